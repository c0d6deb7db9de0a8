import logging

"""
Create a global logger instance for the pool ledger.
"""

logger = logging.getLogger(__name__)
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())


def set_log_level(level: int | str) -> None:
    """
    Set the level of the package logger, accepting either a numeric level or a level name
    (e.g. "DEBUG").
    """

    logger.setLevel(level.upper() if isinstance(level, str) else level)
