from clamm_core.exceptions.base import ClammValueError


class LayoutError(ClammValueError):
    """
    Raised when a packed pool record cannot be encoded or decoded.
    """
