"""
Fatal faults. These indicate a violated precondition elsewhere in the system (an overflowing
accumulator, a clock moving backward, a division by zero liquidity) and must abort the enclosing
operation rather than produce a silently wrong financial result.
"""

from typing import Any

from clamm_core.exceptions.base import ClammError


class InvariantViolation(ClammError):
    """
    Base class for unrecoverable arithmetic and ordering faults.
    """


class ArithmeticOverflow(InvariantViolation):
    """
    Raised when a result does not fit in the backing integer width of its type.
    """

    def __init__(self, type_name: str, value: int) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(message=f"Overflow: {value} does not fit in {type_name}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.type_name, self.value)


class ArithmeticUnderflow(InvariantViolation):
    """
    Raised when a subtraction or construction would produce a negative value for an unsigned type.
    """

    def __init__(self, type_name: str, value: int) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(message=f"Underflow: {value} is negative, {type_name} is unsigned.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.type_name, self.value)


class DivisionByZero(InvariantViolation):
    def __init__(self, divisor: str) -> None:
        self.divisor = divisor
        super().__init__(message=f"Division by zero {divisor}.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.divisor,)


class TimestampRegression(InvariantViolation):
    """
    Raised when a timestamp earlier than the last recorded update is provided.
    """

    def __init__(self, last_timestamp: int, current_timestamp: int) -> None:
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            message=f"Timestamp {current_timestamp} is earlier than the last update at {last_timestamp}."  # noqa: E501
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.last_timestamp, self.current_timestamp)
