from clamm_core.exceptions.base import ClammTypeError, ClammValueError


class DecimalTypeError(ClammTypeError):
    """
    Raised when decimal values of different units are combined, e.g. adding a `Price` to a
    `Liquidity`.
    """

    def __init__(self, expected: str, received: str) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message=f"Expected {expected}, received {received}.")

    def __reduce__(self) -> tuple[object, ...]:
        return self.__class__, (self.expected, self.received)


class InexactDecimal(ClammValueError):
    """
    Raised when a decimal literal cannot be represented exactly at the scale of the target type.
    """

    def __init__(self, text: str, type_name: str) -> None:
        self.text = text
        self.type_name = type_name
        super().__init__(message=f"{text!r} is not exactly representable as {type_name}.")

    def __reduce__(self) -> tuple[object, ...]:
        return self.__class__, (self.text, self.type_name)
