class ClammError(Exception):
    """
    Base exception used as the parent class for all exceptions raised by this package.

    Calling code should catch `ClammError` and derived classes separately before general
    exceptions, e.g.:

    ```
    try:
        pool.update_liquidity_safely(...)
    except InvalidPoolLiquidity:
        ... # handle a specific exception
    except ClammError:
        ... # handle non-specific clamm_core exception
    except Exception:
        ... # handle exceptions raised by 3rd party dependencies or Python built-ins
    ```

    Subclasses of `InvariantViolation` are the exception to this rule. They signal a broken
    precondition in the calling code and should abort the enclosing operation instead of being
    handled.

    An optional string-formatted message may be attached to the exception and retrieved by accessing
    the `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class ClammValueError(ClammError): ...


class ClammTypeError(ClammError): ...
