"""Request errors, each one carrying the HTTP status code it is answered with."""
from typing import Iterable


class ArithmeticRequestError(Exception):
    """Base class for every error turned into a JSON error response."""

    error_code: int = 405

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RoutingError(ArithmeticRequestError):
    """The request path is not /<operation>/<number>/<number>."""

    error_code = 404

    def __init__(self, message: str = "Invalid url") -> None:
        super().__init__(message)


class UnknownOperationError(ArithmeticRequestError):
    """The operation name is not in the registry."""

    def __init__(self, name: str, valid_names: Iterable[str]) -> None:
        self.name = name
        self.valid_names = list(valid_names)
        # Names are listed as a JSON-style array: ["plus", "minus", ...]
        listed = ", ".join(f'"{valid}"' for valid in self.valid_names)
        super().__init__(f"Invalid method. Possible methods: [{listed}]")


class OperandError(ArithmeticRequestError):
    """One of the two operands could not be validated."""

    def __init__(self, position: str, detail: str) -> None:
        self.position = position
        self.detail = detail
        super().__init__(f"Invalid {position} argument: {detail}")


class ComputationError(ArithmeticRequestError):
    """The operation has no finite result."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid result: {detail}")
