"""Per-request pipeline: match the route, resolve the operation, validate, compute, respond."""
import math
from typing import Mapping, Optional

from arithmetic_http_server.common.errors import (
    ArithmeticRequestError,
    ComputationError,
    OperandError,
    RoutingError,
    UnknownOperationError,
)
from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.common.operations import OPERATION_REGISTRY, Operation, compute, resolve_operation
from arithmetic_http_server.common.parser import PathParser
from arithmetic_http_server.common.validator import OperandValidator
from arithmetic_http_server.server.formatter import FormattedResponse, format_error, format_success


class RequestDispatcher:
    """
    Turn a request path into a formatted JSON response.

    Steps:
        1. Match the path against /<operation>/<number>/<number> (404 otherwise)
        2. Resolve the operation name, ignoring case (405 otherwise)
        3. Validate the first operand, then the second (405 on the first failure)
        4. Compute in single precision (405 on division by zero or a non-finite result)
        5. Format the success payload

    The dispatcher holds no mutable state, so a single instance serves every request thread.
    """

    def __init__(self, registry: Optional[Mapping[str, Operation]] = None) -> None:
        self.registry = OPERATION_REGISTRY if registry is None else registry

    def dispatch(self, path: str) -> FormattedResponse:
        """
        Handle one request path.

        :param str path: Request path without query string

        :return: Status code and JSON body to send back
        :rtype: FormattedResponse
        """
        try:
            result = self.evaluate(path)
        except ArithmeticRequestError as exc:
            logger.info(f"Rejected {path!r}: {exc.message} ({exc.error_code})")
            return format_error(exc.message, exc.error_code)
        return format_success(result)

    def evaluate(self, path: str) -> float:
        """
        Compute the result requested by a path.

        :param str path: Request path without query string

        :return: Finite float32 result
        :rtype: float
        :raises ArithmeticRequestError: If any step of the pipeline rejects the request
        """
        route = PathParser.match(path)
        if route is None:
            raise RoutingError()
        name, first_text, second_text = route

        operation = resolve_operation(name, self.registry)
        if operation is None:
            raise UnknownOperationError(name, self.registry.keys())

        first = self._validate_operand("first", first_text)
        second = self._validate_operand("second", second_text)

        logger.debug(f"Data: {operation.name}, {first!r}, {second!r}")

        try:
            result = compute(operation, first, second)
        except ZeroDivisionError as exc:
            raise OperandError("second", str(exc)) from exc

        if not math.isfinite(result):
            raise ComputationError("Result is not a finite number")
        return result

    @staticmethod
    def _validate_operand(position: str, token: str) -> float:
        """Validate one operand, naming its position in the error."""
        try:
            return OperandValidator.validate(token)
        except ValueError as exc:
            raise OperandError(position, str(exc)) from exc
