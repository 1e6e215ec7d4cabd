"""Shape success and error payloads into HTTP status codes and JSON bodies."""
from typing import NamedTuple

from arithmetic_http_server.common.models import ErrorResponse, SuccessResponse


class FormattedResponse(NamedTuple):
    """HTTP status code paired with its JSON body."""

    status_code: int
    body: str


def format_success(result: float) -> FormattedResponse:
    """
    Build the 200 response for a computed result.

    :param float result: Finite result of the operation

    :return: Status 200 with {"status":0,"result":<result>}
    :rtype: FormattedResponse
    :raises pydantic.ValidationError: If the result is NaN or infinite
    """
    return FormattedResponse(200, SuccessResponse(result=result).model_dump_json())


def format_error(error_message: str, error_code: int) -> FormattedResponse:
    """
    Build an error response whose HTTP status is the error code.

    :param str error_message: Reason of the failure
    :param int error_code: HTTP status code, repeated in the body

    :return: Status error_code with {"status":-1,"error_message":...,"error_code":...}
    :rtype: FormattedResponse
    """
    payload = ErrorResponse(error_message=error_message, error_code=error_code)
    return FormattedResponse(error_code, payload.model_dump_json())
