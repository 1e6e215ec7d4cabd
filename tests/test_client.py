"""Test class ArithmeticClient."""
import socket

from pydantic import ValidationError
import pytest
import requests

from arithmetic_http_server.client.client import ArithmeticClient
from arithmetic_http_server.common.models import ErrorResponse, SuccessResponse


def test_client_valid_config() -> None:
    """Check that a valid host and port correctly initialize the client."""
    client = ArithmeticClient(host="127.0.0.1", port=3000)
    assert str(client.host) == "127.0.0.1"
    assert client.port == 3000


def test_client_invalid_ip() -> None:
    """Ensure invalid IP addresses raise a ValidationError."""
    with pytest.raises(ValidationError):
        ArithmeticClient(host="999.999.999.999", port=3000)


@pytest.mark.parametrize("port", [0, 70000])
def test_client_invalid_port(port: int) -> None:
    """Ensure ports outside valid range raise a ValidationError."""
    with pytest.raises(ValidationError):
        ArithmeticClient(host="127.0.0.1", port=port)


def test_client_invalid_timeout() -> None:
    """Ensure a non-positive timeout raises a ValidationError."""
    with pytest.raises(ValidationError):
        ArithmeticClient(timeout=0)


@pytest.mark.parametrize("operation,first,second,expected", [
    ("plus", 2, 3, "/plus/2/3"),
    ("div", 2.5, -1.0, "/div/2.5/-1.0"),
    ("mul", 1e-05, "7", "/mul/1e-05/7"),
])
def test_build_path(operation, first, second, expected) -> None:
    """build_path renders numbers as JSON number segments."""
    assert ArithmeticClient().build_path(operation, first, second) == expected


@pytest.mark.parametrize("host,expected", [
    ("127.0.0.1", "http://127.0.0.1:3000"),
    ("::1", "http://[::1]:3000"),
])
def test_base_url(host: str, expected: str) -> None:
    """base_url brackets IPv6 hosts."""
    assert ArithmeticClient(host=host).base_url == expected


def test_calculate_success(running_server) -> None:
    """calculate decodes a success body."""
    host, port = running_server
    response = ArithmeticClient(host=host, port=port).calculate("plus", 2, 3)
    assert response == SuccessResponse(result=5.0)


def test_calculate_error(running_server) -> None:
    """calculate decodes an error body instead of raising."""
    host, port = running_server
    response = ArithmeticClient(host=host, port=port).calculate("plus", 1, "abc")
    assert response == ErrorResponse(error_message="Invalid url", error_code=404)


def test_calculate_unreachable_server() -> None:
    """calculate raises a requests ConnectionError when nothing listens on the port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as free_socket:
        free_socket.bind(("127.0.0.1", 0))
        free_port = free_socket.getsockname()[1]

    with pytest.raises(requests.ConnectionError):
        ArithmeticClient(port=free_port, timeout=1).calculate("plus", 1, 2)
