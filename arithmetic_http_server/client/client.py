"""HTTP client."""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, TypeAdapter
import requests

from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.common.models import OperationResponse


Operand = Union[int, float, str]

RESPONSE_ADAPTER: TypeAdapter = TypeAdapter(OperationResponse)


class ArithmeticClient(BaseModel):
    """
    HTTP client sending one arithmetic operation to the server and decoding its answer.

    The HTTP client:
    - builds the /<operation>/<first>/<second> path
    - sends a GET request to the server with requests
    - decodes the JSON body into a SuccessResponse or an ErrorResponse
    """

    # Make the Pydantic instance immutable (read-only), so the target server cannot change between requests.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", validate_default=True, description="Server host address")
    port: int = Field(default=3000, ge=1, le=65535, description="Server TCP port")
    timeout: float = Field(default=5.0, gt=0, description="Socket timeout in seconds")

    @staticmethod
    def _format_operand(operand: Operand) -> str:
        """
        Render an operand as a path segment.

        Floats use their shortest repr (e.g. 2.5, 1e-05), which the server accepts as a JSON number.

        :param operand: Number, or raw text sent untouched

        :return: Path segment
        :rtype: str
        """
        if isinstance(operand, str):
            return operand
        return repr(operand)

    def build_path(self, operation: str, first: Operand, second: Operand) -> str:
        """
        Build the request path for an operation.

        :param str operation: Operation name, e.g. "plus"
        :param first: Left operand
        :param second: Right operand

        :return: Path such as "/plus/2/3"
        :rtype: str
        """
        return f"/{operation}/{self._format_operand(first)}/{self._format_operand(second)}"

    @property
    def base_url(self) -> str:
        """Root URL of the server, with IPv6 hosts in brackets."""
        host = f"[{self.host}]" if self.host.version == 6 else str(self.host)
        return f"http://{host}:{self.port}"

    def calculate(self, operation: str, first: Operand, second: Operand) -> OperationResponse:
        """
        Ask the server to compute an operation.

        :param str operation: Operation name, e.g. "plus"
        :param first: Left operand
        :param second: Right operand

        :return: Decoded success or error body
        :rtype: OperationResponse
        :raises requests.RequestException: If the server cannot be reached or times out
        :raises pydantic.ValidationError: If the body is not a valid response
        """
        url = self.base_url + self.build_path(operation, first, second)
        response = requests.get(url, timeout=self.timeout)

        logger.debug(f"✉️ {url} -> {response.status_code} {response.content!r}")
        return RESPONSE_ADAPTER.validate_json(response.content)
