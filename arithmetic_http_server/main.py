"""
Command-line entrypoint.

Subcommands:
- serve: run the HTTP server until interrupted
- calc: send one operation to a running server and print the JSON answer

Examples
--------
python -m arithmetic_http_server.main serve --port 3000
python -m arithmetic_http_server.main calc plus 2 3
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, IPvAnyAddress, ValidationError
import requests

from arithmetic_http_server.client.client import ArithmeticClient
from arithmetic_http_server.common.logger import configure_logger, logger
from arithmetic_http_server.common.models import SuccessResponse
from arithmetic_http_server.server.server import ArithmeticServer


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServeArgs(BaseModel):
    """
    Pydantic model used to validate the serve arguments.

    Attributes
    ----------
    host : IPvAnyAddress
        Address to bind.
    port : int
        Port to bind, 0 for any free port.
    log_level : LogLevel
        Logging level of the application logger.
    """

    host: IPvAnyAddress
    port: int = Field(ge=0, le=65535)
    log_level: LogLevel = "INFO"


class CalcArgs(BaseModel):
    """
    Pydantic model used to validate the calc arguments.

    Attributes
    ----------
    operation : str
        Operation name (plus, minus, div, mul).
    first, second : str
        Operands, sent to the server as written.
    host : IPvAnyAddress
        Server address.
    port : int
        Server port.
    timeout : float
        Socket timeout in seconds.
    log_level : LogLevel
        Logging level of the application logger.
    """

    operation: str = Field(min_length=1)
    first: str = Field(min_length=1)
    second: str = Field(min_length=1)
    host: IPvAnyAddress
    port: int = Field(ge=1, le=65535)
    timeout: float = Field(gt=0)
    log_level: LogLevel = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with its serve and calc subcommands.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Arithmetic HTTP server: GET /<operation>/<number>/<number>"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default="127.0.0.1", help="Address to bind")
    serve.add_argument("--port", type=int, default=3000, help="Port to bind")
    serve.add_argument("--log-level", default="INFO", type=str.upper, help="Logging level")

    calc = subparsers.add_parser("calc", help="Send one operation to a running server")
    calc.add_argument("operation", help="Operation name: plus, minus, div or mul")
    calc.add_argument("first", help="First operand")
    calc.add_argument("second", help="Second operand")
    calc.add_argument("--host", default="127.0.0.1", help="Server address")
    calc.add_argument("--port", type=int, default=3000, help="Server port")
    calc.add_argument("--timeout", type=float, default=5.0, help="Socket timeout in seconds")
    calc.add_argument("--log-level", default="WARNING", type=str.upper, help="Logging level")

    return parser


def run_server(args: ServeArgs) -> int:
    """
    Start the arithmetic server and block until interrupted.

    :return: Process exit code
    """
    configure_logger(args.log_level)
    ArithmeticServer(host=args.host, port=args.port).start()
    return 0


def run_calc(args: CalcArgs) -> int:
    """
    Send one operation and print the JSON body.

    :return: 0 for a success response, 1 for an error response or an unreachable server
    """
    configure_logger(args.log_level)
    client = ArithmeticClient(host=args.host, port=args.port, timeout=args.timeout)
    try:
        response = client.calculate(args.operation, args.first, args.second)
    except requests.RequestException as exc:
        logger.error(f"🔌❌ Could not reach {args.host}:{args.port}: {exc}")
        return 1

    print(response.model_dump_json())
    return 0 if isinstance(response, SuccessResponse) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse the command line and run the selected subcommand.

    :param argv: Arguments, defaults to sys.argv[1:]

    :return: Process exit code
    :rtype: int
    """
    parser = build_parser()
    namespace = parser.parse_args(argv)
    values = {key: value for key, value in vars(namespace).items() if key != "command"}

    try:
        if namespace.command == "serve":
            serve_args = ServeArgs(**values)
        else:
            calc_args = CalcArgs(**values)
    except ValidationError as exc:
        parser.error(str(exc))

    if namespace.command == "serve":
        return run_server(serve_args)
    return run_calc(calc_args)


if __name__ == "__main__":
    sys.exit(main())
