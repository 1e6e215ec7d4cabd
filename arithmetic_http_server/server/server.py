"""HTTP server answering /<operation>/<number>/<number> requests with JSON."""
from pydantic import BaseModel, Field, IPvAnyAddress
import uvicorn

from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.server.app import create_app


class ArithmeticServer(BaseModel):
    """
    HTTP server computing arithmetic operations requested through the URL.

    Features:
        - Accepts /<operation>/<number>/<number> with any HTTP method.
        - Serves the FastAPI application with uvicorn.
        - Answers every request with a JSON body, including errors.
    """

    host: IPvAnyAddress = Field(default="127.0.0.1", validate_default=True, description="Server host address")
    port: int = Field(default=3000, ge=0, le=65535, description="Server TCP port, 0 picks a free port")

    def create_uvicorn_server(self) -> uvicorn.Server:
        """
        Build the uvicorn server without starting it.

        The h11 protocol accepts any method token, non-standard ones included.
        Logging is left to the application logger.

        :return: uvicorn server, ready for run()
        :rtype: uvicorn.Server
        """
        config = uvicorn.Config(
            create_app(),
            host=str(self.host),
            port=self.port,
            http="h11",
            log_config=None,
        )
        return uvicorn.Server(config)

    def start(self) -> None:
        """
        Start the HTTP server and serve requests until interrupted.

        Steps:
            1. Bind and listen on the configured host and port.
            2. Serve requests on the uvicorn event loop.
            3. Shut down gracefully on SIGINT/SIGTERM.

        :return: None
        """
        logger.info(f"🖥️ Starting server on {self.host}:{self.port}")
        self.create_uvicorn_server().run()
        logger.info("🖥️ Server stopped")
