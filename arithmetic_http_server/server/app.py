# server/app.py

from typing import Optional
from urllib.parse import urlsplit

from fastapi import FastAPI, Request, Response

from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.server.dispatcher import RequestDispatcher
from arithmetic_http_server.server.formatter import format_error


class AbsoluteFormMiddleware:
    """Reduce absolute-form request targets (GET http://host/plus/2/3) to their path before routing."""

    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http" and not scope["path"].startswith("/"):
            path = urlsplit(scope["path"]).path or "/"
            scope = dict(scope, path=path, raw_path=path.encode("ascii", "ignore"))
        await self.app(scope, receive, send)


def create_app(dispatcher: Optional[RequestDispatcher] = None) -> FastAPI:
    """
    Build the FastAPI application serving /<operation>/<number>/<number>.

    A single catch-all route is registered without a method list, so every HTTP method
    (including non-standard ones) reaches the dispatcher, and unmatched paths get the
    JSON "Invalid url" error instead of the framework's default 404 page.
    """
    app = FastAPI(
        title="Arithmetic HTTP Server",
        description="Computes plus, minus, div and mul on two single-precision operands.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.dispatcher = dispatcher or RequestDispatcher()
    app.add_middleware(AbsoluteFormMiddleware)

    async def calculate(request: Request) -> Response:
        """Dispatch the request path and answer with the JSON body."""
        try:
            response = request.app.state.dispatcher.dispatch(request.url.path)
        except Exception:
            # Catch any unexpected error and return a 500 with the same JSON shape
            logger.exception(f"Unexpected failure while handling {request.method} {request.url.path}")
            response = format_error("Internal server error", 500)
        return Response(
            content=response.body,
            status_code=response.status_code,
            media_type="application/json",
        )

    # Starlette routes without a method list accept every method
    app.add_route("/{path:path}", calculate, include_in_schema=False)
    return app


# Application instance for `uvicorn arithmetic_http_server.server.app:app`
app = create_app()
