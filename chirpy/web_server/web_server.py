"""Chirpy Web Server - static files, hit metrics and chirp validation."""

from pathlib import Path
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import (
    FileResponse,
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    Response,
)
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from chirpy.errors import error_to_web_response, get_status_code
from chirpy.exceptions import ChirpyError, SerializationError
from chirpy.logger import session_logger as logger
from chirpy.metrics import (
    HitCounter,
    HitCounterMiddleware,
    render_admin_metrics,
    render_plain_metrics,
)
from chirpy.validation import validate_chirp

READINESS_PATH = "/api/healthz"
METRICS_PATH = "/api/metrics"
RESET_PATH = "/api/reset"
ADMIN_METRICS_PATH = "/admin/metrics"
ADMIN_RESET_PATH = "/admin/reset"
VALIDATE_PATH = "/api/validate_chirp"
STATIC_PREFIX = "/app"


def respond_with_json(payload: Any, status_code: int = 200) -> Response:
    """Encode payload as JSON, falling back to a 500 error envelope."""
    try:
        return JSONResponse(payload, status_code=status_code)
    except (TypeError, ValueError) as e:
        return respond_with_error(
            SerializationError(
                "SERIALIZATION_FAILED",
                f"Error marshalling JSON: {e}",
                {"payload_type": type(payload).__name__},
            )
        )


def respond_with_error(error: ChirpyError) -> Response:
    """Render a ChirpyError as a JSON error response."""
    return JSONResponse(error_to_web_response(error), status_code=get_status_code(error))


class ChirpyWebServer:
    """Web server for Chirpy.

    Owns the hit counter shared by the static file routes and the metrics
    endpoints. Pass a counter in to observe or pre-seed it from outside.
    """

    def __init__(
        self,
        filepath_root: str = "app",
        hit_counter: Optional[HitCounter] = None,
        host: str = "0.0.0.0",
        port: int = 8080,
    ):
        self.filepath_root = Path(filepath_root)
        self.hit_counter = hit_counter if hit_counter is not None else HitCounter()
        self.host = host
        self.port = port
        self.app = self._create_app()

    def _create_app(self) -> Any:
        """Create the Starlette application."""
        if not self.filepath_root.is_dir():
            logger.warning(
                "Static file root does not exist",
                filepath_root=str(self.filepath_root),
            )

        static_files = StaticFiles(directory=str(self.filepath_root), html=True, check_dir=False)

        routes = [
            Route(READINESS_PATH, endpoint=self.readiness, methods=["GET"]),
            Route(METRICS_PATH, endpoint=self.metrics, methods=["GET"]),
            Route(RESET_PATH, endpoint=self.reset, methods=["POST"]),
            Route(ADMIN_METRICS_PATH, endpoint=self.admin_metrics, methods=["GET"]),
            Route(ADMIN_RESET_PATH, endpoint=self.admin_reset, methods=["POST"]),
            Route(VALIDATE_PATH, endpoint=self.validate, methods=["POST"]),
            Route(
                STATIC_PREFIX,
                endpoint=HitCounterMiddleware(self.index, self.hit_counter),
                methods=["GET"],
            ),
            Mount(STATIC_PREFIX, app=HitCounterMiddleware(static_files, self.hit_counter)),
        ]

        return Starlette(
            debug=False,
            routes=routes,
            exception_handlers={405: self.method_not_allowed},
        )

    async def method_not_allowed(self, request: Request, exc: Exception) -> Response:
        """Wrong verb on a known path: 405 with an empty body."""
        headers = exc.headers if isinstance(exc, HTTPException) else None
        logger.debug("Method not allowed", method=request.method, path=request.url.path)
        return Response(status_code=405, headers=headers)

    async def index(self, scope, receive, send) -> None:
        """Serve index.html from the static root for the bare prefix."""
        index_path = self.filepath_root / "index.html"
        if index_path.is_file():
            response: Response = FileResponse(index_path)
        else:
            response = PlainTextResponse("Not Found", status_code=404)
        await response(scope, receive, send)

    async def readiness(self, request: Request) -> Response:
        """Readiness endpoint."""
        return PlainTextResponse("OK")

    async def metrics(self, request: Request) -> Response:
        """Plain-text hit count."""
        return PlainTextResponse(render_plain_metrics(self.hit_counter.read()))

    async def reset(self, request: Request) -> Response:
        """Clear the hit counter and report the new value."""
        self.hit_counter.reset()
        logger.info("Hit counter reset", source=RESET_PATH)
        return PlainTextResponse(render_plain_metrics(self.hit_counter.read()))

    async def admin_metrics(self, request: Request) -> Response:
        """HTML hit count for the admin view."""
        return HTMLResponse(render_admin_metrics(self.hit_counter.read()))

    async def admin_reset(self, request: Request) -> Response:
        """Clear the hit counter and render the admin view."""
        self.hit_counter.reset()
        logger.info("Hit counter reset", source=ADMIN_RESET_PATH)
        return HTMLResponse(render_admin_metrics(self.hit_counter.read()))

    async def validate(self, request: Request) -> Response:
        """Validate and censor a chirp."""
        raw_body = await request.body()
        try:
            result = validate_chirp(raw_body)
        except ChirpyError as e:
            return respond_with_error(e)
        return respond_with_json(result.model_dump())

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app
