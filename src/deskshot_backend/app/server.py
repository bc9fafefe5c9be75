"""
server.py - HTTP front end
==========================
One route, POST /invoke, dispatching on the JSON "method" field:

- listTools → {"tools": [...]}
- callTool  → {"content": [...]}
- anything else → 400

Errors always come back as {"error": "<message>"}.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..capture.orchestrator import ScreenshotOrchestrator
from ..errors import DeskshotError, InvalidRequestError
from ..schemas.capture import InvokeRequest
from ..utils.logger import get_logger
from .arguments import UNSUPPORTED_MESSAGE, normalize_tool_call, parse_capture_request
from .tools import list_tools

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for item in exc.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()) if p != "body") or "body"
        parts.append(f"{loc}: {item.get('msg')}")
    return "Invalid request: " + ("; ".join(parts) or "malformed body")


def create_app(orchestrator: ScreenshotOrchestrator) -> FastAPI:
    """Build the FastAPI app around one long-lived orchestrator."""
    app = FastAPI(title="deskshot")
    app.state.orchestrator = orchestrator

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON, non-object body, missing "method"
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(DeskshotError)
    async def _service_error(request: Request, exc: DeskshotError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed: %s", exc)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error handling %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})

    # Sync route; FastAPI runs it in its threadpool
    @app.post("/invoke")
    def invoke(body: InvokeRequest):
        if body.method == "listTools":
            return {"tools": list_tools()}

        if body.method == "callTool":
            capture_request = parse_capture_request(normalize_tool_call(body.params))
            result = app.state.orchestrator.run(capture_request)
            return {"content": result.to_content()}

        raise InvalidRequestError(UNSUPPORTED_MESSAGE)

    return app
