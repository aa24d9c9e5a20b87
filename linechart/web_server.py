import logging
from typing import Any, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from linechart.logger import ConsoleLogger
from linechart.models import RequestVariant
from linechart.responses import (
    PONG,
    internal_error_response,
    message_response,
    not_implemented_response,
)
from linechart.service import LineChartService
from linechart.settings import Settings

ERROR_UNEXPECTED = 199

# Every method except POST; routes answer these with a fixed message
NON_POST_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE"]


class LineChartWebServer:
    def __init__(
        self,
        settings: Settings,
        service: Optional[LineChartService] = None,
        log_level: int = logging.INFO,
    ):
        """
        Args:
            settings: Validated process configuration
            service: Request pipeline (built from settings if not given)
            log_level: Logging level (logging.DEBUG, logging.INFO, etc.)
        """
        self.settings = settings
        self.service = service or LineChartService(settings, log_level=log_level)
        self.logger = ConsoleLogger(name="web_server", level=log_level)
        self.app = FastAPI(
            title="linechart",
            description="Line chart rendering microservice",
            version="1.0.0",
        )
        self._setup_routes()
        self.logger.info(
            "Web server initialized",
            image_dir=settings.storage.image_dir,
            public_url=settings.server.resolve_public_url(),
        )

    async def _respond(self, action: str, fn: Callable[..., BaseModel], *args: Any) -> JSONResponse:
        """
        Run a pipeline step on the worker thread pool and wrap its result

        Unexpected exceptions become an internal-error message; the process
        keeps serving.
        """
        try:
            result = await run_in_threadpool(fn, *args)
        except Exception as e:
            self.logger.error(
                "Unexpected error", action=action, error=str(e), error_type=type(e).__name__
            )
            result = internal_error_response(ERROR_UNEXPECTED, self.settings.server.support_email)
        return JSONResponse(content=result.model_dump())

    def _setup_routes(self) -> None:
        @self.app.get("/line/ping")
        async def ping():
            """Health check"""
            self.logger.debug("Ping request received")
            return JSONResponse(content=message_response(PONG).model_dump())

        @self.app.post("/line")
        async def render_dual(request: Request):
            """Render series given as X_Points/Y_Points pairs under 'Points'"""
            body = await request.body()
            return await self._respond("render", self.service.render, body, RequestVariant.DUAL_ARRAY)

        @self.app.post("/line/simple")
        async def render_single(request: Request):
            """Render series given as Y values only under 'Y_Points'"""
            body = await request.body()
            return await self._respond(
                "render", self.service.render, body, RequestVariant.SINGLE_ARRAY
            )

        @self.app.api_route("/line", methods=NON_POST_METHODS)
        @self.app.api_route("/line/simple", methods=NON_POST_METHODS)
        @self.app.post("/line/result/{argument}")
        async def not_implemented(request: Request):
            self.logger.info(
                "Unsupported method", method=request.method, path=request.url.path
            )
            return JSONResponse(content=not_implemented_response().model_dump())

        @self.app.api_route("/line/result/{argument}", methods=NON_POST_METHODS)
        async def retrieve(argument: str):
            """Return a stored chart as base64"""
            return await self._respond("retrieve", self.service.retrieve, argument)
