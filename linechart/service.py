"""Request pipeline

Validator -> PlanBuilder -> ArtifactBridge. Pure computation plus the
artifact write; no HTTP concerns. One instance is shared by all worker
threads; it holds no per-request state.
"""

import logging
import random
import uuid
from typing import Callable, Optional

from linechart.bridge import ArtifactBridge
from linechart.logger import ConsoleLogger, Logger
from linechart.models import (
    DataResponse,
    LinkResponse,
    MessageResponse,
    RenderPlan,
    RequestVariant,
)
from linechart.plan import ColorSource, PlanBuilder
from linechart.render import ChartRenderer
from linechart.responses import internal_error_response, message_response
from linechart.settings import Settings
from linechart.storage import ArtifactStoreBase, FileArtifactStore
from linechart.validation import ChartRequestValidator

ERROR_PLAN_FAILED = 105


class LineChartService:
    def __init__(
        self,
        settings: Settings,
        rng: Optional[random.Random] = None,
        store: Optional[ArtifactStoreBase] = None,
        renderer: Optional[ChartRenderer] = None,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        log_level: int = logging.INFO,
    ):
        """
        Args:
            settings: Validated process configuration
            rng: Random source for line colors (seed it for reproducible output)
            store: Artifact store (defaults to the file store in settings.storage.image_dir)
            renderer: Rendering engine (defaults to matplotlib with settings.render)
            id_factory: Artifact identifier generator
            log_level: Level for the component loggers
        """
        self.settings = settings
        self.logger: Logger = ConsoleLogger(name="service", level=log_level)
        self.validator = ChartRequestValidator(ConsoleLogger(name="validator", level=log_level))
        self.plan_builder = PlanBuilder(
            ColorSource(rng), ConsoleLogger(name="plan_builder", level=log_level)
        )
        self.renderer = renderer or ChartRenderer(
            settings.render, ConsoleLogger(name="renderer", level=log_level)
        )
        self.store = store or FileArtifactStore(
            settings.storage.image_dir,
            self.renderer.extension,
            ConsoleLogger(name="file_storage", level=log_level),
        )
        self.bridge = ArtifactBridge(
            self.renderer,
            self.store,
            settings.server,
            id_factory=id_factory,
            logger=ConsoleLogger(name="bridge", level=log_level),
        )

    def plan(self, body: bytes | str, variant: RequestVariant) -> RenderPlan | MessageResponse:
        """Validate a request body and build its render plan"""
        result = self.validator.validate_body(body, variant)
        if result.failure is not None:
            return message_response(result.failure.message)

        try:
            return self.plan_builder.build(result.request)
        except ValueError as e:
            self.logger.error("Building render plan failed", error=str(e), code=ERROR_PLAN_FAILED)
            return internal_error_response(ERROR_PLAN_FAILED, self.settings.server.support_email)

    def render(self, body: bytes | str, variant: RequestVariant) -> LinkResponse | MessageResponse:
        """Full pipeline for one render request"""
        self.logger.debug("Render request received", variant=variant.value, body_bytes=len(body))
        planned = self.plan(body, variant)
        if isinstance(planned, MessageResponse):
            return planned
        return self.bridge.publish(planned)

    def retrieve(self, argument: str) -> DataResponse | MessageResponse:
        return self.bridge.retrieve(argument)
