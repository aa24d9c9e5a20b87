"""Identifier/artifact bridge

Names each rendered chart with a fresh UUID, stores the image bytes in the
artifact store and turns the outcome into the caller-facing response. Errors
are converted to "Message" responses carrying a support code; nothing is
retried.
"""

import base64
import logging
import uuid
from typing import Callable, Optional

from linechart.exceptions import (
    ArtifactInternalError,
    ArtifactNotFoundError,
    InvalidIdentifierError,
    RenderError,
)
from linechart.logger import ConsoleLogger, Logger
from linechart.models import DataResponse, LinkResponse, MessageResponse, RenderPlan
from linechart.render import ChartRenderer
from linechart.responses import (
    data_response,
    internal_error_response,
    link_response,
    not_a_uuid_response,
    not_found_response,
)
from linechart.settings import ServerSettings
from linechart.storage import ArtifactStoreBase, canonical_identifier

ERROR_EMPTY_RENDER = 102
ERROR_RENDER_FAILED = 104

RESULT_PATH = "/line/result"


class ArtifactBridge:
    def __init__(
        self,
        renderer: ChartRenderer,
        store: ArtifactStoreBase,
        server_settings: ServerSettings,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        logger: Optional[Logger] = None,
    ):
        self.renderer = renderer
        self.store = store
        self.server_settings = server_settings
        self.id_factory = id_factory
        self.logger = logger or ConsoleLogger(name="bridge", level=logging.INFO)

    @property
    def extension(self) -> str:
        return self.renderer.extension

    def link_for(self, identifier: str) -> str:
        base = self.server_settings.resolve_public_url()
        return f"{base}{RESULT_PATH}/{identifier}.{self.extension}"

    def _internal_error(self, code: int) -> MessageResponse:
        return internal_error_response(code, self.server_settings.support_email)

    def publish(self, plan: RenderPlan) -> LinkResponse | MessageResponse:
        """Render the plan, store it under a new UUID and return its link"""
        identifier = str(self.id_factory())

        try:
            image_data = self.renderer.render(plan)
        except RenderError as e:
            self.logger.error("Rendering failed", guid=identifier, error=str(e), code=ERROR_RENDER_FAILED)
            return self._internal_error(ERROR_RENDER_FAILED)

        if not image_data:
            self.logger.error("Renderer returned no bytes", guid=identifier, code=ERROR_EMPTY_RENDER)
            return self._internal_error(ERROR_EMPTY_RENDER)

        try:
            self.store.put(identifier, image_data)
        except ArtifactInternalError as e:
            self.logger.error("Storing artifact failed", guid=identifier, error=e.message, code=e.code)
            return self._internal_error(e.code)

        link = self.link_for(identifier)
        self.logger.info("Chart published", guid=identifier, size_bytes=len(image_data), link=link)
        return link_response(link)

    def split_argument(self, argument: str) -> str:
        """Strip an optional ".<ext>" suffix matching the stored format"""
        suffix = f".{self.extension}"
        if argument.lower().endswith(suffix):
            return argument[: -len(suffix)]
        return argument

    def retrieve(self, argument: str) -> DataResponse | MessageResponse:
        """Return the stored image for a UUID (optionally with extension) as base64"""
        try:
            identifier = canonical_identifier(self.split_argument(argument))
        except InvalidIdentifierError:
            self.logger.info("Retrieval with invalid identifier", argument=argument)
            return not_a_uuid_response()

        try:
            image_data = self.store.get(identifier)
        except ArtifactNotFoundError:
            self.logger.info("Retrieval of unknown artifact", guid=identifier)
            return not_found_response(self.server_settings.support_email)
        except ArtifactInternalError as e:
            self.logger.error("Retrieval failed", guid=identifier, error=e.message, code=e.code)
            return self._internal_error(e.code)

        encoded = base64.b64encode(image_data).decode("ascii")
        self.logger.info("Artifact retrieved", guid=identifier, size_bytes=len(image_data))
        return data_response(encoded, self.extension)
