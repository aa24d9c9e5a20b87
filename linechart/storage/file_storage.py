"""File-based artifact storage

Each artifact is a single file named <uuid>.<ext> inside the configured
image directory. Files are written once and never modified, so concurrent
readers need no locking.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from linechart.exceptions import (
    ArtifactInternalError,
    ArtifactNotFoundError,
    ConfigurationError,
    InvalidIdentifierError,
)
from linechart.logger import ConsoleLogger, Logger
from linechart.storage.base import ArtifactStoreBase

# Support correlation codes embedded in caller-facing messages
ERROR_OPEN_FAILED = 100
ERROR_EMPTY_ARTIFACT = 101
ERROR_WRITE_FAILED = 103


def canonical_identifier(identifier: str) -> str:
    """
    Normalize a UUID string to its lowercase hyphenated form

    Raises:
        InvalidIdentifierError: If the string is not a UUID
    """
    try:
        return str(uuid.UUID(identifier))
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidIdentifierError(f"Invalid artifact identifier: {identifier!r}") from e


class FileArtifactStore(ArtifactStoreBase):
    """Artifact store rooted at an existing absolute directory"""

    def __init__(self, image_dir: str | Path, extension: str = "png", logger: Optional[Logger] = None):
        """
        Args:
            image_dir: Directory holding the artifacts. Must already exist.
            extension: File extension of stored images (png, jpg)

        Raises:
            ConfigurationError: If the directory does not exist
        """
        self.image_dir = Path(image_dir)
        self.extension = extension.lower()
        self.logger = logger or ConsoleLogger(name="file_storage", level=logging.INFO)

        if not self.image_dir.is_dir():
            self.logger.error("Image directory does not exist", directory=str(self.image_dir))
            raise ConfigurationError(f"Image directory does not exist: {self.image_dir}")

        self.logger.info(
            "File artifact store initialized", directory=str(self.image_dir), extension=self.extension
        )

    def path_for(self, identifier: str) -> Path:
        return self.image_dir / f"{canonical_identifier(identifier)}.{self.extension}"

    def put(self, identifier: str, data: bytes) -> None:
        filepath = self.path_for(identifier)
        self.logger.debug("Writing artifact", guid=identifier, size=len(data))
        try:
            # "xb" refuses to overwrite: artifacts are immutable
            with open(filepath, "xb") as f:
                f.write(data)
        except OSError as e:
            self.logger.error("Failed to write artifact", guid=identifier, error=str(e))
            raise ArtifactInternalError(
                f"Failed to write artifact: {e}", code=ERROR_WRITE_FAILED
            ) from e
        self.logger.info("Artifact written", guid=identifier, path=str(filepath), size=len(data))

    def get(self, identifier: str) -> bytes:
        filepath = self.path_for(identifier)
        if not filepath.exists():
            self.logger.warning("Artifact not found", guid=identifier)
            raise ArtifactNotFoundError(f"No artifact stored under {identifier}")

        try:
            with open(filepath, "rb") as f:
                data = f.read()
        except OSError as e:
            self.logger.error("Failed to read artifact", guid=identifier, error=str(e))
            raise ArtifactInternalError(
                f"Failed to read artifact: {e}", code=ERROR_OPEN_FAILED
            ) from e

        if not data:
            self.logger.error("Artifact is empty", guid=identifier)
            raise ArtifactInternalError("Artifact is empty", code=ERROR_EMPTY_ARTIFACT)

        self.logger.debug("Artifact read", guid=identifier, size=len(data))
        return data
