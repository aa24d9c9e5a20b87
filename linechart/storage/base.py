"""Base interface for artifact storage

Artifacts are immutable rendered images addressed by a UUID.
"""

from abc import ABC, abstractmethod


class ArtifactStoreBase(ABC):
    """Abstract base class for artifact stores"""

    @abstractmethod
    def put(self, identifier: str, data: bytes) -> None:
        """
        Store image bytes under an identifier

        Raises:
            InvalidIdentifierError: If the identifier is not a UUID
            ArtifactInternalError: If the bytes cannot be written
        """

    @abstractmethod
    def get(self, identifier: str) -> bytes:
        """
        Read the image bytes stored under an identifier

        Raises:
            InvalidIdentifierError: If the identifier is not a UUID
            ArtifactNotFoundError: If nothing is stored under it
            ArtifactInternalError: If the artifact cannot be read or is empty
        """
