"""Artifact storage module

Abstract store interface plus the file-backed implementation.
"""

from linechart.storage.base import ArtifactStoreBase
from linechart.storage.file_storage import FileArtifactStore, canonical_identifier

__all__ = [
    "ArtifactStoreBase",
    "FileArtifactStore",
    "canonical_identifier",
]
