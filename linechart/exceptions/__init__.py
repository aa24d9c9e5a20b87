"""Custom exceptions for the linechart service.

Validation problems are not exceptions: the validator returns a
ValidationFailure. These cover configuration, rendering and artifact storage.
"""

from typing import Optional


class LineChartError(Exception):
    """Base class for all linechart errors"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(LineChartError):
    """Start-up configuration is missing or invalid.

    `code` is the process exit code the CLI terminates with.
    """


class RenderError(LineChartError):
    """The rendering engine failed to produce an image"""


class InvalidIdentifierError(LineChartError):
    """An artifact identifier is not a UUID"""


class ArtifactNotFoundError(LineChartError):
    """No artifact is stored under the identifier"""


class ArtifactInternalError(LineChartError):
    """An artifact exists but cannot be written or read.

    `code` is the support correlation code embedded in the caller message.
    """


__all__ = [
    "LineChartError",
    "ConfigurationError",
    "RenderError",
    "InvalidIdentifierError",
    "ArtifactNotFoundError",
    "ArtifactInternalError",
]
