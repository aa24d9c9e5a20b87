from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for the service logging interface"""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message"""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message"""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message"""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message"""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message"""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the current session ID"""
