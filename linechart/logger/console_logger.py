import logging as python_logging
import uuid
from typing import Any
from .interface import Logger


class ConsoleLogger(Logger):
    """
    Logger implementation on top of Python's logging module.
    Writes to the console and tags every line with a short session id.
    """

    def __init__(
        self,
        name: str = "linechart",
        level: int = python_logging.INFO,
        format_string: str = "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s",
    ):
        """
        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            format_string: Log format string (must include %(session_id)s)
        """
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = python_logging.getLogger(name)
        self._logger.setLevel(level)

        # Loggers are process-wide; attach the handler once
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)
        for handler in self._logger.handlers:
            handler.setLevel(level)

    def get_session_id(self) -> str:
        return self._session_id

    def _format_extra(self, **kwargs: Any) -> str:
        if not kwargs:
            return ""
        return " " + " ".join(f"{k}={v}" for k, v in kwargs.items())

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(
            level, message + self._format_extra(**kwargs), extra={"session_id": self._session_id}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(python_logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(python_logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(python_logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(python_logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(python_logging.CRITICAL, message, **kwargs)
