"""Application settings

Settings are resolved once at start-up from an INI file, then environment
variables, then CLI flags, and passed explicitly to the server and pipeline.

INI layout (QSettings-compatible, keys live in the [General] section):

    [General]
    Port=50001
    ImagePath=/var/lib/linechart/images

Environment overrides use the LINECHART_ prefix (LINECHART_PORT,
LINECHART_IMAGE_PATH, LINECHART_HOST, LINECHART_PUBLIC_URL, ...).
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from linechart.exceptions import ConfigurationError

ENV_PREFIX = "LINECHART"
INI_SECTION = "General"
DEFAULT_INI_NAME = "settings.ini"

PORT_KEY = "Port"
IMAGEPATH_KEY = "ImagePath"

LOWEST_PORT = 1024
HIGHEST_PORT = 65535

SUPPORTED_FORMATS = ("png", "jpg")

# Exit codes reported when start-up configuration is unusable
EXIT_MISSING_INI = -100
EXIT_MISSING_PORT = -101
EXIT_PORT_RANGE = -102
EXIT_MISSING_IMAGEPATH = -103
EXIT_EMPTY_IMAGEPATH = -104
EXIT_IMAGEPATH_MISSING_DIR = -105
EXIT_IMAGEPATH_RELATIVE = -106
EXIT_INVALID_RENDER = -107


@dataclass
class ServerSettings:
    host: str = "127.0.0.1"
    port: Optional[int] = None
    # Base of the links handed back to callers; derived from host/port if unset
    public_url: Optional[str] = None
    support_email: str = "support@example.com"

    def resolve_public_url(self) -> str:
        if self.public_url:
            return self.public_url.rstrip("/")
        return f"http://{self.host}:{self.port}"


@dataclass
class StorageSettings:
    image_dir: Optional[str] = None


@dataclass
class RenderSettings:
    image_format: str = "png"
    width: int = 1024
    height: int = 768
    dpi: int = 100
    theme: str = "light"


@dataclass
class Settings:
    """Process-wide configuration, immutable after start-up by convention"""

    server: ServerSettings = field(default_factory=ServerSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    render: RenderSettings = field(default_factory=RenderSettings)

    @classmethod
    def from_ini(cls, ini_path: str | Path) -> "Settings":
        """
        Build settings from a QSettings-style INI file

        Raises:
            ConfigurationError: If the file does not exist or cannot be parsed
        """
        path = Path(ini_path)
        if not path.is_file():
            raise ConfigurationError(f"Settings file not found: {path}", code=EXIT_MISSING_INI)

        parser = configparser.ConfigParser()
        # QSettings keys are case sensitive
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        try:
            parser.read(path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigurationError(
                f"Settings file is not a valid INI file: {e}", code=EXIT_MISSING_INI
            ) from e

        values = dict(parser[INI_SECTION]) if parser.has_section(INI_SECTION) else {}
        settings = cls()

        if PORT_KEY in values:
            settings.server.port = _parse_port(values[PORT_KEY])
        if IMAGEPATH_KEY in values:
            settings.storage.image_dir = values[IMAGEPATH_KEY].strip()
        if "Host" in values:
            settings.server.host = values["Host"].strip()
        if "PublicUrl" in values:
            settings.server.public_url = values["PublicUrl"].strip()
        if "SupportEmail" in values:
            settings.server.support_email = values["SupportEmail"].strip()
        if "ImageFormat" in values:
            settings.render.image_format = values["ImageFormat"].strip().lower()
        if "Width" in values:
            settings.render.width = _parse_int("Width", values["Width"])
        if "Height" in values:
            settings.render.height = _parse_int("Height", values["Height"])
        if "Theme" in values:
            settings.render.theme = values["Theme"].strip().lower()

        return settings

    def apply_env(self, environ: Optional[dict] = None) -> "Settings":
        """Override values from LINECHART_* environment variables"""
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}_{name}")

        if get("PORT"):
            self.server.port = _parse_port(get("PORT"))
        if get("HOST"):
            self.server.host = get("HOST")
        if get("PUBLIC_URL"):
            self.server.public_url = get("PUBLIC_URL")
        if get("SUPPORT_EMAIL"):
            self.server.support_email = get("SUPPORT_EMAIL")
        if get("IMAGE_PATH") is not None:
            self.storage.image_dir = get("IMAGE_PATH")
        if get("IMAGE_FORMAT"):
            self.render.image_format = get("IMAGE_FORMAT").lower()
        if get("THEME"):
            self.render.theme = get("THEME").lower()
        return self

    @classmethod
    def load(cls, ini_path: Optional[str | Path] = None, environ: Optional[dict] = None) -> "Settings":
        """
        Load settings from the INI file (if one is given or present) and the environment

        Args:
            ini_path: Explicit settings file. Required to exist when given.
            environ: Environment mapping (defaults to os.environ)
        """
        if ini_path is not None:
            settings = cls.from_ini(ini_path)
        elif Path(DEFAULT_INI_NAME).is_file():
            settings = cls.from_ini(DEFAULT_INI_NAME)
        else:
            settings = cls()
        return settings.apply_env(environ)

    def validate(self) -> None:
        """
        Check the settings needed to serve requests

        Raises:
            ConfigurationError: With the exit code matching the first problem found
        """
        port = self.server.port
        if port is None:
            raise ConfigurationError(f"Missing setting '{PORT_KEY}'", code=EXIT_MISSING_PORT)
        if port < LOWEST_PORT or port > HIGHEST_PORT:
            raise ConfigurationError(
                f"Port {port} is outside {LOWEST_PORT}..{HIGHEST_PORT}", code=EXIT_PORT_RANGE
            )

        image_dir = self.storage.image_dir
        if image_dir is None:
            raise ConfigurationError(
                f"Missing setting '{IMAGEPATH_KEY}'", code=EXIT_MISSING_IMAGEPATH
            )
        if not image_dir:
            raise ConfigurationError(f"Setting '{IMAGEPATH_KEY}' is empty", code=EXIT_EMPTY_IMAGEPATH)
        if not Path(image_dir).exists():
            raise ConfigurationError(
                f"Image directory does not exist: {image_dir}", code=EXIT_IMAGEPATH_MISSING_DIR
            )
        if not Path(image_dir).is_absolute():
            raise ConfigurationError(
                f"Image directory must be an absolute path: {image_dir}",
                code=EXIT_IMAGEPATH_RELATIVE,
            )

        if self.render.image_format not in SUPPORTED_FORMATS:
            raise ConfigurationError(
                f"Unsupported image format '{self.render.image_format}'. "
                f"Supported: {', '.join(SUPPORTED_FORMATS)}",
                code=EXIT_INVALID_RENDER,
            )
        if self.render.width <= 0 or self.render.height <= 0:
            raise ConfigurationError("Image width and height must be positive", code=EXIT_INVALID_RENDER)


def _parse_port(value: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigurationError(f"Port is not a number: {value!r}", code=EXIT_PORT_RANGE) from e


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} is not a number: {value!r}", code=EXIT_INVALID_RENDER) from e


__all__ = [
    "ServerSettings",
    "StorageSettings",
    "RenderSettings",
    "Settings",
    "SUPPORTED_FORMATS",
]
