#!/usr/bin/env python3
"""Test settings loading and start-up validation codes"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from linechart.exceptions import ConfigurationError
from linechart.main_web import build_parser, resolve_settings
from linechart.settings import Settings


def write_ini(tmp_path, body):
    path = tmp_path / "settings.ini"
    path.write_text(body, encoding="utf-8")
    return path


def test_from_ini_reads_general_section(tmp_path, image_dir):
    path = write_ini(
        tmp_path,
        f"[General]\nPort=50001\nImagePath={image_dir}\nTheme=Dark\nWidth=800\nHeight=600\n",
    )

    settings = Settings.from_ini(path)
    settings.validate()

    assert settings.server.port == 50001
    assert settings.storage.image_dir == str(image_dir)
    assert settings.render.theme == "dark"
    assert (settings.render.width, settings.render.height) == (800, 600)
    assert settings.server.resolve_public_url() == "http://127.0.0.1:50001"


def test_missing_ini_file_code(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_ini(tmp_path / "nope.ini")
    assert exc_info.value.code == -100


def test_env_overrides_ini(tmp_path, image_dir):
    path = write_ini(tmp_path, "[General]\nPort=50001\nImagePath=/somewhere/else\n")

    settings = Settings.load(
        path,
        environ={
            "LINECHART_PORT": "50002",
            "LINECHART_IMAGE_PATH": str(image_dir),
            "LINECHART_PUBLIC_URL": "https://charts.example.org",
        },
    )
    settings.validate()

    assert settings.server.port == 50002
    assert settings.storage.image_dir == str(image_dir)
    assert settings.server.resolve_public_url() == "https://charts.example.org"


@pytest.mark.parametrize(
    "port, image_dir, code",
    [
        (None, "/tmp", -101),
        (80, "/tmp", -102),
        (70000, "/tmp", -102),
        (50001, None, -103),
        (50001, "", -104),
        (50001, "/definitely/not/here", -105),
        (50001, ".", -106),
    ],
)
def test_validation_exit_codes(port, image_dir, code):
    settings = Settings()
    settings.server.port = port
    settings.storage.image_dir = image_dir

    with pytest.raises(ConfigurationError) as exc_info:
        settings.validate()

    assert exc_info.value.code == code


def test_unsupported_format_rejected(image_dir):
    settings = Settings()
    settings.server.port = 50001
    settings.storage.image_dir = str(image_dir)
    settings.render.image_format = "bmp"

    with pytest.raises(ConfigurationError):
        settings.validate()


def test_cli_flags_override_settings(tmp_path, image_dir, monkeypatch):
    monkeypatch.delenv("LINECHART_PORT", raising=False)
    monkeypatch.delenv("LINECHART_IMAGE_PATH", raising=False)
    path = write_ini(tmp_path, "[General]\nPort=50001\nImagePath=/missing\n")
    args = build_parser().parse_args(
        ["--config", str(path), "--port", "50010", "--image-dir", str(image_dir)]
    )

    settings = resolve_settings(args)

    assert settings.server.port == 50010
    assert settings.storage.image_dir == str(image_dir)
