"""Pytest configuration and fixtures

Every test gets its own absolute image directory and a Settings object
pointing at it; nothing is shared through globals.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import random

import pytest

from linechart.logger import ConsoleLogger
from linechart.service import LineChartService
from linechart.settings import Settings
from linechart.web_server import LineChartWebServer

TEST_PORT = 50001
PUBLIC_URL = "http://127.0.0.1:50001"
SUPPORT_EMAIL = "support@linechart.test"


@pytest.fixture(scope="function")
def image_dir(tmp_path):
    """Absolute, existing directory for rendered artifacts"""
    directory = tmp_path / "images"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@pytest.fixture(scope="function")
def settings(image_dir):
    settings = Settings()
    settings.server.port = TEST_PORT
    settings.server.public_url = PUBLIC_URL
    settings.server.support_email = SUPPORT_EMAIL
    settings.storage.image_dir = str(image_dir)
    settings.validate()
    return settings


@pytest.fixture(scope="function")
def service(settings):
    """Pipeline with a seeded color source"""
    return LineChartService(settings, rng=random.Random(1234))


@pytest.fixture(scope="function")
def server(settings, service):
    return LineChartWebServer(settings, service=service)


@pytest.fixture(scope="function")
def app(server):
    return server.app


@pytest.fixture(scope="function")
def logger():
    """ConsoleLogger for test logging"""
    return ConsoleLogger(name="test", level=logging.INFO)
