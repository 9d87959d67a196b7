"""
Test configuration for renderer unit tests.

Ensures the project root is on sys.path so the package can be imported
without installing it, and provides shared renderer fixtures.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger


PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hive_renderer import DefaultRenderer  # noqa: E402
from hive_renderer.models import DEFAULT_LOCALIZATION, RendererOptions  # noqa: E402


@pytest.fixture
def options():
    return RendererOptions(base_url="https://hive.blog/")


@pytest.fixture
def localization():
    return DEFAULT_LOCALIZATION


@pytest.fixture
def renderer(options, localization):
    return DefaultRenderer(options, localization)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
