"""Shared pytest fixtures for page-range tests."""

from collections.abc import Generator

import pytest
import structlog

from src.core.logging import clear_contextvars


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Reset structlog configuration and context around each test."""
    structlog.reset_defaults()
    clear_contextvars()
    yield
    clear_contextvars()


@pytest.fixture
def page_changes() -> list[int]:
    """Provide a list that collects on_change callback arguments.

    Example:
        def test_click(page_changes):
            controller.activate(item, page_changes.append)
            assert page_changes == [3]
    """
    return []
