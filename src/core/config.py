"""Environment-driven pagination defaults.

Settings are read from the environment on every call to load_settings(),
so nothing is cached between renders.

Environment variables:
    PAGINATION_BOUNDARY_COUNT: Pages shown at each end (default: 1).
    PAGINATION_SIBLING_COUNT: Pages shown around the active page (default: 1).
"""

from dataclasses import dataclass, replace
from os import getenv
from typing import Any

from src.core.logging import get_logger
from src.core.pagination import PaginationConfig

logger = get_logger(__name__)

DEFAULT_BOUNDARY_COUNT = 1
DEFAULT_SIBLING_COUNT = 1


@dataclass(frozen=True)
class PaginationSettings:
    """Default visibility parameters applied to new configs."""

    boundary_count: int = DEFAULT_BOUNDARY_COUNT
    sibling_count: int = DEFAULT_SIBLING_COUNT

    def build(self, count: int, page: int = 1, **overrides: Any) -> PaginationConfig:
        """Create a PaginationConfig using these settings as defaults.

        Args:
            count: Total number of pages.
            page: The active page.
            **overrides: Any other PaginationConfig field, e.g. hide_first=True.

        Returns:
            A new PaginationConfig.
        """
        config = PaginationConfig(
            count=count,
            page=page,
            boundary_count=self.boundary_count,
            sibling_count=self.sibling_count,
        )
        return replace(config, **overrides)


def _read_int(name: str, default: int) -> int:
    raw = getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("invalid_pagination_setting", name=name, value=raw, default=default)
        return default


def load_settings() -> PaginationSettings:
    """Load pagination defaults from the environment.

    Returns:
        PaginationSettings with unset or unparsable values at their defaults.
    """
    return PaginationSettings(
        boundary_count=_read_int("PAGINATION_BOUNDARY_COUNT", DEFAULT_BOUNDARY_COUNT),
        sibling_count=_read_int("PAGINATION_SIBLING_COUNT", DEFAULT_SIBLING_COUNT),
    )
