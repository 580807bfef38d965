"""Pagination config anomaly classification.

Pagination is a rendering aid and must never fail a render pass, so odd
inputs are classified and normalized rather than raised. This module names
the anomalies so callers can inspect or log what was normalized.

Example:
    from src.core.errors import ConfigAnomaly, classify_config

    anomalies = classify_config(PaginationConfig(count=10, page=42))
    if ConfigAnomaly.PAGE_ABOVE_RANGE in anomalies:
        ...
"""

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.pagination import PaginationConfig


class ConfigAnomaly(Enum):
    """Classification of out-of-contract pagination inputs."""

    # Page outside [1, count] - rendered with no current page
    PAGE_BELOW_RANGE = auto()
    PAGE_ABOVE_RANGE = auto()

    # Nothing to paginate - rendered with no page items
    EMPTY_COUNT = auto()

    # Treated as zero
    NEGATIVE_BOUNDARY = auto()
    NEGATIVE_SIBLING = auto()


# Anomalies that leave nothing to paginate
DEGENERATE_ANOMALIES = {ConfigAnomaly.EMPTY_COUNT}


def classify_config(config: "PaginationConfig") -> set[ConfigAnomaly]:
    """Classify a pagination config into the anomalies it exhibits.

    Args:
        config: The config to inspect.

    Returns:
        The set of anomalies found; empty for a valid config.
    """
    anomalies: set[ConfigAnomaly] = set()

    if config.count < 1:
        anomalies.add(ConfigAnomaly.EMPTY_COUNT)
    elif config.page < 1:
        anomalies.add(ConfigAnomaly.PAGE_BELOW_RANGE)
    elif config.page > config.count:
        anomalies.add(ConfigAnomaly.PAGE_ABOVE_RANGE)

    if config.boundary_count < 0:
        anomalies.add(ConfigAnomaly.NEGATIVE_BOUNDARY)
    if config.sibling_count < 0:
        anomalies.add(ConfigAnomaly.NEGATIVE_SIBLING)

    return anomalies


def is_degenerate(anomalies: set[ConfigAnomaly]) -> bool:
    """Check if the anomalies leave no pages to render.

    Args:
        anomalies: Result of classify_config.

    Returns:
        True if the pager should render controls only.
    """
    return bool(anomalies & DEGENERATE_ANOMALIES)
