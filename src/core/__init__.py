"""Core pagination logic.

This module contains the platform-agnostic page range computation and the
helpers renderers use to label, activate and serialize its items.
"""

from src.core.config import PaginationSettings, load_settings
from src.core.errors import ConfigAnomaly, classify_config, is_degenerate
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    logging_context,
)
from src.core.pager import (
    PagerController,
    aria_label,
    is_interactive,
    item_label,
    render_text,
    target_page,
)
from src.core.pagination import (
    EllipsisEdge,
    EllipsisItem,
    NavControl,
    NavKind,
    Page,
    PageItem,
    PaginationConfig,
    compute,
)
from src.core.schemas import PageItemResponse, PaginationRequest, PaginationResponse

__all__ = [
    # Page range computation
    "EllipsisEdge",
    "EllipsisItem",
    "NavControl",
    "NavKind",
    "Page",
    "PageItem",
    "PaginationConfig",
    "compute",
    # Renderer helpers
    "PagerController",
    "aria_label",
    "is_interactive",
    "item_label",
    "render_text",
    "target_page",
    # Configuration
    "PaginationSettings",
    "load_settings",
    # Config anomalies
    "ConfigAnomaly",
    "classify_config",
    "is_degenerate",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "logging_context",
    # Schemas
    "PageItemResponse",
    "PaginationRequest",
    "PaginationResponse",
]
