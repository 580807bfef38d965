"""Pager helpers shared by every pagination renderer.

Renderers (web templates, chat bot buttons, terminal output) call compute()
and then use these helpers to label items, dispatch activations and step
through pages without re-implementing the navigation rules.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace

from src.core.logging import get_logger
from src.core.pagination import (
    EllipsisItem,
    NavControl,
    NavKind,
    Page,
    PageItem,
    PaginationConfig,
)

logger = get_logger(__name__)

ELLIPSIS_LABEL = "..."

NAV_LABELS = {
    NavKind.FIRST: "<<",
    NavKind.PREVIOUS: "<",
    NavKind.NEXT: ">",
    NavKind.LAST: ">>",
}

NAV_ARIA_LABELS = {
    NavKind.FIRST: "Go to first page",
    NavKind.PREVIOUS: "Go to previous page",
    NavKind.NEXT: "Go to next page",
    NavKind.LAST: "Go to last page",
}


def item_label(item: PageItem) -> str:
    """Get the visible text for an item."""
    if isinstance(item, Page):
        return str(item.value)
    if isinstance(item, NavControl):
        return NAV_LABELS[item.kind]
    return ELLIPSIS_LABEL


def aria_label(item: PageItem) -> str | None:
    """Get the accessible label for an item, None for ellipses."""
    if isinstance(item, Page):
        return f"Go to page {item.value}"
    if isinstance(item, NavControl):
        return NAV_ARIA_LABELS[item.kind]
    return None


def target_page(item: PageItem) -> int | None:
    """Get the page an item navigates to, None for ellipses."""
    if isinstance(item, Page):
        return item.value
    if isinstance(item, NavControl):
        return item.target_page
    return None


def is_interactive(item: PageItem) -> bool:
    """Check if an item can be activated at all."""
    if isinstance(item, EllipsisItem):
        return False
    if isinstance(item, NavControl):
        return not item.is_disabled
    return True


def render_text(items: Sequence[PageItem]) -> str:
    """Render items as a single line of text.

    The current page is wrapped in brackets and disabled controls in
    parentheses, e.g. "(<<) (<) [1] 2 3 4 5 > >>".
    """
    parts: list[str] = []
    for item in items:
        label = item_label(item)
        if isinstance(item, Page) and item.is_current:
            label = f"[{label}]"
        elif isinstance(item, NavControl) and item.is_disabled:
            label = f"({label})"
        parts.append(label)
    return " ".join(parts)


class PagerController:
    """Dispatches item activations and steps through pages.

    Attributes:
        disabled: When True the whole pager ignores activations.
    """

    def __init__(self, disabled: bool = False) -> None:
        self.disabled = disabled

    def activate(
        self, item: PageItem, on_change: Callable[[int], object]
    ) -> int | None:
        """Activate an item, invoking on_change with its target page.

        Args:
            item: The item the user activated.
            on_change: Callback receiving the new page number.

        Returns:
            The page passed to on_change, or None if the activation was ignored.
        """
        if self.disabled or not is_interactive(item):
            logger.debug("pager_activation_ignored", item=item_label(item))
            return None

        page = target_page(item)
        if page is None:
            return None

        logger.debug("pager_activated", item=item_label(item), target_page=page)
        on_change(page)
        return page

    def next_page(self, config: PaginationConfig) -> PaginationConfig:
        """Move to the next page, returns new config.

        Lands on the same page as the NEXT control would.
        """
        if config.count >= 1 and config.page < config.count:
            active = min(max(config.page, 1), config.count)
            return replace(config, page=min(active + 1, config.count))
        return config

    def prev_page(self, config: PaginationConfig) -> PaginationConfig:
        """Move to the previous page, returns new config."""
        if config.count >= 1 and config.page > 1:
            active = min(max(config.page, 1), config.count)
            return replace(config, page=max(active - 1, 1))
        return config

    def go_to_page(self, config: PaginationConfig, page: int) -> PaginationConfig:
        """Jump to a specific page; out-of-range targets leave config unchanged."""
        if 1 <= page <= config.count:
            return replace(config, page=page)
        return config
