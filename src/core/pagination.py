"""Pagination range logic - platform agnostic.

Computes the ordered list of items a pager renders: page numbers, ellipses
and first/previous/next/last controls. The result depends only on the
supplied PaginationConfig, so any client (web frontend, chat bot, terminal)
can render it however it likes.

Example:
    from src.core.pagination import PaginationConfig, compute

    items = compute(PaginationConfig(count=20, page=10))
    # [<<, <, 1, ..., 9, 10, 11, ..., 20, >, >>]
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import classify_config, is_degenerate
from src.core.logging import get_logger

logger = get_logger(__name__)


class EllipsisEdge(Enum):
    """Which gap an ellipsis stands for."""

    START = "start"
    END = "end"


class NavKind(Enum):
    """Navigation control types."""

    FIRST = "first"
    PREVIOUS = "previous"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class PaginationConfig:
    """Inputs for a single pagination computation.

    Attributes:
        count: Total number of pages.
        page: The active page. Values outside [1, count] are tolerated.
        boundary_count: Pages always shown at each end of the range.
        sibling_count: Pages always shown before and after the active page.
        hide_first: Omit the first-page control.
        hide_prev: Omit the previous-page control.
        hide_next: Omit the next-page control.
        hide_last: Omit the last-page control.
    """

    count: int
    page: int = 1
    boundary_count: int = 1
    sibling_count: int = 1
    hide_first: bool = False
    hide_prev: bool = False
    hide_next: bool = False
    hide_last: bool = False


@dataclass(frozen=True)
class Page:
    """A clickable page number."""

    value: int
    is_current: bool = False


@dataclass(frozen=True)
class EllipsisItem:
    """A non-interactive marker for two or more hidden pages."""

    edge: EllipsisEdge


@dataclass(frozen=True)
class NavControl:
    """A first/previous/next/last control."""

    kind: NavKind
    target_page: int
    is_disabled: bool


PageItem = Page | EllipsisItem | NavControl


def _inclusive_range(start: int, end: int) -> list[int]:
    return list(range(start, end + 1))


def _page_numbers(
    count: int, page: int, boundary_count: int, sibling_count: int
) -> list[int | EllipsisEdge]:
    """Lay out page numbers and gap markers for a non-empty range."""
    start_pages = _inclusive_range(1, min(boundary_count, count))
    end_pages = _inclusive_range(
        max(count - boundary_count + 1, boundary_count + 1), count
    )

    # Window width stays constant near either end of the range
    siblings_start = max(
        min(
            page - sibling_count,
            count - boundary_count - sibling_count * 2 - 1,
        ),
        boundary_count + 2,
    )
    siblings_end = min(
        max(page + sibling_count, boundary_count + sibling_count * 2 + 2),
        end_pages[0] - 2 if end_pages else count - 1,
    )

    numbers: list[int | EllipsisEdge] = [*start_pages]

    if siblings_start > boundary_count + 2:
        numbers.append(EllipsisEdge.START)
    elif boundary_count + 1 < count - boundary_count:
        # Only one page hidden: show it rather than an ellipsis
        numbers.append(boundary_count + 1)

    numbers.extend(_inclusive_range(siblings_start, siblings_end))

    if siblings_end < count - boundary_count - 1:
        numbers.append(EllipsisEdge.END)
    elif count - boundary_count > boundary_count:
        numbers.append(count - boundary_count)

    numbers.extend(end_pages)
    return numbers


def compute(config: PaginationConfig) -> list[PageItem]:
    """Compute the items a pager should render for the given config.

    Numeric anomalies are normalized instead of raised: a page outside
    [1, count] yields no current page, negative boundary or sibling counts
    act as zero, and a count below one yields no page items with every
    navigation control disabled.

    Args:
        config: The pagination inputs.

    Returns:
        Items in display order: first, previous, pages and ellipses, next, last.
        Hidden controls are omitted entirely.
    """
    anomalies = classify_config(config)
    if anomalies:
        logger.debug(
            "pagination_config_normalized",
            anomalies=sorted(a.name for a in anomalies),
            count=config.count,
            page=config.page,
        )

    boundary_count = max(config.boundary_count, 0)
    sibling_count = max(config.sibling_count, 0)

    if is_degenerate(anomalies):
        numbers: list[int | EllipsisEdge] = []
        last_page = 1
        active = 1
    else:
        last_page = config.count
        active = min(max(config.page, 1), last_page)
        numbers = _page_numbers(last_page, active, boundary_count, sibling_count)

    at_start = active <= 1
    at_end = active >= last_page

    items: list[PageItem] = []
    if not config.hide_first:
        items.append(NavControl(NavKind.FIRST, 1, at_start))
    if not config.hide_prev:
        items.append(NavControl(NavKind.PREVIOUS, max(active - 1, 1), at_start))

    for number in numbers:
        if isinstance(number, EllipsisEdge):
            items.append(EllipsisItem(number))
        else:
            items.append(Page(number, is_current=number == config.page))

    if not config.hide_next:
        items.append(NavControl(NavKind.NEXT, min(active + 1, last_page), at_end))
    if not config.hide_last:
        items.append(NavControl(NavKind.LAST, last_page, at_end))

    return items
