"""Pydantic schemas for exchanging pagination state with a frontend.

A web client posts a PaginationRequest and renders the flat items of the
PaginationResponse, so it never needs to know about the item dataclasses.
"""

from collections.abc import Sequence
from typing import Literal, cast

from pydantic import BaseModel, ConfigDict, Field

from src.core import pager
from src.core.pagination import (
    EllipsisItem,
    NavControl,
    Page,
    PageItem,
    PaginationConfig,
)

ItemType = Literal["page", "ellipsis", "first", "previous", "next", "last"]


class PaginationRequest(BaseModel):
    """Schema for requesting a pagination layout."""

    count: int = Field(..., description="Total number of pages")
    page: int = Field(1, description="The active page")
    boundary_count: int = Field(1, description="Pages always shown at each end")
    sibling_count: int = Field(1, description="Pages shown around the active page")
    hide_first: bool = False
    hide_prev: bool = False
    hide_next: bool = False
    hide_last: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"count": 20, "page": 10, "boundary_count": 1, "sibling_count": 1}
        }
    )

    def to_config(self) -> PaginationConfig:
        """Convert to the core PaginationConfig."""
        return PaginationConfig(**self.model_dump())


class PageItemResponse(BaseModel):
    """Schema for a single rendered pagination item."""

    type: ItemType
    page: int | None = Field(None, description="Target page, null for ellipses")
    selected: bool = False
    disabled: bool = False
    label: str
    aria_label: str | None = None

    @classmethod
    def from_item(cls, item: PageItem) -> "PageItemResponse":
        """Create a response item from a computed PageItem."""
        item_type: ItemType
        if isinstance(item, Page):
            item_type = "page"
        elif isinstance(item, EllipsisItem):
            item_type = "ellipsis"
        else:
            item_type = cast(ItemType, item.kind.value)

        return cls(
            type=item_type,
            page=pager.target_page(item),
            selected=isinstance(item, Page) and item.is_current,
            disabled=isinstance(item, NavControl) and item.is_disabled,
            label=pager.item_label(item),
            aria_label=pager.aria_label(item),
        )


class PaginationResponse(BaseModel):
    """Schema for a computed pagination layout."""

    count: int
    page: int
    items: list[PageItemResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "count": 5,
                "page": 1,
                "items": [
                    {
                        "type": "previous",
                        "page": 1,
                        "selected": False,
                        "disabled": True,
                        "label": "<",
                        "aria_label": "Go to previous page",
                    },
                    {
                        "type": "page",
                        "page": 1,
                        "selected": True,
                        "disabled": False,
                        "label": "1",
                        "aria_label": "Go to page 1",
                    },
                ],
            }
        }
    )

    @classmethod
    def from_items(
        cls, config: PaginationConfig, items: Sequence[PageItem]
    ) -> "PaginationResponse":
        """Build a response from a config and its computed items."""
        return cls(
            count=config.count,
            page=config.page,
            items=[PageItemResponse.from_item(item) for item in items],
        )
