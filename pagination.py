import logging
from typing import Callable

import pandas as pd

from page_range import (
    DEFAULT_SIBLING_COUNT,
    InvalidConfiguration,
    PaginationState,
    compute_state,
    compute_total_pages,
    is_integer,
    require_int,
)

logger = logging.getLogger(__name__)


class PaginationController:
    def __init__(
        self,
        total_items: int,
        items_per_page: int,
        on_state_change: Callable[[PaginationState], None],
        initial_page: int = 1,
        sibling_count: int = DEFAULT_SIBLING_COUNT,
    ):
        if not callable(on_state_change):
            raise InvalidConfiguration("on_state_change must be callable")
        initial_page = require_int("initial_page", initial_page, 1)
        self.items_per_page = require_int("items_per_page", items_per_page, 1)
        self.sibling_count = require_int("sibling_count", sibling_count, 0)
        self.total_items = require_int("total_items", total_items, 0)
        self.total_pages = compute_total_pages(self.total_items, self.items_per_page)
        self.on_state_change = on_state_change

        self.current_page = initial_page
        self._clamp()
        if self.current_page != initial_page:
            logger.debug("initial page %s clamped to %s", initial_page, self.current_page)

        self.initial_state = self.state

    @classmethod
    def for_frame(cls, df: pd.DataFrame, items_per_page: int, on_state_change, **kwargs):
        return cls(len(df), items_per_page, on_state_change, **kwargs)

    def _clamp(self):
        last_page = max(1, self.total_pages)
        self.current_page = max(1, min(self.current_page, last_page))

    @property
    def state(self) -> PaginationState:
        return compute_state(
            self.total_items, self.items_per_page, self.current_page, self.sibling_count
        )

    def go_to_page(self, page: int) -> bool:
        if not is_integer(page):
            logger.debug("ignoring non-integer page %r", page)
            return False
        page = int(page)
        if page < 1 or page > self.total_pages:
            logger.debug("ignoring page %s outside 1..%s", page, self.total_pages)
            return False
        if page == self.current_page:
            return False

        logger.debug("page %s -> %s", self.current_page, page)
        self.current_page = page
        self.on_state_change(self.state)
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)

    def first_page(self) -> bool:
        return self.go_to_page(1)

    def last_page(self) -> bool:
        return self.go_to_page(self.total_pages)

    def update_total_items(self, total_items: int):
        """Replace the item count and notify if the page count or current page moved."""
        total_items = require_int("total_items", total_items, 0)
        prev_pages = self.total_pages
        prev_page = self.current_page

        self.total_items = total_items
        self.total_pages = compute_total_pages(total_items, self.items_per_page)
        self._clamp()

        if self.total_pages != prev_pages or self.current_page != prev_page:
            logger.debug(
                "total items now %s: %s pages, page %s -> %s",
                total_items,
                self.total_pages,
                prev_page,
                self.current_page,
            )
            self.on_state_change(self.state)

    def page_for_item(self, index: int) -> int:
        index = require_int("index", index)
        if index < 0 or self.total_items == 0:
            return 1
        index = min(index, self.total_items - 1)
        return index // self.items_per_page + 1

    def ensure_item_visible(self, index: int) -> bool:
        if not is_integer(index):
            logger.debug("ignoring non-integer item index %r", index)
            return False
        return self.go_to_page(self.page_for_item(index))

    @property
    def item_start(self) -> int:
        return (self.current_page - 1) * self.items_per_page

    @property
    def item_end(self) -> int:
        return min(self.total_items, self.item_start + self.items_per_page)

    def slice_frame(self, df: pd.DataFrame) -> pd.DataFrame:
        return df.iloc[self.item_start : self.item_end]
