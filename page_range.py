import numbers
from dataclasses import asdict, dataclass
from typing import List, Optional, Union

ELLIPSIS = "ellipsis"
DEFAULT_SIBLING_COUNT = 2

PageToken = Union[int, str]


class InvalidConfiguration(ValueError):
    pass


@dataclass(frozen=True)
class PaginationState:
    pages: List[PageToken]
    current_page: int
    total_pages: int
    has_next: bool
    has_previous: bool
    next_page: Optional[int]
    previous_page: Optional[int]

    def to_dict(self) -> dict:
        return asdict(self)


def is_integer(value) -> bool:
    # numpy integers count; bool does not
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def require_int(name: str, value, minimum: Optional[int] = None) -> int:
    if not is_integer(value):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if minimum is not None and value < minimum:
        raise InvalidConfiguration(f"{name} must be >= {minimum}, got {value}")
    return value


def compute_total_pages(total_items: int, items_per_page: int) -> int:
    total_items = require_int("total_items", total_items, 0)
    items_per_page = require_int("items_per_page", items_per_page, 1)
    return -(-total_items // items_per_page)


def compute_pages(current_page: int, total_pages: int, sibling_count: int = DEFAULT_SIBLING_COUNT) -> List[PageToken]:
    """
    Page tokens for a pager bar: page 1, an optional ellipsis, the sibling
    window around current_page, an optional ellipsis, then the last page.
    """
    pages: List[PageToken] = []
    if total_pages < 1:
        return pages

    start = max(2, current_page - sibling_count)
    end = min(total_pages - 1, current_page + sibling_count)

    pages.append(1)
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    if total_pages > 1:
        pages.append(total_pages)
    return pages


def compute_state(
    total_items: int,
    items_per_page: int,
    current_page: int,
    sibling_count: int = DEFAULT_SIBLING_COUNT,
) -> PaginationState:
    # current_page is not range-checked here
    current_page = require_int("current_page", current_page)
    sibling_count = require_int("sibling_count", sibling_count, 0)
    total_pages = compute_total_pages(total_items, items_per_page)

    has_next = current_page < total_pages
    has_previous = current_page > 1
    return PaginationState(
        pages=compute_pages(current_page, total_pages, sibling_count),
        current_page=current_page,
        total_pages=total_pages,
        has_next=has_next,
        has_previous=has_previous,
        next_page=current_page + 1 if has_next else None,
        previous_page=current_page - 1 if has_previous else None,
    )
