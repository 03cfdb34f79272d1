from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import config_paths
from page_range import DEFAULT_SIBLING_COUNT, InvalidConfiguration, PaginationState
from pagination import PaginationController

# accepted spellings for each option, checked in order
OPTION_KEYS = {
    "total_items": ("total_items", "totalItems"),
    "items_per_page": ("items_per_page", "itemsPerPage"),
    "initial_page": ("initial_page", "initialPage", "current_page", "currentPage"),
    "sibling_count": ("sibling_count", "siblingCount"),
    "on_state_change": ("on_state_change", "onStateChange"),
}


@dataclass
class PaginationOptions:
    total_items: int
    items_per_page: int
    on_state_change: Callable[[PaginationState], None]
    initial_page: int = 1
    sibling_count: int = DEFAULT_SIBLING_COUNT

    def build(self) -> PaginationController:
        return PaginationController(
            self.total_items,
            self.items_per_page,
            self.on_state_change,
            initial_page=self.initial_page,
            sibling_count=self.sibling_count,
        )


def _canonical(mapping: Mapping[str, Any]) -> dict:
    """Map every accepted spelling in `mapping` onto its field name."""
    unknown = [
        key for key in mapping
        if not any(key in spellings for spellings in OPTION_KEYS.values())
    ]
    if unknown:
        raise InvalidConfiguration(f"unknown pagination options: {', '.join(sorted(unknown))}")

    values = {}
    for field, spellings in OPTION_KEYS.items():
        present = [key for key in spellings if key in mapping]
        if len(present) > 1:
            raise InvalidConfiguration(f"{field} given more than once: {', '.join(present)}")
        if present:
            values[field] = mapping[present[0]]
    return values


def options_from_mapping(mapping: Mapping[str, Any], defaults: Optional[dict] = None) -> PaginationOptions:
    """
    Build options from a mapping that may use either snake_case or camelCase
    names. items_per_page and sibling_count fall back to `defaults` (as
    returned by config_paths.load_config) when absent.
    """
    defaults = defaults or {}
    values = _canonical(mapping)
    for field in OPTION_KEYS:
        values.setdefault(field, None)

    if values["total_items"] is None:
        raise InvalidConfiguration("totalItems is required")
    if values["on_state_change"] is None:
        raise InvalidConfiguration("onStateChange is required")
    if values["items_per_page"] is None:
        values["items_per_page"] = defaults.get("ITEMS_PER_PAGE")
    if values["items_per_page"] is None:
        raise InvalidConfiguration("itemsPerPage is required")
    if values["sibling_count"] is None:
        values["sibling_count"] = defaults.get("SIBLING_COUNT", DEFAULT_SIBLING_COUNT)
    if values["initial_page"] is None:
        values["initial_page"] = 1

    return PaginationOptions(**values)


def create_pagination(mapping: Optional[Mapping[str, Any]] = None, defaults: Optional[dict] = None, **kwargs) -> PaginationController:
    # keywords win over the mapping whatever spelling either side uses
    merged = _canonical(mapping or {})
    merged.update(_canonical(kwargs))
    if defaults is None:
        defaults = config_paths.load_config()
    return options_from_mapping(merged, defaults=defaults).build()
