"""Builder for Magento ``searchCriteria`` query strings.

Magento expresses list filters as nested query parameters::

    searchCriteria[filter_groups][0][filters][0][field]=increment_id
    searchCriteria[filter_groups][0][filters][0][value]=100000123
    searchCriteria[filter_groups][0][filters][0][condition_type]=eq

Filter groups are AND-ed together; filters inside one group are OR-ed.
Indices are assigned from insertion order.
"""

from typing import NamedTuple
from urllib.parse import urlencode


class Filter(NamedTuple):
    field: str
    value: str
    condition_type: str = "eq"


class SearchQuery:
    """Accumulates filter groups and extra parameters for a list endpoint."""

    def __init__(self):
        self._groups: list[list[Filter]] = []
        self._params: list[tuple[str, str]] = []
        self._sort_orders = 0

    def where(self, field: str, value, condition: str = "eq") -> "SearchQuery":
        """Start a new filter group (AND with the previous groups)."""
        self._groups.append([Filter(field, str(value), condition)])
        return self

    def or_where(self, field: str, value, condition: str = "eq") -> "SearchQuery":
        """Add a filter to the current group (OR with its other filters)."""
        if not self._groups:
            return self.where(field, value, condition)
        self._groups[-1].append(Filter(field, str(value), condition))
        return self

    def filter_group(self, *filters: Filter) -> "SearchQuery":
        if filters:
            self._groups.append(list(filters))
        return self

    def with_param(self, key: str, value) -> "SearchQuery":
        """Supplementary parameter, e.g. ``fields=items[entity_id]``."""
        self._params.append((key, str(value)))
        return self

    def page(self, size: int, current: int = 1) -> "SearchQuery":
        self._params.append(("searchCriteria[pageSize]", str(size)))
        self._params.append(("searchCriteria[currentPage]", str(current)))
        return self

    def sort_by(self, field: str, direction: str = "ASC") -> "SearchQuery":
        prefix = f"searchCriteria[sortOrders][{self._sort_orders}]"
        self._sort_orders += 1
        self._params.append((f"{prefix}[field]", field))
        self._params.append((f"{prefix}[direction]", direction.upper()))
        return self

    def pairs(self) -> list[tuple[str, str]]:
        pairs = []
        for group_index, group in enumerate(self._groups):
            for filter_index, f in enumerate(group):
                prefix = f"searchCriteria[filter_groups][{group_index}][filters][{filter_index}]"
                pairs.append((f"{prefix}[field]", f.field))
                pairs.append((f"{prefix}[value]", f.value))
                pairs.append((f"{prefix}[condition_type]", f.condition_type))
        pairs.extend(self._params)
        return pairs

    def encode(self) -> str:
        """Query string with brackets left unescaped, as Magento documents it."""
        return urlencode(self.pairs(), safe="[]")

    def apply(self, route: str) -> str:
        """Append the encoded query to ``route``."""
        query = self.encode()
        if not query:
            return route
        return f"{route}?{query}"

    def __str__(self) -> str:
        return self.encode()


def build_search_query(field: str, value, condition: str = "eq") -> str:
    """Single-filter shortcut."""
    return SearchQuery().where(field, value, condition).encode()
