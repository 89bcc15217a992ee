"""
Search over the component catalog.

Only published components ever take part in a search. Filters are
applied one after another, each narrowing the current list, and the
result keeps catalog order: there is no relevance ranking.
"""

from __future__ import annotations

from typing import List, Optional

from .schemas import Component, ComponentSummary, SearchFilters, SearchResult
from .store import CatalogStore

DEFAULT_LIMIT = 20


def _haystack(component: Component) -> str:
    """Build the lower-cased text a free-text query is matched against."""
    parts = [
        component.name,
        component.slug,
        component.description or "",
        component.category,
        component.subcategory,
        *component.tags,
        *component.keywords,
        *component.use_cases,
    ]
    return " ".join(parts).lower()


def _in_category(component: Component, slug: str) -> bool:
    return component.category == slug or component.subcategory == slug


def filter_components(store: CatalogStore, filters: SearchFilters) -> List[Component]:
    """Apply ``filters`` to the published components of ``store``.

    Parameters
    ----------
    store : CatalogStore
        The catalog to search.
    filters : SearchFilters
        Filters to apply. ``None`` fields are skipped. ``query`` is a
        case-insensitive substring match against name, slug,
        description, category, subcategory, tags, keywords and use
        cases. ``limit`` truncates the result when greater than zero.

    Returns
    -------
    List[Component]
        Matching components in catalog order.
    """
    items = store.published_components

    if filters.type:
        items = [c for c in items if c.type == filters.type]

    if filters.category:
        items = [c for c in items if _in_category(c, filters.category)]

    if filters.is_free is not None:
        items = [c for c in items if c.is_free == filters.is_free]

    if filters.is_featured is not None:
        items = [c for c in items if c.is_featured == filters.is_featured]

    if filters.query:
        nq = filters.query.lower()
        items = [c for c in items if nq in _haystack(c)]

    if filters.limit and filters.limit > 0:
        items = items[: filters.limit]

    return items


def search_components(store: CatalogStore, filters: Optional[SearchFilters] = None) -> SearchResult:
    """Run a search and project the matches to summaries."""
    results = filter_components(store, filters or SearchFilters())
    return SearchResult(
        count=len(results),
        components=[ComponentSummary.from_component(c) for c in results],
    )


def components_in_category(store: CatalogStore, slug: str) -> List[ComponentSummary]:
    """Published components whose category or subcategory is ``slug``."""
    return [
        ComponentSummary.from_component(c)
        for c in store.published_components
        if _in_category(c, slug)
    ]
