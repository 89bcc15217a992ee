"""Per-category component counts."""

from __future__ import annotations

from typing import Dict, List, Optional

from .schemas import CategoryStat, SubcategoryRef
from .store import CatalogStore


def list_categories(store: CatalogStore, type_filter: Optional[str] = None) -> List[CategoryStat]:
    """Return every published category with its component counts.

    Counts are keyed on each published component's ``category`` field;
    ``freeCount`` only counts the free ones. Published categories with
    no components are still listed with zero counts. ``type_filter`` is
    accepted for interface compatibility; categories carry no type of
    their own so it does not change the result.
    """
    counts: Dict[str, int] = {}
    free_counts: Dict[str, int] = {}

    for component in store.published_components:
        key = component.category
        counts[key] = counts.get(key, 0) + 1
        if component.is_free:
            free_counts[key] = free_counts.get(key, 0) + 1

    return [
        CategoryStat(
            slug=cat.slug,
            name=cat.name,
            icon=cat.icon,
            component_count=counts.get(cat.slug, 0),
            free_count=free_counts.get(cat.slug, 0),
            subcategories=[SubcategoryRef(slug=item.slug, name=item.name) for item in cat.items],
        )
        for cat in store.categories
        if cat.is_published
    ]
