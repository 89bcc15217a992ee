"""
In-memory store for the component catalog.

A ``CatalogStore`` wraps one loaded ``Catalog`` and the lookup indexes
built from it: components by id, components by slug and categories by
slug. The indexes are built in a single pass when the store is created;
duplicate keys do not fail construction, the last entry seen simply
replaces the earlier one (a warning is logged). Nothing mutates the
store afterwards, so it can be shared freely between requests and
threads.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .schemas import Catalog, Category, Component

log = logging.getLogger("webpixels.catalog.store")


class CatalogStore:
    """Read-only view over a catalog with id/slug lookups."""

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._by_id: Dict[str, Component] = {}
        self._by_slug: Dict[str, Component] = {}
        self._categories: Dict[str, Category] = {}

        for component in catalog.components:
            if component.id in self._by_id:
                log.warning("Duplicate component id %r, keeping the last entry", component.id)
            if component.slug in self._by_slug:
                log.warning("Duplicate component slug %r, keeping the last entry", component.slug)
            self._by_id[component.id] = component
            self._by_slug[component.slug] = component

        for category in catalog.categories:
            if category.slug in self._categories:
                log.warning("Duplicate category slug %r, keeping the last entry", category.slug)
            self._categories[category.slug] = category

        log.debug(
            "Indexed %d components (%d slugs) and %d categories",
            len(self._by_id), len(self._by_slug), len(self._categories),
        )

    @property
    def version(self) -> str:
        return self._catalog.version

    @property
    def generated_at(self) -> str:
        return self._catalog.generated_at

    @property
    def components(self) -> List[Component]:
        """All components in catalog order, published or not."""
        return list(self._catalog.components)

    @property
    def published_components(self) -> List[Component]:
        return [c for c in self._catalog.components if c.is_published]

    @property
    def categories(self) -> List[Category]:
        return list(self._catalog.categories)

    def get(self, id_or_slug: str) -> Optional[Component]:
        """Look up a component by id, falling back to slug.

        Returns ``None`` when neither index knows the reference.
        """
        component = self._by_id.get(id_or_slug)
        if component is None:
            component = self._by_slug.get(id_or_slug)
        return component

    def get_by_slug(self, slug: str) -> Optional[Component]:
        return self._by_slug.get(slug)

    def get_category(self, slug: str) -> Optional[Category]:
        return self._categories.get(slug)

    def __len__(self) -> int:
        return len(self._catalog.components)
