"""
Read-only resource views over the catalog.

Resources are addressed as ``<kind>://<key>``:

* ``component://catalog`` - summaries of every published component.
* ``category://<slug>`` - published components in a category or subcategory.
* ``component://<id-or-slug>`` - the full record of one component.
"""

from __future__ import annotations

from typing import List

from .errors import ComponentNotFoundError, UnknownResourceError
from .schemas import ComponentDetail, ComponentSummary, ReadResourceResult, Resource, ResourceContents
from .search import components_in_category
from .store import CatalogStore
from .tools import dump, to_json

CATALOG_URI = "component://catalog"


def list_resources(store: CatalogStore) -> List[Resource]:
    resources = [
        Resource(
            uri=CATALOG_URI,
            name="Component Catalog",
            description="Full catalog of all available components",
        )
    ]
    for cat in store.categories:
        if cat.is_published:
            resources.append(
                Resource(
                    uri=f"category://{cat.slug}",
                    name=f"{cat.name} Category",
                    description=f"All components in the {cat.name} category",
                )
            )
    return resources


def _catalog_view(store: CatalogStore) -> dict:
    summaries = [ComponentSummary.from_component(c) for c in store.published_components]
    return {
        "totalCount": len(summaries),
        "components": [dump(s) for s in summaries],
    }


def _category_view(store: CatalogStore, slug: str) -> dict:
    category = store.get_category(slug)
    summaries = components_in_category(store, slug)
    return {
        "category": category.model_dump(
            include={"slug", "name", "description"}, exclude_none=True,
        ) if category else None,
        "count": len(summaries),
        "components": [dump(s) for s in summaries],
    }


def _component_view(store: CatalogStore, id_or_slug: str) -> dict:
    component = store.get(id_or_slug)
    if component is None:
        raise ComponentNotFoundError(id_or_slug)
    return dump(ComponentDetail.from_component(component))


def read_resource(store: CatalogStore, uri: str) -> ReadResourceResult:
    """Render the resource at ``uri`` as JSON text.

    Raises
    ------
    UnknownResourceError
        When the kind is not ``component`` or ``category``.
    ComponentNotFoundError
        When a ``component://`` key does not resolve.
    """
    kind, sep, key = uri.partition("://")
    if not sep:
        raise UnknownResourceError(uri)

    if kind == "component" and key == "catalog":
        data = _catalog_view(store)
    elif kind == "category":
        data = _category_view(store, key)
    elif kind == "component":
        data = _component_view(store, key)
    else:
        raise UnknownResourceError(uri)

    return ReadResourceResult(contents=[ResourceContents(uri=uri, text=to_json(data))])
