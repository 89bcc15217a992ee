"""Resolve a component's usage-graph edges into component summaries."""

from __future__ import annotations

from typing import List, Optional

from .errors import ComponentNotFoundError, InvalidArgumentsError
from .schemas import ComponentRef, ComponentSummary, DependencyResult
from .store import CatalogStore

DIRECTIONS = ("dependencies", "dependents", "both")


def _resolve_slugs(store: CatalogStore, slugs: List[str]) -> List[ComponentSummary]:
    # Dangling slugs are dropped, not reported.
    resolved = [store.get_by_slug(slug) for slug in slugs]
    return [ComponentSummary.from_component(c) for c in resolved if c is not None]


def get_dependencies(
    store: CatalogStore,
    id_or_slug: str,
    direction: Optional[str] = "both",
) -> DependencyResult:
    """Return what a component uses and/or what uses it.

    ``direction`` selects ``dependencies`` (the component's own
    ``dependencies`` list), ``dependents`` (its ``used_by`` list) or
    ``both``. Edges are resolved by slug in list order.
    """
    direction = direction or "both"
    if direction not in DIRECTIONS:
        raise InvalidArgumentsError(
            f"Invalid direction: {direction} (expected one of {', '.join(DIRECTIONS)})"
        )

    component = store.get(id_or_slug)
    if component is None:
        raise ComponentNotFoundError(id_or_slug)

    result = DependencyResult(
        component=ComponentRef(id=component.id, slug=component.slug, name=component.name),
    )
    if direction in ("dependencies", "both"):
        result.dependencies = _resolve_slugs(store, component.dependencies)
    if direction in ("dependents", "both"):
        result.dependents = _resolve_slugs(store, component.used_by)
    return result
