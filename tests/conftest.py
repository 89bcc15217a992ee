"""Shared fixtures: a small hand-written catalog and a store built from it."""

from __future__ import annotations

import pytest

from webpixels.catalog.schemas import Catalog
from webpixels.catalog.store import CatalogStore


def make_component(id, slug, **overrides) -> dict:
    data = {
        "id": id,
        "slug": slug,
        "name": slug.replace("-", " ").title(),
        "type": "section",
        "category": "sections",
        "subcategory": "hero",
        "description": f"Description of {slug}",
        "tags": [],
        "keywords": [],
        "use_cases": [],
        "includes": [],
        "html": f"<div>{slug}</div>",
        "dependencies": [],
        "used_by": [],
        "similar_to": [],
        "is_free": False,
        "is_published": True,
        "is_featured": False,
        "is_new": False,
    }
    data.update(overrides)
    return data


SAMPLE_CATALOG = {
    "version": "test",
    "generated_at": "2025-01-01T00:00:00Z",
    "categories": [
        {
            "slug": "sections",
            "name": "Sections",
            "icon": "bi-window",
            "description": "Page sections",
            "is_published": True,
            "items": [
                {"name": "Hero", "slug": "hero"},
                {"name": "Pricing", "slug": "pricing", "description": "Plans"},
            ],
        },
        {"slug": "components", "name": "Components", "is_published": True, "items": []},
        {"slug": "empty", "name": "Empty", "is_published": True, "items": []},
        {"slug": "drafts", "name": "Drafts", "is_published": False, "items": []},
    ],
    "components": [
        make_component(
            "u1", "section-hero-1",
            name="Hero 1",
            subcategory="hero",
            is_free=True,
            is_featured=True,
            tags=["landing"],
            html="<div>Hero</div>",
            used_by=["section-pricing-1", "ghost-slug"],
        ),
        make_component(
            "u2", "section-pricing-1",
            name="Pricing 1",
            subcategory="pricing",
            keywords=["Subscription"],
            content_hints={
                "has_images": False, "has_icons": True, "has_buttons": True,
                "has_form": False, "has_carousel": False, "has_video": False,
                "color_scheme": "dark", "layout_type": "split",
            },
            html="<div>Pricing</div>",
            dependencies=["section-hero-1", "missing-dependency"],
        ),
        make_component(
            "u3", "component-button-1",
            name="Button 1",
            type="component",
            category="components",
            subcategory="buttons",
            description=None,
            is_free=True,
            use_cases=["Call to action"],
            html="<button>Go</button>",
        ),
        make_component(
            "u4", "section-draft-1",
            name="Draft Hero",
            subcategory="hero",
            is_free=True,
            is_published=False,
            html="<div>Draft</div>",
        ),
        make_component(
            "u5", "layout-shell-1",
            name="Shell 1",
            type="layout",
            category="layouts",
            subcategory="shells",
            html="<main>\n<!-- content -->\n</main>",
        ),
        make_component(
            "u6", "layout-plain-1",
            name="Plain layout",
            type="layout",
            category="layouts",
            subcategory="shells",
            html="<header>Top</header>",
        ),
    ],
}


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.model_validate(SAMPLE_CATALOG)


@pytest.fixture
def store(catalog) -> CatalogStore:
    return CatalogStore(catalog)


@pytest.fixture
def big_store() -> CatalogStore:
    """Thirty published components plus a few unpublished ones."""
    components = [
        make_component(f"id-{i}", f"section-bulk-{i}", is_free=(i % 2 == 0))
        for i in range(30)
    ]
    components.insert(3, make_component("hidden-1", "section-hidden-1", is_published=False))
    components.append(make_component("hidden-2", "section-hidden-2", is_published=False))
    return CatalogStore(Catalog.model_validate({"components": components}))
