"""
Tests for the read-only resource views.

Run: python -m pytest tests/test_resources.py -v
"""

import json

import pytest

from webpixels.catalog.errors import ComponentNotFoundError, UnknownResourceError
from webpixels.catalog.resources import CATALOG_URI, list_resources, read_resource


def _read(store, uri):
    result = read_resource(store, uri)
    (contents,) = result.contents
    assert contents.uri == uri
    assert contents.mime_type == "application/json"
    return json.loads(contents.text)


def test_list_resources(store):
    resources = list_resources(store)
    assert [r.uri for r in resources] == [
        CATALOG_URI,
        "category://sections",
        "category://components",
        "category://empty",
    ]
    assert resources[1].name == "Sections Category"
    assert resources[1].description == "All components in the Sections category"
    assert resources[0].model_dump(by_alias=True)["mimeType"] == "application/json"


def test_catalog_resource_lists_all_published(store):
    data = _read(store, "component://catalog")
    assert data["totalCount"] == 5
    assert [c["slug"] for c in data["components"]][0] == "section-hero-1"
    assert "section-draft-1" not in [c["slug"] for c in data["components"]]
    assert "html" not in data["components"][0]


def test_catalog_resource_is_not_truncated(big_store):
    assert _read(big_store, CATALOG_URI)["totalCount"] == 30


def test_category_resource(store):
    data = _read(store, "category://sections")
    assert data["category"] == {
        "slug": "sections",
        "name": "Sections",
        "description": "Page sections",
    }
    assert data["count"] == 2


def test_category_without_description_leaves_it_out(store):
    data = _read(store, "category://components")
    assert data["category"] == {"slug": "components", "name": "Components"}
    assert [c["slug"] for c in data["components"]] == ["component-button-1"]


def test_category_resource_by_subcategory(store):
    data = _read(store, "category://pricing")
    assert data["category"] is None
    assert [c["slug"] for c in data["components"]] == ["section-pricing-1"]


def test_component_resource(store):
    data = _read(store, "component://u1")
    assert data["slug"] == "section-hero-1"
    assert data["html"] == "<div>Hero</div>"


def test_component_resource_not_found(store):
    with pytest.raises(ComponentNotFoundError):
        read_resource(store, "component://ghost")


@pytest.mark.parametrize("uri", ["widget://x", "no-scheme"])
def test_unknown_resource(store, uri):
    with pytest.raises(UnknownResourceError):
        read_resource(store, uri)
