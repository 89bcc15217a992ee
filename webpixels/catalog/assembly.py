"""
Page assembly: concatenate component markup into a single HTML page.

References are resolved in the order given and their ``html`` joined
with a blank line. Nothing is deduplicated or reordered; the
``dependencies``/``used_by`` fields play no part here. When any
reference fails to resolve the whole request fails and every missing
reference is reported at once.

A ``layout`` component, when given, wraps the body. If its markup holds
``LAYOUT_PLACEHOLDER`` the body replaces it, otherwise the layout markup
is placed before the body. A layout that does not resolve is logged and
left out; it never fails the request.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .errors import AssemblyValidationError
from .store import CatalogStore

log = logging.getLogger("webpixels.catalog.assembly")

SEPARATOR = "\n\n"
LAYOUT_PLACEHOLDER = "<!-- content -->"

BOOTSTRAP_VERSION = "5.3.3"
BOOTSTRAP_ICONS_VERSION = "1.11.3"
WEBPIXELS_CSS_VERSION = "latest"

PAGE_TITLE = "WebPixels Page"

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <!-- Bootstrap CSS -->
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@{bootstrap}/dist/css/bootstrap.min.css" rel="stylesheet">
  <!-- Bootstrap Icons -->
  <link href="https://cdn.jsdelivr.net/npm/bootstrap-icons@{icons}/font/bootstrap-icons.min.css" rel="stylesheet">
  <!-- WebPixels CSS -->
  <link href="https://cdn.jsdelivr.net/npm/@webpixels/css@{webpixels}/dist/index.css" rel="stylesheet">
</head>
<body>
{body}
  <!-- Bootstrap JS -->
  <script src="https://cdn.jsdelivr.net/npm/bootstrap@{bootstrap}/dist/js/bootstrap.bundle.min.js"></script>
</body>
</html>"""


def wrap_document(body: str, title: str = PAGE_TITLE) -> str:
    """Wrap ``body`` in the boilerplate document with pinned CDN assets."""
    return DOCUMENT_TEMPLATE.format(
        title=title,
        bootstrap=BOOTSTRAP_VERSION,
        icons=BOOTSTRAP_ICONS_VERSION,
        webpixels=WEBPIXELS_CSS_VERSION,
        body=body,
    )


def apply_layout(layout_html: str, body: str) -> str:
    if LAYOUT_PLACEHOLDER in layout_html:
        return layout_html.replace(LAYOUT_PLACEHOLDER, body, 1)
    return layout_html + SEPARATOR + body


def assemble_page(
    store: CatalogStore,
    refs: Sequence[str],
    layout: Optional[str] = None,
    include_assets: Optional[bool] = True,
) -> str:
    """Assemble the components named by ``refs`` into one HTML string.

    Parameters
    ----------
    store : CatalogStore
        Catalog the references are resolved against (id first, then slug).
    refs : Sequence[str]
        Component ids or slugs in display order. Must not be empty.
    layout : Optional[str]
        Id or slug of a component whose markup wraps the body. Ignored
        when it does not resolve.
    include_assets : Optional[bool]
        Wrap the result in a full HTML document unless explicitly ``False``.

    Returns
    -------
    str
        The assembled markup.

    Raises
    ------
    AssemblyValidationError
        When ``refs`` is empty or any of them does not resolve.
        ``missing`` lists every unresolved reference.
    """
    if not refs:
        raise AssemblyValidationError("No components provided")

    missing: List[str] = [ref for ref in refs if store.get(ref) is None]
    if missing:
        raise AssemblyValidationError("Components not found", missing=missing)

    body = SEPARATOR.join(store.get(ref).html for ref in refs)

    if layout:
        layout_component = store.get(layout)
        if layout_component is None:
            log.info("Layout %r not found, assembling without it", layout)
        else:
            body = apply_layout(layout_component.html, body)

    if include_assets is False:
        return body
    return wrap_document(body)
