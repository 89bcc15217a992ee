# webpixels/storage.py
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .catalog.schemas import Catalog
from .catalog.store import CatalogStore

log = logging.getLogger("webpixels.storage")

DEFAULT_CATALOG_FILE = Path(__file__).resolve().parent / "data" / "components.json"


class CatalogLoadError(RuntimeError):
    """The catalog file is missing, unreadable or does not match the schema."""


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Read and validate the generated catalog file."""
    p = Path(path) if path else DEFAULT_CATALOG_FILE
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogLoadError(f"Cannot read catalog {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Catalog {p} is not valid JSON: {exc}") from exc

    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Catalog {p} does not match the schema: {exc}") from exc

    log.info(
        "Loaded catalog %s (version %s, generated %s): %d components, %d categories",
        p, catalog.version or "?", catalog.generated_at or "?",
        len(catalog.components), len(catalog.categories),
    )
    return catalog


def open_store(path: Optional[Union[str, Path]] = None) -> CatalogStore:
    return CatalogStore(load_catalog(path))
