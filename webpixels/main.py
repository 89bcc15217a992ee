# webpixels/main.py
import logging
from typing import Optional

from fastapi import FastAPI

from .catalog import CatalogStore, catalog_router
from .config import Settings, get_settings
from .storage import open_store

log = logging.getLogger("webpixels.main")


def create_app(store: Optional[CatalogStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around ``store``, loading it from the configured file if not given."""
    settings = settings or get_settings()
    if store is None:
        store = open_store(settings.catalog_path)

    app = FastAPI(
        title="WebPixels component catalog",
        description=(
            "Read-only catalog of Bootstrap UI components: search, fetch, "
            "list categories, resolve dependencies and assemble pages."
        ),
        version="1.0.0",
    )
    app.state.store = store
    app.include_router(catalog_router)

    # Base route for a quick liveness check
    @app.get("/")
    def health_check():
        return {
            "status": "ok",
            "components": len(app.state.store),
            "version": app.state.store.version,
        }

    log.info("Catalog API ready with %d components", len(store))
    return app


app = create_app()
