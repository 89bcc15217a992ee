"""
Catalog package for the component snippet API.

This package holds the in-memory catalog store and the engines built
on top of it (search, category counts, page assembly and dependency
resolution), the tool and resource layer that exposes them as named
operations, and the FastAPI router that serves that layer over HTTP.
Every engine takes the ``CatalogStore`` explicitly, so several
independent catalogs can live side by side (handy in tests).
"""

from .errors import (  # noqa: F401
    AssemblyValidationError,
    CatalogError,
    ComponentNotFoundError,
    InvalidArgumentsError,
    UnknownResourceError,
    UnknownToolError,
)
from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore  # noqa: F401
from .tools import TOOLS, call_tool, list_tools  # noqa: F401
from .resources import list_resources, read_resource  # noqa: F401
