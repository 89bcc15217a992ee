"""Errors raised by the catalog engines.

Data-level errors (``ComponentNotFoundError``, ``AssemblyValidationError``,
``InvalidArgumentsError``) are turned into error payloads by
``tools.call_tool``. ``UnknownToolError`` and ``UnknownResourceError``
mean the caller asked for something that does not exist at all and are
left for the adapter to handle.
"""

from __future__ import annotations

from typing import List, Optional


class CatalogError(Exception):
    """Base class for catalog errors."""

    def payload(self) -> dict:
        return {"error": str(self)}


class ComponentNotFoundError(CatalogError):
    def __init__(self, ref: str):
        super().__init__(f"Component not found: {ref}")
        self.ref = ref


class AssemblyValidationError(CatalogError):
    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = missing

    def payload(self) -> dict:
        data = super().payload()
        if self.missing is not None:
            data["missing"] = list(self.missing)
        return data


class InvalidArgumentsError(CatalogError):
    pass


class UnknownToolError(CatalogError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownResourceError(CatalogError):
    def __init__(self, uri: str):
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri
