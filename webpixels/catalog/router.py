"""
Route definitions for the component catalog API.

Endpoints under /api:
- GET  /tools                : tool definitions with their input schemas
- POST /tools/{name}         : call a tool; the JSON body holds its arguments
- GET  /resources            : list resource views
- GET  /resources/read?uri=  : read one resource view

Data-level failures (unknown component, empty page, bad arguments) come
back as a ``ToolResult`` with ``isError`` set. Asking for a tool or
resource that does not exist is a 404.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request

from .errors import ComponentNotFoundError, UnknownResourceError, UnknownToolError
from .resources import list_resources, read_resource
from .schemas import ReadResourceResult, Resource, ToolDefinition, ToolResult
from .store import CatalogStore
from .tools import call_tool, list_tools

router = APIRouter(prefix="/api", tags=["catalog"])


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


@router.get("/tools", response_model=List[ToolDefinition])
def tools() -> List[ToolDefinition]:
    return list_tools()


@router.post("/tools/{name}", response_model=ToolResult)
def run_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    store: CatalogStore = Depends(get_store),
) -> ToolResult:
    """Call the tool ``name`` with the request body as its arguments."""
    try:
        return call_tool(store, name, arguments)
    except UnknownToolError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("/resources", response_model=List[Resource])
def resources(store: CatalogStore = Depends(get_store)) -> List[Resource]:
    return list_resources(store)


@router.get("/resources/read", response_model=ReadResourceResult)
def read(
    uri: str = Query(..., description="Resource URI, e.g. component://catalog"),
    store: CatalogStore = Depends(get_store),
) -> ReadResourceResult:
    try:
        return read_resource(store, uri)
    except (UnknownResourceError, ComponentNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
