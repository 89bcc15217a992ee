"""
Tool implementations for the component catalog.

Each tool takes the ``CatalogStore`` and a validated argument model and
returns a ``ToolResult`` holding a single text payload. JSON payloads
are pretty-printed; ``assemble_page`` returns the raw HTML instead.

``call_tool`` is the single entry point used by adapters: it validates
the raw arguments, dispatches through ``TOOLS`` and turns every
data-level ``CatalogError`` into an error result. Only an unknown tool
name escapes as ``UnknownToolError``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from .aggregation import list_categories as _list_categories
from .assembly import assemble_page as _assemble_page
from .dependencies import get_dependencies as _get_dependencies
from .errors import CatalogError, ComponentNotFoundError, InvalidArgumentsError, UnknownToolError
from .schemas import (
    AssemblePageArgs,
    ComponentDetail,
    GetComponentArgs,
    GetDependenciesArgs,
    ListCategoriesArgs,
    SearchComponentsArgs,
    SearchFilters,
    TextContent,
    ToolDefinition,
    ToolResult,
)
from .search import DEFAULT_LIMIT, search_components as _search_components
from .store import CatalogStore

log = logging.getLogger("webpixels.catalog.tools")


def dump(model: BaseModel) -> dict:
    """JSON-ready dict of a model, leaving out unset optionals."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(data: Any, indent: Optional[int] = 2) -> str:
    if isinstance(data, BaseModel):
        data = dump(data)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def text_result(text: str, is_error: bool = False) -> ToolResult:
    return ToolResult(content=[TextContent(text=text)], is_error=is_error)


def error_result(exc: CatalogError) -> ToolResult:
    return text_result(to_json(exc.payload(), indent=None), is_error=True)


# ═══════════════════════════════════════════════════════════════════
# TOOL FUNCTIONS
# ═══════════════════════════════════════════════════════════════════


def search_components(store: CatalogStore, args: SearchComponentsArgs) -> ToolResult:
    filters = SearchFilters(
        query=args.query,
        type=args.type,
        category=args.category,
        is_free=args.is_free,
        is_featured=args.is_featured,
        limit=args.limit or DEFAULT_LIMIT,
    )
    return text_result(to_json(_search_components(store, filters)))


def get_component(store: CatalogStore, args: GetComponentArgs) -> ToolResult:
    component = store.get(args.id)
    if component is None:
        raise ComponentNotFoundError(args.id)
    return text_result(to_json(ComponentDetail.from_component(component)))


def list_categories(store: CatalogStore, args: ListCategoriesArgs) -> ToolResult:
    categories = _list_categories(store, type_filter=args.type)
    return text_result(to_json({"categories": [dump(c) for c in categories]}))


def assemble_page(store: CatalogStore, args: AssemblePageArgs) -> ToolResult:
    html = _assemble_page(
        store,
        args.components,
        layout=args.layout,
        include_assets=args.include_assets,
    )
    return text_result(html)


def get_component_dependencies(store: CatalogStore, args: GetDependenciesArgs) -> ToolResult:
    result = _get_dependencies(store, args.id, direction=args.direction)
    return text_result(to_json(result))


# ═══════════════════════════════════════════════════════════════════
# TOOL REGISTRY
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    args_model: Type[BaseModel]
    handler: Callable[[CatalogStore, Any], ToolResult]

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.args_model.model_json_schema(by_alias=True),
        )


TOOLS: Dict[str, Tool] = {
    tool.name: tool
    for tool in (
        Tool(
            "search_components",
            "Search Bootstrap components by name, category, type, or description. "
            "Use this to find components that match specific criteria.",
            SearchComponentsArgs,
            search_components,
        ),
        Tool(
            "get_component",
            "Get the HTML code and metadata for a specific component by ID (UUID) or slug.",
            GetComponentArgs,
            get_component,
        ),
        Tool(
            "list_categories",
            "List all component categories with component counts. "
            "Useful for understanding what types of components are available.",
            ListCategoriesArgs,
            list_categories,
        ),
        Tool(
            "assemble_page",
            "Assemble multiple components into a complete HTML page. "
            "Provide component IDs/slugs in the order they should appear.",
            AssemblePageArgs,
            assemble_page,
        ),
        Tool(
            "get_component_dependencies",
            "Get the dependency tree for a component. "
            "Shows what other components it uses or what components use it.",
            GetDependenciesArgs,
            get_component_dependencies,
        ),
    )
}


def list_tools() -> List[ToolDefinition]:
    return [tool.definition() for tool in TOOLS.values()]


def _parse_args(tool: Tool, arguments: Optional[Dict[str, Any]]) -> BaseModel:
    try:
        return tool.args_model.model_validate(arguments or {})
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidArgumentsError(f"Invalid arguments for {tool.name}: {problems}") from exc


def call_tool(
    store: CatalogStore,
    name: str,
    arguments: Optional[Dict[str, Any]] = None,
) -> ToolResult:
    """Dispatch a named tool call against ``store``.

    Raises
    ------
    UnknownToolError
        When ``name`` is not a registered tool.
    """
    tool = TOOLS.get(name)
    if tool is None:
        raise UnknownToolError(name)

    log.debug("Calling tool %s with %r", name, arguments)
    try:
        return tool.handler(store, _parse_args(tool, arguments))
    except CatalogError as exc:
        log.info("Tool %s failed: %s", name, exc)
        return error_result(exc)
