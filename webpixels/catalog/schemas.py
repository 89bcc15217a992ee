"""
Pydantic schema definitions for the component catalog.

The ``Component`` model mirrors one entry of the generated catalog file
(HTML snippet plus metadata). ``Category`` and ``Subcategory`` describe
the taxonomy shown to clients, and ``Catalog`` is the top-level
snapshot loaded once at startup. All catalog models are frozen so that
nothing downstream of the loader can mutate the shared dataset.

The second half of the module holds the shapes exchanged with callers:
``ComponentSummary`` and ``ComponentDetail`` (the reduced and full
projections of a component), the argument models for each tool, and
the ``ToolResult``/``Resource`` envelopes returned by the adapter.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ComponentType = Literal[
    "component",
    "section",
    "card",
    "screen",
    "layout",
    "page",
    "form",
    "chart",
    "partial",
]

Direction = Literal["dependencies", "dependents", "both"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContentHints(_Frozen):
    """Descriptive flags derived from the snippet markup. Pass-through only."""

    has_images: bool
    has_icons: bool
    has_buttons: bool
    has_form: bool
    has_carousel: bool
    has_video: bool
    color_scheme: Literal["light", "dark", "mixed"]
    layout_type: Literal["full-width", "contained", "split"]


class Component(_Frozen):
    """A single catalog entry.

    ``id`` and ``slug`` are both unique keys and are accepted
    interchangeably wherever a component reference is expected.
    ``dependencies`` and ``used_by`` hold slugs of other components
    (forward and back edges of the usage graph); ``similar_to`` is
    carried through but not used by any operation.
    """

    id: str
    slug: str
    name: str
    type: ComponentType
    category: str
    subcategory: str = ""
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    includes: List[str] = Field(default_factory=list)
    content_hints: Optional[ContentHints] = None
    html: str = ""
    dependencies: List[str] = Field(default_factory=list)
    used_by: List[str] = Field(default_factory=list)
    similar_to: List[str] = Field(default_factory=list)
    is_free: bool = False
    is_published: bool = True
    is_featured: bool = False
    is_new: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Subcategory(_Frozen):
    name: str
    slug: str
    description: Optional[str] = None


class Category(_Frozen):
    """A taxonomy node. ``items`` are descriptive labels only; component
    membership is decided by the component's own category fields."""

    slug: str
    name: str
    icon: Optional[str] = None
    description: Optional[str] = None
    is_published: bool = True
    items: List[Subcategory] = Field(default_factory=list)


class Catalog(_Frozen):
    version: str = ""
    generated_at: str = ""
    categories: List[Category] = Field(default_factory=list)
    components: List[Component] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Projections


class ComponentSummary(BaseModel):
    """Reduced view used in list and search results (no markup)."""

    id: str
    name: str
    slug: str
    type: ComponentType
    category: str
    subcategory: str
    description: Optional[str] = None
    is_free: bool
    is_featured: bool
    tags: List[str]

    @classmethod
    def from_component(cls, component: Component) -> "ComponentSummary":
        return cls(
            id=component.id,
            name=component.name,
            slug=component.slug,
            type=component.type,
            category=component.category,
            subcategory=component.subcategory,
            description=component.description,
            is_free=component.is_free,
            is_featured=component.is_featured,
            tags=list(component.tags),
        )


class ComponentDetail(ComponentSummary):
    """Full record returned by ``get_component`` and the component resource."""

    keywords: List[str]
    use_cases: List[str]
    includes: List[str]
    content_hints: Optional[ContentHints] = None
    dependencies: List[str]
    used_by: List[str]
    html: str

    @classmethod
    def from_component(cls, component: Component) -> "ComponentDetail":
        summary = ComponentSummary.from_component(component)
        return cls(
            **summary.model_dump(),
            keywords=list(component.keywords),
            use_cases=list(component.use_cases),
            includes=list(component.includes),
            content_hints=component.content_hints,
            dependencies=list(component.dependencies),
            used_by=list(component.used_by),
            html=component.html,
        )


class ComponentRef(BaseModel):
    id: str
    slug: str
    name: str


class SubcategoryRef(BaseModel):
    slug: str
    name: str


class CategoryStat(BaseModel):
    """One row of ``list_categories``."""

    model_config = ConfigDict(populate_by_name=True)

    slug: str
    name: str
    icon: Optional[str] = None
    component_count: int = Field(0, alias="componentCount")
    free_count: int = Field(0, alias="freeCount")
    subcategories: List[SubcategoryRef] = Field(default_factory=list)


class SearchFilters(BaseModel):
    """Search filters. ``None`` means "no filter", so ``is_free=False``
    is a real filter and distinct from leaving it out."""

    query: Optional[str] = None
    type: Optional[ComponentType] = None
    category: Optional[str] = None
    is_free: Optional[bool] = None
    is_featured: Optional[bool] = None
    limit: Optional[int] = 20


class SearchResult(BaseModel):
    count: int
    components: List[ComponentSummary]


class DependencyResult(BaseModel):
    component: ComponentRef
    dependencies: Optional[List[ComponentSummary]] = None
    dependents: Optional[List[ComponentSummary]] = None


# ---------------------------------------------------------------------------
# Tool arguments


class SearchComponentsArgs(BaseModel):
    query: Optional[str] = Field(
        default=None, description="Search query (matches name, description, tags)"
    )
    type: Optional[ComponentType] = Field(
        default=None, description="Filter by component type"
    )
    category: Optional[str] = Field(
        default=None,
        description="Category or subcategory slug (e.g., 'sections', 'hero', 'pricing')",
    )
    is_free: Optional[bool] = Field(
        default=None, description="Filter for free components only"
    )
    is_featured: Optional[bool] = Field(
        default=None, description="Filter for featured components only"
    )
    limit: Optional[int] = Field(
        default=None,
        description="Maximum number of results to return (default: 20)",
    )


class GetComponentArgs(BaseModel):
    id: str = Field(description='Component UUID or slug (e.g., "section-hero-1")')


class ListCategoriesArgs(BaseModel):
    type: Optional[str] = Field(
        default=None, description="Filter categories by component type"
    )


class AssemblePageArgs(BaseModel):
    # An omitted list still validates so that assembly can report it as
    # "No components provided"; the published schema marks it required.
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"required": ["components"]},
    )

    components: List[str] = Field(
        default_factory=list,
        description="Array of component IDs or slugs in display order",
    )
    layout: Optional[str] = Field(
        default=None,
        description=(
            "Optional layout component ID to wrap the content; "
            "ignored when it does not resolve"
        ),
    )
    include_assets: Optional[bool] = Field(
        default=True,
        alias="includeAssets",
        description="Include CSS/JS links in a full HTML document (default: true)",
    )


class GetDependenciesArgs(BaseModel):
    id: str = Field(description="Component UUID or slug")
    direction: Optional[Direction] = Field(
        default="both",
        description=(
            'Direction: "dependencies" (what this uses), '
            '"dependents" (what uses this), or "both"'
        ),
    )


# ---------------------------------------------------------------------------
# Envelopes


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(False, alias="isError")


class ToolDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")


class Resource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    name: str
    description: str
    mime_type: str = Field("application/json", alias="mimeType")


class ResourceContents(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    mime_type: str = Field("application/json", alias="mimeType")
    text: str


class ReadResourceResult(BaseModel):
    contents: List[ResourceContents]
