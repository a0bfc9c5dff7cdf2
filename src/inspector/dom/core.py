# src/inspector/dom/core.py
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field


class DisplayType(str, Enum):
    """Coarse display category derived from the resolved `display` value."""
    BLOCK = "block"
    INLINE = "inline"
    FLEX = "flex"
    GRID = "grid"
    INLINE_BLOCK = "inline-block"
    NONE = "none"
    OTHER = "other"


class ContainerType(str, Enum):
    FLEX = "flex"
    GRID = "grid"


class BoundingBox(BaseModel):
    """
    Synthetic box in canvas pixel space.

    Only x, y, width and height are stored; the edge values are derived so
    that growing the height during reconciliation can never leave `bottom` stale.
    """
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @computed_field
    @property
    def top(self) -> float:
        return self.y

    @computed_field
    @property
    def left(self) -> float:
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        return self.y + self.height


class ComputedStyleInfo(BaseModel):
    """
    Flat, fully populated style record for one element.
    Values are CSS strings; an empty string means 'not set'.
    """
    display: str = "block"
    position: str = "static"
    flex_direction: str = ""
    justify_content: str = ""
    align_items: str = ""
    grid_template_columns: str = ""
    grid_template_rows: str = ""
    gap: str = ""
    padding: str = ""
    margin: str = ""
    background_color: str = ""
    color: str = ""
    font_size: str = ""
    font_family: str = ""
    font_weight: str = ""
    border_radius: str = ""
    border: str = ""
    box_shadow: str = ""
    z_index: str = ""
    overflow: str = ""
    opacity: str = "1"
    transform: str = ""
    transition: str = ""
    width: str = ""
    height: str = ""
    max_width: str = ""
    min_height: str = ""


class FlexProperties(BaseModel):
    direction: str = "row"
    wrap: str = "nowrap"
    justify: str = "flex-start"
    align: str = "stretch"
    gap: str = "0"


class GridProperties(BaseModel):
    columns: str = "none"
    rows: str = "none"
    gap: str = "0"
    areas: str = ""


class LayoutInfo(BaseModel):
    """
    Container classification for a node.
    The *_item flags describe the relationship with the parent and are
    filled in by the builder, never by the classifier.
    """
    is_flex_container: bool = False
    is_grid_container: bool = False
    is_flex_item: bool = False
    is_grid_item: bool = False
    flex_properties: Optional[FlexProperties] = None
    grid_properties: Optional[GridProperties] = None


class DOMNode(BaseModel):
    """
    A reconstructed element with inferred style and estimated geometry.
    """
    id: str
    tag_name: str
    class_attribute: str = ""
    id_attribute: str = ""
    attributes: Dict[str, str] = Field(default_factory=dict)
    computed_style: ComputedStyleInfo = Field(default_factory=ComputedStyleInfo)
    bounding_box: BoundingBox = Field(default_factory=BoundingBox)
    children: List['DOMNode'] = Field(default_factory=list)
    text_content: str = ""
    depth: int = 0
    path: str = ""
    layout_info: LayoutInfo = Field(default_factory=LayoutInfo)

    @computed_field
    @property
    def is_visible(self) -> bool:
        return self.computed_style.display != "none"

    @computed_field
    @property
    def display_type(self) -> DisplayType:
        return resolve_display_type(self.computed_style.display)

    @property
    def class_list(self) -> List[str]:
        return self.class_attribute.split()


def resolve_display_type(display: str) -> DisplayType:
    """Maps a raw `display` value onto one of the DisplayType buckets."""
    if "flex" in display:
        return DisplayType.FLEX
    if "grid" in display:
        return DisplayType.GRID
    if display == "block":
        return DisplayType.BLOCK
    if display == "inline-block":
        return DisplayType.INLINE_BLOCK
    if display == "inline":
        return DisplayType.INLINE
    if display == "none":
        return DisplayType.NONE
    return DisplayType.OTHER


class NodeIdCounter:
    """
    Monotonic id source owned by a single build.
    Each DOMBuilder.build() call creates its own instance.
    """

    def __init__(self, prefix: str = "node"):
        self.prefix = prefix
        self._value = 0

    def next_id(self) -> str:
        self._value += 1
        return f"{self.prefix}-{self._value}"
