# src/inspector/dom/models.py
from enum import Enum
from typing import Optional, List, Dict

from pydantic import BaseModel, Field

from .core import DOMNode


class LayoutPattern(str, Enum):
    SINGLE_COLUMN = "single-column"
    SIDEBAR_LEFT = "sidebar-left"
    SIDEBAR_RIGHT = "sidebar-right"
    DUAL_SIDEBAR = "dual-sidebar"
    GRID_LAYOUT = "grid-layout"
    COMPLEX = "complex"


class MetaTag(BaseModel):
    name: Optional[str] = None
    property: Optional[str] = None
    content: str


class LayoutSummary(BaseModel):
    """
    Aggregate landmark and container facts about a built tree,
    plus the coarse whole-page layout classification.
    """
    has_header: bool = False
    has_nav: bool = False
    has_main: bool = False
    has_footer: bool = False
    has_aside: bool = False
    has_sections: int = 0
    has_articles: int = 0
    layout_pattern: LayoutPattern = LayoutPattern.SINGLE_COLUMN
    container_count: int = 0
    flex_containers: int = 0
    grid_containers: int = 0


class PageStructure(BaseModel):
    """
    Output envelope of the DOMBuilder.

    Holds document-level metadata, the reconstructed body tree and the
    aggregate counts that the summary views and exports are based on.
    """
    doctype: str = "<!DOCTYPE html>"
    html_version: str = "HTML5"
    language: str = "en"
    charset: str = "UTF-8"
    viewport: str = ""
    title: str = "Untitled"
    meta_tags: List[MetaTag] = Field(default_factory=list)

    root_node: DOMNode
    total_elements: int = 0
    max_depth: int = 0
    element_counts: Dict[str, int] = Field(default_factory=dict)
    layout_summary: LayoutSummary = Field(default_factory=LayoutSummary)


class ElementSelection(BaseModel):
    """A selected node together with its ancestor chain (root first) and siblings."""
    node: DOMNode
    ancestors: List[DOMNode] = Field(default_factory=list)
    siblings: List[DOMNode] = Field(default_factory=list)
