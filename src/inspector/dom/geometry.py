# src/inspector/dom/geometry.py
"""
Synthetic box estimation.

There is no renderer behind this, so boxes come from fixed per-tag and
per-class sizes. The tables below are user visible (they drive the canvas
view), so keep values and ordering stable.
"""
from typing import Optional

from .core import BoundingBox

VIEWPORT_WIDTH = 1200
CONTAINER_MAX_WIDTH = 1280
DEFAULT_HEIGHT = 100
INSET = 20          # horizontal inset of a child inside its parent
SIBLING_GAP = 10    # vertical gap between stacked siblings

# Tags that only change the height.
TAG_HEIGHTS = {
    "section": 400,
    "article": 300,
    "h1": 60,
    "h2": 48,
    "h3": 36,
    "h4": 36,
    "h5": 36,
    "h6": 36,
    "p": 60,
    "form": 300,
    "ul": 150,
    "ol": 150,
}


def _parent_width(parent_box: Optional[BoundingBox], fallback: float = VIEWPORT_WIDTH) -> float:
    # A zero-width parent counts as missing.
    if parent_box and parent_box.width:
        return parent_box.width
    return fallback


def _parent_x(parent_box: Optional[BoundingBox]) -> float:
    return parent_box.x if parent_box else 0


def estimate_box(
        tag_name: str,
        class_attribute: str,
        depth: int,
        sibling_index: int,
        parent_box: Optional[BoundingBox] = None
) -> BoundingBox:
    """
    Estimates the box of one element.

    Args:
        tag_name (str): Lowercase tag name.
        class_attribute (str): Raw class string.
        depth (int): Tree depth (part of the contract, not used by the sizing rules).
        sibling_index (int): Position among the included siblings.
        parent_box (Optional[BoundingBox]): Tentative box handed down by the parent.

    Returns:
        BoundingBox: A deterministic box for the given inputs.
    """
    tag = tag_name.lower()

    # --- Defaults ---
    if parent_box:
        width = parent_box.width - 2 * INSET
        x = parent_box.x + INSET
        y = parent_box.y + parent_box.height + SIBLING_GAP
    else:
        width = VIEWPORT_WIDTH
        x = 0
        y = 0
    height = DEFAULT_HEIGHT

    # --- Semantic tag overrides ---
    if tag in ("header", "nav"):
        height = 80
        width = _parent_width(parent_box)
        x = _parent_x(parent_box)
    elif tag == "footer":
        height = 200
        width = _parent_width(parent_box)
        x = _parent_x(parent_box)
    elif tag == "main":
        height = 600
        width = _parent_width(parent_box)
    elif tag == "aside":
        width = 300
        height = 400
    elif tag == "div":
        # Each class hint applies independently, later ones win.
        if "container" in class_attribute or "max-w-" in class_attribute:
            width = min(CONTAINER_MAX_WIDTH, _parent_width(parent_box))
        if "hero" in class_attribute or "banner" in class_attribute:
            height = 500
        if "card" in class_attribute:
            width = 350
            height = 280
        if "grid" in class_attribute:
            height = 400
    elif tag in ("button", "a"):
        height = 44
        width = 150
    elif tag == "img":
        height = 200
        width = 300
    elif tag in ("input", "textarea"):
        height = 44
        width = parent_box.width - 2 * INSET if parent_box else 400
    elif tag == "li":
        height = 40
        width = _parent_width(parent_box, fallback=200)
    elif tag in TAG_HEIGHTS:
        height = TAG_HEIGHTS[tag]

    # Siblings stack vertically regardless of the parent's layout mode.
    if sibling_index > 0 and parent_box:
        y = parent_box.y + sibling_index * (height + SIBLING_GAP)

    return BoundingBox(x=x, y=y, width=width, height=height)
