# src/inspector/dom/layout.py
from .core import ComputedStyleInfo, FlexProperties, GridProperties, LayoutInfo


def classify_layout(style: ComputedStyleInfo, class_attribute: str) -> LayoutInfo:
    """
    Decides whether an element establishes a flex or grid context and collects
    the container-level parameters.

    Item flags are left False here: whether a node is a flex/grid item depends
    on its parent, so the DOMBuilder sets them after the parent is classified.
    """
    is_flex = "flex" in style.display
    is_grid = "grid" in style.display

    flex_properties = None
    if is_flex:
        flex_properties = FlexProperties(
            direction=style.flex_direction or "row",
            wrap="wrap" if "flex-wrap" in class_attribute else "nowrap",
            justify=style.justify_content or "flex-start",
            align=style.align_items or "stretch",
            gap=style.gap or "0",
        )

    grid_properties = None
    if is_grid:
        grid_properties = GridProperties(
            columns=style.grid_template_columns or "none",
            rows=style.grid_template_rows or "none",
            gap=style.gap or "0",
            areas="",  # template areas are not resolved
        )

    return LayoutInfo(
        is_flex_container=is_flex,
        is_grid_container=is_grid,
        flex_properties=flex_properties,
        grid_properties=grid_properties,
    )
