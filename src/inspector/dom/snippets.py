# src/inspector/dom/snippets.py
"""Markup and CSS snippets for the properties inspector."""
from typing import List, Tuple

from .core import DOMNode

# (CSS property, ComputedStyleInfo field, value treated as "not worth printing")
CSS_DECLARATIONS: List[Tuple[str, str, str]] = [
    ("display", "display", "block"),
    ("position", "position", "static"),
    ("width", "width", ""),
    ("height", "height", ""),
    ("padding", "padding", ""),
    ("margin", "margin", ""),
    ("background-color", "background_color", ""),
    ("color", "color", ""),
    ("font-size", "font_size", ""),
    ("font-weight", "font_weight", ""),
    ("border-radius", "border_radius", ""),
    ("box-shadow", "box_shadow", ""),
    ("gap", "gap", ""),
    ("flex-direction", "flex_direction", "row"),
    ("justify-content", "justify_content", ""),
    ("align-items", "align_items", ""),
]


def element_markup(node: DOMNode) -> str:
    """Re-creates a single element tag (without its children) from the node."""
    other_attrs = " ".join(
        f'{key}="{value}"'
        for key, value in node.attributes.items()
        if key not in ("class", "style")
    )
    class_part = f' class="{node.class_attribute}"' if node.class_attribute else ""
    attrs_part = f" {other_attrs}" if other_attrs else ""
    body = f"\n  {node.text_content}\n" if node.text_content else ""
    return f"<{node.tag_name}{class_part}{attrs_part}>{body}</{node.tag_name}>"


def css_selector(node: DOMNode) -> str:
    """`#id`, else the first class, else the tag name."""
    if node.id_attribute:
        return f"#{node.id_attribute}"
    if node.class_list:
        return f".{node.class_list[0]}"
    return node.tag_name


def element_css(node: DOMNode) -> str:
    """CSS rule listing the node's non-default inferred declarations."""
    style = node.computed_style
    body = ""
    for prop, field_name, neutral in CSS_DECLARATIONS:
        value = getattr(style, field_name)
        if value and value != neutral:
            body += f"  {prop}: {value};\n"
    return f"{css_selector(node)} {{\n{body}}}"
