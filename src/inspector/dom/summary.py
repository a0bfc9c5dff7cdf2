# src/inspector/dom/summary.py
from typing import List, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .builder import child_elements, implicit_body_children
from .core import DOMNode
from .styles import attribute_text

MAX_DUMP_DEPTH = 4
MAX_DUMP_CHILDREN = 10
MAX_DUMP_CLASSES = 2


def describe_element(element: Tag) -> str:
    """Short selector-like label, e.g. `<div#app.container.mx-auto>`."""
    tag = (element.name or "").lower()
    element_id = attribute_text(element, "id")
    classes = attribute_text(element, "class").split()[:MAX_DUMP_CLASSES]

    label = tag
    if element_id:
        label += f"#{element_id}"
    if classes:
        label += "." + ".".join(classes)
    return f"<{label}>"


def format_structure(document: Union[BeautifulSoup, Tag]) -> str:
    """
    Indented outline of the document body for quick textual overviews.

    Output stops below depth 4 and lists at most 10 children per element, so
    it stays readable for large pages. This is independent of the DOMBuilder,
    which always processes the full document. A document without a <body>
    tag is outlined as if its top-level content elements sat in one.
    """
    lines: List[str] = []

    def traverse(element: Tag, depth: int) -> None:
        lines.append("  " * depth + describe_element(element))
        if depth >= MAX_DUMP_DEPTH:
            return
        for child in child_elements(element)[:MAX_DUMP_CHILDREN]:
            traverse(child, depth + 1)

    if not isinstance(document, BeautifulSoup):
        traverse(document, 0)
    elif document.body is not None:
        traverse(document.body, 0)
    else:
        content = implicit_body_children(document)
        if not content:
            return ""
        lines.append("<body>")
        for child in content[:MAX_DUMP_CHILDREN]:
            traverse(child, 1)

    return "\n".join(lines) + "\n"


def format_node_tree(
        root: DOMNode,
        max_depth: int = MAX_DUMP_DEPTH,
        max_children: int = MAX_DUMP_CHILDREN
) -> str:
    """
    Same outline for an already built tree, annotated with node ids,
    display type and the estimated box.
    """
    lines: List[str] = []
    # Entries are (node, level) or a ("... and N more", level) marker.
    stack: List[Tuple[Union[DOMNode, str], int]] = [(root, 0)]

    while stack:
        item, level = stack.pop()
        indent = "  " * level
        if isinstance(item, str):
            lines.append(f"{indent}{item}")
            continue

        label = item.tag_name or "(root)"
        if item.id_attribute:
            label += f"#{item.id_attribute}"
        if item.class_list:
            label += "." + ".".join(item.class_list[:MAX_DUMP_CLASSES])
        box = item.bounding_box
        lines.append(
            f"{indent}<{label}> [{item.id}] {item.display_type.value} "
            f"{box.width:g}x{box.height:g} @ ({box.x:g},{box.y:g})"
        )
        if level >= max_depth:
            continue

        hidden = len(item.children) - max_children
        if hidden > 0:
            stack.append((f"... and {hidden} more", level + 1))
        for child in reversed(item.children[:max_children]):
            stack.append((child, level + 1))

    return "\n".join(lines) + "\n"
