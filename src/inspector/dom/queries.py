# src/inspector/dom/queries.py
"""
Read-only traversals over a built DOMNode tree.
None of these functions mutate the tree. Walks use an explicit stack, so
arbitrarily deep trees never hit the interpreter recursion limit.
"""
from typing import Dict, Iterator, List, Optional, Tuple

from .core import ContainerType, DOMNode
from .models import ElementSelection, LayoutPattern, LayoutSummary


def iter_nodes(node: DOMNode) -> Iterator[DOMNode]:
    """Yields the subtree in pre-order (node first, then children in order)."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def flatten(node: DOMNode) -> List[DOMNode]:
    """Returns the subtree as a pre-order list (node first, then children)."""
    return list(iter_nodes(node))


def find_by_id(root: DOMNode, node_id: str) -> Optional[DOMNode]:
    return next((n for n in iter_nodes(root) if n.id == node_id), None)


def get_ancestors(root: DOMNode, target_id: str) -> List[DOMNode]:
    """
    Returns the ancestor chain of `target_id`, root first.
    Empty when the target is the root itself or does not exist.
    """
    trail: List[DOMNode] = []
    stack: List[Tuple[DOMNode, int]] = [(root, 0)]
    while stack:
        node, level = stack.pop()
        del trail[level:]
        if node.id == target_id:
            return list(trail)
        trail.append(node)
        stack.extend((child, level + 1) for child in reversed(node.children))
    return []


def select(root: DOMNode, node_id: str) -> Optional[ElementSelection]:
    """Bundles a node with its ancestors and its siblings (for the inspector view)."""
    node = find_by_id(root, node_id)
    if node is None:
        return None

    ancestors = get_ancestors(root, node_id)
    siblings: List[DOMNode] = []
    if ancestors:
        siblings = [c for c in ancestors[-1].children if c.id != node_id]
    return ElementSelection(node=node, ancestors=ancestors, siblings=siblings)


def find_by_tag(node: DOMNode, tag: str) -> List[DOMNode]:
    return [n for n in flatten(node) if n.tag_name == tag]


def find_with_class(node: DOMNode, fragment: str) -> List[DOMNode]:
    """Nodes whose raw class string contains `fragment` (substring match)."""
    return [n for n in flatten(node) if fragment in n.class_attribute]


def search(root: DOMNode, query: str) -> List[DOMNode]:
    """
    Case-insensitive filter on tag name, class string and id attribute.
    An empty query matches nothing.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return []
    return [
        n for n in flatten(root)
        if needle in n.tag_name
        or needle in n.class_attribute.lower()
        or needle in n.id_attribute.lower()
    ]


def count_elements(root: DOMNode) -> Dict[str, int]:
    """Tag histogram of the tree."""
    counts: Dict[str, int] = {}
    for n in flatten(root):
        counts[n.tag_name] = counts.get(n.tag_name, 0) + 1
    return counts


def count_total(node: DOMNode) -> int:
    return sum(1 for _ in iter_nodes(node))


def max_depth(node: DOMNode) -> int:
    """Depth of the deepest leaf in the subtree."""
    return max(n.depth for n in iter_nodes(node) if not n.children)


def count_containers(node: DOMNode, container_type: ContainerType) -> int:
    if container_type == ContainerType.FLEX:
        return sum(1 for n in iter_nodes(node) if n.layout_info.is_flex_container)
    return sum(1 for n in iter_nodes(node) if n.layout_info.is_grid_container)


def classify_layout_pattern(root: DOMNode) -> LayoutPattern:
    """
    Coarse page classification. Rules are checked in order, first hit wins:
    two or more asides, any grid class, a single aside, a busy <main>.
    """
    asides = find_by_tag(root, "aside")

    if len(asides) >= 2:
        return LayoutPattern.DUAL_SIDEBAR
    if find_with_class(root, "grid"):
        return LayoutPattern.GRID_LAYOUT
    if asides:
        return LayoutPattern.SIDEBAR_RIGHT

    mains = find_by_tag(root, "main")
    if mains and len(mains[0].children) > 3:
        return LayoutPattern.COMPLEX

    return LayoutPattern.SINGLE_COLUMN


def summarize_layout(root: DOMNode) -> LayoutSummary:
    counts = count_elements(root)
    return LayoutSummary(
        has_header=counts.get("header", 0) > 0,
        has_nav=counts.get("nav", 0) > 0,
        has_main=counts.get("main", 0) > 0,
        has_footer=counts.get("footer", 0) > 0,
        has_aside=counts.get("aside", 0) > 0,
        has_sections=counts.get("section", 0),
        has_articles=counts.get("article", 0),
        layout_pattern=classify_layout_pattern(root),
        container_count=len(find_with_class(root, "container")),
        flex_containers=count_containers(root, ContainerType.FLEX),
        grid_containers=count_containers(root, ContainerType.GRID),
    )
