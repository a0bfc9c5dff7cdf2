# src/inspector/dom/builder.py
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag, Doctype
from bs4.element import NavigableString, PreformattedString

from .core import BoundingBox, DOMNode, NodeIdCounter, ComputedStyleInfo
from .geometry import DEFAULT_HEIGHT, SIBLING_GAP, VIEWPORT_WIDTH, estimate_box
from .layout import classify_layout
from .models import MetaTag, PageStructure
from .queries import count_elements, count_total, max_depth, summarize_layout
from .styles import attribute_text, infer_style

logger = logging.getLogger(__name__)

# Elements with no visual box of their own; skipped together with their subtree.
EXCLUDED_TAGS = frozenset({
    "script", "style", "link", "meta", "noscript", "template", "svg", "path",
})

# Document-level tags that never belong to an implicit body.
HEAD_TAGS = frozenset({"head", "title", "base"})

TEXT_LIMIT = 100
BOTTOM_PADDING = 20
FALLBACK_HEIGHT = 800
MAX_TREE_DEPTH = 128


def child_elements(element: Tag) -> List[Tag]:
    return [child for child in element.children if isinstance(child, Tag)]


def implicit_body_children(soup: BeautifulSoup) -> List[Tag]:
    """
    Content elements of a document without a <body> tag, in document order.
    <html> is descended into; <head> and other head-only tags are skipped.
    """
    found: List[Tag] = []
    pending = child_elements(soup)
    pending.reverse()
    while pending:
        element = pending.pop()
        name = (element.name or "").lower()
        if name in HEAD_TAGS:
            continue
        if name == "html":
            pending.extend(reversed(child_elements(element)))
            continue
        found.append(element)
    return found


@dataclass
class _Frame:
    """An element whose children are still being built."""
    node: DOMNode
    pending: Iterator[Tag]
    offset: float
    child_index: int = 0


class DOMBuilder:
    """
    Builder responsible for turning raw HTML into a PageStructure.

    The body is walked depth-first; every included element gets an inferred
    style, a layout classification and an estimated box. Parent boxes are
    grown afterwards so they always enclose their children.
    """

    def __init__(self, parser_features: str = "html.parser"):
        self.parser_features = parser_features

    def build(self, html: Optional[str]) -> PageStructure:
        """
        Parses raw HTML and reconstructs its layout tree.

        Args:
            html (Optional[str]): The raw HTML string. Empty input is allowed.

        Returns:
            PageStructure: Metadata, the annotated body tree and its aggregates.
        """
        if not html:
            return self._assemble(self._fallback_root(), soup=None)
        return self.build_from_soup(self.parse(html))

    def parse(self, html: Optional[str]) -> BeautifulSoup:
        """Parses raw HTML with the configured BeautifulSoup parser."""
        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = (html or "").replace('\ufeff', '').strip()
        return BeautifulSoup(clean_html, self.parser_features)

    def build_from_soup(self, soup: BeautifulSoup) -> PageStructure:
        """Builds the structure from an already parsed document."""
        counter = NodeIdCounter()

        if soup.body is not None:
            root = self._build_tree(soup.body, child_elements(soup.body), counter)
        else:
            # html.parser only creates <body> when the markup contains one.
            content = [
                element for element in implicit_body_children(soup)
                if (element.name or "").lower() not in EXCLUDED_TAGS
            ]
            if content:
                logger.debug("Document has no <body> tag; wrapping %d top-level element(s).", len(content))
                root = self._build_tree(soup.new_tag("body"), content, counter)
            else:
                logger.debug("Document has no elements; using a synthetic root node.")
                root = self._fallback_root()

        structure = self._assemble(root, soup)
        logger.debug(
            "Built layout tree: %d nodes, depth %d, pattern %s",
            structure.total_elements, structure.max_depth, structure.layout_summary.layout_pattern.value
        )
        return structure

    # --- Tree construction ---

    def _build_tree(self, root_element: Tag, children: List[Tag], counter: NodeIdCounter) -> DOMNode:
        """
        Converts `root_element` and the given child elements into a DOMNode tree.

        Children are placed optimistically below a running offset, and a node's
        own height is only corrected once all its children are known. The walk
        uses an explicit stack; elements nested deeper than MAX_TREE_DEPTH are
        left out.
        """
        root = self._new_node(root_element, counter, depth=0, parent_path="", sibling_index=0)
        stack = [_Frame(root, iter(children), root.bounding_box.y + SIBLING_GAP)]
        truncated = 0

        while stack:
            frame = stack[-1]
            element = next(frame.pending, None)

            if element is None:
                stack.pop()
                self._mark_items(frame.node)
                self._reconcile(frame.node)
                if stack:
                    parent = stack[-1]
                    parent.node.children.append(frame.node)
                    parent.offset += frame.node.bounding_box.height + SIBLING_GAP
                    parent.child_index += 1
                continue

            if (element.name or "").lower() in EXCLUDED_TAGS:
                continue
            depth = frame.node.depth + 1
            if depth > MAX_TREE_DEPTH:
                truncated += 1
                continue

            parent_box = frame.node.bounding_box
            tentative = BoundingBox(x=parent_box.x, y=frame.offset, width=parent_box.width, height=DEFAULT_HEIGHT)
            node = self._new_node(element, counter, depth, frame.node.path, frame.child_index, tentative)
            stack.append(_Frame(node, iter(child_elements(element)), node.bounding_box.y + SIBLING_GAP))

        if truncated:
            logger.warning(
                "Nesting deeper than %d levels; %d element(s) were left out.", MAX_TREE_DEPTH, truncated
            )
        return root

    def _new_node(
            self,
            element: Tag,
            counter: NodeIdCounter,
            depth: int,
            parent_path: str,
            sibling_index: int,
            parent_box: Optional[BoundingBox] = None
    ) -> DOMNode:
        """Creates the node for one element, without its children."""
        tag_name = (element.name or "").lower()
        class_attr = attribute_text(element, "class")
        style = infer_style(element)

        return DOMNode(
            id=counter.next_id(),
            tag_name=tag_name,
            class_attribute=class_attr,
            id_attribute=attribute_text(element, "id"),
            attributes={name: attribute_text(element, name) for name in element.attrs},
            computed_style=style,
            bounding_box=estimate_box(tag_name, class_attr, depth, sibling_index, parent_box),
            text_content=self._direct_text(element),
            depth=depth,
            path=f"{parent_path} > {tag_name}" if parent_path else tag_name,
            layout_info=classify_layout(style, class_attr),
        )

    @staticmethod
    def _mark_items(node: DOMNode) -> None:
        """Item-ness belongs to the parent/child relation, so the parent sets it."""
        for child in node.children:
            child.layout_info.is_flex_item = node.layout_info.is_flex_container
            child.layout_info.is_grid_item = node.layout_info.is_grid_container

    @staticmethod
    def _reconcile(node: DOMNode) -> None:
        """Grows the node so it encloses every child plus bottom padding."""
        if not node.children:
            return
        box = node.bounding_box
        lowest = max(child.bounding_box.bottom for child in node.children)
        box.height = max(box.height, lowest - box.y + BOTTOM_PADDING)

    @staticmethod
    def _direct_text(element: Tag) -> str:
        """Text of the element's own text nodes (not descendants), trimmed and truncated."""
        parts: List[str] = []
        for child in element.children:
            # Comments, CDATA and doctypes are PreformattedString subclasses.
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                text = child.strip()
                if text:
                    parts.append(text)
        return " ".join(parts)[:TEXT_LIMIT]

    @staticmethod
    def _fallback_root() -> DOMNode:
        return DOMNode(
            id="root",
            tag_name="",
            computed_style=ComputedStyleInfo(),
            bounding_box=BoundingBox(x=0, y=0, width=VIEWPORT_WIDTH, height=FALLBACK_HEIGHT),
        )

    # --- Document level ---

    def _assemble(self, root: DOMNode, soup: Optional[BeautifulSoup]) -> PageStructure:
        structure = PageStructure(
            root_node=root,
            total_elements=count_total(root),
            max_depth=max_depth(root),
            element_counts=count_elements(root),
            layout_summary=summarize_layout(root),
        )
        if soup is not None:
            self._apply_metadata(structure, soup)
        return structure

    @staticmethod
    def _apply_metadata(structure: PageStructure, soup: BeautifulSoup) -> None:
        for item in soup.contents:
            if isinstance(item, Doctype):
                structure.doctype = f"<!DOCTYPE {item}>"
                break

        if soup.html is not None:
            structure.language = attribute_text(soup.html, "lang") or structure.language

        charset_meta = soup.find("meta", attrs={"charset": True})
        if charset_meta is not None:
            structure.charset = attribute_text(charset_meta, "charset") or structure.charset

        viewport_meta = soup.find("meta", attrs={"name": "viewport"})
        if viewport_meta is not None:
            structure.viewport = attribute_text(viewport_meta, "content")

        if soup.title is not None:
            structure.title = soup.title.get_text(strip=True) or structure.title

        for meta in soup.find_all("meta"):
            name = attribute_text(meta, "name")
            prop = attribute_text(meta, "property")
            content = attribute_text(meta, "content")
            if content and (name or prop):
                structure.meta_tags.append(
                    MetaTag(name=name or None, property=prop or None, content=content)
                )
