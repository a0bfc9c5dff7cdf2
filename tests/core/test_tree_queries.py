# tests/core/test_tree_queries.py
import pytest

from inspector.dom.builder import DOMBuilder
from inspector.dom.core import ContainerType, DOMNode
from inspector.dom.models import LayoutPattern
from inspector.dom import queries

PAGE = (
    "<body>"
    '<header class="site-header"><nav id="MainNav" class="flex items-center">'
    '<a href="/">Home</a><a href="/about">About</a></nav></header>'
    '<main class="container mx-auto"><section class="grid grid-cols-3">'
    "<article></article><article></article></section></main>"
    "<footer></footer>"
    "</body>"
)


@pytest.fixture
def root():
    # Pre-order ids: body 1, header 2, nav 3, a 4, a 5, main 6, section 7,
    # article 8, article 9, footer 10.
    return DOMBuilder().build(PAGE).root_node


def test_flatten_is_pre_order():
    leaf_a = DOMNode(id="c", tag_name="span")
    leaf_b = DOMNode(id="d", tag_name="span")
    middle = DOMNode(id="b", tag_name="div", children=[leaf_a])
    tree = DOMNode(id="a", tag_name="body", children=[middle, leaf_b])
    assert [n.id for n in queries.flatten(tree)] == ["a", "b", "c", "d"]


def test_find_by_id(root):
    assert queries.find_by_id(root, "node-7").tag_name == "section"
    assert queries.find_by_id(root, "node-99") is None


def test_get_ancestors_root_first(root):
    ancestors = queries.get_ancestors(root, "node-8")
    assert [n.id for n in ancestors] == ["node-1", "node-6", "node-7"]


def test_get_ancestors_of_root_or_unknown_is_empty(root):
    assert queries.get_ancestors(root, "node-1") == []
    assert queries.get_ancestors(root, "missing") == []


def test_select_collects_siblings(root):
    selection = queries.select(root, "node-4")
    assert selection.node.tag_name == "a"
    assert [n.id for n in selection.ancestors] == ["node-1", "node-2", "node-3"]
    assert [n.id for n in selection.siblings] == ["node-5"]


def test_select_root_and_missing(root):
    selection = queries.select(root, "node-1")
    assert selection.ancestors == []
    assert selection.siblings == []
    assert queries.select(root, "nope") is None


def test_search_is_case_insensitive(root):
    assert [n.id for n in queries.search(root, "MAINNAV")] == ["node-3"]
    assert [n.tag_name for n in queries.search(root, "NAV")] == ["nav"]
    assert [n.tag_name for n in queries.search(root, "grid")] == ["section"]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_search_empty_query_matches_nothing(root, query):
    assert queries.search(root, query) == []


def test_find_helpers(root):
    assert len(queries.find_by_tag(root, "article")) == 2
    assert [n.tag_name for n in queries.find_with_class(root, "container")] == ["main"]


def test_counts(root):
    counts = queries.count_elements(root)
    assert counts["a"] == 2
    assert counts["article"] == 2
    assert queries.count_total(root) == 10
    assert queries.max_depth(root) == 3
    assert queries.count_containers(root, ContainerType.FLEX) == 1
    assert queries.count_containers(root, ContainerType.GRID) == 1


def test_summarize_layout(root):
    summary = queries.summarize_layout(root)
    assert summary.has_header and summary.has_nav and summary.has_main and summary.has_footer
    assert not summary.has_aside
    assert summary.has_sections == 1
    assert summary.has_articles == 2
    assert summary.container_count == 1
    assert summary.flex_containers == 1
    assert summary.grid_containers == 1
    assert summary.layout_pattern == LayoutPattern.GRID_LAYOUT


def test_queries_do_not_mutate(root):
    before = root.model_dump()
    queries.summarize_layout(root)
    queries.select(root, "node-5")
    queries.search(root, "a")
    assert root.model_dump() == before


def test_traversals_handle_very_deep_trees():
    root = DOMNode(id="n-0", tag_name="div")
    node = root
    for level in range(1, 5000):
        child = DOMNode(id=f"n-{level}", tag_name="div", depth=level)
        node.children.append(child)
        node = child

    assert queries.count_total(root) == 5000
    assert queries.max_depth(root) == 4999
    assert [n.id for n in queries.flatten(root)][:3] == ["n-0", "n-1", "n-2"]
    assert queries.find_by_id(root, "n-4999") is node
    ancestors = queries.get_ancestors(root, "n-4999")
    assert len(ancestors) == 4999
    assert ancestors[0] is root
