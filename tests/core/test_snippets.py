# tests/core/test_snippets.py
from inspector.dom.builder import DOMBuilder
from inspector.dom.snippets import css_selector, element_css, element_markup


def first_child(html):
    return DOMBuilder().build(f"<body>{html}</body>").root_node.children[0]


def test_markup_and_css_for_button():
    node = first_child(
        '<button id="cta" class="bg-blue-500 rounded-lg font-bold" type="submit" style="color: red">Buy now</button>'
    )
    assert element_markup(node) == (
        '<button class="bg-blue-500 rounded-lg font-bold" id="cta" type="submit">\n'
        "  Buy now\n"
        "</button>"
    )
    assert element_css(node) == (
        "#cta {\n"
        "  background-color: #3b82f6;\n"
        "  color: red;\n"
        "  font-weight: 700;\n"
        "  border-radius: 8px;\n"
        "}"
    )


def test_selector_fallbacks():
    assert css_selector(first_child('<div class="card shadow"></div>')) == ".card"
    assert css_selector(first_child("<section></section>")) == "section"


def test_empty_element():
    node = first_child("<section></section>")
    assert element_markup(node) == "<section></section>"
    assert element_css(node) == "section {\n}"


def test_flex_container_css():
    node = first_child('<div class="flex flex-col items-center gap-2"></div>')
    css = element_css(node)
    assert "display: flex;" in css
    assert "flex-direction: column;" in css
    assert "align-items: center;" in css
    assert "gap: 8px;" in css
