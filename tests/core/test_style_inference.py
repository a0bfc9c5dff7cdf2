# tests/core/test_style_inference.py
import pytest
from bs4 import BeautifulSoup

from inspector.dom.styles import (
    attribute_text,
    infer_style,
    match_utility,
    parse_inline_style,
    resolve_display,
    FONT_SIZE_RULES,
)


def make_tag(html: str):
    """Parses a snippet and returns its first element."""
    return BeautifulSoup(html, "html.parser").find()


# --- Inline style parsing ---

def test_parse_inline_style_basic():
    declarations = parse_inline_style("color: red; Background-Color : Blue")
    assert declarations == {"color": "red", "background-color": "Blue"}


def test_parse_inline_style_skips_malformed_declarations():
    declarations = parse_inline_style("display;; : x; width:; margin: 0 auto;")
    assert declarations == {"margin": "0 auto"}


def test_parse_inline_style_keeps_colons_in_values():
    declarations = parse_inline_style("background-image: url(http://example.com/a.png)")
    assert declarations["background-image"] == "url(http://example.com/a.png)"


def test_parse_inline_style_empty():
    assert parse_inline_style("") == {}


# --- Attribute access ---

def test_attribute_text_joins_multi_valued_class():
    tag = make_tag('<div class="a  b c"></div>')
    assert attribute_text(tag, "class") == "a b c"


def test_attribute_text_missing_is_empty_string():
    tag = make_tag("<div></div>")
    assert attribute_text(tag, "id") == ""


# --- Display resolution ---

def test_class_flex_wins_over_inline_display():
    style = infer_style(make_tag('<div class="flex" style="display:block"></div>'))
    assert style.display == "flex"


def test_inline_display_used_without_structural_class():
    style = infer_style(make_tag('<span style="display: inline"></span>'))
    assert style.display == "inline"


def test_later_display_class_overwrites_earlier():
    # Both "grid" and "block" are present; "block" is checked last.
    assert resolve_display({}, "grid block") == "block"
    assert resolve_display({"display": "grid"}, "") == "grid"
    assert resolve_display({}, "") == "block"


# --- Defaults ---

def test_defaults_for_bare_element():
    style = infer_style(make_tag("<div></div>"))
    assert style.display == "block"
    assert style.position == "static"
    assert style.opacity == "1"
    assert style.flex_direction == "row"
    assert style.padding == ""
    assert style.background_color == ""


# --- Utility classes ---

@pytest.mark.parametrize("class_attr, field, expected", [
    ("justify-between", "justify_content", "space-between"),
    ("items-center", "align_items", "center"),
    ("grid grid-cols-3", "grid_template_columns", "repeat(3, minmax(0, 1fr))"),
    ("gap-4", "gap", "16px"),
    ("p-6", "padding", "24px"),
    ("px-4 py-2", "padding", "8px 16px"),
    ("m-2", "margin", "8px"),
    ("mx-auto", "margin", "0 auto"),
    ("bg-white", "background_color", "#ffffff"),
    ("bg-gradient-to-r", "background_color", "linear-gradient(...)"),
    ("text-2xl", "font_size", "24px"),
    ("font-semibold", "font_weight", "600"),
    ("font-bold", "font_weight", "700"),
    ("rounded-lg", "border_radius", "8px"),
    ("rounded", "border_radius", "4px"),
    ("shadow-md", "box_shadow", "0 4px 6px -1px rgba(0,0,0,0.1)"),
    ("w-full", "width", "100%"),
    ("w-64", "width", "256px"),
    ("h-screen", "height", "100vh"),
    ("max-w-7xl", "max_width", "1280px"),
    ("flex flex-col", "flex_direction", "column"),
])
def test_utility_class_mapping(class_attr, field, expected):
    style = infer_style(make_tag(f'<div class="{class_attr}"></div>'))
    assert getattr(style, field) == expected


def test_inline_style_beats_utility_class():
    style = infer_style(make_tag('<div class="bg-white p-4" style="background-color: #123456"></div>'))
    assert style.background_color == "#123456"
    assert style.padding == "16px"


def test_inline_only_properties():
    style = infer_style(make_tag(
        '<div style="position: absolute; z-index: 10; opacity: 0.5; font-family: Inter"></div>'
    ))
    assert style.position == "absolute"
    assert style.z_index == "10"
    assert style.opacity == "0.5"
    assert style.font_family == "Inter"


def test_match_utility_first_rule_wins():
    assert match_utility(FONT_SIZE_RULES, "text-sm text-lg") == "14px"
    assert match_utility(FONT_SIZE_RULES, "uppercase") == ""
