# tests/core/test_layout_classifier.py
from inspector.dom.core import ComputedStyleInfo
from inspector.dom.layout import classify_layout


def test_flex_container_properties():
    style = ComputedStyleInfo(display="flex", justify_content="center", gap="8px")
    info = classify_layout(style, "flex flex-wrap justify-center gap-2")

    assert info.is_flex_container
    assert not info.is_grid_container
    assert info.grid_properties is None
    assert info.flex_properties.direction == "row"
    assert info.flex_properties.wrap == "wrap"
    assert info.flex_properties.justify == "center"
    assert info.flex_properties.align == "stretch"
    assert info.flex_properties.gap == "8px"


def test_flex_defaults_without_hints():
    info = classify_layout(ComputedStyleInfo(display="inline-flex"), "")
    assert info.is_flex_container
    assert info.flex_properties.wrap == "nowrap"
    assert info.flex_properties.justify == "flex-start"
    assert info.flex_properties.gap == "0"


def test_grid_container_properties():
    style = ComputedStyleInfo(display="grid", grid_template_columns="repeat(2, minmax(0, 1fr))")
    info = classify_layout(style, "grid grid-cols-2")

    assert info.is_grid_container
    assert info.flex_properties is None
    assert info.grid_properties.columns == "repeat(2, minmax(0, 1fr))"
    assert info.grid_properties.rows == "none"
    assert info.grid_properties.gap == "0"
    assert info.grid_properties.areas == ""


def test_block_is_not_a_container():
    info = classify_layout(ComputedStyleInfo(), "container mx-auto")
    assert not info.is_flex_container
    assert not info.is_grid_container
    assert info.flex_properties is None
    assert info.grid_properties is None


def test_classifier_never_sets_item_flags():
    info = classify_layout(ComputedStyleInfo(display="flex"), "flex")
    assert info.is_flex_item is False
    assert info.is_grid_item is False
