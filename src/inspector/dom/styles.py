# src/inspector/dom/styles.py
"""
Style inference for a single element.

No cascade is available, so every property is resolved from the element's own
inline `style` attribute first and from utility-class naming conventions
(Tailwind style) second. Each property owns an ordered rule table; the first
rule whose predicate matches the raw class string provides the value.
"""
import re
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from bs4 import Tag

from .core import ComputedStyleInfo


Predicate = Callable[[str], Any]
RuleValue = Union[str, Callable[[Any], str]]
UtilityRule = Tuple[Predicate, RuleValue]


# --- Rule helpers ---

def contains(fragment: str) -> Predicate:
    """Predicate: the class string contains `fragment` anywhere."""
    return lambda class_attr: fragment in class_attr


def numeric(prefix: str) -> Predicate:
    """Predicate: the class string contains `<prefix>-<n>`; returns the regex match."""
    pattern = re.compile(rf"{re.escape(prefix)}-(\d+)")
    return lambda class_attr: pattern.search(class_attr)


def spacing_px(match: re.Match) -> str:
    """Tailwind spacing scale: one unit is 4px."""
    return f"{int(match.group(1)) * 4}px"


def _axis_padding(class_attr: str) -> Optional[str]:
    px = re.search(r"px-(\d+)", class_attr)
    py = re.search(r"py-(\d+)", class_attr)
    if not px and not py:
        return None
    vertical = int(py.group(1)) * 4 if py else 0
    horizontal = int(px.group(1)) * 4 if px else 0
    return f"{vertical}px {horizontal}px"


# --- Utility class tables (order matters: first match wins) ---

JUSTIFY_RULES: List[UtilityRule] = [
    (contains("justify-center"), "center"),
    (contains("justify-between"), "space-between"),
    (contains("justify-around"), "space-around"),
    (contains("justify-evenly"), "space-evenly"),
    (contains("justify-end"), "flex-end"),
    (contains("justify-start"), "flex-start"),
]

ALIGN_RULES: List[UtilityRule] = [
    (contains("items-center"), "center"),
    (contains("items-start"), "flex-start"),
    (contains("items-end"), "flex-end"),
    (contains("items-stretch"), "stretch"),
    (contains("items-baseline"), "baseline"),
]

GRID_COLUMN_RULES: List[UtilityRule] = [
    (numeric("grid-cols"), lambda m: f"repeat({m.group(1)}, minmax(0, 1fr))"),
]

GAP_RULES: List[UtilityRule] = [
    (numeric("gap"), spacing_px),
]

PADDING_RULES: List[UtilityRule] = [
    (numeric("p"), spacing_px),
    (_axis_padding, lambda value: value),
]

MARGIN_RULES: List[UtilityRule] = [
    (numeric("m"), spacing_px),
    (contains("mx-auto"), "0 auto"),
]

BACKGROUND_RULES: List[UtilityRule] = [
    (contains("bg-white"), "#ffffff"),
    (contains("bg-black"), "#000000"),
    (contains("bg-gray-"), "#6b7280"),
    (contains("bg-blue-"), "#3b82f6"),
    (contains("bg-indigo-"), "#6366f1"),
    (contains("bg-purple-"), "#8b5cf6"),
    (contains("bg-gradient"), "linear-gradient(...)"),
]

FONT_SIZE_RULES: List[UtilityRule] = [
    (contains("text-xs"), "12px"),
    (contains("text-sm"), "14px"),
    (contains("text-base"), "16px"),
    (contains("text-lg"), "18px"),
    (contains("text-xl"), "20px"),
    (contains("text-2xl"), "24px"),
    (contains("text-3xl"), "30px"),
    (contains("text-4xl"), "36px"),
    (contains("text-5xl"), "48px"),
    (contains("text-6xl"), "60px"),
]

FONT_WEIGHT_RULES: List[UtilityRule] = [
    (contains("font-thin"), "100"),
    (contains("font-light"), "300"),
    (contains("font-normal"), "400"),
    (contains("font-medium"), "500"),
    (contains("font-semibold"), "600"),
    (contains("font-bold"), "700"),
    (contains("font-extrabold"), "800"),
]

RADIUS_RULES: List[UtilityRule] = [
    (contains("rounded-full"), "9999px"),
    (contains("rounded-3xl"), "24px"),
    (contains("rounded-2xl"), "16px"),
    (contains("rounded-xl"), "12px"),
    (contains("rounded-lg"), "8px"),
    (contains("rounded-md"), "6px"),
    (contains("rounded-sm"), "2px"),
    (contains("rounded"), "4px"),
]

SHADOW_RULES: List[UtilityRule] = [
    (contains("shadow-2xl"), "0 25px 50px -12px rgba(0,0,0,0.25)"),
    (contains("shadow-xl"), "0 20px 25px -5px rgba(0,0,0,0.1)"),
    (contains("shadow-lg"), "0 10px 15px -3px rgba(0,0,0,0.1)"),
    (contains("shadow-md"), "0 4px 6px -1px rgba(0,0,0,0.1)"),
    (contains("shadow-sm"), "0 1px 2px 0 rgba(0,0,0,0.05)"),
    (contains("shadow"), "0 1px 3px 0 rgba(0,0,0,0.1)"),
]

WIDTH_RULES: List[UtilityRule] = [
    (contains("w-full"), "100%"),
    (contains("w-screen"), "100vw"),
    (contains("w-auto"), "auto"),
    (numeric("w"), spacing_px),
]

HEIGHT_RULES: List[UtilityRule] = [
    (contains("h-full"), "100%"),
    (contains("h-screen"), "100vh"),
    (contains("h-auto"), "auto"),
    (numeric("h"), spacing_px),
]

MAX_WIDTH_RULES: List[UtilityRule] = [
    (contains("max-w-7xl"), "1280px"),
    (contains("max-w-6xl"), "1152px"),
    (contains("max-w-5xl"), "1024px"),
    (contains("max-w-4xl"), "896px"),
    (contains("max-w-3xl"), "768px"),
    (contains("max-w-2xl"), "672px"),
    (contains("max-w-xl"), "576px"),
    (contains("max-w-lg"), "512px"),
    (contains("max-w-md"), "448px"),
    (contains("max-w-sm"), "384px"),
]

FLEX_DIRECTION_RULES: List[UtilityRule] = [
    (contains("flex-col"), "column"),
]

# Structural classes that decide `display` even when an inline value exists.
# Checked in order; a later match overwrites an earlier one.
DISPLAY_CLASS_OVERRIDES: List[UtilityRule] = [
    (contains("flex"), "flex"),
    (contains("grid"), "grid"),
    (contains("block"), "block"),
]


# --- Resolution ---

def match_utility(rules: List[UtilityRule], class_attr: str) -> str:
    """Returns the value of the first matching rule, or an empty string."""
    for predicate, value in rules:
        hit = predicate(class_attr)
        if hit:
            return value(hit) if callable(value) else value
    return ""


def parse_inline_style(style: str) -> Dict[str, str]:
    """
    Parses a raw `style` attribute into a property -> value mapping.
    Declarations without a name or a value are skipped.
    """
    declarations: Dict[str, str] = {}
    if not style:
        return declarations

    for part in style.split(";"):
        if ":" not in part:
            continue
        prop, value = part.split(":", 1)
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def attribute_text(tag: Tag, name: str) -> str:
    """
    Reads an attribute as a plain string.
    Multi-valued attributes (class, rel, ...) come back from bs4 as lists.
    """
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def resolve_display(inline: Dict[str, str], class_attr: str) -> str:
    """
    Container type is taken from structural utility classes before inline
    style: `class="flex" style="display:block"` resolves to flex.
    """
    display = inline.get("display") or "block"
    for predicate, value in DISPLAY_CLASS_OVERRIDES:
        if predicate(class_attr):
            display = value
    return display


def infer_style(element: Tag) -> ComputedStyleInfo:
    """
    Derives the computed style record of one element from its inline style
    and class string. Never raises; unset properties keep their defaults.
    """
    inline = parse_inline_style(attribute_text(element, "style"))
    class_attr = attribute_text(element, "class")

    def pick(prop: str, rules: Optional[List[UtilityRule]] = None, default: str = "") -> str:
        if inline.get(prop):
            return inline[prop]
        if rules:
            matched = match_utility(rules, class_attr)
            if matched:
                return matched
        return default

    return ComputedStyleInfo(
        display=resolve_display(inline, class_attr),
        position=pick("position", default="static"),
        flex_direction=pick("flex-direction", FLEX_DIRECTION_RULES, default="row"),
        justify_content=pick("justify-content", JUSTIFY_RULES),
        align_items=pick("align-items", ALIGN_RULES),
        grid_template_columns=pick("grid-template-columns", GRID_COLUMN_RULES),
        grid_template_rows=pick("grid-template-rows"),
        gap=pick("gap", GAP_RULES),
        padding=pick("padding", PADDING_RULES),
        margin=pick("margin", MARGIN_RULES),
        background_color=pick("background-color", BACKGROUND_RULES),
        color=pick("color"),
        font_size=pick("font-size", FONT_SIZE_RULES),
        font_family=pick("font-family"),
        font_weight=pick("font-weight", FONT_WEIGHT_RULES),
        border_radius=pick("border-radius", RADIUS_RULES),
        border=pick("border"),
        box_shadow=pick("box-shadow", SHADOW_RULES),
        z_index=pick("z-index"),
        overflow=pick("overflow"),
        opacity=pick("opacity", default="1"),
        transform=pick("transform"),
        transition=pick("transition"),
        width=pick("width", WIDTH_RULES),
        height=pick("height", HEIGHT_RULES),
        max_width=pick("max-width", MAX_WIDTH_RULES),
        min_height=pick("min-height"),
    )
