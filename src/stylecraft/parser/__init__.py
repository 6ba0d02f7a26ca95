from stylecraft.parser.builder import (
    StyleDefinition,
    StyleInput,
    normalize_input,
    parse_object_styles,
)
from stylecraft.parser.keys import KeyKind, classify_key
from stylecraft.parser.selectors import (
    Selector,
    compose_selector,
    parse_directive,
    split_selector_list,
)

__all__ = [
    "parse_object_styles",
    "normalize_input",
    "StyleDefinition",
    "StyleInput",
    "KeyKind",
    "classify_key",
    "Selector",
    "compose_selector",
    "parse_directive",
    "split_selector_list",
]
