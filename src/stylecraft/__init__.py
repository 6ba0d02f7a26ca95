"""stylecraft -- compile nested style objects into flat CSS."""

__version__ = "0.1.0"

from stylecraft.config import OutputConfig  # noqa: E402
from stylecraft.errors import InvalidInputError, InvalidValueError, StyleError  # noqa: E402
from stylecraft.model.nodes import AtRule, Declaration, Node, Rule  # noqa: E402
from stylecraft.parser.builder import StyleInput, parse_object_styles  # noqa: E402
from stylecraft.stringify import serialize  # noqa: E402
from stylecraft.transforms import apply_transforms  # noqa: E402

__all__ = [
    "__version__",
    "parse_object_styles",
    "serialize",
    "to_css",
    "apply_transforms",
    "OutputConfig",
    "Declaration",
    "Rule",
    "AtRule",
    "Node",
    "StyleError",
    "InvalidValueError",
    "InvalidInputError",
]


def to_css(definitions: StyleInput, config: OutputConfig | None = None) -> str:
    """Build, transform, and serialize style objects in one call."""
    config = config or OutputConfig()
    nodes = parse_object_styles(definitions)
    if config.hyphenate:
        nodes = apply_transforms(nodes)
    return serialize(nodes, config)
