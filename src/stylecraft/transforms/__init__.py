from stylecraft.transforms.base import Transform
from stylecraft.transforms.hyphenate import HyphenatePropertiesTransform, hyphenate

__all__ = [
    "Transform",
    "HyphenatePropertiesTransform",
    "hyphenate",
    "BUILTIN_TRANSFORMS",
    "apply_transforms",
]

BUILTIN_TRANSFORMS = [
    HyphenatePropertiesTransform(),
]


def apply_transforms(nodes, custom_transforms=None):
    """Apply all built-in transforms (and any custom ones) to *nodes*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    result = list(nodes)
    for t in transforms:
        result = t.apply(result)
    return result
