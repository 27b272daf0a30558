"""Wikidot-compatible page and category name normalization."""

from .core.category import DEFAULT_CATEGORY
from .normal import NormalizeOptions, Normalizer, is_normal, normalize, normalize_decode

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CATEGORY",
    "NormalizeOptions",
    "Normalizer",
    "is_normal",
    "normalize",
    "normalize_decode",
    "__version__",
]
