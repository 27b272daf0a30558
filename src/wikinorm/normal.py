"""Normalization pipeline and normal-form predicate."""

from dataclasses import dataclass

from .core.category import has_default_category, merge_multi_categories, strip_default_category
from .core.charclass import has_disallowed, replace_disallowed, strip_leading_slash
from .core.collapse import collapse_separators
from .core.decode import percent_decode
from .core.underscore import replace_underscores
from .core.unicode import fold, trim

# Adjacent pairs that never survive collapse_separators()
_FORBIDDEN_PAIRS = ("--", "::", ":-", "-:", "_-", "-_")


@dataclass(frozen=True)
class NormalizeOptions:
    """Variant switches for the normalization pipeline."""
    
    # Fold all but the last category separator into the page name
    merge_categories: bool = False
    
    # Drop one leading '/' before anything else, so "/_template" keeps its underscore
    strip_leading_slash: bool = False


def _check_str(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")


class Normalizer:
    """Normalization pipeline bound to a set of options.
    
    Instances hold no mutable state and can be shared freely.
    """
    
    def __init__(self, options: NormalizeOptions | None = None):
        self.options = options or NormalizeOptions()
    
    def __repr__(self) -> str:
        return f"Normalizer({self.options!r})"
    
    def normalize(self, text: str) -> str:
        """
        Convert an arbitrary string into normal form.
        
        Non-alphanumeric characters become dashes and letters are case folded.
        
        Examples:
            >>> Normalizer().normalize("Big Cheese Horace")
            'big-cheese-horace'
            >>> Normalizer().normalize("Tufto's Proposal")
            'tufto-s-proposal'
            >>> Normalizer().normalize("_default:_template")
            '_template'
        """
        _check_str(text)
        
        if self.options.strip_leading_slash:
            text = strip_leading_slash(text)
        
        text = trim(text)
        text = fold(text)
        text = replace_disallowed(text)
        
        if self.options.merge_categories:
            text = merge_multi_categories(text)
        
        # Permits names like "_template" or "category:_template"
        text = replace_underscores(text)
        text = collapse_separators(text)
        return strip_default_category(text)
    
    def normalize_decode(self, text: str) -> str:
        """Percent-decode, then normalize.
        
        Invalid UTF-8 after decoding is logged, and the undecoded text is
        normalized instead.
        """
        _check_str(text)
        return self.normalize(percent_decode(text))
    
    def is_normal(self, text: str) -> bool:
        """
        Determine whether a string is already in normal form.
        
        True exactly when normalize() would return the string unchanged.
        """
        _check_str(text)
        
        if not text:
            return True
        
        if has_disallowed(text) or fold(text) != text:
            return False
        
        if text[0] in "-:" or text[-1] in "-:":
            return False
        
        if any(pair in text for pair in _FORBIDDEN_PAIRS):
            return False
        
        # Underscores only at the start or right after a category separator
        for idx, ch in enumerate(text):
            if ch == "_" and idx > 0 and text[idx - 1] != ":":
                return False
        
        if has_default_category(text):
            return False
        
        if self.options.merge_categories and text.count(":") > 1:
            return False
        
        return True


_DEFAULT = Normalizer()


def _normalizer(options: NormalizeOptions | None) -> Normalizer:
    if options is None:
        return _DEFAULT
    return Normalizer(options)


def normalize(text: str, options: NormalizeOptions | None = None) -> str:
    """Convert an arbitrary string into normal form.
    
    Args:
        text: Page or category name, in any case or script
        options: Pipeline variants (defaults to NormalizeOptions())
    
    Returns:
        The normalized name, e.g. "Big Cheese Horace" -> "big-cheese-horace"
    """
    return _normalizer(options).normalize(text)


def normalize_decode(text: str, options: NormalizeOptions | None = None) -> str:
    """Percent-decode a name (e.g. from a URL path), then normalize it."""
    return _normalizer(options).normalize_decode(text)


def is_normal(text: str, options: NormalizeOptions | None = None) -> bool:
    """Return True if text is a fixed point of normalize()."""
    return _normalizer(options).is_normal(text)
