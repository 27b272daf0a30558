"""Character-class filtering for normal form."""

import re

# Letters and numbers (Unicode-aware \w, which also covers '_'), dashes and colons
DISALLOWED = re.compile(r"[^\w\-:]+")


def replace_disallowed(text: str) -> str:
    """
    Replace each maximal run of disallowed codepoints with a single dash.
    
    Examples:
        >>> replace_disallowed("some page")
        'some-page'
        >>> replace_disallowed(" <[ test ]> ")
        '-test-'
    """
    return DISALLOWED.sub("-", text)


def has_disallowed(text: str) -> bool:
    return DISALLOWED.search(text) is not None


def strip_leading_slash(text: str) -> str:
    """Drop a single leading '/', as in URL paths like "/some-page"."""
    if text.startswith("/"):
        return text[1:]
    return text
