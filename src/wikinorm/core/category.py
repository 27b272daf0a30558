"""Category separator handling."""

# Implicit category of pages given without one
DEFAULT_CATEGORY = "_default"

_DEFAULT_PREFIX = DEFAULT_CATEGORY + ":"


def merge_multi_categories(text: str) -> str:
    """
    Turn every colon except the last into a dash.
    
    A name carries at most one category, so "a:b:c" is page "c" in the
    category "a-b".
    
    Examples:
        >>> merge_multi_categories("alpha:beta:gamma")
        'alpha-beta:gamma'
        >>> merge_multi_categories("alpha:beta")
        'alpha:beta'
    """
    last = text.rfind(":")
    if last <= 0:
        return text
    
    # Find all colons except the last
    indices = [idx for idx, ch in enumerate(text[:last]) if ch == ":"]
    if not indices:
        return text
    
    chars = list(text)
    for idx in indices:
        chars[idx] = "-"
    return "".join(chars)


def has_default_category(text: str) -> bool:
    return text.startswith(_DEFAULT_PREFIX)


def strip_default_category(text: str) -> str:
    """
    Remove an explicit "_default:" category prefix.
    
    "_default:page" and "page" name the same page, so both normalize the same.
    Repeated prefixes are all removed.
    
    Examples:
        >>> strip_default_category("_default:_template")
        '_template'
        >>> strip_default_category("fragment:_template")
        'fragment:_template'
    """
    while has_default_category(text):
        text = text[len(_DEFAULT_PREFIX):]
    return text
