"""Underscore sanitation."""


def replace_underscores(text: str) -> str:
    """
    Replace underscores with dashes, except where they are significant.
    
    This is the PCRE "(?<!:)_" negative look-behind, with an exception for the
    start of the string. An underscore survives only at index 0 or immediately
    after a colon, permitting names like "_template" and "fragment:_template".
    
    Examples:
        >>> replace_underscores("_special_page")
        '_special-page'
        >>> replace_underscores("fragment:__template")
        'fragment:_-template'
    """
    out = []
    prev_colon = False
    
    for idx, ch in enumerate(text):
        if ch == "_" and idx > 0 and not prev_colon:
            out.append("-")
        else:
            out.append(ch)
        prev_colon = ch == ":"
    
    return "".join(out)
