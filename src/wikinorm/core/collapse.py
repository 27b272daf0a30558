"""Separator collapsing and trimming.

Equivalent to repeatedly applying these rewrites until none match:

    ^-+ | -+$   -> ""
    -{2,}       -> "-"
    :{2,}       -> ":"
    :- | -:     -> ":"
    _- | -_     -> "_"
    ^: | :$     -> ""

but done as one left-to-right scan over the output buffer, looking back
only at the last emitted character.
"""


def collapse_separators(text: str) -> str:
    """
    Merge and trim runs of dashes and colons.
    
    Expects input that has already passed the character-class filter and
    underscore sanitation.
    
    Examples:
        >>> collapse_separators("--test--")
        'test'
        >>> collapse_separators("fragment::-scp-4447--2")
        'fragment:scp-4447-2'
        >>> collapse_separators("_-template-")
        '_template'
    """
    out: list[str] = []
    
    for ch in text:
        last = out[-1] if out else None
        
        if ch == "-":
            # Leading, doubled, or following a separator that absorbs it
            if last is None or last in "-:_":
                continue
            out.append(ch)
        elif ch == ":":
            if last == ":":
                continue
            if last == "-":
                out.pop()
                if out and out[-1] == ":":
                    continue
            out.append(ch)
        elif ch == "_":
            if last == "-":
                out.pop()
            out.append(ch)
        else:
            out.append(ch)
    
    if out and out[-1] == "-":
        out.pop()
    if out and out[-1] == ":":
        out.pop()
    if out and out[0] == ":":
        del out[0]
    
    return "".join(out)
