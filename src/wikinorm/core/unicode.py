"""Unicode preprocessing: trimming, NFKC normalization and case folding."""

import unicodedata


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def normalize_nfkc(text: str) -> str:
    """Collapse compatibility-equivalent sequences (ligatures, fullwidth forms, ...)."""
    return unicodedata.normalize("NFKC", text)


def fold_case(text: str) -> str:
    """Apply full Unicode case folding, not just ASCII lowercasing."""
    return text.casefold()


def fold(text: str) -> str:
    """
    NFKC-normalize, then case fold.
    
    Folding must see composed codepoints, so the order is fixed.
    
    Examples:
        >>> fold("ＡＢＣ")
        'abc'
        >>> fold("ﬁle")
        'file'
        >>> fold("Straße")
        'strasse'
    """
    return fold_case(normalize_nfkc(text))
