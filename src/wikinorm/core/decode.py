"""Percent-decoding front end."""

import logging
from urllib.parse import unquote_to_bytes

logger = logging.getLogger(__name__)


def percent_decode(text: str) -> str:
    """
    Decode percent-escapes (RFC 3986) as UTF-8.
    
    Malformed escapes such as "%zz" are left as they are. If the decoded bytes
    are not valid UTF-8 the original text is returned unchanged and a warning
    is logged; this never raises.
    
    Examples:
        >>> percent_decode("some%20page")
        'some page'
        >>> percent_decode("caf%C3%A9")
        'café'
    """
    if "%" not in text:
        return text
    
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError) as exc:
        logger.warning(
            "Percent-decoded text is not valid UTF-8 (byte %d: %s), using it undecoded: %r",
            exc.start,
            exc.reason,
            text,
        )
        return text
