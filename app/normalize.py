"""
Text normalization helpers.

Responsibilities:
- title casing with the fixed minor-word exceptions
- decoding a single raw exported line to text
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from charset_normalizer import from_bytes

from .rules import MINOR_WORDS, TOKEN_SEPARATOR, TRIM_CHARS

logger = logging.getLogger(__name__)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def normalize_title(title: Any) -> str:
    """
    Normalize a messy title to single-spaced Title Case.

    Rules:
    - Non-string or blank input gives "".
    - Runs of spaces collapse; leading/trailing spaces are dropped.
    - Each word: first letter upper, rest lower.
    - Minor words (MINOR_WORDS) are left untouched unless they lead the title.
      The check is on the raw token, so "KA" is capitalized as "Ka".
    """
    if not isinstance(title, str):
        return ""
    if not title.strip(TRIM_CHARS):
        return ""

    words = [word for word in title.split(TOKEN_SEPARATOR) if word]

    out = []
    for i, word in enumerate(words):
        if i > 0 and word in MINOR_WORDS:
            out.append(word)
        else:
            out.append(_capitalize(word))

    return TOKEN_SEPARATOR.join(out)


def decode_line(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode one raw exported chat line to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped.
    - If decode fails, fall back to UTF-8, then to replacement characters.
    - CRLF/CR become LF and trailing line breaks are removed.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    if decode_fallback:
        logger.warning("raw line decode fell back to %s (detected=%s)", decode_used, detected)

    text = text.lstrip("\ufeff")
    text = text.replace("\r\n", "\n").replace("\r", "\n").rstrip("\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report
