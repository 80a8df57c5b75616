"""Accent-insensitive text normalization for place matching."""

import re
import unicodedata

_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")


def normalize(text: str) -> str:
    """Lower-case, decompose and strip combining marks; map "đ" to "d".

    "đ" has no canonical decomposition, so it is replaced explicitly.
    Lower-casing runs first so that the result is stable under reapplication.
    """
    s = unicodedata.normalize("NFD", (text or "").lower())
    s = _COMBINING_MARKS_RE.sub("", s)
    return s.replace("đ", "d")
