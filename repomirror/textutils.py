"""Text helpers shared by the scorers and the summary generator."""

from __future__ import annotations


def text_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units.

    Characters outside the Basic Multilingual Plane (emoji, for example) count
    as two units, matching how browsers measure string length.
    """
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


__all__ = ["text_length"]
