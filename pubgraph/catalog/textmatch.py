"""Literal text matching used by the publication filters.

All matching is literal: search terms are never interpreted as regular
expressions. Whole-word matching escapes the term before wrapping it in
word boundaries, so terms like ``"C++"`` or ``"(meta)analysis"``
never raise. A boundary only exists next to a word character, though, so
a term that starts or ends with punctuation (``"C++"``) may not match at
all in whole-word mode.
"""

from __future__ import annotations

import re


def escape_term(term: str) -> str:
    """Escape every regex metacharacter in a search term.

    Examples:
        >>> escape_term("a.b*c")
        'a\\\\.b\\\\*c'
    """
    return re.escape(term)


def whole_word_pattern(term: str) -> re.Pattern:
    """Compile a case-insensitive pattern matching *term* as a whole word."""
    return re.compile(rf"\b{escape_term(term)}\b", re.IGNORECASE)


def contains_whole_word(text: str, term: str) -> bool:
    """Whether *term* occurs in *text* bounded by word boundaries.

    Examples:
        >>> contains_whole_word("State of the art review", "art")
        True
        >>> contains_whole_word("A journal article", "art")
        False
    """
    return whole_word_pattern(term).search(text) is not None


def contains(haystack: str, needle: str, case_sensitive: bool = False) -> bool:
    """Substring test, case-insensitive unless *case_sensitive*."""
    if case_sensitive:
        return needle in haystack
    return needle.lower() in haystack.lower()
