"""
src/simplifier/rewriter.py
===========================
Vocabulary & Phrase Rewriting — Vaani Simplifier (stages 2, 3, 4, 6)

Responsibility:
    - Stage 2: language-specific dictionary substitution, longest key first,
      whole-word, case-insensitive; English keeps leading capitalisation
    - Stage 3: English abbreviation expansion
    - Stage 4: ordered phrase-level rewrites ("in order to" → "to")
    - Stage 6: redundant filler removal ("basically", "I think that")

Every pattern here is compiled once at import (or once per injected table),
never per call.

This module does NOT:
    - Split or re-join sentences (see segmenter.py)
    - Insert emoji (see emoji.py)
    - Tidy whitespace beyond what a rule itself produces (see formatting.py)
"""

import logging
import re
from collections.abc import Mapping
from functools import lru_cache

from src.simplifier.language import dictionary_key, is_english
from src.simplifier.matchers import PhraseMatcher
from src.simplifier.tables import (
    ABBREVIATIONS,
    DICTIONARIES,
    PHRASE_RULES,
    REDUNDANT_PHRASES,
    REDUNDANT_REPEATS,
)

logger = logging.getLogger("vaani.simplifier.rewriter")


# ---------------------------------------------------------------------------
# Compiled rule sets
# ---------------------------------------------------------------------------

_PHRASE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in PHRASE_RULES
]

_REDUNDANT_PATTERN: re.Pattern[str] = re.compile(
    "|".join(REDUNDANT_PHRASES), re.IGNORECASE
)

_REPEAT_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in REDUNDANT_REPEATS
]

_ABBREVIATION_MATCHER: PhraseMatcher = PhraseMatcher(ABBREVIATIONS)


@lru_cache(maxsize=None)
def _default_matcher(key: str) -> PhraseMatcher:
    """Matcher for a built-in dictionary, compiled on first use."""
    return PhraseMatcher(DICTIONARIES[key])


def build_matchers(
    dictionaries: Mapping[str, Mapping[str, str]],
) -> dict[str, PhraseMatcher]:
    """Compile one matcher per dictionary in ``dictionaries``."""
    return {key: PhraseMatcher(table) for key, table in dictionaries.items()}


# ---------------------------------------------------------------------------
# Stage 2: dictionary substitution
# ---------------------------------------------------------------------------


def substitute_dictionary(
    text: str,
    language: str,
    matchers: Mapping[str, PhraseMatcher] | None = None,
) -> str:
    """
    Replace complex terms with simpler ones for ``language``.

    Args:
        text: Input text.
        language: Resolved language tag; unmapped languages use English.
        matchers: Optional pre-built matchers (keyed by primary subtag),
            used instead of the built-in dictionaries.

    Returns:
        Text with dictionary terms replaced.
    """
    key = dictionary_key(language)
    if matchers is None:
        matcher = _default_matcher(key)
    else:
        matcher = matchers.get(key)
        if matcher is None:
            matcher = matchers.get("en")
        if matcher is None:
            return text

    return matcher.substitute(text, preserve_case=is_english(language))


# ---------------------------------------------------------------------------
# Stage 3: abbreviations (English only)
# ---------------------------------------------------------------------------


def expand_abbreviations(text: str) -> str:
    """Spell out known abbreviations ("etc" → "and so on")."""
    return _ABBREVIATION_MATCHER.substitute(text)


# ---------------------------------------------------------------------------
# Stage 4: phrase rewrites
# ---------------------------------------------------------------------------


def rewrite_phrases(text: str) -> str:
    """Collapse wordy constructions, applying each rule in order."""
    result = text
    for pattern, replacement in _PHRASE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


# ---------------------------------------------------------------------------
# Stage 6: redundancy removal
# ---------------------------------------------------------------------------


def remove_redundancy(text: str) -> str:
    """
    Strip filler phrases, leaving a single space where each one was.

    Surrounding whitespace is left for the cleanup stage to collapse.
    """
    result = _REDUNDANT_PATTERN.sub(" ", text)
    for pattern, replacement in _REPEAT_PATTERNS:
        result = pattern.sub(replacement, result)
    return result
