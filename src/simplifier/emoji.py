"""
src/simplifier/emoji.py
========================
Emoji Annotation — Vaani Simplifier (stage 7)

Responsibility:
    - Insert the mapped glyph after every whole-word emoji-table match,
      separated by one space ("home" → "home 🏠")
    - Never annotate a word twice: a match already followed (after optional
      whitespace) by an emoji glyph is left alone, so re-running the stage
      on its own output is a no-op

This module does NOT:
    - Replace words with emoji (the word is always kept)
    - Decide whether annotation is enabled (see engine.py)
"""

import re
from collections.abc import Mapping

from src.simplifier.matchers import EMOJI_CLASS, PhraseMatcher
from src.simplifier.tables import EMOJI_TABLE

_EMOJI_CHAR: re.Pattern[str] = re.compile(rf"[{EMOJI_CLASS}]")
_FOLLOWED_BY_EMOJI: re.Pattern[str] = re.compile(rf"\s*[{EMOJI_CLASS}]")

_DEFAULT_MATCHER: PhraseMatcher = PhraseMatcher(EMOJI_TABLE)


def is_emoji(char: str) -> bool:
    """True if ``char`` is (the first code point of) an emoji glyph."""
    return bool(char) and _EMOJI_CHAR.match(char) is not None


def build_emoji_matcher(table: Mapping[str, str]) -> PhraseMatcher:
    """Compile a matcher for a custom word → glyph table."""
    return PhraseMatcher(table)


def annotate(text: str, matcher: PhraseMatcher | None = None) -> str:
    """
    Stage 7: append emoji after recognised words.

    Args:
        text: Input text.
        matcher: Optional matcher over a word → glyph table; the unified
            table by default (see build_emoji_matcher).

    Returns:
        Annotated text. Words already followed by a glyph are untouched.
    """
    if matcher is None:
        matcher = _DEFAULT_MATCHER
    if not len(matcher):
        return text

    def _annotate(match: re.Match[str]) -> str:
        word = match.group(0)
        if _FOLLOWED_BY_EMOJI.match(match.string, match.end()):
            return word
        return f"{word} {matcher.lookup(word)}"

    return matcher.pattern.sub(_annotate, text)
