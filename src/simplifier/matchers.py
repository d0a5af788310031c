"""
src/simplifier/matchers.py
===========================
Compiled Whole-Word Matchers — Vaani Simplifier

Responsibility:
    - Compile one case-insensitive alternation per lookup table, built once
    - Enforce whole-word / whole-phrase boundaries that understand Indic
      scripts (vowel signs and viramas count as part of a word)
    - Replace matches in a single left-to-right pass, longest key first
    - Define the emoji glyph class shared by annotation and word counting

Python's ``\\b`` treats Indic combining vowel signs as non-word characters,
so ``\\bपैसा\\b`` never matches (the word ends in a vowel sign). The
boundary used here is "not preceded / not followed by a word character",
where word characters are ``\\w`` plus the Indic blocks minus the danda
punctuation.

This module does NOT:
    - Know which table belongs to which language (see rewriter.py)
    - Insert emoji (see emoji.py)
"""

import re
from collections.abc import Callable, Mapping

# Devanagari … Sinhala blocks, excluding danda (U+0964) / double danda
# (U+0965), plus ZWNJ / ZWJ which appear inside Indic words.
WORD_CHARS: str = r"\w\u0900-\u0963\u0966-\u0DFF\u200c\u200d"

_BOUNDARY_BEFORE: str = rf"(?<![{WORD_CHARS}])"
_BOUNDARY_AFTER: str = rf"(?![{WORD_CHARS}])"

# Pictographic blocks plus the symbol ranges used by the emoji table
# (❤ ✅ ❌ ⭐ ☀ ⚠ ⏰ ❓ …) and the emoji variation selector.
EMOJI_CLASS: str = (
    r"\U0001F000-\U0001FAFF"
    r"\u2190-\u21FF\u2300-\u23FF\u2460-\u24FF\u25A0-\u27BF\u2900-\u297F"
    r"\u2B00-\u2BFF\u3030\u303D\u3297\u3299\uFE0F"
)

# A whitespace-delimited token made only of glyphs (ZWJ sequences included),
# optionally followed by sentence punctuation: "🏠", "📅.", "🍽️,"
_EMOJI_TOKEN: re.Pattern[str] = re.compile(rf"[{EMOJI_CLASS}\u200d]+[.,!?।॥]*")


def is_emoji_token(token: str) -> bool:
    """True if ``token`` is an emoji glyph rather than a word."""
    return _EMOJI_TOKEN.fullmatch(token) is not None


def whole_word_pattern(keys: list[str]) -> re.Pattern[str]:
    """
    Compile a case-insensitive whole-word alternation of ``keys``.

    Keys are sorted by length (longest first) so that at any position a
    multi-word phrase wins over its component words.
    """
    ordered = sorted(set(keys), key=len, reverse=True)
    body = "|".join(re.escape(k) for k in ordered) or r"(?!x)x"
    return re.compile(
        _BOUNDARY_BEFORE + "(?:" + body + ")" + _BOUNDARY_AFTER,
        re.IGNORECASE,
    )


def capitalize_first(text: str) -> str:
    """Uppercase the first character of ``text``."""
    if not text:
        return text
    return text[0].upper() + text[1:]


class PhraseMatcher:
    """
    Single-pass substitution over one lookup table.

    The table is read at substitution time (not copied), so the matcher
    always reflects the mapping it was built from.
    """

    def __init__(self, table: Mapping[str, str]):
        self._table = table
        self._canonical: dict[str, str] = {k.lower(): k for k in table}
        self.pattern: re.Pattern[str] = whole_word_pattern(list(table))

    def __len__(self) -> int:
        return len(self._canonical)

    def lookup(self, matched: str) -> str:
        """Return the replacement for a matched span (any casing)."""
        return self._table[self._canonical[matched.lower()]]

    def substitute(self, text: str, preserve_case: bool = False) -> str:
        """
        Replace every whole-word key occurrence in ``text``.

        Args:
            text: Input text.
            preserve_case: When True, a match starting with an uppercase
                character yields a capitalised replacement.

        Returns:
            Text with all matches replaced.
        """
        if not self._canonical:
            return text
        return self.pattern.sub(self._replacer(preserve_case), text)

    def _replacer(self, preserve_case: bool) -> Callable[[re.Match[str]], str]:
        def _replace(match: re.Match[str]) -> str:
            matched = match.group(0)
            replacement = self.lookup(matched)
            if preserve_case and matched[0].isupper():
                return capitalize_first(replacement)
            return replacement

        return _replace
