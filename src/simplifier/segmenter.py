"""
src/simplifier/segmenter.py
============================
Sentence Segmentation — Vaani Simplifier (stage 5)

Responsibility:
    - Split text into sentences on terminal punctuation (. ! ? । ॥)
      followed by whitespace
    - Re-split any sentence longer than the word limit at natural pause
      points (commas, conjunctions), forcing a break at the limit otherwise
    - Re-join fragments with single spaces

Pause-point rule, scanning words left to right:
    - After a word containing a comma or equal to a pause conjunction, break
      if the fragment has at least MIN_FRAGMENT_WORDS words and the word is
      not the last one of the sentence.
    - Otherwise break once the fragment reaches the word limit.
    - A broken-off fragment loses a trailing comma and ends with a period
      unless it already ends in terminal punctuation.

Emoji glyphs are not words: they are never counted against the limit and
always stay attached to the word before them. Re-segmenting an annotated
caption therefore leaves it unchanged.

This module does NOT:
    - Change any words (see rewriter.py)
    - Normalise spacing around punctuation (see formatting.py)
"""

import re

from src.simplifier.matchers import is_emoji_token
from src.simplifier.tables import PAUSE_CONJUNCTIONS

MIN_FRAGMENT_WORDS: int = 5

TERMINAL_PUNCTUATION: str = ".!?।॥"

_SENTENCE_BOUNDARY: re.Pattern[str] = re.compile(r"(?<=[.!?।॥])\s+")
_SPACE_BEFORE_PERIOD: re.Pattern[str] = re.compile(r"\s+\.")
_DOUBLE_PERIOD: re.Pattern[str] = re.compile(r"\.\s*\.")


def split_sentences(text: str) -> list[str]:
    """Split ``text`` after each terminal punctuation mark + whitespace."""
    return _SENTENCE_BOUNDARY.split(text)


def count_words(sentence: str) -> int:
    """Number of whitespace-delimited words in ``sentence``, glyphs excluded."""
    return sum(1 for token in sentence.split() if not is_emoji_token(token))


def is_pause_point(word: str) -> bool:
    """True if a sentence may be broken right after ``word``."""
    return "," in word or word.lower() in PAUSE_CONJUNCTIONS


def _word_units(tokens: list[str]) -> list[list[str]]:
    """Group each word with the glyph tokens that follow it."""
    units: list[list[str]] = []
    for token in tokens:
        if units and is_emoji_token(token):
            units[-1].append(token)
        else:
            units.append([token])
    return units


def _close_fragment(words: list[str]) -> str:
    fragment = " ".join(words).rstrip(",")
    if not fragment.endswith(tuple(TERMINAL_PUNCTUATION)):
        fragment += "."
    return fragment


def split_at_pause_points(sentence: str, max_words: int) -> list[str]:
    """
    Break one long sentence into fragments of at most ``max_words`` words.

    Args:
        sentence: A single sentence.
        max_words: Word limit per fragment (>= 1).

    Returns:
        Non-empty, stripped fragments in order. Every fragment except the
        last ends with terminal punctuation.
    """
    units = _word_units(sentence.split())
    parts: list[str] = []
    current: list[str] = []
    word_count = 0
    last_index = len(units) - 1

    for index, unit in enumerate(units):
        current.extend(unit)
        if not is_emoji_token(unit[0]):
            word_count += 1

        pause = is_pause_point(unit[0]) or any("," in token for token in unit[1:])
        if pause and word_count >= MIN_FRAGMENT_WORDS and index < last_index:
            parts.append(_close_fragment(current))
            current = []
            word_count = 0
        elif word_count >= max_words:
            parts.append(_close_fragment(current))
            current = []
            word_count = 0

    if current:
        parts.append(" ".join(current))

    return [p.strip() for p in parts if p.strip()]


def break_long_sentences(text: str, max_words: int) -> str:
    """
    Stage 5: bound sentence length.

    Sentences within ``max_words`` are kept verbatim; longer ones are
    re-split at pause points. Stray " ." and ". ." sequences collapse.
    """
    simplified: list[str] = []
    for sentence in split_sentences(text):
        if count_words(sentence) <= max_words:
            simplified.append(sentence)
        else:
            simplified.extend(split_at_pause_points(sentence, max_words))

    joined = " ".join(simplified)
    joined = _SPACE_BEFORE_PERIOD.sub(".", joined)
    return _DOUBLE_PERIOD.sub(".", joined)
