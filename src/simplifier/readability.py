"""
src/simplifier/readability.py
==============================
Readability Scoring — Vaani Simplifier

Responsibility:
    - Estimate reading ease of a caption with the Flesch Reading Ease
      formula, adapted for Indic scripts
    - Map a score to a human-readable reading level

Formula:
    206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    clamped to [0, 100]; 0 when the text has no sentences or no words.

Syllables:
    - Words of three characters or fewer count as one syllable
    - Words with Indic vowel signs count one syllable per vowel sign
    - Otherwise count Latin vowel groups (a e i o u y), minus one for a
      trailing silent "e"
    - Never less than one

This module does NOT:
    - Modify text
    - Depend on the simplification options or language tag
"""

import re
from enum import Enum

FLESCH_BASE: float = 206.835
FLESCH_SENTENCE_WEIGHT: float = 1.015
FLESCH_SYLLABLE_WEIGHT: float = 84.6

MIN_SCORE: float = 0.0
MAX_SCORE: float = 100.0

_SENTENCE_SPLIT: re.Pattern[str] = re.compile(r"[.!?।॥]+")

# Dependent vowel signs: Devanagari, Bengali, Gujarati, Tamil, Telugu
_INDIC_VOWEL_SIGNS: re.Pattern[str] = re.compile(
    r"[\u093E-\u094C\u09BE-\u09CC\u0ABE-\u0ACC\u0BBE-\u0BCC\u0C3E-\u0C4C]"
)

_LATIN_VOWELS: str = "aeiouy"


class ReadingLevel(str, Enum):
    """Reading-level bands, easiest first."""

    VERY_EASY = "Very Easy (5th grade) 👶"
    EASY = "Easy (6th grade) 😊"
    FAIRLY_EASY = "Fairly Easy (7th grade) 👍"
    STANDARD = "Standard (8th-9th grade) 📚"
    FAIRLY_DIFFICULT = "Fairly Difficult (10th-12th grade) 📖"
    DIFFICULT = "Difficult (College level) 🎓"


# Lower bound (inclusive) of each band, checked top-down
_LEVEL_THRESHOLDS: tuple[tuple[float, ReadingLevel], ...] = (
    (90.0, ReadingLevel.VERY_EASY),
    (80.0, ReadingLevel.EASY),
    (70.0, ReadingLevel.FAIRLY_EASY),
    (60.0, ReadingLevel.STANDARD),
    (50.0, ReadingLevel.FAIRLY_DIFFICULT),
)


def count_syllables(word: str) -> int:
    """Approximate syllable count for one word in any supported script."""
    word = word.lower().strip()
    if len(word) <= 3:
        return 1

    indic_matches = _INDIC_VOWEL_SIGNS.findall(word)
    if indic_matches:
        return max(1, len(indic_matches))

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in _LATIN_VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1

    return max(1, count)


def get_readability_score(text: str) -> float:
    """
    Flesch Reading Ease of ``text``, clamped to [0, 100].

    Returns:
        Score (higher = easier); 0.0 for empty or punctuation-only text.
    """
    if not text:
        return MIN_SCORE

    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    words = text.split()
    if not sentences or not words:
        return MIN_SCORE

    syllables = sum(count_syllables(w) for w in words)
    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables_per_word = syllables / len(words)

    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    )
    return max(MIN_SCORE, min(MAX_SCORE, score))


def get_reading_level(score: float) -> str:
    """Human-readable label for a readability score."""
    for threshold, level in _LEVEL_THRESHOLDS:
        if score >= threshold:
            return level.value
    return ReadingLevel.DIFFICULT.value
