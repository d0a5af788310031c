# src/simplifier/tables/__init__.py
# ==================================
# Static lookup tables — Vaani Simplifier
#
# Loaded once at import and never mutated. Every mapping is a
# types.MappingProxyType so accidental writes raise TypeError.
#
# Public API:
#   DICTIONARIES         primary language subtag → simplification table
#   ABBREVIATIONS        English abbreviation expansions
#   EMOJI_TABLE          unified word → emoji table
#   PAUSE_CONJUNCTIONS   sentence-split conjunctions, all languages

from types import MappingProxyType

from src.simplifier.tables.emoji import EMOJI_TABLE
from src.simplifier.tables.english import (
    ABBREVIATIONS,
    PHRASE_RULES,
    REDUNDANT_PHRASES,
    REDUNDANT_REPEATS,
    SIMPLIFICATIONS,
)
from src.simplifier.tables.indic import (
    BENGALI,
    GUJARATI,
    HINDI,
    MARATHI,
    PAUSE_CONJUNCTIONS,
    TAMIL,
    TELUGU,
)

DICTIONARIES = MappingProxyType({
    "en": SIMPLIFICATIONS,
    "hi": HINDI,
    "bn": BENGALI,
    "ta": TAMIL,
    "te": TELUGU,
    "mr": MARATHI,
    "gu": GUJARATI,
})

__all__ = [
    "ABBREVIATIONS",
    "DICTIONARIES",
    "EMOJI_TABLE",
    "PAUSE_CONJUNCTIONS",
    "PHRASE_RULES",
    "REDUNDANT_PHRASES",
    "REDUNDANT_REPEATS",
]
