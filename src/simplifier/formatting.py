"""
src/simplifier/formatting.py
=============================
Formatting Cleanup — Vaani Simplifier (stage 8)

Steps (in order):
    1. Collapse whitespace runs to one space
    2. Remove whitespace before punctuation (. , ! ? । ॥)
    3. Ensure one space after punctuation directly followed by a letter
       (Latin or Indic)
    4. Collapse repeated periods
    5. Remove any whitespace left before a period
    6. Trim
"""

import re

_WHITESPACE: re.Pattern[str] = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT: re.Pattern[str] = re.compile(r"\s+([.,!?।॥])")
_MISSING_SPACE_AFTER_PUNCT: re.Pattern[str] = re.compile(
    r"([.,!?।॥])([A-Za-z\u0904-\u0939\u0958-\u0961\u0972-\u097F\u0985-\u09B9"
    r"\u0A05-\u0A39\u0A85-\u0AB9\u0B05-\u0B39\u0B85-\u0BB9\u0C05-\u0C39"
    r"\u0C85-\u0CB9\u0D05-\u0D39])"
)
_REPEATED_PERIODS: re.Pattern[str] = re.compile(r"\.+")
_SPACE_BEFORE_PERIOD: re.Pattern[str] = re.compile(r"\s+\.")


def cleanup(text: str) -> str:
    """Normalise spacing and punctuation of a simplified caption."""
    result = _WHITESPACE.sub(" ", text)
    result = _SPACE_BEFORE_PUNCT.sub(r"\1", result)
    result = _MISSING_SPACE_AFTER_PUNCT.sub(r"\1 \2", result)
    result = _REPEATED_PERIODS.sub(".", result)
    result = _SPACE_BEFORE_PERIOD.sub(".", result)
    return result.strip()
