# src/simplifier/__init__.py
# ===========================
# Text Simplification Engine — Vaani Caption Pipeline
#
# Turns raw speech transcripts (English + Indian languages) into short,
# low-complexity, emoji-annotated captions for Deaf and hard-of-hearing
# readers, and scores caption readability.
#
# Pipeline (see engine.py for the locked stage order):
#   language → dictionary → abbreviations → phrases → segmentation
#   → redundancy → emoji → cleanup
#
# Public API:
#   simplify(text, options=None, **overrides)  → str
#   get_readability_score(text)                → float in [0, 100]
#   get_reading_level(score)                   → str
#   build_caption(text, options=None)          → Caption

from src.simplifier.engine import (  # noqa: F401
    Caption,
    TextSimplifier,
    build_caption,
    get_readability_score,
    get_reading_level,
    simplify,
)
from src.simplifier.language import (  # noqa: F401
    SUPPORTED_LANGUAGES,
    SupportedLanguage,
    detect_language,
)
from src.simplifier.options import (  # noqa: F401
    SimplificationOptions,
    resolve_options,
)
from src.simplifier.readability import ReadingLevel  # noqa: F401

__all__ = [
    "Caption",
    "ReadingLevel",
    "SUPPORTED_LANGUAGES",
    "SimplificationOptions",
    "SupportedLanguage",
    "TextSimplifier",
    "build_caption",
    "detect_language",
    "get_readability_score",
    "get_reading_level",
    "resolve_options",
    "simplify",
]
