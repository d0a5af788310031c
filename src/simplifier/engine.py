"""
src/simplifier/engine.py
=========================
Simplification Engine — Vaani Caption Pipeline

Responsibility (LOCKED stage order; later stages rely on earlier ones):
    1. Language resolution          → language.resolve_language
    2. Dictionary substitution      → rewriter.substitute_dictionary
    3. Abbreviation expansion       → rewriter.expand_abbreviations (English)
    4. Phrase rewriting             → rewriter.rewrite_phrases
    5. Sentence length bounding     → segmenter.break_long_sentences
    6. Redundancy removal           → rewriter.remove_redundancy
    7. Emoji annotation             → emoji.annotate
    8. Formatting cleanup           → formatting.cleanup

Failure semantics:
    - Empty / whitespace-only input returns "" immediately.
    - Any exception in any stage aborts the whole pipeline and the ORIGINAL
      input is returned unchanged. The fault is logged, never raised.
      Partial pipeline output is never returned.

The engine is stateless: tables are read-only and compiled once, so one
instance can be shared by any number of concurrent callers.

This module does NOT:
    - Capture audio or call a speech service
    - Render captions
    - Read environment variables
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.simplifier import emoji, formatting, readability, rewriter, segmenter
from src.simplifier.language import is_english, resolve_language
from src.simplifier.matchers import PhraseMatcher
from src.simplifier.options import SimplificationOptions, resolve_options

logger = logging.getLogger("vaani.simplifier.engine")

OptionsLike = SimplificationOptions | Mapping[str, Any] | None


@dataclass(frozen=True)
class Caption:
    """Everything a caption renderer needs for one transcript update."""

    original: str
    simplified: str
    language: str
    readability_score: float
    reading_level: str


class TextSimplifier:
    """
    Deterministic transcript → caption simplifier.

    Args:
        dictionaries: Optional replacement for the built-in simplification
            dictionaries, keyed by primary language subtag ("en", "hi", ...).
            Unmapped languages use the "en" entry.
        emoji_table: Optional replacement for the unified emoji table.
    """

    def __init__(
        self,
        dictionaries: Mapping[str, Mapping[str, str]] | None = None,
        emoji_table: Mapping[str, str] | None = None,
    ):
        self._matchers: dict[str, PhraseMatcher] | None = (
            rewriter.build_matchers(dictionaries) if dictionaries is not None else None
        )
        self._emoji_matcher: PhraseMatcher | None = (
            emoji.build_emoji_matcher(emoji_table) if emoji_table is not None else None
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def simplify(self, text: str, options: OptionsLike = None, **overrides: Any) -> str:
        """
        Simplify a transcript into an easy-to-read caption.

        Args:
            text: Transcript text in any supported language (or mixed).
            options: Partial options (mapping or SimplificationOptions).
            **overrides: Individual option overrides.

        Returns:
            The simplified caption, "" for blank input, or ``text``
            unchanged if any stage failed.
        """
        if not text or not text.strip():
            return ""

        try:
            opts = resolve_options(options, **overrides)
            language = resolve_language(text, opts.language)
            return self._run_pipeline(text, language, opts)
        except Exception:
            logger.exception(
                "Text simplification failed — returning original text (%d chars).",
                len(text),
            )
            return text

    def get_readability_score(self, text: str) -> float:
        """Flesch reading-ease score of ``text`` in [0, 100]."""
        return readability.get_readability_score(text)

    def get_reading_level(self, score: float) -> str:
        """Human-readable band for a readability score."""
        return readability.get_reading_level(score)

    def build_caption(self, text: str, options: OptionsLike = None, **overrides: Any) -> Caption:
        """
        Simplify ``text`` and score the result for display.

        Returns:
            Caption with the original and simplified text, the language the
            pipeline ran with, and the simplified text's readability.
        """
        opts = resolve_options(options, **overrides)
        simplified = self.simplify(text, opts)
        language = resolve_language(text or "", opts.language)
        score = self.get_readability_score(simplified)

        return Caption(
            original=text,
            simplified=simplified,
            language=language,
            readability_score=round(score, 2),
            reading_level=self.get_reading_level(score),
        )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _run_pipeline(
        self,
        text: str,
        language: str,
        opts: SimplificationOptions,
    ) -> str:
        result = text

        if opts.remove_complex_words:
            result = rewriter.substitute_dictionary(result, language, self._matchers)

        if opts.expand_abbreviations and is_english(language):
            result = rewriter.expand_abbreviations(result)

        result = rewriter.rewrite_phrases(result)
        result = segmenter.break_long_sentences(result, opts.max_words_per_sentence)
        result = rewriter.remove_redundancy(result)

        if opts.add_emojis:
            result = emoji.annotate(result, self._emoji_matcher)

        result = formatting.cleanup(result)

        logger.debug(
            "Simplified %d → %d chars (language=%s).",
            len(text), len(result), language,
        )
        return result


# ---------------------------------------------------------------------------
# Module-level default engine
# ---------------------------------------------------------------------------

_default_engine = TextSimplifier()


def simplify(text: str, options: OptionsLike = None, **overrides: Any) -> str:
    """Simplify ``text`` with the built-in tables. See TextSimplifier.simplify."""
    return _default_engine.simplify(text, options, **overrides)


def get_readability_score(text: str) -> float:
    """Flesch reading-ease score of ``text`` in [0, 100]."""
    return _default_engine.get_readability_score(text)


def get_reading_level(score: float) -> str:
    """Human-readable band for a readability score."""
    return _default_engine.get_reading_level(score)


def build_caption(text: str, options: OptionsLike = None, **overrides: Any) -> Caption:
    """Simplify and score ``text`` with the built-in tables."""
    return _default_engine.build_caption(text, options, **overrides)
