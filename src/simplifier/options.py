"""
src/simplifier/options.py
==========================
Simplification Options — Vaani Simplifier

Responsibility:
    - Define the immutable per-call configuration with documented defaults
    - Merge caller-supplied partial options over those defaults explicitly
    - Accept both snake_case and the camelCase names used by the mobile
      client (maxWordsPerSentence, addEmojis, ...)
    - Clamp out-of-range values instead of raising

Defaults:
    max_words_per_sentence = 10
    remove_complex_words   = True
    add_emojis             = True
    expand_abbreviations   = True
    language               = "en-US"

``language=None`` (or "auto") is meaningful: it asks the engine to detect
the script of the input instead of using a fixed language.

This module does NOT:
    - Read environment variables (see src/api/captions.py)
    - Resolve or detect languages (see language.py)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger("vaani.simplifier.options")

DEFAULT_MAX_WORDS_PER_SENTENCE: int = 10
DEFAULT_LANGUAGE: str = "en-US"
MIN_WORDS_PER_SENTENCE: int = 1

# camelCase names sent by the caption client → dataclass field names
_FIELD_ALIASES: dict[str, str] = {
    "maxWordsPerSentence": "max_words_per_sentence",
    "removeComplexWords": "remove_complex_words",
    "addEmojis": "add_emojis",
    "expandAbbreviations": "expand_abbreviations",
}

_AUTO_LANGUAGE_VALUES: set[str] = {"", "auto", "detect"}


@dataclass(frozen=True)
class SimplificationOptions:
    """Per-call simplification settings. Immutable once built."""

    max_words_per_sentence: int = DEFAULT_MAX_WORDS_PER_SENTENCE
    remove_complex_words: bool = True
    add_emojis: bool = True
    expand_abbreviations: bool = True
    language: str | None = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "max_words_per_sentence",
            _clamp_max_words(self.max_words_per_sentence),
        )
        for name in ("remove_complex_words", "add_emojis", "expand_abbreviations"):
            object.__setattr__(self, name, bool(getattr(self, name)))
        object.__setattr__(self, "language", _clean_language(self.language))

    @property
    def auto_detect(self) -> bool:
        """True when the engine should detect the language from the text."""
        return self.language is None


_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(SimplificationOptions))


def _clamp_max_words(value: Any) -> int:
    """Coerce to int and clamp to MIN_WORDS_PER_SENTENCE, warning on change."""
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(
            "Invalid max_words_per_sentence %r — using default %d.",
            value, DEFAULT_MAX_WORDS_PER_SENTENCE,
        )
        return DEFAULT_MAX_WORDS_PER_SENTENCE

    if number < MIN_WORDS_PER_SENTENCE:
        logger.warning(
            "max_words_per_sentence=%d is below %d — clamping.",
            number, MIN_WORDS_PER_SENTENCE,
        )
        return MIN_WORDS_PER_SENTENCE
    return number


def _clean_language(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in _AUTO_LANGUAGE_VALUES:
        return None
    return text


def resolve_options(
    options: SimplificationOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> SimplificationOptions:
    """
    Merge partial options over the defaults.

    Args:
        options: None, a complete SimplificationOptions, or a mapping of
            field names (snake_case or camelCase) to values.
        **overrides: Field overrides applied last.

    Returns:
        A fully-populated SimplificationOptions.

    A ``None`` value keeps the default for every field except ``language``,
    where an explicit ``None`` requests auto-detection. Unknown keys are
    ignored with a warning.
    """
    if isinstance(options, SimplificationOptions):
        base = options
        partial: dict[str, Any] = {}
    else:
        base = SimplificationOptions()
        partial = dict(options or {})
    partial.update(overrides)

    changes: dict[str, Any] = {}
    for key, value in partial.items():
        name = _FIELD_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.warning("Ignoring unknown simplification option '%s'.", key)
            continue
        if value is None and name != "language":
            continue
        changes[name] = value

    if not changes:
        return base
    return replace(base, **changes)
