"""
src/simplifier/language.py
===========================
Language Resolution — Vaani Simplifier (stage 1)

Responsibility:
    - Detect the script of a transcript by Unicode range presence
    - Normalise caller-supplied languages (BCP-47 tags or picker names such
      as "Hindi" / "हिंदी") to a canonical "ll-RR" tag
    - Map a tag to the simplification dictionary it uses, falling back to
      English for unmapped languages

Detection is a presence test, not a vote: one Devanagari character is enough
to select Hindi. Priority: Devanagari, Bengali, Tamil, Telugu, Gujarati.
Marathi shares the Devanagari block and is only reachable by explicit tag.

This module does NOT:
    - Call any external language-identification service
    - Perform any text transformation
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger("vaani.simplifier.language")

ENGLISH: str = "en-US"


# ---------------------------------------------------------------------------
# Supported languages: the caption client's language picker
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SupportedLanguage:
    """A selectable caption language."""

    tag: str          # BCP-47 (e.g. "hi-IN")
    name: str         # English name (e.g. "Hindi")
    native_name: str  # Endonym (e.g. "हिंदी")


SUPPORTED_LANGUAGES: tuple[SupportedLanguage, ...] = (
    SupportedLanguage("en-US", "English", "English"),
    SupportedLanguage("en-IN", "English (India)", "English"),
    SupportedLanguage("hi-IN", "Hindi", "हिंदी"),
    SupportedLanguage("bn-IN", "Bengali", "বাংলা"),
    SupportedLanguage("te-IN", "Telugu", "తెలుగు"),
    SupportedLanguage("mr-IN", "Marathi", "मराठी"),
    SupportedLanguage("ta-IN", "Tamil", "தமிழ்"),
    SupportedLanguage("gu-IN", "Gujarati", "ગુજરાતી"),
    SupportedLanguage("ur-IN", "Urdu", "اردو"),
    SupportedLanguage("kn-IN", "Kannada", "ಕನ್ನಡ"),
    SupportedLanguage("ml-IN", "Malayalam", "മലയാളം"),
    SupportedLanguage("or-IN", "Odia", "ଓଡ଼ିଆ"),
    SupportedLanguage("pa-IN", "Punjabi", "ਪੰਜਾਬੀ"),
    SupportedLanguage("as-IN", "Assamese", "অসমীয়া"),
    SupportedLanguage("ne-NP", "Nepali", "नेपाली"),
    SupportedLanguage("sa-IN", "Sanskrit", "संस्कृत"),
)

# Lower-cased English and native names → tag. "English (India)" and
# "English" share the native name; the first entry wins.
_NAME_TO_TAG: dict[str, str] = {}
for _lang in SUPPORTED_LANGUAGES:
    _NAME_TO_TAG.setdefault(_lang.name.lower(), _lang.tag)
    _NAME_TO_TAG.setdefault(_lang.native_name.lower(), _lang.tag)


# ---------------------------------------------------------------------------
# Script detection, checked in priority order
# ---------------------------------------------------------------------------

_SCRIPT_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("hi-IN", re.compile(r"[\u0900-\u097F]")),  # Devanagari (Hindi / Marathi)
    ("bn-IN", re.compile(r"[\u0980-\u09FF]")),  # Bengali
    ("ta-IN", re.compile(r"[\u0B80-\u0BFF]")),  # Tamil
    ("te-IN", re.compile(r"[\u0C00-\u0C7F]")),  # Telugu
    ("gu-IN", re.compile(r"[\u0A80-\u0AFF]")),  # Gujarati
)

# Primary subtags that own a simplification dictionary
DICTIONARY_LANGUAGES: frozenset[str] = frozenset({"en", "hi", "bn", "ta", "te", "mr", "gu"})

_TAG_PATTERN: re.Pattern[str] = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z0-9]{2,8}))*$")


def detect_language(text: str) -> str:
    """
    Detect the language tag of ``text`` from the scripts it contains.

    Returns:
        The tag of the first script (in priority order) with at least one
        character in ``text``, or "en-US" if none match.
    """
    for tag, pattern in _SCRIPT_PATTERNS:
        if pattern.search(text):
            return tag
    return ENGLISH


def normalize_language_tag(language: str | None) -> str | None:
    """
    Canonicalise a caller-supplied language.

    - Picker names ("Hindi", "english (india)", "मराठी") map to their tag.
    - Tags are reformatted to "ll-RR" ("hi_in" → "hi-IN").
    - Anything else is returned stripped but otherwise unchanged.
    """
    if language is None:
        return None
    value = language.strip()
    if not value:
        return None

    by_name = _NAME_TO_TAG.get(value.lower())
    if by_name:
        return by_name

    if _TAG_PATTERN.match(value):
        parts = re.split(r"[-_]", value)
        primary = parts[0].lower()
        rest = [p.upper() if len(p) == 2 else p for p in parts[1:]]
        return "-".join([primary, *rest])

    return value


def resolve_language(text: str, language: str | None = None) -> str:
    """
    Resolve the working language for one simplification call.

    A provided language is used as given (after normalisation); otherwise
    the script of ``text`` decides.
    """
    normalized = normalize_language_tag(language)
    if normalized:
        return normalized
    detected = detect_language(text)
    logger.debug("Detected language %s from script.", detected)
    return detected


def dictionary_key(language: str | None) -> str:
    """
    Return the dictionary subtag for ``language``.

    Unrecognised or absent languages fall back to "en".
    """
    if not language:
        return "en"
    primary = re.split(r"[-_]", language.strip(), maxsplit=1)[0].lower()
    if primary in DICTIONARY_LANGUAGES:
        return primary
    return "en"


def is_english(language: str | None) -> bool:
    """True when ``language`` is handled with English rules (incl. fallback)."""
    return dictionary_key(language) == "en"
