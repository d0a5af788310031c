"""
tests/test_options.py
======================
Simplification Options Tests — defaults, merging, clamping

Test categories:
    1. Defaults
    2. Partial merging (snake_case + camelCase, None handling, unknown keys)
    3. max_words_per_sentence clamping
    4. Language auto-detection markers

All tests are offline and deterministic.
"""

import os
import sys
import unittest

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.simplifier.options import (
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_WORDS_PER_SENTENCE,
    SimplificationOptions,
    resolve_options,
)


# ===================================================================
# 1. Defaults
# ===================================================================


class TestDefaults(unittest.TestCase):
    """No options → documented defaults."""

    def test_resolve_none_gives_defaults(self):
        opts = resolve_options()
        self.assertEqual(opts.max_words_per_sentence, 10)
        self.assertTrue(opts.remove_complex_words)
        self.assertTrue(opts.add_emojis)
        self.assertTrue(opts.expand_abbreviations)
        self.assertEqual(opts.language, "en-US")

    def test_constants_match_dataclass(self):
        opts = SimplificationOptions()
        self.assertEqual(opts.max_words_per_sentence, DEFAULT_MAX_WORDS_PER_SENTENCE)
        self.assertEqual(opts.language, DEFAULT_LANGUAGE)
        self.assertFalse(opts.auto_detect)

    def test_options_are_immutable(self):
        opts = SimplificationOptions()
        with self.assertRaises(Exception):
            opts.add_emojis = False  # type: ignore[misc]


# ===================================================================
# 2. Partial merging
# ===================================================================


class TestMerging(unittest.TestCase):
    """Partial options override only the fields they name."""

    def test_mapping_overrides_single_field(self):
        opts = resolve_options({"add_emojis": False})
        self.assertFalse(opts.add_emojis)
        self.assertEqual(opts.max_words_per_sentence, 10)
        self.assertTrue(opts.expand_abbreviations)

    def test_camel_case_keys_accepted(self):
        opts = resolve_options({"maxWordsPerSentence": 7, "addEmojis": False})
        self.assertEqual(opts.max_words_per_sentence, 7)
        self.assertFalse(opts.add_emojis)

    def test_keyword_overrides_win_over_mapping(self):
        opts = resolve_options({"max_words_per_sentence": 7}, max_words_per_sentence=3)
        self.assertEqual(opts.max_words_per_sentence, 3)

    def test_none_value_keeps_default(self):
        opts = resolve_options({"add_emojis": None})
        self.assertTrue(opts.add_emojis)

    def test_unknown_key_ignored_with_warning(self):
        with self.assertLogs("vaani.simplifier.options", level="WARNING"):
            opts = resolve_options({"shout": True})
        self.assertEqual(opts, SimplificationOptions())

    def test_options_instance_used_as_base(self):
        base = SimplificationOptions(max_words_per_sentence=4, add_emojis=False)
        self.assertIs(resolve_options(base), base)

        merged = resolve_options(base, language="hi-IN")
        self.assertEqual(merged.max_words_per_sentence, 4)
        self.assertFalse(merged.add_emojis)
        self.assertEqual(merged.language, "hi-IN")

    def test_truthy_values_coerced_to_bool(self):
        opts = resolve_options({"add_emojis": 0})
        self.assertIs(opts.add_emojis, False)


# ===================================================================
# 3. Clamping
# ===================================================================


class TestClamping(unittest.TestCase):
    """Out-of-range sentence limits are clamped, never raised."""

    def test_zero_clamped_to_one(self):
        with self.assertLogs("vaani.simplifier.options", level="WARNING"):
            opts = resolve_options(max_words_per_sentence=0)
        self.assertEqual(opts.max_words_per_sentence, 1)

    def test_negative_clamped_to_one(self):
        with self.assertLogs("vaani.simplifier.options", level="WARNING"):
            opts = resolve_options(max_words_per_sentence=-12)
        self.assertEqual(opts.max_words_per_sentence, 1)

    def test_non_numeric_falls_back_to_default(self):
        with self.assertLogs("vaani.simplifier.options", level="WARNING"):
            opts = resolve_options(max_words_per_sentence="lots")
        self.assertEqual(opts.max_words_per_sentence, DEFAULT_MAX_WORDS_PER_SENTENCE)

    def test_infinite_falls_back_to_default(self):
        for value in (float("inf"), float("-inf"), float("nan")):
            with self.subTest(value=value):
                with self.assertLogs("vaani.simplifier.options", level="WARNING"):
                    opts = resolve_options({"maxWordsPerSentence": value})
                self.assertEqual(opts.max_words_per_sentence, DEFAULT_MAX_WORDS_PER_SENTENCE)

    def test_numeric_string_accepted(self):
        opts = resolve_options(max_words_per_sentence="6")
        self.assertEqual(opts.max_words_per_sentence, 6)


# ===================================================================
# 4. Language markers
# ===================================================================


class TestLanguageOption(unittest.TestCase):
    """None / "auto" request detection; anything else is kept."""

    def test_explicit_none_requests_detection(self):
        opts = resolve_options(language=None)
        self.assertIsNone(opts.language)
        self.assertTrue(opts.auto_detect)

    def test_auto_and_blank_request_detection(self):
        for value in ("auto", "AUTO", "detect", "", "   "):
            with self.subTest(value=value):
                self.assertTrue(resolve_options(language=value).auto_detect)

    def test_language_kept_verbatim(self):
        self.assertEqual(resolve_options(language="Hindi").language, "Hindi")


if __name__ == "__main__":
    unittest.main()
