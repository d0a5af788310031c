"""
tests/test_engine.py
=====================
Simplification Engine Tests — full pipeline behaviour

Test categories:
    1. Empty input
    2. Pipeline results (English worked example, Hindi, option toggles)
    3. Sentence length bound
    4. Emoji idempotence
    5. Longest match through an injected dictionary
    6. Language fallback and resolution
    7. Fail-safe: a faulty dictionary returns the original text
    8. Caption building

All tests are offline and deterministic.
"""

import os
import re
import sys
import unittest

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.simplifier import (
    Caption,
    ReadingLevel,
    SimplificationOptions,
    TextSimplifier,
    build_caption,
    simplify,
)
from src.simplifier.segmenter import count_words


# ===================================================================
# Test fixtures
# ===================================================================

WORKED_EXAMPLE = (
    "I would like to utilize this opportunity to demonstrate the functionality, "
    "and I believe that it is important to note that this is working correctly."
)

HINDI_SENTENCE = "कृपया इसका उपयोग करना सीखें।"


class _ExplodingTable(dict):
    """Lookup table whose reads fail, to simulate a corrupted dictionary."""

    def __getitem__(self, key):
        raise RuntimeError("dictionary corrupted")


def _sentences(text: str) -> list[str]:
    return [s for s in re.split(r"[.!?।॥]", text) if s.strip()]


# ===================================================================
# 1. Empty input
# ===================================================================


class TestEmptyInput(unittest.TestCase):

    def test_empty_string(self):
        self.assertEqual(simplify(""), "")

    def test_whitespace_only(self):
        self.assertEqual(simplify("   \n\t "), "")

    def test_none(self):
        self.assertEqual(simplify(None), "")  # type: ignore[arg-type]


# ===================================================================
# 2. Pipeline results
# ===================================================================


class TestPipeline(unittest.TestCase):

    def test_worked_example(self):
        result = simplify(WORKED_EXAMPLE, max_words_per_sentence=10)

        self.assertIn("use", result)
        self.assertNotIn("utilize", result)
        self.assertIn("show", result)
        self.assertNotIn("demonstrate", result)
        self.assertNotIn("I believe that", result)
        self.assertGreater(len(_sentences(result)), 1)
        for sentence in _sentences(result):
            self.assertLessEqual(len(sentence.split()), 10)

    def test_worked_example_exact(self):
        self.assertEqual(
            simplify(WORKED_EXAMPLE, max_words_per_sentence=10),
            "I would like to use this chance to show the. functionality, "
            "and note that this is working. correctly.",
        )

    def test_hindi(self):
        result = simplify(HINDI_SENTENCE, language="hi-IN", add_emojis=False)
        self.assertEqual(result, "कृपया इसका इस्तेमाल करना सीखें।")

    def test_language_name_accepted(self):
        self.assertEqual(
            simplify(HINDI_SENTENCE, language="Hindi", add_emojis=False),
            simplify(HINDI_SENTENCE, language="hi-IN", add_emojis=False),
        )

    def test_auto_detection(self):
        self.assertEqual(
            simplify(HINDI_SENTENCE, language=None, add_emojis=False),
            "कृपया इसका इस्तेमाल करना सीखें।",
        )

    def test_default_language_is_english(self):
        # Without detection, Devanagari input runs with the English table.
        self.assertEqual(simplify(HINDI_SENTENCE, add_emojis=False), HINDI_SENTENCE)

    def test_remove_complex_words_off(self):
        result = simplify("Please utilize this tool.", remove_complex_words=False, add_emojis=False)
        self.assertEqual(result, "Please utilize this tool.")

    def test_abbreviations_toggle(self):
        text = "Bring pens, paper, etc."
        self.assertEqual(simplify(text, add_emojis=False), "Bring pens, paper, and so on.")
        self.assertEqual(simplify(text, add_emojis=False, expand_abbreviations=False), text)

    def test_abbreviations_not_expanded_for_indic(self):
        result = simplify("etc", language="hi-IN", add_emojis=False)
        self.assertEqual(result, "etc")

    def test_phrases_and_redundancy(self):
        result = simplify("Basically we left in order to eat.", add_emojis=False)
        self.assertEqual(result, "we left to eat.")

    def test_mapping_options_with_camel_case(self):
        result = simplify("Please utilize this tool.", {"addEmojis": False})
        self.assertEqual(result, "Please use this tool.")

    def test_emojis_on_by_default(self):
        self.assertEqual(simplify("I am happy."), "I am happy 😊.")


# ===================================================================
# 3. Sentence length bound
# ===================================================================


class TestSentenceLengthBound(unittest.TestCase):
    """No caption sentence has more words than the configured limit."""

    SAMPLES = (
        WORKED_EXAMPLE,
        "The train was late again this morning so everyone on the platform "
        "waited in the cold for nearly an hour before it finally arrived.",
        "We went to the market, and then we bought fresh fruit, vegetables, "
        "bread and milk because the shop was closing early today.",
        "Short one. Another short one!",
    )

    def test_max_five(self):
        for text in self.SAMPLES:
            with self.subTest(text=text[:30]):
                result = simplify(text, max_words_per_sentence=5, add_emojis=False)
                for sentence in _sentences(result):
                    self.assertLessEqual(len(sentence.split()), 5, result)

    def test_max_five_with_emoji(self):
        for text in self.SAMPLES:
            with self.subTest(text=text[:30]):
                result = simplify(text, max_words_per_sentence=5)
                for sentence in _sentences(result):
                    self.assertLessEqual(count_words(sentence), 5, result)

    def test_zero_limit_is_clamped_to_one(self):
        result = simplify("We went home early", max_words_per_sentence=0, add_emojis=False)
        self.assertEqual(result, "We. went. home. early.")


# ===================================================================
# 4. Emoji idempotence
# ===================================================================


class TestEmojiIdempotence(unittest.TestCase):

    def test_second_pass_adds_no_glyphs(self):
        once = simplify("I am happy to be home today.")
        self.assertEqual(once, "I am happy 😊 to be home 🏠 today 📅.")
        self.assertEqual(simplify(once), once)

    def test_hindi_second_pass(self):
        once = simplify("आज मैं घर पर खुश हूँ।", language="hi-IN")
        self.assertEqual(simplify(once, language="hi-IN"), once)

    def test_full_length_sentence_second_pass(self):
        once = simplify("I am happy to be home today with good friends.")
        self.assertEqual(once, "I am happy 😊 to be home 🏠 today 📅 with good 👍 friends.")
        self.assertEqual(simplify(once), once)

    def test_short_limit_second_pass(self):
        once = simplify("We are happy at home.", max_words_per_sentence=5)
        self.assertEqual(once, "We are happy 😊 at home 🏠.")
        self.assertEqual(simplify(once, max_words_per_sentence=5), once)

    def test_split_caption_second_pass(self):
        text = "We are happy at home today and we eat good food together."
        once = simplify(text, max_words_per_sentence=5)
        self.assertEqual(
            once,
            "We are happy 😊 at home 🏠. today 📅 and we eat 🍽️ good 👍. food 🍽️ together.",
        )
        self.assertEqual(simplify(once, max_words_per_sentence=5), once)


# ===================================================================
# 5. Longest match
# ===================================================================


class TestLongestMatch(unittest.TestCase):

    def test_phrase_beats_component_words(self):
        engine = TextSimplifier(dictionaries={"en": {"a lot of": "many", "of": "from", "a": "one"}})
        result = engine.simplify("I ate a lot of apples.", add_emojis=False)
        self.assertEqual(result, "I ate many apples.")


# ===================================================================
# 6. Language fallback
# ===================================================================


class TestLanguageFallback(unittest.TestCase):

    def test_unknown_tag_uses_english_dictionary(self):
        result = simplify("Please utilize this tool.", language="xx-YY", add_emojis=False)
        self.assertEqual(result, "Please use this tool.")

    def test_unmapped_indian_language_uses_english_dictionary(self):
        result = simplify("Please utilize this tool.", language="kn-IN", add_emojis=False)
        self.assertEqual(result, "Please use this tool.")


# ===================================================================
# 7. Fail-safe
# ===================================================================


class TestFailSafe(unittest.TestCase):

    def test_faulty_dictionary_returns_original(self):
        engine = TextSimplifier(dictionaries={"en": _ExplodingTable({"utilize": "use"})})
        text = "Please utilize this tool."

        with self.assertLogs("vaani.simplifier.engine", level="ERROR"):
            result = engine.simplify(text)

        self.assertEqual(result, text)

    def test_faulty_emoji_table_returns_original(self):
        engine = TextSimplifier(emoji_table=_ExplodingTable({"happy": "😊"}))
        text = "I am happy."

        with self.assertLogs("vaani.simplifier.engine", level="ERROR"):
            result = engine.simplify(text)

        self.assertEqual(result, text)

    def test_untouched_text_does_not_trip_faulty_table(self):
        engine = TextSimplifier(dictionaries={"en": _ExplodingTable({"utilize": "use"})})
        self.assertEqual(engine.simplify("Nothing to change.", add_emojis=False), "Nothing to change.")


# ===================================================================
# 8. Captions
# ===================================================================


class TestBuildCaption(unittest.TestCase):

    def test_caption_fields(self):
        caption = build_caption("Please utilize this tool.", {"addEmojis": False})

        self.assertIsInstance(caption, Caption)
        self.assertEqual(caption.original, "Please utilize this tool.")
        self.assertEqual(caption.simplified, "Please use this tool.")
        self.assertEqual(caption.language, "en-US")
        self.assertGreaterEqual(caption.readability_score, 0.0)
        self.assertLessEqual(caption.readability_score, 100.0)
        self.assertIn(caption.reading_level, [level.value for level in ReadingLevel])

    def test_caption_reports_detected_language(self):
        caption = build_caption(HINDI_SENTENCE, SimplificationOptions(language=None))
        self.assertEqual(caption.language, "hi-IN")

    def test_caption_for_empty_text(self):
        caption = build_caption("")
        self.assertEqual(caption.simplified, "")
        self.assertEqual(caption.readability_score, 0.0)
        self.assertEqual(caption.reading_level, ReadingLevel.DIFFICULT.value)

    def test_infinite_word_limit_uses_default(self):
        caption = build_caption(
            "Please utilize this tool.",
            {"maxWordsPerSentence": float("inf"), "addEmojis": False},
        )
        self.assertEqual(caption.simplified, "Please use this tool.")


if __name__ == "__main__":
    unittest.main()
