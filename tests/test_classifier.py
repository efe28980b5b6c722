"""
Tests for the lexical classifier and the emotion taxonomy.
"""

import pytest

from emotibot_chat.classifier import KEYWORDS, classify, classify_local
from emotibot_chat.models import ClassificationSource, EmotionCategory
from emotibot_chat.taxonomy import EMOTIONS, metadata_for, require_all_categories


class TestClassify:
    """Keyword matching and its priority order."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I feel so happy today", EmotionCategory.JOY),
            ("I've been feeling really depressed", EmotionCategory.SADNESS),
            ("I'm so nervous about the exam", EmotionCategory.ANXIETY),
            ("This makes me furious", EmotionCategory.ANGER),
        ],
    )
    def test_single_category(self, text, expected):
        """Text with keywords from one category resolves to that category."""
        assert classify(text) == expected

    def test_every_keyword_maps_to_its_category(self):
        """Each keyword alone classifies as its own category."""
        for category, keywords in KEYWORDS:
            for keyword in keywords:
                found = classify(f"just {keyword}")
                # Keywords may contain an earlier category's keyword, never a later one
                assert found == category or (
                    [c for c, _ in KEYWORDS].index(found)
                    < [c for c, _ in KEYWORDS].index(category)
                )

    def test_joy_wins_over_anger(self):
        """Joy is checked before anger regardless of how many anger words appear."""
        text = "I love my job but my boss makes me furious, angry and irritated"
        assert classify(text) == EmotionCategory.JOY

    def test_priority_between_negative_categories(self):
        assert classify("sad but also scared") == EmotionCategory.SADNESS
        assert classify("I'm worried and angry") == EmotionCategory.ANXIETY

    @pytest.mark.parametrize("text", ["The meeting is at noon.", "What time is it?", ""])
    def test_no_match_is_neutral(self, text):
        assert classify(text) == EmotionCategory.NEUTRAL

    def test_case_insensitive(self):
        assert classify("I AM ANGRY") == EmotionCategory.ANGER
        assert classify("WoNdErFuL") == EmotionCategory.JOY

    def test_substring_matching(self):
        """Matching is plain containment, so word stems match longer words."""
        assert classify("so much stress lately, I feel overwhelmed") == (
            EmotionCategory.ANXIETY
        )
        assert classify("I was crying all night") == EmotionCategory.SADNESS


class TestClassifyLocal:
    def test_uses_fixed_intensity(self):
        result = classify_local("I am SO happy!!!")
        assert result.category == EmotionCategory.JOY
        assert result.intensity == 80
        assert result.source == ClassificationSource.LEXICAL

    def test_empty_text(self):
        result = classify_local("")
        assert result.category == EmotionCategory.NEUTRAL
        assert result.intensity == 50

    def test_deterministic(self):
        assert classify_local("I'm worried") == classify_local("I'm worried")


class TestTaxonomy:
    def test_registry_covers_every_category(self):
        assert set(EMOTIONS) == set(EmotionCategory)
        for category in EmotionCategory:
            meta = metadata_for(category)
            assert meta.name == category
            assert meta.label and meta.accent and meta.icon

    def test_labels(self):
        assert metadata_for(EmotionCategory.ANXIETY).label == "Anxious"
        assert metadata_for(EmotionCategory.ANGER).accent == "red"

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            EMOTIONS[EmotionCategory.JOY] = EMOTIONS[EmotionCategory.ANGER]

    def test_incomplete_table_is_rejected(self):
        with pytest.raises(RuntimeError, match="neutral"):
            require_all_categories(
                {c: 1 for c in EmotionCategory if c is not EmotionCategory.NEUTRAL},
                "PARTIAL",
            )
