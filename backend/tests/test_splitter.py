"""Tests for split_suggestions — line rule, sentence rule, whole-text rule."""

from __future__ import annotations

import pytest

from trymate.pipeline.errors import ExtractionError
from trymate.pipeline.splitter import split_suggestions


class TestLineRule:
    def test_truncates_to_three_lines(self) -> None:
        assert split_suggestions("A.\nB.\nC.\nD.") == ["A.", "B.", "C."]

    def test_trims_and_drops_blank_lines(self) -> None:
        text = "  1. Pair with jeans  \n\n   \n2. Add boots\r\n3. Belt it\n"
        assert split_suggestions(text) == ["1. Pair with jeans", "2. Add boots", "3. Belt it"]

    def test_windows_line_endings(self) -> None:
        assert split_suggestions("one\r\ntwo\r\nthree") == ["one", "two", "three"]


class TestSentenceRule:
    def test_three_sentences_without_line_breaks(self) -> None:
        result = split_suggestions("Wear it with jeans. Add boots. Finish with a belt.")
        assert result == ["Wear it with jeans.", "Add boots.", "Finish with a belt."]

    def test_question_and_exclamation_marks(self) -> None:
        result = split_suggestions("Why not boots? Go bold! Keep it simple.")
        assert result == ["Why not boots?", "Go bold!", "Keep it simple."]

    def test_more_than_three_sentences_truncated(self) -> None:
        result = split_suggestions("One. Two. Three. Four. Five.")
        assert result == ["One.", "Two.", "Three."]

    def test_two_lines_fall_through_to_sentences(self) -> None:
        """Fewer than three lines means the sentence rule decides."""
        result = split_suggestions("Add a belt. Try loafers.\nRoll the sleeves.")
        assert result == ["Add a belt.", "Try loafers.", "Roll the sleeves."]

    def test_punctuation_without_following_space_does_not_split(self) -> None:
        assert split_suggestions("Version 2.0 looks great") == ["Version 2.0 looks great"]


class TestWholeTextRule:
    def test_single_phrase(self) -> None:
        assert split_suggestions("  pair with sneakers  ") == ["pair with sneakers"]


class TestBlankInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n\n", "\t \r\n"])
    def test_blank_raises_extraction_error(self, text: str) -> None:
        with pytest.raises(ExtractionError):
            split_suggestions(text)


class TestBounds:
    @pytest.mark.parametrize(
        "text",
        [
            "x",
            "a\nb",
            "a\nb\nc\nd\ne\nf",
            "One. Two.",
            "Lots. Of. Short. Sentences. Here.",
            "no punctuation at all just words",
            "...",
            "!? !? !?",
        ],
    )
    def test_between_one_and_three_non_empty_items(self, text: str) -> None:
        result = split_suggestions(text)
        assert 1 <= len(result) <= 3
        assert all(item.strip() for item in result)
