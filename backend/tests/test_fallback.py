"""Tests for fallback suggestions and the prompt template."""

from __future__ import annotations

import pytest

from trymate.pipeline.fallback import GENERIC_SUGGESTIONS, fallback_suggestions
from trymate.pipeline.prompts import CATEGORIES, build_prompt


class TestFallbackSuggestions:
    @pytest.mark.parametrize("category", CATEGORIES)
    def test_every_offered_category_has_three(self, category: str) -> None:
        result = fallback_suggestions(category)
        assert len(result) == 3
        assert all(s.strip() for s in result)

    def test_known_category_is_specific(self) -> None:
        assert fallback_suggestions("Dress")[0] == "Add a denim jacket and ankle boots."
        assert fallback_suggestions("T-Shirt") != list(GENERIC_SUGGESTIONS)

    @pytest.mark.parametrize("category", ["Hat", "", "dress", "🧣"])
    def test_unknown_category_gets_generic_set(self, category: str) -> None:
        assert fallback_suggestions(category) == list(GENERIC_SUGGESTIONS)

    def test_returns_fresh_list(self) -> None:
        """Callers may mutate the result without affecting later calls."""
        first = fallback_suggestions("Jeans")
        first.append("extra")
        assert len(fallback_suggestions("Jeans")) == 3


class TestBuildPrompt:
    def test_embeds_category_verbatim(self) -> None:
        prompt = build_prompt("Jacket")
        assert "for a Jacket." in prompt
        assert "exactly 3" in prompt

    def test_deterministic(self) -> None:
        assert build_prompt("Skirt") == build_prompt("Skirt")

    def test_braces_in_category_are_literal(self) -> None:
        assert "{odd}" in build_prompt("{odd}")
