"""Tests for prompt templating, fallback pools and believability clamping."""

import itertools
import math

import pytest

from quickexit.domain.excuse import Category, Tone
from quickexit.services.excuse_generator import (
    DEFAULT_CATEGORY_PROMPT,
    DEFAULT_TONE_PROMPT,
    ExcuseOutput,
    build_excuse_prompt,
    clamp_believability,
    describe_category,
    describe_tone,
)
from quickexit.services.fallbacks import (
    DEFAULT_FALLBACK_EXCUSES,
    FALLBACK_EXCUSES,
    get_fallback_pool,
)


class TestPromptTemplating:
    """Tests for build_excuse_prompt and its helpers."""

    def test_category_prose(self):
        assert describe_category("work") == (
            "a work-related emergency that requires immediate attention"
        )
        assert describe_category(Category.TRANSPORT) == (
            "a transportation problem or vehicle issue"
        )

    def test_tone_prose(self):
        assert describe_tone("urgent") == "urgent and serious tone that conveys real emergency"
        assert describe_tone(Tone.SUBTLE) == (
            "casual and understated tone that doesn't draw attention"
        )

    def test_unknown_keys_use_defaults(self):
        assert describe_category("space") == DEFAULT_CATEGORY_PROMPT
        assert describe_tone("sarcastic") == DEFAULT_TONE_PROMPT

    def test_prompt_includes_context_and_constraints(self):
        prompt = build_excuse_prompt("work", "urgent")

        assert "because of a work-related emergency that requires immediate attention." in prompt
        assert "Use a urgent and serious tone that conveys real emergency." in prompt
        assert "under 50 words" in prompt
        assert "conversational" in prompt
        assert "texting or speaking aloud" in prompt
        assert "not rehearsed" in prompt
        assert '"excuse"' in prompt
        assert '"believability"' in prompt

    def test_prompt_for_unknown_pairing(self):
        prompt = build_excuse_prompt("space", "sarcastic")

        assert "because of an emergency situation." in prompt
        assert "Use a polite." in prompt


class TestFallbackPools:
    """Tests for the hand-written excuse pools."""

    @pytest.mark.parametrize(("category", "tone"), list(itertools.product(Category, Tone)))
    def test_every_pairing_is_seeded(self, category, tone):
        pool = FALLBACK_EXCUSES[(category, tone)]
        assert pool
        assert all(excuse.strip() for excuse in pool)

    def test_plain_strings_find_seeded_pool(self):
        assert get_fallback_pool("work", "urgent") is FALLBACK_EXCUSES[
            (Category.WORK, Tone.URGENT)
        ]

    def test_unknown_pairing_uses_default(self):
        assert get_fallback_pool("work", "sarcastic") is DEFAULT_FALLBACK_EXCUSES
        assert get_fallback_pool("space", "urgent") is DEFAULT_FALLBACK_EXCUSES
        assert get_fallback_pool(None, None) is DEFAULT_FALLBACK_EXCUSES  # type: ignore[arg-type]

    def test_fallbacks_stay_short(self):
        for excuse in itertools.chain(DEFAULT_FALLBACK_EXCUSES, *FALLBACK_EXCUSES.values()):
            assert len(excuse.split()) < 50


class TestClampBelievability:
    """Tests for clamp_believability."""

    def test_in_range_passes_through(self):
        assert clamp_believability(5, default=7) == 5

    def test_clamps_high_and_low(self):
        assert clamp_believability(15, default=7) == 10
        assert clamp_believability(0, default=7) == 1

    def test_infinite_values_clamp(self):
        assert clamp_believability(math.inf, default=7) == 10
        assert clamp_believability(-math.inf, default=7) == 1

    def test_nan_uses_default(self):
        assert clamp_believability(math.nan, default=7) == 7

    def test_non_numeric_uses_default(self):
        assert clamp_believability("high", default=7) == 7
        assert clamp_believability([9], default=7) == 7
        assert clamp_believability(None, default=3) == 3


class TestExcuseOutputModel:
    """Tests for the ExcuseOutput reply schema."""

    def test_parses_reply(self):
        output = ExcuseOutput.model_validate_json('{"excuse": "Gotta run!", "believability": 12}')
        assert output.excuse == "Gotta run!"
        assert output.believability == 10

    def test_extra_fields_ignored(self):
        output = ExcuseOutput.model_validate({"excuse": "Gotta run!", "reason": "test"})
        assert output.excuse == "Gotta run!"
