"""Tests for prompt enhancement."""

import random

import pytest

from image_relay.core import PromptEnhancer
from image_relay.models.enums import EnhancementStrategy
from image_relay.utils.config import EnhancementConfig
from image_relay.utils.errors import ConfigurationError


class TestRandomStrategy:
    """Random-from-set enhancement."""

    @pytest.mark.parametrize("prompt", ["a sunset", "x", "ein Hund im Schnee", "  padded  "])
    def test_enhanced_starts_with_prompt_and_is_longer(self, enhancer, prompt):
        enhanced = enhancer.enhance(prompt)

        assert enhanced.startswith(prompt)
        assert len(enhanced) > len(prompt)

    def test_suffix_comes_from_candidate_set(self, enhancer, suffixes):
        for _ in range(50):
            enhanced = enhancer.enhance("a sunset")
            assert enhanced[len("a sunset, "):] in suffixes

    def test_same_seed_gives_same_suffix(self):
        first = PromptEnhancer().enhance("castle", rng=random.Random(7))
        second = PromptEnhancer().enhance("castle", rng=random.Random(7))

        assert first == second

    def test_per_call_rng_overrides_instance_rng(self):
        class Last(random.Random):
            def choice(self, seq):
                return seq[-1]

        enhancer = PromptEnhancer(suffixes=["one", "two"], rng=random.Random(0))

        assert enhancer.enhance("p", rng=Last()) == "p, two"

    def test_every_suffix_is_reachable(self, rng, suffixes):
        enhancer = PromptEnhancer(rng=rng)
        seen = {enhancer.choose_suffix() for _ in range(200)}

        assert seen == set(suffixes)

    def test_empty_candidate_set_rejected(self):
        with pytest.raises(ConfigurationError):
            PromptEnhancer(suffixes=[])


class TestFixedStrategy:
    """Fixed-suffix enhancement."""

    def test_always_appends_fixed_suffix(self):
        enhancer = PromptEnhancer(strategy=EnhancementStrategy.FIXED, fixed_suffix="crisp")

        assert enhancer.enhance("a cat") == "a cat, crisp"
        assert enhancer.enhance("a cat") == "a cat, crisp"

    def test_strategy_accepts_plain_string(self):
        enhancer = PromptEnhancer(strategy="fixed")

        assert enhancer.enhance("a cat") == "a cat, high quality, detailed, professional"

    def test_blank_fixed_suffix_rejected(self):
        with pytest.raises(ConfigurationError):
            PromptEnhancer(strategy=EnhancementStrategy.FIXED, fixed_suffix="  ")


def test_from_config():
    config = EnhancementConfig(strategy="fixed", fixed_suffix="8K")
    enhancer = PromptEnhancer.from_config(config)

    assert enhancer.strategy == EnhancementStrategy.FIXED
    assert enhancer.enhance("moon") == "moon, 8K"
