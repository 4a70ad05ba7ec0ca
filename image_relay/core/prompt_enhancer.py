"""Prompt enhancement component."""

import random
from typing import List, Optional, Sequence

from ..models.enums import EnhancementStrategy
from ..utils.config import DEFAULT_SUFFIXES, EnhancementConfig
from ..utils.errors import ConfigurationError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class PromptEnhancer:
    """Appends a quality-boosting clause to user prompts."""

    def __init__(
        self,
        strategy: EnhancementStrategy = EnhancementStrategy.RANDOM,
        suffixes: Optional[Sequence[str]] = None,
        fixed_suffix: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize prompt enhancer.

        Args:
            strategy: RANDOM picks one of suffixes per call, FIXED always
                appends fixed_suffix
            suffixes: Candidate suffixes for the RANDOM strategy
            fixed_suffix: Suffix for the FIXED strategy
            rng: Randomness source used when enhance() is not given one

        Raises:
            ConfigurationError: If the chosen strategy has nothing to append
        """
        self.strategy = EnhancementStrategy(strategy)
        self.suffixes: List[str] = list(suffixes if suffixes is not None else DEFAULT_SUFFIXES)
        self.fixed_suffix = fixed_suffix if fixed_suffix is not None else DEFAULT_SUFFIXES[0]
        self.rng = rng or random.Random()

        if self.strategy == EnhancementStrategy.RANDOM:
            if not self.suffixes or not all(s.strip() for s in self.suffixes):
                raise ConfigurationError("Random enhancement needs non-empty suffixes")
        elif not self.fixed_suffix.strip():
            raise ConfigurationError("Fixed enhancement needs a non-empty suffix")

    @classmethod
    def from_config(cls, config: EnhancementConfig, rng: Optional[random.Random] = None) -> "PromptEnhancer":
        return cls(
            strategy=config.strategy,
            suffixes=config.suffixes,
            fixed_suffix=config.fixed_suffix,
            rng=rng,
        )

    def choose_suffix(self, rng: Optional[random.Random] = None) -> str:
        if self.strategy == EnhancementStrategy.FIXED:
            return self.fixed_suffix
        return (rng or self.rng).choice(self.suffixes)

    def enhance(self, prompt: str, rng: Optional[random.Random] = None) -> str:
        """
        Enhance a prompt with a quality suffix.

        Args:
            prompt: Non-empty user prompt (validated by the caller)
            rng: Optional randomness source for this call

        Returns:
            "{prompt}, {suffix}"
        """
        suffix = self.choose_suffix(rng)
        enhanced = f"{prompt}, {suffix}"

        logger.debug(
            "Prompt enhanced",
            extra={
                "strategy": self.strategy.value,
                "original_prompt": prompt[:200],
                "suffix": suffix,
            }
        )

        return enhanced
