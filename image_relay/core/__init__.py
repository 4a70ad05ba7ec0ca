"""Core business logic components."""

from .prompt_enhancer import PromptEnhancer
from .dispatcher import ServiceFallbackDispatcher

__all__ = [
    "PromptEnhancer",
    "ServiceFallbackDispatcher",
]
