"""Data models and schemas for the image relay."""

from .schemas import (
    GenerationResult,
    ServiceAttempt,
    GenerationRequest,
    BatchGenerationRequest,
)
from .enums import (
    EnhancementStrategy,
    ServiceProvider,
)

__all__ = [
    "GenerationResult",
    "ServiceAttempt",
    "GenerationRequest",
    "BatchGenerationRequest",
    "EnhancementStrategy",
    "ServiceProvider",
]
