"""Enumerations for the image relay."""

from enum import Enum


class EnhancementStrategy(str, Enum):
    """How a quality suffix is chosen for a prompt."""
    RANDOM = "random"
    FIXED = "fixed"


class ServiceProvider(str, Enum):
    """Known image URL providers."""
    POLLINATIONS = "pollinations"
    CATAI = "catai"
    PRODIA = "prodia"
