"""HTTP routers."""

from . import ai, health

__all__ = ["ai", "health"]
