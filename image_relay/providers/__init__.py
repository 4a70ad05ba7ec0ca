"""Image URL services for external providers."""

from .base import BaseService, FunctionService
from .pollinations import PollinationsService
from .catai import CatAIService
from .prodia import ProdiaService
from .registry import build_service, build_services

__all__ = [
    "BaseService",
    "FunctionService",
    "PollinationsService",
    "CatAIService",
    "ProdiaService",
    "build_service",
    "build_services",
]
