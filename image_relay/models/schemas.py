"""Pydantic schemas for data validation."""

from typing import Any, Dict, List
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerationResult(BaseModel):
    """Result of a single prompt generation."""
    success: bool = True
    image_url: str
    source_name: str
    original_prompt: str
    enhanced_prompt: str
    created_by: str = "My AI Image Creator"
    created_at: datetime = Field(default_factory=utcnow)

    class Config:
        frozen = True

    def to_response(self) -> Dict[str, Any]:
        """Serialize using the HTTP wire names."""
        return {
            "success": self.success,
            "image": self.image_url,
            "source": self.source_name,
            "enhanced_prompt": self.enhanced_prompt,
            "created_by": self.created_by,
            "timestamp": self.created_at.isoformat().replace("+00:00", "Z"),
        }


class ServiceAttempt(BaseModel):
    """A failed attempt against one service."""
    service_name: str
    error: str
    timestamp: datetime = Field(default_factory=utcnow)


class GenerationRequest(BaseModel):
    """Single prompt request."""
    prompt: str


class BatchGenerationRequest(BaseModel):
    """Batch prompt request."""
    prompts: List[str] = Field(default_factory=list)
