"""Prodia image URL builder."""

from typing import Optional

import httpx

from .base import BaseService

DEFAULT_MODEL = "realisticVisionV50_v50VAE.safetensors"

# Prodia gets its own quality clause on top of the enhanced prompt
PRODIA_SUFFIX = "high quality, detailed, realistic"


class ProdiaService(BaseService):
    """Builds Prodia Stable Diffusion generate URLs."""

    def __init__(self, name: str = "Prodia", model: Optional[str] = None, **kwargs):
        super().__init__(
            name=name,
            base_url="https://api.prodia.com/v1/sd/generate",
            **kwargs,
        )
        self.model = model or DEFAULT_MODEL

    async def build(self, prompt: str) -> str:
        url = httpx.URL(
            self.base_url,
            params={"prompt": f"{prompt}, {PRODIA_SUFFIX}", "model": self.model},
        )
        return str(url)
