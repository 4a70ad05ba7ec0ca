"""Pollinations AI image URL builder."""

from urllib.parse import quote

import httpx

from .base import BaseService


class PollinationsService(BaseService):
    """Builds Pollinations prompt URLs (prompt lives in the path)."""

    def __init__(self, name: str = "Pollinations AI", width: int = 1024, height: int = 1024, **kwargs):
        super().__init__(
            name=name,
            base_url="https://image.pollinations.ai/prompt",
            width=width,
            height=height,
            **kwargs,
        )

    async def build(self, prompt: str) -> str:
        safe_prompt = quote(prompt, safe="")
        url = httpx.URL(
            f"{self.base_url}/{safe_prompt}",
            params={"width": self.width, "height": self.height},
        )
        return str(url)
