"""CatAI image URL builder."""

import httpx

from .base import BaseService


class CatAIService(BaseService):
    """Builds CatAI generate URLs."""

    def __init__(self, name: str = "CatAI", width: int = 1024, height: int = 1024, **kwargs):
        super().__init__(
            name=name,
            base_url="https://image.catai.me/api/generate",
            width=width,
            height=height,
            **kwargs,
        )

    async def build(self, prompt: str) -> str:
        url = httpx.URL(
            self.base_url,
            params={"prompt": prompt, "width": self.width, "height": self.height},
        )
        return str(url)
