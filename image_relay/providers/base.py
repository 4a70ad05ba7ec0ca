"""Abstract base class for image URL services."""

import inspect
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Union

from ..utils.logger import get_logger

logger = get_logger(__name__)


class BaseService(ABC):
    """Abstract base class for all image services."""

    def __init__(
        self,
        name: str,
        base_url: str = "",
        width: int = 1024,
        height: int = 1024,
        max_attempts: int = 1,
    ):
        """
        Initialize service.

        Args:
            name: Display name reported as the result source
            base_url: Base URL of the provider endpoint
            width: Requested image width
            height: Requested image height
            max_attempts: Attempts the dispatcher makes before moving on
        """
        self.name = name
        self.base_url = base_url
        self.width = width
        self.height = height
        self.max_attempts = max_attempts

    @abstractmethod
    async def build(self, prompt: str) -> str:
        """Return the image URL for an enhanced prompt."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class FunctionService(BaseService):
    """Service backed by a plain callable, sync or async."""

    def __init__(
        self,
        name: str,
        func: Callable[[str], Union[str, Awaitable[str]]],
        max_attempts: int = 1,
    ):
        super().__init__(name=name, max_attempts=max_attempts)
        self.func = func

    async def build(self, prompt: str) -> str:
        result = self.func(prompt)
        if inspect.isawaitable(result):
            result = await result
        return result
