"""Service fallback dispatcher: tries image services in order until one succeeds."""

import asyncio
import random
from typing import List, Optional, Sequence

from .prompt_enhancer import PromptEnhancer
from ..providers.base import BaseService
from ..models.schemas import GenerationResult, ServiceAttempt
from ..utils.logger import get_logger
from ..utils.errors import (
    AllServicesFailed,
    ConfigurationError,
    ServiceError,
    ServiceTimeoutError,
)
from ..utils.retry import retry_async, timeout_async

logger = get_logger(__name__)


class ServiceFallbackDispatcher:
    """
    Produces generation results by trying services in fixed priority order.

    The first service that returns a URL wins; failures of individual
    services are logged and absorbed. Only the aggregate failure, when every
    service failed, reaches the caller.
    """

    def __init__(
        self,
        enhancer: PromptEnhancer,
        services: Sequence[BaseService],
        service_timeout: Optional[float] = None,
        created_by: str = "My AI Image Creator",
        retry_delay: float = 0.5,
    ):
        """
        Initialize dispatcher.

        Args:
            enhancer: Prompt enhancer applied before any service is tried
            services: Services in fallback order
            service_timeout: Per-attempt deadline in seconds (None disables)
            created_by: Creator label stamped on every result
            retry_delay: Initial backoff for services with max_attempts > 1

        Raises:
            ConfigurationError: If no services are given
        """
        if not services:
            raise ConfigurationError("At least one image service is required")

        self.enhancer = enhancer
        self.services = tuple(services)
        self.service_timeout = service_timeout
        self.created_by = created_by
        self.retry_delay = retry_delay

    @property
    def service_names(self) -> List[str]:
        return [service.name for service in self.services]

    async def _attempt(self, service: BaseService, prompt: str) -> str:
        """Run one service build under the deadline, raising ServiceError on failure."""
        try:
            image_url = await timeout_async(service.build(prompt), self.service_timeout)
        except asyncio.TimeoutError:
            raise ServiceTimeoutError(service.name, self.service_timeout)
        except ServiceError:
            raise
        except Exception as e:
            raise ServiceError(service.name, str(e) or e.__class__.__name__) from e

        if not image_url:
            raise ServiceError(service.name, "returned no URL")

        return image_url

    async def _try_service(self, service: BaseService, prompt: str) -> str:
        attempts = max(1, getattr(service, "max_attempts", 1))
        if attempts == 1:
            return await self._attempt(service, prompt)

        attempt = retry_async(
            max_attempts=attempts,
            initial_delay=self.retry_delay,
            exceptions=(ServiceError,),
        )(self._attempt)
        return await attempt(service, prompt)

    async def generate(
        self,
        raw_prompt: str,
        rng: Optional[random.Random] = None,
    ) -> GenerationResult:
        """
        Generate an image URL for a prompt.

        Args:
            raw_prompt: Non-empty user prompt (validated by the caller)
            rng: Optional randomness source for prompt enhancement

        Returns:
            GenerationResult from the first service that succeeded

        Raises:
            AllServicesFailed: If every service failed
        """
        enhanced_prompt = self.enhancer.enhance(raw_prompt, rng=rng)
        failures: List[ServiceAttempt] = []

        for service in self.services:
            logger.info(
                f"Trying {service.name}",
                extra={"service": service.name, "prompt": raw_prompt[:200]}
            )

            try:
                image_url = await self._try_service(service, enhanced_prompt)
            except ServiceError as e:
                logger.warning(
                    f"{service.name} failed, trying next",
                    extra={"service": service.name, "error": str(e)}
                )
                failures.append(ServiceAttempt(service_name=service.name, error=str(e)))
                continue

            logger.info(
                f"Image URL created by {service.name}",
                extra={
                    "service": service.name,
                    "failed_before": len(failures),
                    "url": image_url[:200],
                }
            )

            return GenerationResult(
                image_url=image_url,
                source_name=service.name,
                original_prompt=raw_prompt,
                enhanced_prompt=enhanced_prompt,
                created_by=self.created_by,
            )

        logger.error(
            "All image services failed",
            extra={
                "services": self.service_names,
                "errors": [f.error for f in failures],
            }
        )
        raise AllServicesFailed(failures)

    async def generate_batch(
        self,
        raw_prompts: Sequence[str],
        rng: Optional[random.Random] = None,
    ) -> List[GenerationResult]:
        """
        Generate image URLs for several prompts, one after another.

        The first prompt that fails on every service aborts the batch and its
        AllServicesFailed propagates; results already produced are discarded.

        Args:
            raw_prompts: Prompts in the order results should be returned

        Returns:
            Results in input order
        """
        logger.info(
            f"Starting batch generation for {len(raw_prompts)} prompts",
            extra={"count": len(raw_prompts)}
        )

        results = []
        for prompt in raw_prompts:
            results.append(await self.generate(prompt, rng=rng))

        return results
