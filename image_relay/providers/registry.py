"""Builds the ordered service list from configuration."""

from typing import Dict, List, Type

from .base import BaseService
from .pollinations import PollinationsService
from .catai import CatAIService
from .prodia import ProdiaService
from ..models.enums import ServiceProvider
from ..utils.config import ServiceConfig
from ..utils.errors import ConfigurationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_CLASSES: Dict[str, Type[BaseService]] = {
    ServiceProvider.POLLINATIONS.value: PollinationsService,
    ServiceProvider.CATAI.value: CatAIService,
    ServiceProvider.PRODIA.value: ProdiaService,
}


def build_service(service_config: ServiceConfig) -> BaseService:
    """
    Instantiate one service from its configuration.

    Raises:
        ConfigurationError: If the provider is unknown
    """
    service_cls = SERVICE_CLASSES.get(service_config.provider.lower())
    if service_cls is None:
        raise ConfigurationError(
            f"Unknown image provider '{service_config.provider}' for service '{service_config.name}'"
        )

    kwargs = {
        "name": service_config.name,
        "width": service_config.width,
        "height": service_config.height,
        "max_attempts": service_config.max_attempts,
    }
    if service_cls is ProdiaService:
        kwargs["model"] = service_config.model

    return service_cls(**kwargs)


def build_services(service_configs: List[ServiceConfig]) -> List[BaseService]:
    """Instantiate services, keeping the given order."""
    services = [build_service(sc) for sc in service_configs]

    logger.info(
        f"Built {len(services)} image services",
        extra={"services": [s.name for s in services]}
    )

    return services
