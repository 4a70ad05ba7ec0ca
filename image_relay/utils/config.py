"""Configuration management for the image relay."""

import os
from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from ..models.enums import EnhancementStrategy
from .errors import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_SUFFIXES = [
    "high quality, detailed, professional",
    "ultra realistic, 4K resolution",
    "sharp focus, professional photography",
    "cinematic lighting, highly detailed",
]


class ServiceConfig(BaseModel):
    """Configuration for a single image service."""
    name: str
    provider: str
    enabled: bool = True
    priority: Optional[int] = None
    width: int = 1024
    height: int = 1024
    model: Optional[str] = None
    max_attempts: int = Field(default=1, ge=1)


class EnhancementConfig(BaseModel):
    """Configuration for prompt enhancement."""
    strategy: EnhancementStrategy = EnhancementStrategy.RANDOM
    suffixes: List[str] = Field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    fixed_suffix: str = DEFAULT_SUFFIXES[0]


class IdentityConfig(BaseModel):
    """How the relay names itself in responses."""
    ai_name: str = "My Image Creator AI"
    version: str = "1.0.0"
    created_by: str = "My AI Image Creator"


def default_services() -> List[ServiceConfig]:
    return [
        ServiceConfig(name="Pollinations AI", provider="pollinations"),
        ServiceConfig(name="CatAI", provider="catai"),
        ServiceConfig(name="Prodia", provider="prodia"),
    ]


class Config(BaseModel):
    """Main application configuration."""

    # Application Settings
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=5000, alias="PORT")

    # Timeout Settings
    service_timeout_seconds: Optional[float] = Field(default=10.0, alias="SERVICE_TIMEOUT_SECONDS")

    # Service Configuration
    services: List[ServiceConfig] = Field(default_factory=default_services)
    enhancement: EnhancementConfig = Field(default_factory=EnhancementConfig)
    identity: IdentityConfig = Field(default_factory=IdentityConfig)

    class Config:
        populate_by_name = True

    def ordered_services(self) -> List[ServiceConfig]:
        """Enabled services in fallback order (priority, ties keep list order)."""
        enabled = [s for s in self.services if s.enabled]
        # sorted() is stable, so entries without priority keep list order
        return sorted(
            enabled,
            key=lambda s: s.priority if s.priority is not None else 0,
        )


# Global config instance
_config: Optional[Config] = None


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from environment and the services YAML file.

    Args:
        path: YAML path, defaults to RELAY_CONFIG_PATH or config/services.yaml

    Returns:
        Config instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config

    if path is None:
        path = Path(os.getenv("RELAY_CONFIG_PATH", "config/services.yaml"))

    try:
        yaml_config = {}
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
            if not isinstance(yaml_config, dict):
                raise ConfigurationError(f"{path} must contain a mapping")
        else:
            logger.warning(
                f"Services config not found at {path}, using defaults",
                extra={"path": str(path)}
            )

        # Blank env values fall back to defaults
        env = {k: v for k, v in os.environ.items() if v != ""}
        config = Config(**{**env, **yaml_config})

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}")

    if not config.ordered_services():
        raise ConfigurationError("At least one enabled image service is required")

    _config = config

    logger.info(
        "Configuration loaded successfully",
        extra={
            "services": [s.name for s in config.ordered_services()],
            "strategy": config.enhancement.strategy.value,
            "environment": config.app_env,
        }
    )

    return config


def get_config() -> Config:
    """
    Get the current configuration instance.

    Raises:
        ConfigurationError: If config not loaded
    """
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config
