"""Custom exception classes for the image relay."""

from typing import List, Optional


class ImageRelayError(Exception):
    """Base exception for all relay errors."""
    pass


class ConfigurationError(ImageRelayError):
    """Configuration or initialization errors."""
    pass


class RequestValidationError(ImageRelayError):
    """Client input is missing or malformed."""
    pass


class ServiceError(ImageRelayError):
    """A single image service attempt failed."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service} error: {message}")


class ServiceTimeoutError(ServiceError):
    """A single image service attempt exceeded its deadline."""

    def __init__(self, service: str, seconds: float):
        self.seconds = seconds
        super().__init__(service, f"timed out after {seconds} seconds")


class AllServicesFailed(ImageRelayError):
    """Every configured image service failed for a prompt."""

    def __init__(self, attempts: Optional[List] = None):
        self.attempts = attempts or []
        super().__init__("All image services are busy")
