"""Tests for image URL services and the registry."""

from urllib.parse import unquote

import httpx
import pytest

from image_relay.providers import (
    CatAIService,
    FunctionService,
    PollinationsService,
    ProdiaService,
    build_service,
    build_services,
)
from image_relay.utils.config import ServiceConfig, default_services
from image_relay.utils.errors import ConfigurationError

PROMPT = "a sunset, cinematic lighting & more/else?"


@pytest.mark.asyncio
async def test_pollinations_puts_prompt_in_path():
    url = await PollinationsService(width=512, height=768).build(PROMPT)
    parsed = httpx.URL(url)

    assert url.startswith("https://image.pollinations.ai/prompt/")
    assert unquote(url.split("/prompt/", 1)[1].split("?", 1)[0]) == PROMPT
    assert parsed.params["width"] == "512"
    assert parsed.params["height"] == "768"


@pytest.mark.asyncio
async def test_catai_puts_prompt_in_query():
    url = await CatAIService().build(PROMPT)
    parsed = httpx.URL(url)

    assert parsed.host == "image.catai.me"
    assert parsed.path == "/api/generate"
    assert parsed.params["prompt"] == PROMPT
    assert parsed.params["width"] == "1024"


@pytest.mark.asyncio
async def test_prodia_adds_its_own_suffix_and_model():
    url = await ProdiaService().build("a sunset")
    parsed = httpx.URL(url)

    assert parsed.host == "api.prodia.com"
    assert parsed.params["prompt"] == "a sunset, high quality, detailed, realistic"
    assert parsed.params["model"] == "realisticVisionV50_v50VAE.safetensors"


@pytest.mark.asyncio
async def test_prodia_custom_model():
    url = await ProdiaService(model="sdxl.safetensors").build("a sunset")

    assert httpx.URL(url).params["model"] == "sdxl.safetensors"


@pytest.mark.asyncio
async def test_function_service_sync_and_async():
    async def async_build(prompt):
        return f"async:{prompt}"

    assert await FunctionService("sync", lambda p: f"sync:{p}").build("x") == "sync:x"
    assert await FunctionService("async", async_build).build("x") == "async:x"


def test_build_service_uses_config():
    service = build_service(ServiceConfig(
        name="Poll", provider="Pollinations", width=256, height=128, max_attempts=2,
    ))

    assert isinstance(service, PollinationsService)
    assert service.name == "Poll"
    assert (service.width, service.height) == (256, 128)
    assert service.max_attempts == 2


def test_build_service_unknown_provider():
    with pytest.raises(ConfigurationError):
        build_service(ServiceConfig(name="Nope", provider="dalle"))


def test_build_services_keeps_order():
    services = build_services(default_services())

    assert [s.name for s in services] == ["Pollinations AI", "CatAI", "Prodia"]
    assert isinstance(services[2], ProdiaService)
