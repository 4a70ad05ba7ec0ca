"""Image generation endpoints under /ai."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..core.dispatcher import ServiceFallbackDispatcher
from ..models.schemas import BatchGenerationRequest, GenerationRequest
from ..utils.config import IdentityConfig
from ..utils.errors import AllServicesFailed, ImageRelayError, RequestValidationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

DEMO_PROMPTS = [
    "a futuristic city at night",
    "a mystical forest with glowing plants",
    "an astronaut floating in space",
    "a dragon flying over mountains",
    "a cyberpunk street market",
]
DEMO_SAMPLE_SIZE = 2

BUSY_MESSAGE = "My AI is currently busy. Please try again in a moment."


# ============================================================================
# DEPENDENCIES
# ============================================================================

async def get_dispatcher(request: Request) -> ServiceFallbackDispatcher:
    """Dependency to get the dispatcher from app state."""
    return request.app.state.dispatcher


async def get_identity(request: Request) -> IdentityConfig:
    """Dependency to get the relay identity from app state."""
    return request.app.state.config.identity


# ============================================================================
# REQUEST PARSING
# ============================================================================

async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the body as a JSON object; anything else counts as empty."""
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def validate_prompt(value: Any, message: str) -> str:
    """Return the prompt if it is a non-blank string, else raise."""
    if not isinstance(value, str) or not value.strip():
        raise RequestValidationError(message)
    return value


def parse_generation_request(data: Dict[str, Any]) -> GenerationRequest:
    prompt = validate_prompt(
        data.get("prompt"), "Prompt is required for my AI to create images"
    )
    return GenerationRequest(prompt=prompt)


def parse_batch_request(data: Dict[str, Any]) -> BatchGenerationRequest:
    value = data.get("prompts")
    if not isinstance(value, list):
        raise RequestValidationError("Array of prompts required")
    prompts = [
        validate_prompt(item, f"Prompt at index {i} must be a non-empty string")
        for i, item in enumerate(value)
    ]
    return BatchGenerationRequest(prompts=prompts)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/generate")
async def generate(
    request: Request,
    dispatcher: ServiceFallbackDispatcher = Depends(get_dispatcher),
    identity: IdentityConfig = Depends(get_identity),
):
    """Generate a single image URL from {"prompt": ...}."""
    started = time.perf_counter()
    data = await read_json_object(request)
    prompt = parse_generation_request(data).prompt

    logger.info("Generate request received", extra={"prompt": prompt[:200]})

    try:
        result = await dispatcher.generate(prompt)
    except AllServicesFailed as e:
        logger.error(
            "Generate request failed",
            extra={"error": str(e), "attempts": len(e.attempts)}
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": BUSY_MESSAGE,
                "ai_name": identity.ai_name,
            },
        )

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    return {
        **result.to_response(),
        "ai_name": identity.ai_name,
        "version": identity.version,
        "response_time": f"{elapsed_ms}ms",
    }


@router.post("/generate-batch")
async def generate_batch(
    request: Request,
    dispatcher: ServiceFallbackDispatcher = Depends(get_dispatcher),
    identity: IdentityConfig = Depends(get_identity),
):
    """Generate image URLs for {"prompts": [...]}, in order."""
    data = await read_json_object(request)
    prompts = parse_batch_request(data).prompts

    try:
        results = await dispatcher.generate_batch(prompts)
    except AllServicesFailed as e:
        logger.error(
            "Batch generation failed",
            extra={"error": str(e), "batch_size": len(prompts)}
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Batch generation failed"},
        )

    return {
        "success": True,
        "batch_id": f"batch_{int(time.time() * 1000)}",
        "created_by": identity.created_by,
        "results": [r.to_response() for r in results],
        "total_generated": len(results),
    }


@router.get("/status")
async def status(
    dispatcher: ServiceFallbackDispatcher = Depends(get_dispatcher),
    identity: IdentityConfig = Depends(get_identity),
):
    """Relay status and capabilities."""
    return {
        "ai_name": identity.ai_name,
        "version": identity.version,
        "status": "🟢 Online",
        "capabilities": [
            "Image Generation from Text",
            "Prompt Enhancement",
            "Multiple Service Integration",
            "Batch Processing",
            "Real-time Generation",
        ],
        "supported_services": dispatcher.service_names,
        "endpoints": {
            "POST /ai/generate": "Generate single image",
            "POST /ai/generate-batch": "Generate multiple images",
            "GET /ai/status": "AI status and capabilities",
            "GET /ai/demo": "Sample generations",
        },
        "usage_examples": {
            "single": (
                'curl -X POST http://localhost:5000/ai/generate -H "Content-Type: application/json" '
                "-d '{\"prompt\":\"a beautiful sunset\"}'"
            ),
            "batch": (
                'curl -X POST http://localhost:5000/ai/generate-batch -H "Content-Type: application/json" '
                "-d '{\"prompts\":[\"sunset\", \"mountain\", \"ocean\"]}'"
            ),
        },
    }


@router.get("/demo")
async def demo(
    dispatcher: ServiceFallbackDispatcher = Depends(get_dispatcher),
    identity: IdentityConfig = Depends(get_identity),
):
    """Run a couple of fixed prompts; degrades to a status object on failure."""
    try:
        generated = []
        for prompt in DEMO_PROMPTS[:DEMO_SAMPLE_SIZE]:
            result = await dispatcher.generate(prompt)
            generated.append({
                "original_prompt": prompt,
                "enhanced_prompt": result.enhanced_prompt,
                "image_url": result.image_url,
                "generated_by": result.created_by,
                "source": result.source_name,
            })
    except ImageRelayError as e:
        logger.warning("Demo unavailable", extra={"error": str(e)})
        return {
            "ai_name": identity.ai_name,
            "status": "Demo temporarily unavailable",
            "error": str(e),
        }

    return {
        "ai_name": identity.ai_name,
        "demonstration": "Showing AI capabilities with sample generations",
        "features": [
            "🤖 Intelligent prompt enhancement",
            "🖼️ Multi-service image generation",
            "⚡ Real-time processing",
            "🔧 Error handling & fallbacks",
        ],
        "generated_images": generated,
        "try_it": "Use POST /ai/generate with your own prompts!",
    }
