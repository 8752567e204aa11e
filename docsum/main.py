"""FastAPI app entry: config, logging, health, error handling, and the uvicorn runner."""

from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from docsum.config.logging import configure_logging, get_logger
from docsum.config.settings import get_settings
from docsum.config.summarization.static import get_summarizer_config
from docsum.controllers.routes.summarize import get_model_invoker
from docsum.controllers.routes.summarize import router as summarize_router
from docsum.services.errors import SummarizerError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, config, and generation client. Refuses to start without a credential."""
    settings = get_settings()
    configure_logging()
    if settings.generation_provider == "gemini" and not settings.gemini_api_key:
        logger.error("Missing GEMINI_API_KEY; refusing to start")
        raise RuntimeError("GEMINI_API_KEY is required when generation_provider is 'gemini'")
    config = get_summarizer_config()
    get_model_invoker()
    logger.info(
        "Application starting",
        extra={
            "app_name": settings.app_name,
            "environment": settings.environment,
            "provider": config.generation_provider,
            "model_candidates": list(config.model_candidates),
            "max_chunk_tokens": config.max_chunk_tokens,
        },
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Document Summarizer",
    description="Summarize pasted text or PDF/DOCX/TXT uploads with a generative language model",
    version="1.0.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(summarize_router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Document Summarizer Backend is running..."


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check dependencies."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> JSONResponse:
    """Readiness: the generation provider resolves and is credentialed."""
    try:
        invoker = get_model_invoker()
    except ValueError as e:
        return JSONResponse(content={"status": "degraded", "error": str(e)}, status_code=503)
    return JSONResponse(content={"status": "ok", "model_candidates": list(invoker.candidates)}, status_code=200)


@app.exception_handler(SummarizerError)
async def summarizer_exception_handler(_request: Request, exc: SummarizerError):
    """Validation, extraction, and generation failures: one message plus a stable code."""
    if exc.status_code >= 500:
        logger.error(
            "Summarize failed",
            extra={"error_code": exc.error_code, "error": exc.message, "cause": type(exc.cause).__name__},
        )
    else:
        logger.info("Summarize rejected", extra={"error_code": exc.error_code, "error": exc.message})
    return JSONResponse(
        content={"error": exc.message, "detail": exc.message, "error_code": exc.error_code},
        status_code=exc.status_code,
    )


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: do not leak stack traces or internal details to the client."""
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"error": "An internal error occurred.", "detail": "An internal error occurred."},
        status_code=500,
    )


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "docsum.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
