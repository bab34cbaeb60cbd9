"""
FastAPI backend for berust.

Exposes the in-memory translator over HTTP; nothing touches the filesystem.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from berust.core import settings, setup_logging, get_logger

from .errors import register_error_handlers
from .models import TranslateRequest, TranslateResponse
from .services import TranslationService, get_translation_service

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting berust API",
        extra_data={"debug": settings.DEBUG}
    )
    yield
    logger.info("Shutting down berust API")


app = FastAPI(
    title=settings.APP_NAME,
    description="Translate the `be` toy notation into Rust-style code",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_error_handlers(app)


@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": {
            "translate": "/translate",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
    }


@app.post("/translate", response_model=TranslateResponse)
async def translate_source(
    request: TranslateRequest,
    service: TranslationService = Depends(get_translation_service)
):
    """Translate a source text"""
    result = service.translate(request.source)
    return TranslateResponse.from_result(result)


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
