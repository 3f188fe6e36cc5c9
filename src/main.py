# src/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from src.common.config import Settings, get_settings
from src.common.utils.email_service import EmailDispatcher
from src.router.routers import include_routers

logger = logging.getLogger(__name__)

def configure_logging(settings: Settings) -> None:
    # Centralized logging configuration
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

async def submission_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed submissions get the same opaque failure as any other error."""
    logger.error("Invalid submission to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False},
    )

def create_app(settings: Optional[Settings] = None, dispatcher: Optional[EmailDispatcher] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Loksar Services API",
        description="Contact and booking form notifications for Loksar home and gardening services.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.dispatcher = dispatcher or EmailDispatcher(settings)

    app.add_exception_handler(RequestValidationError, submission_validation_handler)

    # Middleware for CORS using allowed origins from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers from a separate file
    include_routers(app)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok", "message": "API is running"}

    return app

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)
