"""HTTP process entrypoint."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_error_handlers
from src.api.router import router
from src.app import App, create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings

logger = logging.getLogger(__name__)


def build_api(app: App) -> FastAPI:
    """Create the FastAPI application bound to `app` (settings + store)."""

    api = FastAPI(
        title="String Analyzer Service",
        description="Analyze, store and filter strings by their structural properties",
        version="1.0.0",
    )
    api.state.container = app

    api.add_middleware(
        CORSMiddleware,
        allow_origins=app.settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_error_handlers(api)
    api.include_router(router)
    return api


def main() -> None:
    """Run the HTTP server."""

    settings = load_settings()
    configure_logging(settings.log_level)

    api = build_api(create_app(settings))
    logger.info("starting host=%s port=%d", settings.app_host, settings.app_port)
    uvicorn.run(
        api,
        host=settings.app_host,
        port=settings.app_port,
        # Levels come from configure_logging; uvicorn must not reset them.
        log_config=None,
    )


if __name__ == "__main__":
    main()
