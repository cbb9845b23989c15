"""
Application factory for the encyclopedia HTTP API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from .config_manager import Config
from .encyclopedia import (
    ContentStore,
    EncyclopediaManager,
    FileContentStore,
    HttpContentStore,
    QueryClassifier,
)
from .encyclopedia.manager import AnswerProvider
from .encyclopedia_routes import init_encyclopedia_routes


def build_content_store(config: Config) -> ContentStore:
    """Create the content store selected by ``encyclopedia.backend``."""
    settings = config.encyclopedia
    if settings.backend == "http":
        return HttpContentStore(settings.base_url, timeout=settings.request_timeout)
    return FileContentStore(settings.data_dir)


def build_manager(
    config: Config,
    store: Optional[ContentStore] = None,
    answer_provider: Optional[AnswerProvider] = None,
) -> EncyclopediaManager:
    return EncyclopediaManager(
        store=store or build_content_store(config),
        classifier=QueryClassifier(config.encyclopedia.question_languages),
        answer_provider=answer_provider,
        language=config.encyclopedia.display_language,
    )


def create_app(
    config: Optional[Config] = None,
    store: Optional[ContentStore] = None,
    answer_provider: Optional[AnswerProvider] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    The metadata bundle is bulk-loaded during startup, before any request is
    served.

    Args:
        config: Application configuration (default: all defaults)
        store: Content store override (default: built from config)
        answer_provider: Optional collaborator for the question path
    """
    config = config or Config()
    manager = build_manager(config, store=store, answer_provider=answer_provider)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await manager.initialize()
        logger.info("🚀 Encyclopedia API ready")
        yield
        if isinstance(manager.store, HttpContentStore):
            await manager.store.aclose()

    app = FastAPI(title="Lore Codex API", lifespan=lifespan)
    app.state.manager = manager
    app.include_router(
        init_encyclopedia_routes(
            manager,
            min_query_length=config.encyclopedia.min_query_length,
            default_line_break=config.encyclopedia.line_break,
        )
    )
    return app
