# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.database import create_store

# Routers
from app.routers.cart_items import router as cart_items_router

logger = logging.getLogger("uvicorn")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application with its own cart item store.

    Tests pass their own Settings to get an isolated app. Logging is
    configured once, at import, from the process settings.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
          - Log the initial contents of the in-memory store.

        Shutdown:
          - Nothing to clean up; the store is dropped with the process.
        """
        logger.info(
            "Startup: cart item store ready with %d item(s).",
            len(app.state.cart_item_store),
        )
        yield
        logger.info("Shutdown: discarding in-memory cart items.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.cart_item_store = create_store(seed=settings.SEED_SAMPLE_DATA)

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(cart_items_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": settings.PROJECT_NAME}

    return app


settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)

app = create_app(settings)
