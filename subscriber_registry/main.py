"""FastAPI app entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subscriber_registry.core.config import settings
from subscriber_registry.functions.subscribers import SubscriberFunctions
from subscriber_registry.routers import subscribers
from subscriber_registry.services.subscriber_store import SubscriberStore


def create_app(store: SubscriberStore | None = None) -> FastAPI:
    """Build FastAPI application around a single subscriber store."""

    app = FastAPI(title="Subscriber Registry", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.store = store if store is not None else SubscriberStore()
    app.state.functions = SubscriberFunctions(app.state.store)
    app.include_router(subscribers.router)

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
