from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.container import BackofficeContainer
from backoffice.modules.config import Settings, configure_logging
from backoffice.modules.users.api import admin_router, order_router, verification_router, view_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[BackofficeContainer] = None,
) -> FastAPI:
    """
    Application factory.

    Run with ``uvicorn backoffice.app:create_app --factory``.
    """
    if container is None:
        settings = settings or Settings.from_env()
        container = BackofficeContainer.from_settings(settings)
    settings = settings or Settings(storage_url="")
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        await container.startup()
        yield
        # Shutdown
        await container.shutdown()

    app = FastAPI(title="Marketplace Back Office", version="0.1.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(admin_router)
    app.include_router(verification_router)
    app.include_router(order_router)
    app.include_router(view_router)

    @app.get("/health")
    async def health():
        healthy = await container.clients.health_check()
        return {"status": "online" if healthy else "degraded", "system": "Marketplace Back Office"}

    return app
