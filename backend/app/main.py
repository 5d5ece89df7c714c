import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from .api.auth import router as auth_router
from .api.health import router as health_router
from .api.steam import router as steam_router
from .core.config import Settings, load_settings
from .core.errors import ClientInputError, client_input_error_handler
from .core.supabase import create_identity_client
from .services.notifier import LoggingToastSink, Notifier, ToastSink
from .services.providers.steam import SteamProvider

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup logic ---
    # Refuse to start without Supabase configuration
    settings: Settings = app.state.settings or load_settings()
    app.state.settings = settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if app.state.identity_client is None:
        app.state.identity_client = create_identity_client(settings)

    app.state.steam = await SteamProvider.create(settings)
    logger.info("Steam provider initialised (cc=%s, timeout=%ss)", settings.STEAM_COUNTRY_CODE, settings.STEAM_TIMEOUT)

    yield  # main app runs here

    # --- Close the client ---
    await app.state.steam.close()
    app.state.steam = None
    logger.info("Steam provider closed")


def create_app(
        settings: Optional[Settings] = None,
        identity_client: Optional[Any] = None,
        toast_sink: Optional[ToastSink] = None,
) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME if settings else "Steam Store Proxy", lifespan=lifespan)

    app.state.settings = settings
    app.state.identity_client = identity_client
    app.state.notifier = Notifier(toast_sink or LoggingToastSink())

    app.add_exception_handler(ClientInputError, client_input_error_handler)

    # Routers
    app.include_router(steam_router, prefix="/api", tags=["steam"])
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(health_router, tags=["health"])

    return app

app = create_app()
