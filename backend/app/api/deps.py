import logging
from typing import Any, Optional

from fastapi import Header, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from ..services.providers.base import StoreProvider

logger = logging.getLogger(__name__)


def get_steam_provider(request: Request) -> StoreProvider:
    provider = getattr(request.app.state, "steam", None)
    if provider is None:
        raise HTTPException(status_code=503, detail="Steam provider not initialised yet")
    return provider


def get_identity_client(request: Request) -> Any:
    client = getattr(request.app.state, "identity_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Identity client not initialised yet")
    return client


async def get_current_user(request: Request, authorization: Optional[str] = Header(None)) -> Any:
    """
    Resolve the Supabase user behind a `Bearer` access token.
    Raises 401 when the header is missing or Supabase rejects the token.
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Missing bearer token")

    client = get_identity_client(request)
    try:
        # supabase-py's auth client is synchronous
        resp = await run_in_threadpool(client.auth.get_user, token.strip())
    except Exception as e:
        logger.warning("Supabase rejected access token: %s", e)
        raise HTTPException(status_code=401, detail="Invalid access token") from e

    user = getattr(resp, "user", None)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid access token")
    return user
