from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from ..core.errors import ClientInputError
from ..services.providers.base import StoreProvider
from .deps import get_steam_provider

router = APIRouter()


@router.get("/steam-details")
async def steam_details(
        appid: Optional[str] = Query(None, description="Steam application id"),
        provider: StoreProvider = Depends(get_steam_provider)) -> dict[str, Any]:
    """
    Proxy for the Steam store appdetails endpoint.
    Returns the upstream JSON verbatim, or {} if Steam could not be reached.
    """
    if not appid:
        raise ClientInputError(status_code=400, status_message="Missing appid")

    return await provider.get_app_details(appid)


@router.get("/steam-search")
async def steam_search(
        q: Optional[str] = Query(None, description="Search term for Steam apps"),
        provider: StoreProvider = Depends(get_steam_provider)) -> list[Any]:
    """Proxy for Steam community app search. Always answers with a list."""
    if not q:
        return []

    return await provider.search_apps(q)
