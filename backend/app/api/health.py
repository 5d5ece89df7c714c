from fastapi import APIRouter, Depends

from ..services.providers.base import StoreProvider
from .deps import get_steam_provider

router = APIRouter()


@router.get("/health")
async def health(provider: StoreProvider = Depends(get_steam_provider)):
    return {"status": "ok", "steam": await provider.check_health()}
