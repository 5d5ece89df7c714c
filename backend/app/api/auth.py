from typing import Any

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from .deps import get_current_user

router = APIRouter()


@router.get("/user", summary="Return the signed-in Supabase user")
async def current_user(user: Any = Depends(get_current_user)) -> Any:
    return jsonable_encoder(user)
