"""User router — lets any user check its current role and related entity."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import DataResponse, envelope
from app.db.base import get_db
from app.schemas.user import UserOut
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}", response_model=DataResponse[UserOut])
async def get_user(
    user_id: str,
    session: AsyncSession = Depends(get_db),
):
    user = await UserService(session).get_user(user_id)
    return envelope(UserOut.model_validate(user))
