"""User service — read-only lookup of a user's current authority."""


from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.user import User
from app.services.access import AccessGuard


class UserService:
    def __init__(self, session: AsyncSession):
        self._guard = AccessGuard(session)

    async def get_user(self, user_id: str) -> User:
        return await self._guard.resolve_user(user_id)
