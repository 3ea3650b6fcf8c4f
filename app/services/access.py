"""Access control guard — resolves the caller and checks role and ownership.

Every operation that acts on behalf of a caller goes through the same three
steps, in this order:

  1. resolve the caller by id        -> NotFoundError if unknown
  2. require an exact role match     -> ForbiddenError (no role hierarchy)
  3. require ownership of the target -> ForbiddenError unless the target's
                                        company_id equals the caller's related_id

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadPayloadError, ForbiddenError, NotFoundError
from app.domain.enums import Role
from app.domain.user import User
from app.repositories.users import UserRepository

logger = logging.getLogger(__name__)


class AccessGuard:
    def __init__(self, session: AsyncSession):
        self._users = UserRepository(session)

    async def resolve_user(self, user_id: str) -> User:
        if not user_id:
            raise BadPayloadError("Bad payload: user id is required")
        user = await self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    @staticmethod
    def require_role(user: User, role: Role, message: str | None = None) -> None:
        if user.role != role:
            logger.warning(
                "Access denied: user %s has role %s, %s required",
                user.id, user.role.value, role.value,
            )
            raise ForbiddenError(message) if message else ForbiddenError()

    @staticmethod
    def require_owner(user: User, company_id: str) -> None:
        """The caller controls ``company_id`` (executives only own their own company)."""
        if user.is_pending or user.related_id != company_id:
            logger.warning(
                "Access denied: user %s does not own company %s", user.id, company_id
            )
            raise ForbiddenError()

    async def authorize(self, user_id: str, role: Role, message: str | None = None) -> User:
        """Resolve the caller and require ``role`` in one step."""
        user = await self.resolve_user(user_id)
        self.require_role(user, role, message)
        return user
