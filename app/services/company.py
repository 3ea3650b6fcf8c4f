"""Company service — registration, update and lookup of companies.

Registering a company also creates its executive: a User with
role=management whose related_id points at the new company. Both rows are
written in the caller's transaction, so either both exist or neither does.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.core.exceptions import BadPayloadError, NotFoundError
from app.domain.company import Company
from app.domain.enums import Role
from app.domain.mixins import new_id
from app.domain.user import User
from app.repositories.companies import CompanyRepository
from app.repositories.users import UserRepository
from app.schemas.company import CompanyPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompanyCreated:
    company: Company
    executive: User


class CompanyService:
    def __init__(self, session: AsyncSession, clock: Clock | None = None):
        self._clock = clock or SystemClock()
        self._companies = CompanyRepository(session)
        self._users = UserRepository(session)

    async def create_company(self, data: CompanyPayload) -> CompanyCreated:
        if not data.name or not data.category:
            raise BadPayloadError("Bad payload: name and category are required")

        now = self._clock.now()
        company = Company(
            id=new_id(),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        executive = User(
            id=new_id(),
            role=Role.EXECUTIVE,
            related_id=company.id,
            created_at=now,
        )

        # Company first, then the user that makes it reachable
        company = await self._companies.insert(company)
        executive = await self._users.insert(executive)
        logger.info("Company %s created with executive %s", company.id, executive.id)
        return CompanyCreated(company=company, executive=executive)

    async def get_company(self, company_id: str) -> Company:
        if not company_id:
            raise BadPayloadError("Bad payload: company id is required")
        company = await self._companies.get(company_id)
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    async def update_company(self, company_id: str, data: CompanyPayload) -> Company:
        """Replace every descriptive field; created_at is kept, updated_at advances."""
        existing = await self.get_company(company_id)  # raises 400 / 404

        replacement = Company(
            id=existing.id,
            created_at=existing.created_at,
            updated_at=max(self._clock.now(), existing.updated_at),
            **data.model_dump(),
        )
        company = await self._companies.insert(replacement)
        logger.info("Company %s updated", company.id)
        return company
