"""Statement ingestion — uploads by verified division managers and auditors.

A caller may upload only after its request was accepted: the role must
match exactly and the caller's related_id must resolve to the Division (or
Auditor) created by that acceptance. Statements are append-only.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.core.exceptions import BadPayloadError, NotFoundError
from app.domain.enums import Role
from app.domain.mixins import new_id
from app.domain.statement import AuditStatement, FinancialStatement
from app.repositories.divisions import AuditorRepository, DivisionRepository
from app.repositories.statements import (
    AuditStatementRepository,
    FinancialStatementRepository,
)
from app.services.access import AccessGuard

logger = logging.getLogger(__name__)


class StatementService:
    def __init__(self, session: AsyncSession, clock: Clock | None = None):
        self._clock = clock or SystemClock()
        self._guard = AccessGuard(session)
        self._divisions = DivisionRepository(session)
        self._auditors = AuditorRepository(session)
        self._financial = FinancialStatementRepository(session)
        self._audit = AuditStatementRepository(session)

    async def upload_financial_statement(self, caller_id: str, url: str) -> FinancialStatement:
        _require_payload(caller_id, url)
        manager = await self._guard.authorize(
            caller_id, Role.DIVISION_MANAGER, "Fail to upload financial statement"
        )
        division = await self._divisions.get(manager.related_id)
        if division is None:
            raise NotFoundError("Division", manager.related_id or None)

        statement = await self._financial.insert(
            FinancialStatement(
                id=new_id(),
                company_id=division.company_id,
                url=url,
                uploaded_by=division.id,
                uploaded_at=self._clock.now(),
            )
        )
        logger.info(
            "Financial statement %s uploaded by division %s", statement.id, division.id
        )
        return statement

    async def upload_audit_statement(self, caller_id: str, url: str) -> AuditStatement:
        _require_payload(caller_id, url)
        user = await self._guard.authorize(
            caller_id, Role.AUDITOR, "Fail to upload audit statement"
        )
        auditor = await self._auditors.get(user.related_id)
        if auditor is None:
            raise NotFoundError("Auditor", user.related_id or None)

        statement = await self._audit.insert(
            AuditStatement(
                id=new_id(),
                company_id=auditor.company_id,
                url=url,
                uploaded_by=auditor.id,
                uploaded_at=self._clock.now(),
            )
        )
        logger.info("Audit statement %s uploaded by auditor %s", statement.id, auditor.id)
        return statement

    async def list_financial_statements(self, caller_id: str) -> list[FinancialStatement]:
        executive = await self._guard.authorize(caller_id, Role.EXECUTIVE)
        return await self._financial.list_for_company(executive.related_id)

    async def list_audit_statements(self, caller_id: str) -> list[AuditStatement]:
        executive = await self._guard.authorize(caller_id, Role.EXECUTIVE)
        return await self._audit.list_for_company(executive.related_id)


def _require_payload(caller_id: str, url: str) -> None:
    if not caller_id or not url:
        raise BadPayloadError("Bad payload: user id and url are required")
