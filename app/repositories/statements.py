from app.domain.statement import AuditStatement, FinancialStatement
from app.repositories.base import BaseRepository


class FinancialStatementRepository(BaseRepository[FinancialStatement]):
    model = FinancialStatement
    order_by = "uploaded_at"

    async def list_for_company(self, company_id: str) -> list[FinancialStatement]:
        return await self.where(company_id=company_id)


class AuditStatementRepository(BaseRepository[AuditStatement]):
    model = AuditStatement
    order_by = "uploaded_at"

    async def list_for_company(self, company_id: str) -> list[AuditStatement]:
        return await self.where(company_id=company_id)
