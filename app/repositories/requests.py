from app.domain.enums import RequestStatus
from app.domain.request import VerificationRequest
from app.repositories.base import BaseRepository


class RequestRepository(BaseRepository[VerificationRequest]):
    model = VerificationRequest
    order_by = "created_at"

    async def list_for_company(
        self, company_id: str, status: RequestStatus | None = None
    ) -> list[VerificationRequest]:
        if status is None:
            return await self.where(company_id=company_id)
        return await self.where(company_id=company_id, status=status)
