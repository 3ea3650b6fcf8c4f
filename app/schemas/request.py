"""Verification request Pydantic schemas."""


from datetime import datetime

from app.domain.enums import RequestKind, RequestStatus, Role
from app.schemas.common import CamelModel

class DivisionRequestCreate(CamelModel):
    company_id: str = ""
    division_name: str = ""

class AuditorRequestCreate(CamelModel):
    company_id: str = ""

class RequestOut(CamelModel):
    id: str
    user_id: str
    kind: RequestKind
    role: Role
    status: RequestStatus
    company_id: str
    division_name: str | None = None
    created_at: datetime

class RequestSubmittedOut(CamelModel):
    request_id: str
    user_id: str

class RequestAcceptedOut(CamelModel):
    request: RequestOut
    user_id: str
    role: Role
    # Id of the Division or Auditor created by the acceptance
    related_id: str
