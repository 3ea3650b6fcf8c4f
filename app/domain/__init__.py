"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  enums.py      — Role, RequestStatus, RequestKind and the request transition table
  user.py       — Users and the role / related_id authority pointer
  company.py    — Companies registered by an executive
  division.py   — Divisions and Auditors (created by accepted requests)
  request.py    — Verification requests (waiting / accepted / rejected)
  statement.py  — Financial and audit statements (append-only)
  mixins.py     — Shared IdMixin, UTCDateTime
"""

from app.domain.company import Company
from app.domain.division import Auditor, Division
from app.domain.enums import RequestKind, RequestStatus, Role
from app.domain.request import VerificationRequest
from app.domain.statement import AuditStatement, FinancialStatement
from app.domain.user import User

__all__ = [
    "AuditStatement",
    "Auditor",
    "Company",
    "Division",
    "FinancialStatement",
    "RequestKind",
    "RequestStatus",
    "Role",
    "User",
    "VerificationRequest",
]
