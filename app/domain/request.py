"""SQLAlchemy ORM model for verification requests.

Named ``VerificationRequest`` to keep it apart from HTTP request objects;
the table is ``requests``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.enums import RequestKind, RequestStatus, Role
from app.domain.mixins import IdMixin, UTCDateTime, enum_column


class VerificationRequest(Base, IdMixin):
    __tablename__ = "requests"

    # The pending user awaiting promotion
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    kind: Mapped[RequestKind] = mapped_column(enum_column(RequestKind), nullable=False)
    role: Mapped[Role] = mapped_column(enum_column(Role), nullable=False)
    # waiting -> accepted | rejected; both terminal
    status: Mapped[RequestStatus] = mapped_column(
        enum_column(RequestStatus), default=RequestStatus.WAITING, nullable=False, index=True
    )
    company_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    # Only set for division requests
    division_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
