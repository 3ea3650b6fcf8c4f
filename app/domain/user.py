"""SQLAlchemy ORM model for Users.

A user's ``role`` and ``related_id`` always describe its *current* authority:
the Company, Division or Auditor it controls. Pending users (created with a
request) have an empty ``related_id`` until the request is accepted.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.enums import Role
from app.domain.mixins import IdMixin, UTCDateTime, enum_column


class User(Base, IdMixin):
    __tablename__ = "users"

    role: Mapped[Role] = mapped_column(enum_column(Role), nullable=False)
    # Weak back-reference (no FK); "" while a request is pending
    related_id: Mapped[str] = mapped_column(String(36), default="", nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    @property
    def is_pending(self) -> bool:
        return not self.related_id
