"""SQLAlchemy ORM models for the verified parties: Divisions and Auditors.

Both rows exist only as the result of an accepted request.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import IdMixin, UTCDateTime


class Division(Base, IdMixin):
    __tablename__ = "divisions"

    company_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    division_name: Mapped[str] = mapped_column(String(255), nullable=False)
    verified_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)


class Auditor(Base, IdMixin):
    __tablename__ = "auditors"

    company_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    verified_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
