"""SQLAlchemy ORM models for uploaded statements (append-only, never updated or deleted)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import IdMixin, UTCDateTime


class StatementMixin(IdMixin):
    company_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    # Id of the uploading Division / Auditor
    uploaded_by: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    uploaded_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)


class FinancialStatement(Base, StatementMixin):
    __tablename__ = "financial_statements"


class AuditStatement(Base, StatementMixin):
    __tablename__ = "audit_statements"
