"""Repositories package — one keyed store per entity kind.

Rule: repositories are the only code that builds SQLAlchemy queries.
"""

from app.repositories.companies import CompanyRepository
from app.repositories.divisions import AuditorRepository, DivisionRepository
from app.repositories.requests import RequestRepository
from app.repositories.statements import AuditStatementRepository, FinancialStatementRepository
from app.repositories.users import UserRepository

__all__ = [
    "AuditStatementRepository",
    "AuditorRepository",
    "CompanyRepository",
    "DivisionRepository",
    "FinancialStatementRepository",
    "RequestRepository",
    "UserRepository",
]
