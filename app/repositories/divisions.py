"""Repositories for the verified parties created by accepted requests."""

from app.domain.division import Auditor, Division
from app.repositories.base import BaseRepository


class DivisionRepository(BaseRepository[Division]):
    model = Division
    order_by = "verified_at"


class AuditorRepository(BaseRepository[Auditor]):
    model = Auditor
    order_by = "verified_at"
