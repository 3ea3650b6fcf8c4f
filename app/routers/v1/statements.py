"""Statement router — uploads by verified parties, listings for the executive."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, get_clock
from app.core.response import DataResponse, envelope
from app.db.base import get_db
from app.routers.v1.deps import get_caller_id
from app.schemas.statement import StatementOut, StatementUpload
from app.services.statements import StatementService

router = APIRouter(prefix="/statements", tags=["Statements"])


def _svc(session: AsyncSession, clock: Clock | None = None) -> StatementService:
    return StatementService(session, clock)


@router.post(
    "/financial",
    response_model=DataResponse[StatementOut],
    status_code=status.HTTP_201_CREATED,
)
async def upload_financial_statement(
    body: StatementUpload,
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Division managers only."""
    statement = await _svc(session, clock).upload_financial_statement(caller_id, body.url)
    return envelope(
        StatementOut.model_validate(statement), "Successfully uploaded financial statement"
    )


@router.post(
    "/audit",
    response_model=DataResponse[StatementOut],
    status_code=status.HTTP_201_CREATED,
)
async def upload_audit_statement(
    body: StatementUpload,
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Auditors only."""
    statement = await _svc(session, clock).upload_audit_statement(caller_id, body.url)
    return envelope(
        StatementOut.model_validate(statement), "Successfully uploaded audit statement"
    )


@router.get("/financial", response_model=DataResponse[list[StatementOut]])
async def list_financial_statements(
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
):
    items = await _svc(session).list_financial_statements(caller_id)
    return envelope([StatementOut.model_validate(s) for s in items])


@router.get("/audit", response_model=DataResponse[list[StatementOut]])
async def list_audit_statements(
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
):
    items = await _svc(session).list_audit_statements(caller_id)
    return envelope([StatementOut.model_validate(s) for s in items])
