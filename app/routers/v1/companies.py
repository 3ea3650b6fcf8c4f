"""Company router — register, update and fetch companies."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, get_clock
from app.core.response import DataResponse, envelope
from app.db.base import get_db
from app.schemas.company import CompanyCreatedOut, CompanyOut, CompanyPayload
from app.services.company import CompanyService

router = APIRouter(prefix="/companies", tags=["Companies"])


def _svc(session: AsyncSession, clock: Clock | None = None) -> CompanyService:
    return CompanyService(session, clock)


@router.post(
    "", response_model=DataResponse[CompanyCreatedOut], status_code=status.HTTP_201_CREATED
)
async def create_company(
    body: CompanyPayload,
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Register a company together with its executive user."""
    created = await _svc(session, clock).create_company(body)
    return envelope(
        CompanyCreatedOut(company_id=created.company.id, executive_id=created.executive.id),
        "Company created successfully",
    )


@router.get("/{company_id}", response_model=DataResponse[CompanyOut])
async def get_company(
    company_id: str,
    session: AsyncSession = Depends(get_db),
):
    company = await _svc(session).get_company(company_id)
    return envelope(CompanyOut.model_validate(company))


@router.put("/{company_id}", response_model=DataResponse[CompanyOut])
async def update_company(
    company_id: str,
    body: CompanyPayload,
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Replace all descriptive fields of a company."""
    company = await _svc(session, clock).update_company(company_id, body)
    return envelope(CompanyOut.model_validate(company), "Company updated successfully")
