"""Verification request router.

Submission is open (the pending user does not exist yet); listing and
resolution require the executive of the request's company in ``X-User-Id``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, get_clock
from app.core.response import DataResponse, envelope
from app.db.base import get_db
from app.routers.v1.deps import get_caller_id
from app.schemas.request import (
    AuditorRequestCreate,
    DivisionRequestCreate,
    RequestAcceptedOut,
    RequestOut,
    RequestSubmittedOut,
)
from app.services.requests import RequestService, RequestSubmitted

router = APIRouter(prefix="/requests", tags=["Requests"])


def _svc(session: AsyncSession, clock: Clock | None = None) -> RequestService:
    return RequestService(session, clock)


def _submitted(result: RequestSubmitted) -> RequestSubmittedOut:
    return RequestSubmittedOut(request_id=result.request.id, user_id=result.user.id)


# ------------------------------------------------------------------
# Submission
# ------------------------------------------------------------------

@router.post(
    "/division",
    response_model=DataResponse[RequestSubmittedOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_division_request(
    body: DivisionRequestCreate,
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    result = await _svc(session, clock).create_division_request(
        body.company_id, body.division_name
    )
    return envelope(_submitted(result), "Division request successfully created")


@router.post(
    "/auditor",
    response_model=DataResponse[RequestSubmittedOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_auditor_request(
    body: AuditorRequestCreate,
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    result = await _svc(session, clock).create_auditor_request(body.company_id)
    return envelope(_submitted(result), "Auditor request successfully created")


# ------------------------------------------------------------------
# Listing
# ------------------------------------------------------------------

@router.get("", response_model=DataResponse[list[RequestOut]])
async def list_requests(
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
):
    """All requests for the caller's company."""
    items = await _svc(session).list_requests(caller_id)
    return envelope([RequestOut.model_validate(r) for r in items])


@router.get("/waiting", response_model=DataResponse[list[RequestOut]])
async def list_waiting_requests(
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
):
    items = await _svc(session).list_waiting_requests(caller_id)
    return envelope([RequestOut.model_validate(r) for r in items])


@router.get("/{request_id}", response_model=DataResponse[RequestOut])
async def get_request(
    request_id: str,
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
):
    request = await _svc(session).get_request(caller_id, request_id)
    return envelope(RequestOut.model_validate(request))


# ------------------------------------------------------------------
# Resolution
# ------------------------------------------------------------------

@router.post("/{request_id}/accept", response_model=DataResponse[RequestAcceptedOut])
async def accept_request(
    request_id: str,
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    result = await _svc(session, clock).accept_request(caller_id, request_id)
    return envelope(
        RequestAcceptedOut(
            request=RequestOut.model_validate(result.request),
            user_id=result.user.id,
            role=result.user.role,
            related_id=result.entity_id,
        ),
        "Request successfully accepted",
    )


@router.post("/{request_id}/reject", response_model=DataResponse[RequestOut])
async def reject_request(
    request_id: str,
    caller_id: str = Depends(get_caller_id),
    session: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    request = await _svc(session, clock).reject_request(caller_id, request_id)
    return envelope(RequestOut.model_validate(request), "Request successfully rejected")
