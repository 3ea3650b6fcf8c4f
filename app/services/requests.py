"""Request lifecycle service — the waiting / accepted / rejected state machine.

A request is submitted together with a *pending* user (role set, related_id
empty). The executive of the target company resolves it:

  accept  -> a Division or Auditor row is created, the pending user is
             promoted in place (role + related_id overwritten, created_at
             kept) and the request becomes ``accepted``
  reject  -> only the request changes, to ``rejected``; the pending user is
             left as-is

``accepted`` and ``rejected`` are terminal: resolving a request twice raises
ConflictError and creates nothing.

Write order inside an accept: subordinate record, then the user that points
at it, then the request status. The router's session commits all three or
none.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.core.exceptions import BadPayloadError, ConflictError, NotFoundError
from app.domain.division import Auditor, Division
from app.domain.enums import (
    REQUEST_TRANSITIONS,
    ROLE_FOR_KIND,
    RequestKind,
    RequestStatus,
    Role,
)
from app.domain.mixins import new_id
from app.domain.request import VerificationRequest
from app.domain.user import User
from app.repositories.companies import CompanyRepository
from app.repositories.divisions import AuditorRepository, DivisionRepository
from app.repositories.requests import RequestRepository
from app.repositories.users import UserRepository
from app.services.access import AccessGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestSubmitted:
    request: VerificationRequest
    user: User


@dataclass(frozen=True)
class RequestAccepted:
    request: VerificationRequest
    user: User
    division: Division | None = None
    auditor: Auditor | None = None

    @property
    def entity_id(self) -> str:
        return self.division.id if self.division is not None else self.auditor.id


class RequestService:
    def __init__(self, session: AsyncSession, clock: Clock | None = None):
        self._clock = clock or SystemClock()
        self._guard = AccessGuard(session)
        self._companies = CompanyRepository(session)
        self._users = UserRepository(session)
        self._requests = RequestRepository(session)
        self._divisions = DivisionRepository(session)
        self._auditors = AuditorRepository(session)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def create_division_request(
        self, company_id: str, division_name: str
    ) -> RequestSubmitted:
        if not company_id or not division_name:
            raise BadPayloadError("Bad payload: company id and division name are required")
        return await self._submit(company_id, RequestKind.DIVISION, division_name)

    async def create_auditor_request(self, company_id: str) -> RequestSubmitted:
        if not company_id:
            raise BadPayloadError("Bad payload: company id is required")
        return await self._submit(company_id, RequestKind.AUDITOR, None)

    async def _submit(
        self, company_id: str, kind: RequestKind, division_name: str | None
    ) -> RequestSubmitted:
        if await self._companies.get(company_id) is None:
            raise NotFoundError("Company", company_id)

        now = self._clock.now()
        role = ROLE_FOR_KIND[kind]
        pending = User(id=new_id(), role=role, related_id="", created_at=now)
        request = VerificationRequest(
            id=new_id(),
            user_id=pending.id,
            kind=kind,
            role=role,
            status=RequestStatus.WAITING,
            company_id=company_id,
            division_name=division_name,
            created_at=now,
        )

        pending = await self._users.insert(pending)
        request = await self._requests.insert(request)
        logger.info(
            "%s request %s submitted for company %s (pending user %s)",
            kind.value.capitalize(), request.id, company_id, pending.id,
        )
        return RequestSubmitted(request=request, user=pending)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_requests(self, caller_id: str) -> list[VerificationRequest]:
        executive = await self._guard.authorize(caller_id, Role.EXECUTIVE)
        return await self._requests.list_for_company(executive.related_id)

    async def list_waiting_requests(self, caller_id: str) -> list[VerificationRequest]:
        executive = await self._guard.authorize(caller_id, Role.EXECUTIVE)
        return await self._requests.list_for_company(
            executive.related_id, status=RequestStatus.WAITING
        )

    async def get_request(self, caller_id: str, request_id: str) -> VerificationRequest:
        _, request = await self._load_owned(caller_id, request_id)
        return request

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def accept_request(self, caller_id: str, request_id: str) -> RequestAccepted:
        executive, request = await self._load_owned(caller_id, request_id)
        self._check_transition(request, RequestStatus.ACCEPTED)

        pending = await self._users.get(request.user_id)
        if pending is None:
            raise NotFoundError("User", request.user_id)

        now = self._clock.now()
        division = auditor = None
        if request.kind == RequestKind.DIVISION:
            division = await self._divisions.insert(
                Division(
                    id=new_id(),
                    company_id=executive.related_id,
                    division_name=request.division_name,
                    verified_at=now,
                )
            )
            entity_id = division.id
        else:
            auditor = await self._auditors.insert(
                Auditor(id=new_id(), company_id=executive.related_id, verified_at=now)
            )
            entity_id = auditor.id

        promoted = await self._users.insert(
            User(
                id=pending.id,
                role=ROLE_FOR_KIND[request.kind],
                related_id=entity_id,
                created_at=pending.created_at,
            )
        )
        request = await self._set_status(request, RequestStatus.ACCEPTED)
        logger.info(
            "Request %s accepted by %s: user %s now %s of %s",
            request.id, executive.id, promoted.id, promoted.role.value, entity_id,
        )
        return RequestAccepted(request=request, user=promoted, division=division, auditor=auditor)

    async def reject_request(self, caller_id: str, request_id: str) -> VerificationRequest:
        executive, request = await self._load_owned(caller_id, request_id)
        self._check_transition(request, RequestStatus.REJECTED)

        request = await self._set_status(request, RequestStatus.REJECTED)
        logger.info("Request %s rejected by %s", request.id, executive.id)
        return request

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _load_owned(
        self, caller_id: str, request_id: str
    ) -> tuple[User, VerificationRequest]:
        if not caller_id or not request_id:
            raise BadPayloadError("Bad payload: caller id and request id are required")
        executive = await self._guard.authorize(caller_id, Role.EXECUTIVE)
        request = await self._requests.get(request_id)
        if request is None:
            raise NotFoundError("Request", request_id)
        self._guard.require_owner(executive, request.company_id)
        return executive, request

    @staticmethod
    def _check_transition(request: VerificationRequest, target: RequestStatus) -> None:
        if target not in REQUEST_TRANSITIONS[request.status]:
            raise ConflictError(
                f"Request '{request.id}' is already {request.status.value}"
            )

    async def _set_status(
        self, request: VerificationRequest, status: RequestStatus
    ) -> VerificationRequest:
        request.status = status
        return await self._requests.insert(request)
