"""Closed enumerations shared by the domain models and schemas."""

from enum import Enum


class Role(str, Enum):
    EXECUTIVE = "management"
    AUDITOR = "auditor"
    DIVISION_MANAGER = "division_manager"


class RequestStatus(str, Enum):
    WAITING = "waiting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RequestKind(str, Enum):
    """What an accepted request creates."""

    DIVISION = "division"
    AUDITOR = "auditor"


# Allowed status moves; accepted and rejected are terminal.
REQUEST_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.WAITING: frozenset({RequestStatus.ACCEPTED, RequestStatus.REJECTED}),
    RequestStatus.ACCEPTED: frozenset(),
    RequestStatus.REJECTED: frozenset(),
}

# Role the pending user is created with, and promoted to, per request kind
ROLE_FOR_KIND: dict[RequestKind, Role] = {
    RequestKind.DIVISION: Role.DIVISION_MANAGER,
    RequestKind.AUDITOR: Role.AUDITOR,
}
