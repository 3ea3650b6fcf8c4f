"""Shared router dependencies."""

from fastapi import Header


def get_caller_id(
    x_user_id: str = Header(default="", description="Id of the calling user"),
) -> str:
    """Caller identity from the ``X-User-Id`` header; empty when absent.

    Emptiness is reported by the services as a bad payload, not here.
    """
    return x_user_id.strip()
