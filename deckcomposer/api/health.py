"""
Health check endpoints.

Provides a liveness check. Sessions live in memory, so there is no
dependency to check for readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from deckcomposer.api.composer import SessionStore, get_session_store

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    sessions: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health(
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> HealthResponse:
    """
    Liveness check.

    Returns healthy if the service is running, with the number of
    open composer sessions.
    """
    return HealthResponse(status="healthy", sessions=len(store))
