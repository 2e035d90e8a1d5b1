"""
Deck composer API endpoints.

Holds composer sessions in process memory and exposes the composer's
operations and derived state. Rendering stays with the client; this
layer only forwards requests and reports classified outcomes.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from deckcomposer.config import settings
from deckcomposer.models.card import CardDefinition
from deckcomposer.models.deck import GameMode, MatchRequest
from deckcomposer.models.failure import (
    ApiResponse,
    FailureKind,
    KnownError,
    RefusalError,
    create_success,
)
from deckcomposer.models.owned_pool import OwnedPool
from deckcomposer.services.deck_composer import DeckComposer, InvalidPositionError
from deckcomposer.services.match_launcher import MatchLauncher
from deckcomposer.services.notices import (
    deck_progress,
    launch_label,
    pool_heading,
    rejection_notice,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/composer", tags=["composer"])


# =============================================================================
# SESSION STORE
# =============================================================================


@dataclass
class ComposerSession:
    """One player's deck-building session."""

    session_id: str
    composer: DeckComposer
    is_guest: bool
    locale: str
    last_match: MatchRequest | None = None

    def record_match(self, match: MatchRequest) -> None:
        self.last_match = match


class SessionStore:
    """Process-local composer sessions keyed by id."""

    def __init__(self) -> None:
        self._sessions: dict[str, ComposerSession] = {}

    def create(self, composer: DeckComposer, is_guest: bool, locale: str) -> ComposerSession:
        session = ComposerSession(
            session_id=uuid.uuid4().hex,
            composer=composer,
            is_guest=is_guest,
            locale=locale,
        )
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> ComposerSession:
        """
        Look up a session.

        Raises:
            KnownError: NOT_FOUND if no such session exists
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise KnownError(
                kind=FailureKind.NOT_FOUND,
                message=f"Composer session '{session_id}' not found",
                suggestion="Start a new deck-building session.",
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return session

    def remove(self, session_id: str) -> ComposerSession:
        """
        Drop a session and return it.

        Raises:
            KnownError: NOT_FOUND if no such session exists
        """
        session = self.get(session_id)
        del self._sessions[session_id]
        return session

    def __len__(self) -> int:
        return len(self._sessions)


_store = SessionStore()
_launcher = MatchLauncher()


def get_session_store() -> SessionStore:
    return _store


def get_match_launcher() -> MatchLauncher:
    return _launcher


# =============================================================================
# REQUEST / RESPONSE MODELS
# =============================================================================


class PoolCardRequest(BaseModel):
    """One unlocked card definition and how many copies are owned."""

    definition_id: int | str
    name: str = ""
    quantity: int = Field(default=1, ge=0)


class CreateSessionRequest(BaseModel):
    """Request model for starting a deck-building session."""

    pool: list[PoolCardRequest] = Field(
        ...,
        description="Unlocked cards in display order",
    )
    is_guest: bool = False
    locale: str | None = None


class AddCardRequest(BaseModel):
    definition_id: int | str


class LaunchRequest(BaseModel):
    mode: GameMode


class DeckSlot(BaseModel):
    position: int
    definition_id: int | str
    name: str


class PoolCardState(BaseModel):
    """Derived state of one pool card."""

    definition_id: int | str
    name: str
    owned: int
    in_deck: int
    remaining: int
    selectable: bool


class SessionLabels(BaseModel):
    """Localized display text for the session's current state."""

    practice: str
    ranked: str
    deck_progress: str
    pool_heading: str


class ComposerState(BaseModel):
    """Response model for a session's current deck and derived views."""

    session_id: str
    deck: list[DeckSlot]
    pool: list[PoolCardState]
    deck_size: int
    max_duplicates: int
    cards_needed: int
    is_valid: bool
    status: str
    is_guest: bool
    labels: SessionLabels


class MatchResponse(BaseModel):
    match_id: str
    mode: GameMode
    opponent: str
    definition_ids: list[int | str]


def _state(session: ComposerSession) -> ComposerState:
    composer = session.composer
    counts = composer.counts_in_deck()
    remaining = composer.remaining_in_pool()
    needed = composer.cards_needed()

    return ComposerState(
        session_id=session.session_id,
        deck=[
            DeckSlot(
                position=entry.position,
                definition_id=entry.definition.definition_id,
                name=entry.definition.name,
            )
            for entry in composer.entries()
        ],
        pool=[
            PoolCardState(
                definition_id=definition.definition_id,
                name=definition.name,
                owned=owned,
                in_deck=counts.get(definition.definition_id, 0),
                remaining=remaining[definition.definition_id],
                selectable=remaining[definition.definition_id] > 0,
            )
            for definition, owned in composer.pool.items()
        ],
        deck_size=composer.deck_size,
        max_duplicates=composer.max_duplicates,
        cards_needed=needed,
        is_valid=composer.is_valid(),
        status=composer.status().value,
        is_guest=session.is_guest,
        labels=SessionLabels(
            practice=launch_label(GameMode.PRACTICE, needed, session.is_guest, session.locale),
            ranked=launch_label(GameMode.RANKED, needed, session.is_guest, session.locale),
            deck_progress=deck_progress(len(composer), composer.deck_size, session.locale),
            pool_heading=pool_heading(len(composer.pool), session.locale),
        ),
    )


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.post(
    "/sessions",
    response_model=ApiResponse[ComposerState],
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    request: CreateSessionRequest,
    store: Annotated[SessionStore, Depends(get_session_store)],
    launcher: Annotated[MatchLauncher, Depends(get_match_launcher)],
) -> ApiResponse[Any]:
    """
    Start a deck-building session with an empty deck.

    Pool entries with quantity 0 are dropped. The session's composer
    submits straight into the match launcher.
    """
    pool = OwnedPool.from_quantities(
        (CardDefinition(definition_id=card.definition_id, name=card.name), card.quantity)
        for card in request.pool
    )
    session = store.create(
        DeckComposer(pool),
        is_guest=request.is_guest,
        locale=request.locale or settings.default_locale,
    )
    session.composer.on_submit = launcher.bind(
        is_guest=session.is_guest, on_queued=session.record_match
    )
    logger.info("Started composer session %s with %d pool cards", session.session_id, len(pool))
    return create_success(_state(session))


@router.get("/sessions/{session_id}", response_model=ApiResponse[ComposerState])
async def get_session_state(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse[Any]:
    """Get the current deck and derived views of a session."""
    return create_success(_state(store.get(session_id)))


@router.delete("/sessions/{session_id}", response_model=ApiResponse[ComposerState])
async def end_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse[Any]:
    """End a session. Returns its final state."""
    session = store.remove(session_id)
    logger.info("Ended composer session %s", session.session_id)
    return create_success(_state(session))


@router.post("/sessions/{session_id}/cards", response_model=ApiResponse[ComposerState])
async def add_card(
    session_id: str,
    request: AddCardRequest,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse[Any]:
    """
    Add one copy of a pool card to the end of the deck.

    A rejected add returns a refusal carrying the localized notice.
    """
    session = store.get(session_id)
    composer = session.composer

    definition = composer.pool.get(request.definition_id)
    if definition is None:
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message=f"Card {request.definition_id!r} is not in this session's pool",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    result = composer.add_card(definition)
    if result.reason is not None:
        raise RefusalError(
            kind=FailureKind(result.reason.value),
            message=rejection_notice(
                result.reason,
                deck_size=composer.deck_size,
                max_duplicates=composer.max_duplicates,
                locale=session.locale,
            ),
            detail=f"definition_id={request.definition_id!r}",
        )

    return create_success(_state(session))


@router.delete(
    "/sessions/{session_id}/cards/{position}",
    response_model=ApiResponse[ComposerState],
)
async def remove_card(
    session_id: str,
    position: int,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse[Any]:
    """Remove the card at a position in the current deck order."""
    session = store.get(session_id)

    try:
        session.composer.remove_card(position)
    except InvalidPositionError as e:
        raise KnownError(
            kind=FailureKind.INVALID_POSITION,
            message=str(e),
            suggestion="Refresh the deck view and try again.",
        ) from e

    return create_success(_state(session))


@router.post("/sessions/{session_id}/launch", response_model=ApiResponse[MatchResponse])
async def launch_match(
    session_id: str,
    request: LaunchRequest,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ApiResponse[Any]:
    """
    Submit a complete deck; the session's bound launcher queues the match.

    Incomplete decks fail with DECK_INCOMPLETE; guest sessions are
    refused ranked matches.
    """
    session = store.get(session_id)
    session.last_match = None
    session.composer.submit(request.mode)

    match = session.last_match
    if match is None:
        raise RuntimeError(f"Session {session_id} submitted without queueing a match")

    return create_success(
        MatchResponse(
            match_id=match.match_id,
            mode=match.mode,
            opponent=match.opponent,
            definition_ids=match.definition_ids(),
        )
    )
