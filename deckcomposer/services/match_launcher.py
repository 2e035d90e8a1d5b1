"""
Match launcher.

Receives finished decks from a DeckComposer and queues a match for them.
Ranked play is refused for guest sessions; practice is open to everyone.
No match is simulated here: a matchmaker drains the queue with
next_match().
"""

import logging
import uuid
from collections.abc import Callable

from deckcomposer.models.card import CardDefinition
from deckcomposer.models.deck import DeckSubmission, GameMode, MatchRequest
from deckcomposer.models.failure import RankedRequiresLoginError

logger = logging.getLogger(__name__)

OPPONENTS: dict[GameMode, str] = {
    GameMode.PRACTICE: "cpu",
    GameMode.RANKED: "player",
}


class MatchLauncher:
    """FIFO queue of match requests created from submitted decks."""

    def __init__(self) -> None:
        self.pending: list[MatchRequest] = []

    def launch(self, submission: DeckSubmission, is_guest: bool = False) -> MatchRequest:
        """
        Queue a match for a submitted deck.

        Raises:
            RankedRequiresLoginError: If a guest asks for a ranked match
        """
        if submission.mode == GameMode.RANKED and is_guest:
            logger.warning("Refused ranked match for guest session")
            raise RankedRequiresLoginError()

        request = MatchRequest(
            match_id=uuid.uuid4().hex,
            mode=submission.mode,
            cards=submission.cards,
            opponent=OPPONENTS[submission.mode],
        )
        self.pending.append(request)
        logger.info(
            "Queued %s match %s against %s", request.mode.value, request.match_id, request.opponent
        )
        return request

    def bind(
        self,
        is_guest: bool = False,
        on_queued: Callable[[MatchRequest], object] | None = None,
    ) -> Callable[[tuple[CardDefinition, ...], GameMode], MatchRequest]:
        """
        Build a DeckComposer on_submit handler for one session.

        Args:
            is_guest: Guest flag applied to every launch from this handler
            on_queued: Called with each queued request
        """

        def on_submit(cards: tuple[CardDefinition, ...], mode: GameMode) -> MatchRequest:
            request = self.launch(DeckSubmission(cards=cards, mode=mode), is_guest=is_guest)
            if on_queued is not None:
                on_queued(request)
            return request

        return on_submit

    def next_match(self) -> MatchRequest | None:
        """Remove and return the oldest queued request, or None if empty."""
        if not self.pending:
            return None
        return self.pending.pop(0)

    def __len__(self) -> int:
        return len(self.pending)
