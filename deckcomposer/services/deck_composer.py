"""
Deck composition service.

DeckComposer owns an in-progress deck built from an OwnedPool and is the
single authority on which additions and removals are legal.

INVARIANTS (hold after every call):
- 0 <= len(deck) <= deck_size
- count_in_deck(d) <= copy_limit(d) for every definition d
- is_valid() iff len(deck) == deck_size

Rejected additions are reported as values (AddResult), never raised.
Removing an out-of-range position is a caller bug and raises.
"""

import logging
from collections.abc import Callable, Iterable

from deckcomposer.config import settings
from deckcomposer.models.card import CardDefinition, DefinitionId
from deckcomposer.models.deck import (
    AddResult,
    DeckEntry,
    DeckStatus,
    DeckSubmission,
    GameMode,
    RejectionReason,
)
from deckcomposer.models.failure import DeckIncompleteError, FailureKind, KnownError
from deckcomposer.models.owned_pool import OwnedPool

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[tuple[CardDefinition, ...], GameMode], object]


class InvalidPositionError(ValueError):
    """Raised when a removal targets a position outside the deck."""

    def __init__(self, position: object, deck_length: int) -> None:
        self.position = position
        self.deck_length = deck_length
        super().__init__(
            f"Position {position!r} is out of range for a deck of {deck_length} cards"
        )


class DeckComposer:
    """
    Mutable aggregate holding one deck under construction.

    Derived views (counts, remaining, validity) are recomputed from the
    current deck on every call, so they cannot go stale after a mutation.

    Usage:
        composer = DeckComposer(pool)
        result = composer.add_card(definition)
        if not result:
            show_notice(result.reason)
        if composer.is_valid():
            composer.submit(GameMode.PRACTICE)
    """

    def __init__(
        self,
        pool: OwnedPool,
        *,
        deck_size: int | None = None,
        max_duplicates: int | None = None,
        enforce_ownership: bool | None = None,
        on_submit: SubmitHandler | None = None,
        initial_cards: Iterable[CardDefinition] = (),
    ) -> None:
        self.pool = pool
        self.deck_size = settings.deck_size if deck_size is None else deck_size
        self.max_duplicates = settings.max_duplicates if max_duplicates is None else max_duplicates
        self.enforce_ownership = (
            settings.enforce_ownership if enforce_ownership is None else enforce_ownership
        )
        self.on_submit = on_submit

        if self.deck_size < 1:
            raise ValueError(f"deck_size must be >= 1, got {self.deck_size}")
        if self.max_duplicates < 1:
            raise ValueError(f"max_duplicates must be >= 1, got {self.max_duplicates}")

        self._deck: list[CardDefinition] = []
        for card in initial_cards:
            result = self.add_card(card)
            if not result:
                raise ValueError(
                    f"Initial deck breaks a composition rule at {card.definition_id!r}: "
                    f"{result.reason.value if result.reason else 'rejected'}"
                )

    def __len__(self) -> int:
        return len(self._deck)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_card(self, definition: CardDefinition) -> AddResult:
        """
        Append a copy of a definition to the end of the deck.

        Checks run in order and the first failure wins:
        1. The deck is not full
        2. The definition is below its copy limit

        Returns:
            AddResult with the new entry, or with the rejection reason.
            A rejected request leaves the deck unchanged.
        """
        if len(self._deck) >= self.deck_size:
            logger.info(
                "Rejected %r: deck full (%d cards)", definition.definition_id, self.deck_size
            )
            return AddResult.rejected(RejectionReason.DECK_FULL)

        definition_id = definition.definition_id
        in_deck = self.count_of(definition_id)
        if in_deck >= self.copy_limit(definition_id):
            logger.info(
                "Rejected %r: duplicate limit reached (%d in deck)", definition_id, in_deck
            )
            return AddResult.rejected(RejectionReason.DUPLICATE_LIMIT)

        self._deck.append(definition)
        entry = DeckEntry(position=len(self._deck) - 1, definition=definition)
        logger.debug("Added %r at position %d", definition_id, entry.position)
        return AddResult.added(entry)

    def remove_card(self, position: int) -> DeckEntry:
        """
        Remove the entry at a position in the current deck order.

        Later entries shift left, so a position always refers to whatever
        card occupies it now, not to a card's original slot.

        Raises:
            InvalidPositionError: If position is not an index into the deck
        """
        if (
            not isinstance(position, int)
            or isinstance(position, bool)
            or not 0 <= position < len(self._deck)
        ):
            raise InvalidPositionError(position, len(self._deck))

        definition = self._deck.pop(position)
        logger.debug("Removed %r from position %d", definition.definition_id, position)
        return DeckEntry(position=position, definition=definition)

    def clear(self) -> None:
        """Empty the deck."""
        self._deck.clear()

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def copy_limit(self, definition_id: DefinitionId) -> int:
        """Maximum copies of a definition this deck may hold."""
        return self.pool.copy_limit(definition_id, self.max_duplicates, self.enforce_ownership)

    def count_of(self, definition_id: DefinitionId) -> int:
        """Copies of a definition currently in the deck."""
        return sum(1 for card in self._deck if card.definition_id == definition_id)

    def counts_in_deck(self) -> dict[DefinitionId, int]:
        """Tally of definition_id -> copies in deck, in first-added order."""
        counts: dict[DefinitionId, int] = {}
        for card in self._deck:
            counts[card.definition_id] = counts.get(card.definition_id, 0) + 1
        return counts

    def remaining_in_pool(self) -> dict[DefinitionId, int]:
        """
        Copies of each pooled definition that may still be added.

        One entry per pool definition, in pool display order. Never
        negative.
        """
        counts = self.counts_in_deck()
        remaining: dict[DefinitionId, int] = {}
        for definition in self.pool:
            definition_id = definition.definition_id
            remaining[definition_id] = max(
                0, self.copy_limit(definition_id) - counts.get(definition_id, 0)
            )
        return remaining

    def is_selectable(self, definition_id: DefinitionId) -> bool:
        """Whether a pool card should be offered (not dimmed)."""
        if definition_id not in self.pool:
            return False
        return self.copy_limit(definition_id) - self.count_of(definition_id) > 0

    def cards(self) -> tuple[CardDefinition, ...]:
        """Deck contents in deck order."""
        return tuple(self._deck)

    def entries(self) -> list[DeckEntry]:
        """Deck contents as positioned entries."""
        return [DeckEntry(position=i, definition=card) for i, card in enumerate(self._deck)]

    def cards_needed(self) -> int:
        """Cards still missing before the deck is complete."""
        return self.deck_size - len(self._deck)

    def is_valid(self) -> bool:
        """A deck is valid only at exactly deck_size cards."""
        return len(self._deck) == self.deck_size

    def status(self) -> DeckStatus:
        return DeckStatus.COMPLETE if self.is_valid() else DeckStatus.BUILDING

    # -------------------------------------------------------------------------
    # Hand-off
    # -------------------------------------------------------------------------

    def submit(self, mode: GameMode | str) -> DeckSubmission:
        """
        Hand the finished deck to the submit handler.

        The deck is left in place; completion is not terminal.

        Args:
            mode: GameMode or its string value ("practice" / "ranked")

        Returns:
            The submitted snapshot

        Raises:
            DeckIncompleteError: If the deck is not valid
            KnownError: If mode is not a known GameMode
        """
        try:
            game_mode = GameMode(mode)
        except ValueError as e:
            raise KnownError(
                kind=FailureKind.INVALID_INPUT,
                message=f"Unknown match mode: {mode!r}",
                suggestion=f"Use one of: {', '.join(m.value for m in GameMode)}",
            ) from e

        if not self.is_valid():
            raise DeckIncompleteError(deck_size=self.deck_size, actual_size=len(self._deck))

        submission = DeckSubmission(cards=self.cards(), mode=game_mode)
        logger.info("Submitting %d-card deck for %s", len(submission.cards), game_mode.value)
        if self.on_submit is not None:
            self.on_submit(submission.cards, submission.mode)
        return submission
