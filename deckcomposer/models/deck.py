from dataclasses import dataclass
from enum import Enum

from deckcomposer.models.card import CardDefinition, DefinitionId


class GameMode(str, Enum):
    """Match a finished deck is launched into."""

    PRACTICE = "practice"  # versus CPU
    RANKED = "ranked"  # versus another player


class DeckStatus(str, Enum):
    """Whether the deck has reached the required size."""

    BUILDING = "building"
    COMPLETE = "complete"


class RejectionReason(str, Enum):
    """Why an add request was refused. State is unchanged in both cases."""

    DECK_FULL = "deck_full"
    DUPLICATE_LIMIT = "duplicate_limit"


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    A single slot in the deck.

    Attributes:
        position: Index in the current deck order. Positions shift
            left when an earlier entry is removed.
        definition: The card definition this slot refers to
    """

    position: int
    definition: CardDefinition


@dataclass(frozen=True, slots=True)
class AddResult:
    """Outcome of an add request."""

    accepted: bool
    reason: RejectionReason | None = None
    entry: DeckEntry | None = None

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def added(cls, entry: DeckEntry) -> "AddResult":
        return cls(accepted=True, entry=entry)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "AddResult":
        return cls(accepted=False, reason=reason)


@dataclass(frozen=True, slots=True)
class DeckSubmission:
    """
    Snapshot of a complete deck handed to the match launcher.

    Attributes:
        cards: Deck contents in deck order
        mode: Requested match mode
    """

    cards: tuple[CardDefinition, ...]
    mode: GameMode


@dataclass(frozen=True, slots=True)
class MatchRequest:
    """A match queued by the launcher for a submitted deck."""

    match_id: str
    mode: GameMode
    cards: tuple[CardDefinition, ...]
    opponent: str  # "cpu" or "player"

    def definition_ids(self) -> list[DefinitionId]:
        """Definition ids in deck order."""
        return [card.definition_id for card in self.cards]
