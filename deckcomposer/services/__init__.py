from deckcomposer.services.deck_composer import DeckComposer, InvalidPositionError
from deckcomposer.services.match_launcher import MatchLauncher
from deckcomposer.services.notices import (
    deck_progress,
    launch_label,
    pool_heading,
    rejection_notice,
)

__all__ = [
    "DeckComposer",
    "InvalidPositionError",
    "MatchLauncher",
    "deck_progress",
    "launch_label",
    "pool_heading",
    "rejection_notice",
]
