from deckcomposer.models.card import CardDefinition, DefinitionId
from deckcomposer.models.deck import (
    AddResult,
    DeckEntry,
    DeckStatus,
    DeckSubmission,
    GameMode,
    MatchRequest,
    RejectionReason,
)
from deckcomposer.models.failure import (
    ApiResponse,
    ComposerError,
    DeckIncompleteError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    RankedRequiresLoginError,
    RefusalError,
    create_success,
    create_unknown_failure,
    finalize_response,
)
from deckcomposer.models.owned_pool import OwnedPool

__all__ = [
    "AddResult",
    "ApiResponse",
    "CardDefinition",
    "ComposerError",
    "DeckEntry",
    "DeckIncompleteError",
    "DeckStatus",
    "DeckSubmission",
    "DefinitionId",
    "FailureDetail",
    "FailureKind",
    "GameMode",
    "KnownError",
    "MatchRequest",
    "OutcomeType",
    "OwnedPool",
    "RankedRequiresLoginError",
    "RefusalError",
    "RejectionReason",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
]
