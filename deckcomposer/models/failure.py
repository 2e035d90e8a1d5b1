"""
Classified outcomes for the composer API.

Every response body is an ApiResponse whose outcome says how to read it:

- success: data holds the result
- refusal: a deck rule or access rule blocked the request; nothing changed
- known_failure: the request was malformed or named something missing
- unknown_failure: anything else, reported with a fixed message

INVARIANT: a response carries failure details iff it is not a success.
finalize_response() checks this before anything leaves the service.
"""

from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """What went wrong, for clients that branch on it."""

    # Malformed requests
    INVALID_INPUT = "invalid_input"
    INVALID_POSITION = "invalid_position"
    NOT_FOUND = "not_found"

    # Deck rules (the first two mirror RejectionReason values)
    DECK_FULL = "deck_full"
    DUPLICATE_LIMIT = "duplicate_limit"
    DECK_INCOMPLETE = "deck_incomplete"

    # Access rules
    LOGIN_REQUIRED = "login_required"

    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")

UNKNOWN_FAILURE_MESSAGE = (
    "I failed and I don't know why. Try simplifying the request or retrying."
)
UNKNOWN_FAILURE_SUGGESTION = "If this persists, please report the issue."


class FailureDetail(BaseModel):
    kind: FailureKind
    message: str = Field(..., description="Text that can be shown to the player as-is")
    detail: str | None = Field(default=None, description="Technical context, not for display")
    suggestion: str | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every composer endpoint."""

    outcome: OutcomeType
    data: T | None = None
    failure: FailureDetail | None = None


class ComposerError(Exception):
    """
    An error the API can explain to the player.

    Subclasses fix the outcome class and the default HTTP status; the
    exception handlers in main.py turn them into finalized envelopes.
    """

    outcome: ClassVar[OutcomeType]
    default_status: ClassVar[int]

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = self.default_status if status_code is None else status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        return ApiResponse(
            outcome=self.outcome,
            failure=FailureDetail(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            ),
        )


class KnownError(ComposerError):
    """The request cannot be served as sent (bad input, missing session or card)."""

    outcome = OutcomeType.KNOWN_FAILURE
    default_status = 400


class RefusalError(ComposerError):
    """A rule forbids the request. State is left unchanged."""

    outcome = OutcomeType.REFUSAL
    default_status = 409


class DeckIncompleteError(KnownError):
    """
    Raised when an incomplete deck is submitted.

    Partial decks are never valid; callers should have disabled the
    launch buttons.
    """

    def __init__(self, deck_size: int, actual_size: int):
        self.deck_size = deck_size
        self.actual_size = actual_size
        super().__init__(
            kind=FailureKind.DECK_INCOMPLETE,
            message=(
                f"A deck needs exactly {deck_size} cards to start a match. "
                f"This deck has {actual_size}."
            ),
            detail=f"{deck_size - actual_size} cards still needed",
            suggestion="Add cards until the deck is complete.",
        )


class RankedRequiresLoginError(RefusalError):
    """Raised when a guest session asks for a ranked match."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.LOGIN_REQUIRED,
            message="Ranked matches require a signed-in account.",
            suggestion="Sign in, or start a practice match instead.",
            status_code=403,
        )


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Check an envelope before it is sent.

    Raises:
        ValueError: If failure details are missing on a failure, or
            present on a success
    """
    is_success = response.outcome == OutcomeType.SUCCESS
    if is_success and response.failure is not None:
        raise ValueError("Success response must not have failure details")
    if not is_success and response.failure is None:
        raise ValueError(f"{response.outcome.value} response must have failure details")
    return response


def create_unknown_failure(exception: Exception) -> ApiResponse[Any]:
    """
    Envelope for an unexpected exception.

    Only the exception's type name is exposed; its message may hold
    internals.
    """
    return finalize_response(
        ApiResponse(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message=UNKNOWN_FAILURE_MESSAGE,
                detail=type(exception).__name__,
                suggestion=UNKNOWN_FAILURE_SUGGESTION,
            ),
        )
    )


def create_success(data: T) -> ApiResponse[T]:
    return finalize_response(ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data))
