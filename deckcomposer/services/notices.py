"""
User-facing notice text for the deck composer.

The composer reports rejections as RejectionReason values; this module
renders them, and the launch button labels, for a locale. Unknown
locales fall back to Japanese.
"""

from deckcomposer.models.deck import GameMode, RejectionReason

DEFAULT_LOCALE = "ja"

_REJECTIONS: dict[str, dict[RejectionReason, str]] = {
    "ja": {
        RejectionReason.DECK_FULL: "デッキは{deck_size}枚までです。",
        RejectionReason.DUPLICATE_LIMIT: (
            "同じカードは{max_duplicates}枚までしか入れられません。"
        ),
    },
    "en": {
        RejectionReason.DECK_FULL: "A deck can hold at most {deck_size} cards.",
        RejectionReason.DUPLICATE_LIMIT: (
            "You can only put {max_duplicates} copies of the same card in a deck."
        ),
    },
}

_LABELS: dict[str, dict[str, str]] = {
    "ja": {
        "cards_needed": "あと {count} 枚",
        "practice": "CPU対戦 (練習)",
        "ranked": "ランクマッチ (対人戦)",
        "ranked_guest": "対人戦 (ログイン必須)",
        "deck_progress": "あなたのデッキ ({count}/{deck_size})",
        "pool_heading": "カードプール ({kinds}種類)",
    },
    "en": {
        "cards_needed": "{count} more cards",
        "practice": "Practice vs CPU",
        "ranked": "Ranked Match (PvP)",
        "ranked_guest": "PvP (sign-in required)",
        "deck_progress": "Your Deck ({count}/{deck_size})",
        "pool_heading": "Card Pool ({kinds} kinds)",
    },
}


def _locale(locale: str | None) -> str:
    if locale is not None and locale in _REJECTIONS:
        return locale
    return DEFAULT_LOCALE


def rejection_notice(
    reason: RejectionReason,
    deck_size: int,
    max_duplicates: int,
    locale: str | None = DEFAULT_LOCALE,
) -> str:
    """Render the notice shown when an add request is rejected."""
    template = _REJECTIONS[_locale(locale)][reason]
    return template.format(deck_size=deck_size, max_duplicates=max_duplicates)


def launch_label(
    mode: GameMode,
    cards_needed: int,
    is_guest: bool = False,
    locale: str | None = DEFAULT_LOCALE,
) -> str:
    """
    Render the label of a launch button.

    The guest label for ranked play wins over the progress label, since
    that button stays disabled for guests even with a complete deck.
    """
    labels = _LABELS[_locale(locale)]
    if mode == GameMode.RANKED and is_guest:
        return labels["ranked_guest"]
    if cards_needed > 0:
        return labels["cards_needed"].format(count=cards_needed)
    return labels[mode.value]


def deck_progress(count: int, deck_size: int, locale: str | None = DEFAULT_LOCALE) -> str:
    return _LABELS[_locale(locale)]["deck_progress"].format(count=count, deck_size=deck_size)


def pool_heading(kinds: int, locale: str | None = DEFAULT_LOCALE) -> str:
    return _LABELS[_locale(locale)]["pool_heading"].format(kinds=kinds)
