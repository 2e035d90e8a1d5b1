"""Tests for user-facing notice text."""

import pytest

from deckcomposer.models.deck import GameMode, RejectionReason
from deckcomposer.services.notices import (
    deck_progress,
    launch_label,
    pool_heading,
    rejection_notice,
)


class TestRejectionNotice:
    def test_deck_full_japanese(self) -> None:
        notice = rejection_notice(RejectionReason.DECK_FULL, deck_size=30, max_duplicates=3)

        assert notice == "デッキは30枚までです。"

    def test_duplicate_limit_japanese(self) -> None:
        notice = rejection_notice(
            RejectionReason.DUPLICATE_LIMIT, deck_size=30, max_duplicates=2
        )

        assert notice == "同じカードは2枚までしか入れられません。"

    def test_english(self) -> None:
        notice = rejection_notice(
            RejectionReason.DECK_FULL, deck_size=40, max_duplicates=3, locale="en"
        )

        assert "40" in notice
        assert notice.startswith("A deck")

    @pytest.mark.parametrize("locale", ["fr", None, ""])
    def test_unknown_locale_falls_back(self, locale) -> None:
        notice = rejection_notice(
            RejectionReason.DECK_FULL, deck_size=30, max_duplicates=3, locale=locale
        )

        assert notice == "デッキは30枚までです。"


class TestLaunchLabel:
    def test_incomplete_deck_shows_cards_needed(self) -> None:
        assert launch_label(GameMode.PRACTICE, cards_needed=4) == "あと 4 枚"
        assert launch_label(GameMode.RANKED, cards_needed=4) == "あと 4 枚"

    def test_complete_deck_shows_mode(self) -> None:
        assert launch_label(GameMode.PRACTICE, cards_needed=0) == "CPU対戦 (練習)"
        assert launch_label(GameMode.RANKED, cards_needed=0) == "ランクマッチ (対人戦)"

    def test_guest_ranked_label_wins(self) -> None:
        assert launch_label(GameMode.RANKED, cards_needed=5, is_guest=True) == (
            "対人戦 (ログイン必須)"
        )

    def test_guest_practice_label_unchanged(self) -> None:
        assert launch_label(GameMode.PRACTICE, cards_needed=0, is_guest=True) == (
            "CPU対戦 (練習)"
        )

    def test_english_labels(self) -> None:
        assert launch_label(GameMode.PRACTICE, cards_needed=2, locale="en") == "2 more cards"
        assert launch_label(GameMode.RANKED, cards_needed=0, locale="en") == "Ranked Match (PvP)"


class TestHeadings:
    def test_deck_progress(self) -> None:
        assert deck_progress(12, 30) == "あなたのデッキ (12/30)"

    def test_pool_heading(self) -> None:
        assert pool_heading(8, locale="en") == "Card Pool (8 kinds)"
