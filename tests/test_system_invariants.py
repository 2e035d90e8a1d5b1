"""
System invariants of deck composition under random operation sequences.

Every reachable state must satisfy:
- 0 <= len(deck) <= deck_size
- count_in_deck(d) <= copy_limit(d) <= max_duplicates
- is_valid() iff len(deck) == deck_size
- remaining_in_pool(d) == max(0, copy_limit(d) - count_in_deck(d))
"""

import random

import pytest

from deckcomposer.models.card import CardDefinition
from deckcomposer.models.deck import RejectionReason
from deckcomposer.models.owned_pool import OwnedPool
from deckcomposer.services.deck_composer import DeckComposer

DEFINITIONS = [CardDefinition(definition_id=i, name=f"Card {i}") for i in range(6)]
OUTSIDER = CardDefinition(definition_id="outsider", name="Unlisted Card")


def assert_invariants(composer: DeckComposer) -> None:
    counts = composer.counts_in_deck()

    assert 0 <= len(composer) <= composer.deck_size
    assert composer.is_valid() == (len(composer) == composer.deck_size)
    assert sum(counts.values()) == len(composer)

    for definition_id, count in counts.items():
        assert count <= composer.copy_limit(definition_id) <= composer.max_duplicates

    for definition_id, remaining in composer.remaining_in_pool().items():
        expected = composer.copy_limit(definition_id) - counts.get(definition_id, 0)
        assert remaining == max(0, expected)
        assert composer.is_selectable(definition_id) == (remaining > 0)


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("enforce_ownership", [True, False])
def test_random_sequences_preserve_invariants(seed: int, enforce_ownership: bool) -> None:
    rng = random.Random(seed)
    pool = OwnedPool.from_quantities((d, rng.randint(1, 4)) for d in DEFINITIONS)
    composer = DeckComposer(
        pool,
        deck_size=rng.randint(1, 10),
        max_duplicates=rng.randint(1, 3),
        enforce_ownership=enforce_ownership,
    )

    for _ in range(200):
        before = composer.cards()
        if len(composer) and rng.random() < 0.35:
            position = rng.randrange(len(composer))
            removed = composer.remove_card(position)
            assert removed.definition == before[position]
            assert composer.cards() == before[:position] + before[position + 1 :]
        else:
            card = rng.choice(DEFINITIONS + [OUTSIDER])
            result = composer.add_card(card)
            if result.accepted:
                assert composer.cards() == before + (card,)
            else:
                assert composer.cards() == before
                if len(before) == composer.deck_size:
                    assert result.reason == RejectionReason.DECK_FULL
                else:
                    assert result.reason == RejectionReason.DUPLICATE_LIMIT
        assert_invariants(composer)


@pytest.mark.parametrize("seed", range(10))
def test_add_then_remove_round_trip(seed: int) -> None:
    rng = random.Random(seed)
    pool = OwnedPool.from_quantities((d, 3) for d in DEFINITIONS)
    composer = DeckComposer(pool, deck_size=8, max_duplicates=3)

    for _ in range(rng.randint(0, 7)):
        composer.add_card(rng.choice(DEFINITIONS))
    assert len(composer) < composer.deck_size

    before = composer.cards()
    candidates = [d for d in DEFINITIONS if composer.is_selectable(d.definition_id)]
    result = composer.add_card(rng.choice(candidates))
    assert result.entry is not None

    composer.remove_card(result.entry.position)

    assert composer.cards() == before
