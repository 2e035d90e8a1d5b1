import pytest

from deckcomposer.models.card import CardDefinition
from deckcomposer.models.owned_pool import OwnedPool


@pytest.fixture
def ember() -> CardDefinition:
    return CardDefinition(definition_id=7, name="Ember Drake")


@pytest.fixture
def tide() -> CardDefinition:
    return CardDefinition(definition_id=9, name="Tide Caller")


@pytest.fixture
def sample_pool(ember: CardDefinition, tide: CardDefinition) -> OwnedPool:
    """Pool with Ember Drake x2, Tide Caller x4, Stone Golem x1."""
    golem = CardDefinition(definition_id="golem", name="Stone Golem")
    return OwnedPool.from_quantities([(ember, 2), (tide, 4), (golem, 1)])
