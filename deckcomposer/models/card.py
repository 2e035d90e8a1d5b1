from dataclasses import dataclass, field
from typing import Any

DefinitionId = int | str


@dataclass(frozen=True, slots=True)
class CardDefinition:
    """
    A catalog entry for one kind of card.

    Two copies of the same card share a definition; a deck holds
    references to definitions, not physical instances.

    Attributes:
        definition_id: Stable identity of the card kind (int or str)
        name: Display name
        attributes: Free-form catalog data (cost, power, art key, ...)
    """

    definition_id: DefinitionId
    name: str = ""
    attributes: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
