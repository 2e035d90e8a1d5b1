"""
Owned Pool - count-aware pool of unlocked card definitions.

INVARIANT: Only definitions with quantity > 0 may appear in the pool.

INVARIANT: No deck may exceed, per definition:
  - the owned quantity (when ownership is enforced)
  - the duplicate cap
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from deckcomposer.models.card import CardDefinition, DefinitionId


@dataclass(frozen=True, slots=True)
class OwnedPool:
    """
    Immutable pool of owned card definitions in display order.

    INVARIANT: Every definition in the pool has quantity >= 1.
    Zero-quantity entries are rejected at construction time.

    Usage:
        pool = OwnedPool.from_definitions(unlocked_cards)
        for definition in pool:
            # display order, each definition once
            ...
    """

    _definitions: tuple[CardDefinition, ...] = field(default_factory=tuple)
    _quantities: dict[DefinitionId, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate quantities and definition/quantity agreement."""
        ids = [d.definition_id for d in self._definitions]
        if len(set(ids)) != len(ids):
            raise ValueError("Pool definitions must be unique by definition_id")
        if set(ids) != set(self._quantities):
            raise ValueError("Pool definitions and quantities must cover the same ids")
        for definition_id, quantity in self._quantities.items():
            if quantity <= 0:
                raise ValueError(
                    f"Definition {definition_id!r} has invalid quantity {quantity} (must be > 0)"
                )

    @classmethod
    def from_definitions(cls, definitions: Iterable[CardDefinition]) -> "OwnedPool":
        """
        Build pool from an ordered list of unlocked definitions.

        A definition listed N times is owned N times. Display order
        follows first appearance.
        """
        ordered: dict[DefinitionId, CardDefinition] = {}
        quantities: dict[DefinitionId, int] = {}
        for definition in definitions:
            ordered.setdefault(definition.definition_id, definition)
            quantities[definition.definition_id] = quantities.get(definition.definition_id, 0) + 1
        return cls(_definitions=tuple(ordered.values()), _quantities=quantities)

    @classmethod
    def from_quantities(
        cls,
        entries: Iterable[tuple[CardDefinition, int]],
    ) -> "OwnedPool":
        """
        Build pool from (definition, quantity) pairs.

        Filters out entries with quantity <= 0. Repeated definitions
        have their quantities summed.
        """
        ordered: dict[DefinitionId, CardDefinition] = {}
        quantities: dict[DefinitionId, int] = {}
        for definition, quantity in entries:
            if quantity <= 0:
                continue
            ordered.setdefault(definition.definition_id, definition)
            quantities[definition.definition_id] = (
                quantities.get(definition.definition_id, 0) + quantity
            )
        return cls(_definitions=tuple(ordered.values()), _quantities=quantities)

    def __contains__(self, definition_id: object) -> bool:
        """Check if a definition id is in the pool."""
        return definition_id in self._quantities

    def __len__(self) -> int:
        """Number of distinct definitions in the pool."""
        return len(self._definitions)

    def __iter__(self) -> Iterator[CardDefinition]:
        """Iterate over definitions in display order."""
        return iter(self._definitions)

    def get(self, definition_id: DefinitionId) -> CardDefinition | None:
        """Look up a definition by id."""
        for definition in self._definitions:
            if definition.definition_id == definition_id:
                return definition
        return None

    def get_quantity(self, definition_id: DefinitionId) -> int:
        """
        Get owned quantity for a definition.

        Returns 0 if the definition is not in the pool.
        """
        return self._quantities.get(definition_id, 0)

    def copy_limit(
        self,
        definition_id: DefinitionId,
        max_duplicates: int,
        enforce_ownership: bool = True,
    ) -> int:
        """
        Maximum copies of a definition a deck may hold.

        Pooled definitions are capped at min(owned, max_duplicates) when
        ownership is enforced. Definitions outside the pool only get the
        duplicate cap; offering them is the caller's decision.
        """
        if enforce_ownership and definition_id in self:
            return min(self.get_quantity(definition_id), max_duplicates)
        return max_duplicates

    def items(self) -> Iterator[tuple[CardDefinition, int]]:
        """Iterate over (definition, quantity) pairs in display order."""
        return ((d, self._quantities[d.definition_id]) for d in self._definitions)
