"""Entity primitives & ID generation.

Every sprite, frame and level root is an ``EntityID`` (an integer) plus the
component dataclasses stored against it in the persistent maps on
:class:`texel_universe.state.State`.

Examples
--------
>>> from texel_universe.entity import new_entity_id, new_entity_ids
>>> frame_id = new_entity_id()
>>> sprite_ids = new_entity_ids(3)

IDs come from a process-local counter and are never recycled.
"""

from dataclasses import dataclass
from typing import Iterator, List

from texel_universe.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for a live entity."""


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)


def new_entity_ids(n: int) -> List[EntityID]:
    """Return ``n`` fresh entity IDs as a list."""
    return [new_entity_id() for _ in range(n)]
