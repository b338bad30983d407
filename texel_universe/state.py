"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` snapshot handed to every system
for one render tick. Systems are pure functions over ``State`` with a single
exception: the compositor writes into a destination
:class:`texel_universe.buffer.Grid` that is passed to it explicitly and is
never stored on the state.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity lacks that component.
* ``transform`` holds *world* placements. There is no parent/child
    propagation; whatever tracks hierarchy upstream supplies the result.
* ``events`` is the per-tick bootstrap queue (see
    :mod:`texel_universe.events`); :func:`texel_universe.step.step` resets it
    at the start of every tick.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from texel_universe.components import Frame, Level, Sprite, Transform
from texel_universe.entity import Entity
from texel_universe.events import LevelEvent
from texel_universe.types import EntityID, RenderStatus


@dataclass(frozen=True)
class State:
    """Immutable ECS world snapshot.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of live entities.
        sprite (PMap[EntityID, Sprite]): Visual assets to composite.
        transform (PMap[EntityID, Transform]): World placements.
        frame (PMap[EntityID, Frame]): Viewing-frame markers (exactly one expected).
        level (PMap[EntityID, Level]): Level root markers.
        events (PVector[LevelEvent]): Bootstrap events for the current tick.
        tick (int): Number of completed ticks.
        render_status (RenderStatus | None): Outcome of the last composition pass.
    """

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    sprite: PMap[EntityID, Sprite] = pmap()
    transform: PMap[EntityID, Transform] = pmap()
    frame: PMap[EntityID, Frame] = pmap()
    level: PMap[EntityID, Level] = pmap()

    # Events
    events: PVector[LevelEvent] = pvector()

    # Status
    tick: int = 0
    render_status: Optional[RenderStatus] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of populated fields.

        Empty component maps / event queues are left out; everything else is
        included as-is. Meant for logging and debugging.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
