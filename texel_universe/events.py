"""Level bootstrap events.

Events are plain values queued on ``State.events`` for the duration of one
tick. ``LEVEL_START`` is posted by the caller; the level system answers with
``root_spawned(eid)`` once it has created the root entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from texel_universe.types import EntityID, LevelEventType


@dataclass(frozen=True)
class LevelEvent:
    """Bootstrap signal.

    Attributes:
        kind: Event type.
        entity: Spawned root id for ``ROOT_SPAWNED``; ``None`` otherwise.
    """

    kind: LevelEventType
    entity: Optional[EntityID] = None

    LEVEL_START: ClassVar[LevelEvent]

    @classmethod
    def root_spawned(cls, entity: EntityID) -> LevelEvent:
        return cls(kind=LevelEventType.ROOT_SPAWNED, entity=entity)


LevelEvent.LEVEL_START = LevelEvent(kind=LevelEventType.LEVEL_START)
