"""Level bootstrap system.

On a ``LEVEL_START`` event, create the level root entity (default
``Transform`` plus the ``Level`` marker) unless one already exists, and
announce it with a ``ROOT_SPAWNED`` event. Further start signals are ignored
while a root exists.
"""

import logging
from dataclasses import replace

from texel_universe.components import Level, Transform
from texel_universe.entity import Entity, new_entity_id
from texel_universe.events import LevelEvent
from texel_universe.state import State
from texel_universe.types import EntityID, LevelEventType

logger = logging.getLogger(__name__)


def level_not_spawned(state: State) -> bool:
    """Return True if no entity carries the ``Level`` marker."""
    return len(state.level) == 0


def on_level_start_event(state: State) -> bool:
    """Return True if a ``LEVEL_START`` event is queued this tick."""
    return any(event.kind == LevelEventType.LEVEL_START for event in state.events)


def _free_entity_id(state: State) -> EntityID:
    used = (
        set(state.entity)
        | set(state.sprite)
        | set(state.transform)
        | set(state.frame)
        | set(state.level)
    )
    eid = new_entity_id()
    while eid in used:
        eid = new_entity_id()
    return eid


def level_system(state: State) -> State:
    """Spawn the level root if requested and not yet present."""
    if not (level_not_spawned(state) and on_level_start_event(state)):
        return state

    logger.info("spawning level")
    eid = _free_entity_id(state)
    return replace(
        state,
        entity=state.entity.set(eid, Entity()),
        transform=state.transform.set(eid, Transform()),
        level=state.level.set(eid, Level()),
        events=state.events.append(LevelEvent.root_spawned(eid)),
    )
