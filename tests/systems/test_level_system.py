import logging
from dataclasses import replace

import pytest
from pyrsistent import pmap, pvector

from texel_universe.components import Frame, Level, Transform
from texel_universe.entity import Entity, new_entity_id
from texel_universe.events import LevelEvent
from texel_universe.state import State
from texel_universe.systems.level import (
    level_not_spawned,
    level_system,
    on_level_start_event,
)
from texel_universe.types import LevelEventType


def test_level_system_without_start_event_does_nothing() -> None:
    state = State()
    assert level_system(state) == state


def test_level_system_spawns_root_on_start() -> None:
    state = replace(State(), events=pvector([LevelEvent.LEVEL_START]))
    new_state = level_system(state)

    assert len(new_state.level) == 1
    (root_id,) = new_state.level.keys()
    assert root_id in new_state.entity
    assert new_state.transform[root_id] == Transform()
    assert new_state.events[-1] == LevelEvent.root_spawned(root_id)


def test_level_system_logs_spawn(caplog: pytest.LogCaptureFixture) -> None:
    state = replace(State(), events=pvector([LevelEvent.LEVEL_START]))
    with caplog.at_level(logging.INFO, logger="texel_universe"):
        level_system(state)
    assert "spawning level" in caplog.text


def test_level_system_is_idempotent() -> None:
    state = replace(State(), events=pvector([LevelEvent.LEVEL_START]))
    once = level_system(state)
    twice = level_system(once)
    assert twice == once
    assert len(twice.level) == 1


def test_level_system_ignores_start_when_root_exists() -> None:
    state = State(
        entity=pmap({5: Entity()}),
        level=pmap({5: Level()}),
        events=pvector([LevelEvent.LEVEL_START]),
    )
    assert level_system(state) == state


def test_level_system_does_not_reuse_existing_ids() -> None:
    taken = {eid: Entity() for eid in range(200)}
    state = State(entity=pmap(taken), events=pvector([LevelEvent.LEVEL_START]))
    new_state = level_system(state)
    (root_id,) = new_state.level.keys()
    assert root_id not in taken


def test_level_predicates() -> None:
    state = State()
    assert level_not_spawned(state)
    assert not on_level_start_event(state)

    spawned = replace(state, events=pvector([LevelEvent.root_spawned(3)]))
    assert not on_level_start_event(spawned)

    started = replace(state, events=pvector([LevelEvent.root_spawned(3), LevelEvent.LEVEL_START]))
    assert on_level_start_event(started)


def test_level_event_equality() -> None:
    assert LevelEvent.LEVEL_START == LevelEvent(kind=LevelEventType.LEVEL_START)
    assert LevelEvent.root_spawned(1) != LevelEvent.root_spawned(2)
    assert LevelEvent.root_spawned(1).entity == 1


def test_level_system_does_not_reuse_unregistered_component_ids() -> None:
    # Ids may live in component stores without an entity registry entry.
    start = new_entity_id()
    occupied = range(start, start + 50)
    placed = Transform.from_translation(5.0, 5.0)
    state = State(
        frame=pmap({eid: Frame() for eid in occupied}),
        transform=pmap({eid: placed for eid in occupied}),
        events=pvector([LevelEvent.LEVEL_START]),
    )
    new_state = level_system(state)
    (root_id,) = new_state.level.keys()
    assert root_id not in occupied
    assert all(new_state.transform[eid] == placed for eid in occupied)
