from pyrsistent import pmap

from texel_universe.components import Frame, Transform
from texel_universe.entity import Entity
from texel_universe.state import State


def test_state_defaults_are_empty() -> None:
    state = State()
    assert len(state.entity) == 0
    assert len(state.events) == 0
    assert state.tick == 0
    assert state.render_status is None


def test_state_description_skips_empty_stores() -> None:
    state = State(
        entity=pmap({0: Entity()}),
        frame=pmap({0: Frame()}),
        transform=pmap({0: Transform()}),
    )
    description = state.description
    assert set(description.keys()) == {"entity", "frame", "transform", "tick", "render_status"}
