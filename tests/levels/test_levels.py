from texel_universe.buffer import Cell
from texel_universe.components import Frame, Level, Sprite, Transform
from texel_universe.levels.convert import from_state, to_state
from texel_universe.levels.entity_spec import EntitySpec
from texel_universe.levels.factories import (
    create_frame,
    create_level_root,
    create_sprite,
    grid_from_text,
    sprite_from_text,
)
from tests.test_utils import chars


def test_grid_from_text_pads_and_blanks() -> None:
    grid = grid_from_text(["ab", "c"], fg=(1, 1, 1), depth=-1.0)
    assert grid.shape == (2, 2)
    assert chars(grid) == [["a", "b"], ["c", None]]
    assert grid.get(0, 0) == Cell(character="a", fg=(1, 1, 1), depth=-1.0)
    assert grid.get(1, 1) == Cell()


def test_grid_from_text_custom_blank() -> None:
    grid = grid_from_text([".x."], blank=".")
    assert chars(grid) == [[None, "x", None]]


def test_grid_from_text_empty() -> None:
    assert grid_from_text([]).shape == (0, 0)


def test_sprite_from_text() -> None:
    sprite = sprite_from_text(["/\\"])
    assert chars(sprite.grid) == [["/", "\\"]]


def test_factories() -> None:
    frame = create_frame(1, 2)
    assert frame.frame == Frame()
    assert frame.transform == Transform.from_translation(1, 2, 0)

    sprite = Sprite(grid=grid_from_text(["x"]))
    spec = create_sprite(sprite, z=-3)
    assert spec.sprite == sprite
    assert spec.transform == Transform.from_translation(0, 0, -3)

    root = create_level_root()
    assert root.level == Level()
    assert root.transform == Transform()


def test_to_state_allocates_ids_in_order() -> None:
    sprite = sprite_from_text(["x"])
    state = to_state([create_frame(), create_sprite(sprite, 1, 0)], first_id=10)
    assert sorted(state.entity) == [10, 11]
    assert 10 in state.frame
    assert state.sprite[11] == sprite
    assert state.transform[11] == Transform.from_translation(1, 0)
    assert len(state.level) == 0


def test_from_state_roundtrip_components() -> None:
    specs = [create_frame(2, 2), create_sprite(sprite_from_text(["ab"]), 3, 4), EntitySpec()]
    restored = from_state(to_state(specs))
    assert restored == specs


def test_entity_spec_iter_components_skips_none() -> None:
    spec = create_frame()
    assert dict(spec.iter_components()) == {
        "frame": Frame(),
        "transform": Transform(),
    }
