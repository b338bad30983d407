"""ECS convenience queries for the compositor.

Resolves the viewing frame and the sprites to composite from a
:class:`texel_universe.state.State` snapshot. An entity only counts as a frame
or a sprite if it also has a ``Transform``; frame entities are never
composited as sprites.
"""

from typing import List, Tuple

from texel_universe.components import Sprite, Transform
from texel_universe.state import State
from texel_universe.types import EntityID


def frame_transforms(state: State) -> List[Transform]:
    """Return the world transforms of every frame entity, by ascending id."""
    return [
        state.transform[eid] for eid in sorted(state.frame) if eid in state.transform
    ]


def sprite_placements(state: State) -> List[Tuple[EntityID, Sprite, Transform]]:
    """Return ``(id, sprite, world transform)`` for composable sprites.

    Ordered by ascending entity id, which fixes the tie-break order between
    sprites landing on the same cell at the same depth.
    """
    return [
        (eid, sprite, state.transform[eid])
        for eid, sprite in sorted(state.sprite.items(), key=lambda item: item[0])
        if eid in state.transform and eid not in state.frame
    ]
