"""Tick orchestration.

:func:`step` runs one render tick:

1. Replace the event queue with the events posted for this tick.
2. ``level_system`` answers a level start signal.
3. Optionally clear the destination buffer when a pass will run (the
   compositor itself never clears).
4. ``render_system`` composites every sprite into the buffer.
5. Record the render outcome and bump ``tick``.

The returned state carries any events emitted during the tick (for example
``ROOT_SPAWNED``) so the caller can react before the next one.
"""

from dataclasses import replace
from typing import Iterable

from pyrsistent import pvector

from texel_universe.buffer import Grid
from texel_universe.events import LevelEvent
from texel_universe.state import State
from texel_universe.systems.level import level_system
from texel_universe.systems.render import render_system
from texel_universe.utils.ecs import frame_transforms


def step(
    state: State,
    buffer: Grid,
    events: Iterable[LevelEvent] = (),
    clear: bool = False,
) -> State:
    """Advance by one render tick.

    Args:
        state (State): Previous snapshot.
        buffer (Grid): Destination grid, mutated in place by the compositor.
        events (Iterable[LevelEvent]): Events posted for this tick.
        clear (bool): Reset ``buffer`` to empty cells before compositing.

    Returns:
        State: Next snapshot with ``render_status`` set. If the pass was
            aborted for lack of a unique frame, ``buffer`` is left untouched
            (it is not cleared either).
    """
    state = replace(state, events=pvector(events))
    state = level_system(state)

    if clear and len(frame_transforms(state)) == 1:
        buffer.fill()
    status = render_system(state, buffer)

    return replace(state, tick=state.tick + 1, render_status=status)
