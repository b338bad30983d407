"""Conversion between authoring ``EntitySpec`` lists and the immutable ``State``."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from pyrsistent import pmap

from texel_universe.entity import Entity
from texel_universe.levels.entity_spec import COMPONENT_TO_FIELD, EntitySpec
from texel_universe.state import State
from texel_universe.types import EntityID


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    return {store_name: {} for store_name in COMPONENT_TO_FIELD.values()}


def to_state(specs: Sequence[EntitySpec], first_id: EntityID = 0) -> State:
    """
    Allocate consecutive entity ids (starting at ``first_id``) in list order and
    build a State holding every present component.

    List order therefore becomes the compositing order between sprites.
    """
    entity: Dict[EntityID, Entity] = {}
    stores = _init_store_maps()
    for offset, spec in enumerate(specs):
        eid: EntityID = first_id + offset
        entity[eid] = Entity()
        for store_name, comp in spec.iter_components():
            stores[store_name][eid] = comp

    return State(
        entity=pmap(entity),
        sprite=pmap(stores["sprite"]),
        transform=pmap(stores["transform"]),
        frame=pmap(stores["frame"]),
        level=pmap(stores["level"]),
    )


def from_state(state: State) -> List[EntitySpec]:
    """
    Rebuild one EntitySpec per registered entity, ordered by entity id.
    Entity ids themselves are not preserved; to_state(from_state(s)) renumbers.
    """
    specs: List[EntitySpec] = []
    for eid in sorted(state.entity):
        spec = EntitySpec()
        for store_name in COMPONENT_TO_FIELD.values():
            store = getattr(state, store_name)
            if eid in store:
                setattr(spec, store_name, store[eid])
        specs.append(spec)
    return specs
