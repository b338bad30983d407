"""texel_universe.components
=================================

Aggregate import surface for the ECS component dataclasses::

    from texel_universe.components import Frame, Sprite, Transform

All components are frozen ``@dataclass`` value objects stored in the
persistent maps of :class:`texel_universe.state.State`. Systems read them;
changing an entity means replacing its component.
"""

from .frame import Frame
from .level import Level
from .sprite import Sprite
from .transform import Transform

__all__ = [
    "Frame",
    "Level",
    "Sprite",
    "Transform",
]
