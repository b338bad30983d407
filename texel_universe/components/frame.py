"""Frame marker component.

Exactly one entity per tick should carry ``Frame``: its world transform is the
origin every sprite is projected into before compositing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    """Viewing-frame marker (no data)."""

    pass
