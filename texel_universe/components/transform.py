"""Transform component.

World placement of an entity. Only translation matters to composition:

* ``x`` shifts a sprite right by that many columns (rounded half-up),
* ``y`` shifts it down by that many rows (rounded half-up),
* ``z`` is added to every cell's own depth.

Frame-relative placements are computed with 4x4 homogeneous matrices
(``placement @ frame_inverse``) so a richer placement model can slot in
without touching the compositor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import numpy.typing as npt

Translation = Tuple[float, float, float]
Matrix4 = npt.NDArray[np.float64]


@dataclass(frozen=True)
class Transform:
    """Placement in world (or frame-relative) space.

    Attributes:
        translation: ``(x, y, z)`` offset.
    """

    translation: Translation = (0.0, 0.0, 0.0)

    @classmethod
    def from_translation(cls, x: float, y: float, z: float = 0.0) -> Transform:
        return cls(translation=(float(x), float(y), float(z)))

    @classmethod
    def from_matrix(cls, matrix: Matrix4) -> Transform:
        """Build a transform from the translation column of an affine matrix."""
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix, got {matrix.shape}")
        x, y, z = (float(v) for v in matrix[:3, 3])
        return cls(translation=(x, y, z))

    @property
    def x(self) -> float:
        return self.translation[0]

    @property
    def y(self) -> float:
        return self.translation[1]

    @property
    def z(self) -> float:
        return self.translation[2]

    def compute_matrix(self) -> Matrix4:
        matrix: Matrix4 = np.identity(4, dtype=np.float64)
        matrix[:3, 3] = self.translation
        return matrix

    def inverse(self) -> Transform:
        x, y, z = self.translation
        return Transform(translation=(-x, -y, -z))

    def relative_to(self, frame_inverse: Matrix4) -> Transform:
        """Express this world placement in the space whose inverse is given."""
        return Transform.from_matrix(self.compute_matrix() @ frame_inverse)
