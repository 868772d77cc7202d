# bbox3d/size.py
import numpy as np

from bbox3d.errors import require
from bbox3d.vector import Vector3


class Size:
    """
    Extent of a bounding box along each axis.

    `width` runs along x, `height` along y and `depth` along z. All three are
    non-negative; constructing a size with a negative component raises
    PreconditionError.
    """
    __slots__ = ("_extent",)

    def __init__(self, width, height, depth, dtype=None):
        self._init_from(Vector3(width, height, depth, dtype=dtype))

    def _init_from(self, extent: Vector3) -> None:
        require(bool(np.all(extent.array >= 0)),
                "width, height and depth must be non-negative")
        self._extent = extent

    @classmethod
    def from_point(cls, point: Vector3) -> "Size":
        """x maps to width, y to height and z to depth."""
        size = cls.__new__(cls)
        size._init_from(point)
        return size

    @property
    def width(self):
        return self._extent.x

    @property
    def height(self):
        return self._extent.y

    @property
    def depth(self):
        return self._extent.z

    @property
    def dtype(self) -> np.dtype:
        return self._extent.dtype

    def as_vector(self) -> Vector3:
        return self._extent

    def __eq__(self, other) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self._extent == other._extent

    def __hash__(self) -> int:
        return hash(self._extent)

    def __repr__(self) -> str:
        width, height, depth = self._extent.to_tuple()
        return f"Size(width={width}, height={height}, depth={depth}, dtype={self.dtype})"
