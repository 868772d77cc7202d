# bbox3d/aabb.py
"""
Axis-aligned 3D bounding boxes over NumPy scalar types.

A box is defined by its minimum and maximum corner. Which operations a box
offers depends on its scalar kind, and each kind has its own class:

- ``BoundingBox``: any supported scalar. Construction from corners or from a
  minimum corner and a size, containment, size and squared distance.
- ``FloatBoundingBox``: floating-point scalars. Adds construction from a
  center, the center itself, distance, signed squared distance and signed
  distance.
- ``IntegerBoundingBox``: fixed-width integer scalars, signed or unsigned.
  All arithmetic wraps on overflow.
- ``SignedIntegerBoundingBox``: signed integer scalars. Adds signed squared
  distance; there is no square root for integers.

Use ``bounding_box()`` to get the most capable class for the corners' dtype.
"""
import numpy as np

from bbox3d.errors import require
from bbox3d.scalar import ScalarKind, scalar_kind
from bbox3d.size import Size
from bbox3d.vector import Vector3


class BoundingBox:
    """
    An immutable axis-aligned bounding box.

    The surface belongs to the box: containment and distances treat every
    axis as a closed interval [min_point, max_point].
    """
    __slots__ = ("_min", "_max")

    Point = Vector3
    Size = Size

    # Scalar kinds this class accepts
    kinds = frozenset(ScalarKind)

    def __init__(self, min_point: Vector3, max_point: Vector3):
        if not isinstance(min_point, Vector3) or not isinstance(max_point, Vector3):
            raise TypeError("bounding box corners must be Vector3 instances")
        if min_point.dtype != max_point.dtype:
            raise TypeError(f"corner dtypes differ: {min_point.dtype} and {max_point.dtype}")
        kind = min_point.kind
        if kind not in self.kinds:
            raise TypeError(f"{type(self).__name__} does not support {kind.value} scalars "
                            f"({min_point.dtype})")
        require(bool(np.all(min_point.array <= max_point.array)),
                "min point must be less or equal than max point in all coordinates")
        self._min = min_point
        self._max = max_point

    @classmethod
    def from_min_size(cls, min_point: Vector3, size: Size) -> "BoundingBox":
        """
        Builds a box from its minimum corner and its size.

        For integer scalars the addition wraps. If the maximum corner wraps
        below the minimum corner, the corner check raises PreconditionError.
        """
        return cls(min_point, min_point + size.as_vector())

    @staticmethod
    def class_for(dtype) -> type:
        """Returns the most capable bounding box class for a dtype."""
        kind = scalar_kind(dtype)
        if kind is ScalarKind.FLOATING:
            return FloatBoundingBox
        if kind is ScalarKind.SIGNED_INTEGER:
            return SignedIntegerBoundingBox
        return IntegerBoundingBox

    @property
    def min_point(self) -> Vector3:
        return self._min

    @property
    def max_point(self) -> Vector3:
        return self._max

    @property
    def dtype(self) -> np.dtype:
        return self._min.dtype

    @property
    def kind(self) -> ScalarKind:
        return self._min.kind

    @property
    def size(self) -> Size:
        """
        Extent of the box along each axis.

        Integer subtraction wraps, so a box wider than the dtype's range
        yields a meaningless extent (and a PreconditionError for signed
        scalars, whose wrapped extent is negative).
        """
        return Size.from_point(self._max - self._min)

    @property
    def corners(self) -> tuple:
        """The eight corners, x-major, then y, then z."""
        (x0, y0, z0), (x1, y1, z1) = self._min.to_tuple(), self._max.to_tuple()
        dtype = self.dtype
        return tuple(Vector3(x, y, z, dtype=dtype)
                     for x in (x0, x1) for y in (y0, y1) for z in (z0, z1))

    def _check_point(self, point: Vector3) -> Vector3:
        if not isinstance(point, Vector3):
            raise TypeError(f"expected a Vector3, got {type(point).__name__}")
        if point.dtype != self.dtype:
            raise TypeError(f"point dtype {point.dtype} does not match box dtype {self.dtype}")
        return point

    def contains(self, point: Vector3) -> bool:
        """
        Tests if a point lies inside the box, surface included.
        """
        p = self._check_point(point).array
        return bool(np.all((self._min.array <= p) & (p <= self._max.array)))

    def squared_distance(self, point: Vector3):
        """
        Squared euclidean distance from a point to the closest point of the box.

        Zero for points inside the box or on its surface. Integer boxes use
        wrapping arithmetic and may return garbage (even negative values)
        near the dtype's range limits.
        """
        self._check_point(point)
        on_surface = point.clamped(self._min, self._max)
        return (point - on_surface).squared_length()

    def _penetration_depth(self, point: Vector3) -> np.ndarray:
        # Distance to the nearest of the six faces, for a point inside the box
        to_min = (point - self._min).array
        to_max = (self._max - point).array
        return np.minimum(to_min, to_max).min(keepdims=True)

    def _signed_squared_distance(self, point: Vector3):
        if self.contains(point):
            depth = self._penetration_depth(point)
            with np.errstate(over="ignore"):
                return np.negative(depth * depth)[0]
        return self.squared_distance(point)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_point={self._min!r}, max_point={self._max!r})"


class FloatBoundingBox(BoundingBox):
    """Bounding box over a floating-point scalar."""
    __slots__ = ()

    kinds = frozenset({ScalarKind.FLOATING})

    @classmethod
    def from_center(cls, center: Vector3, size: Size) -> "FloatBoundingBox":
        """The box extends size / 2 from the center along each axis."""
        half_size = size.as_vector() / 2
        return cls(center - half_size, center + half_size)

    @property
    def center(self) -> Vector3:
        return (self._min + self._max) / 2

    def distance(self, point: Vector3):
        """Euclidean distance to the box, zero inside and on the surface."""
        return np.sqrt(self.squared_distance(point))

    def signed_squared_distance(self, point: Vector3):
        """
        Squared distance to the surface, negated for points inside the box.

        Zero exactly on the surface.
        """
        return self._signed_squared_distance(point)

    def signed_distance(self, point: Vector3):
        """
        Distance to the surface: negative inside, positive outside and zero
        exactly on the surface.
        """
        if self.contains(point):
            return np.negative(self._penetration_depth(point))[0]
        return self.distance(point)


class IntegerBoundingBox(BoundingBox):
    """
    Bounding box over a fixed-width integer scalar, signed or unsigned.

    There is no center (it may not be representable) and no distance, only
    its square. All arithmetic wraps silently on overflow.
    """
    __slots__ = ()

    kinds = frozenset({ScalarKind.SIGNED_INTEGER, ScalarKind.UNSIGNED_INTEGER})


class SignedIntegerBoundingBox(IntegerBoundingBox):
    __slots__ = ()

    kinds = frozenset({ScalarKind.SIGNED_INTEGER})

    def signed_squared_distance(self, point: Vector3):
        """
        Squared distance to the surface, negated for points inside the box.

        Uses wrapping arithmetic: neither the magnitude nor the sign of the
        result can be trusted if it overflows.
        """
        return self._signed_squared_distance(point)


def bounding_box(min_point: Vector3, max_point: Vector3) -> BoundingBox:
    """Builds a box of the most capable class for the corners' dtype."""
    return BoundingBox.class_for(min_point.dtype)(min_point, max_point)
