# bbox3d/vector.py
import numpy as np

from bbox3d.scalar import DEFAULT_FLOAT_DTYPE, ScalarKind, default_dtype, scalar_kind


class Vector3:
    """
    An immutable 3D vector over a single NumPy scalar type, supporting
    componentwise arithmetic, clamping and dot products.

    Integer vectors use wrapping arithmetic: overflow silently wraps around
    the dtype's range instead of raising or promoting to a wider type.
    """
    __slots__ = ("_data",)

    def __init__(self, x, y, z, dtype=None):
        if dtype is None:
            dtype = np.result_type(*(default_dtype(c) for c in (x, y, z)))
        scalar_kind(dtype)
        data = np.array([x, y, z], dtype=dtype)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _from_data(cls, data: np.ndarray) -> "Vector3":
        data.flags.writeable = False
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def from_array(cls, array) -> "Vector3":
        data = np.array(array)
        if data.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {data.shape}")
        scalar_kind(data.dtype)
        return cls._from_data(data)

    @classmethod
    def repeating(cls, value, dtype=None) -> "Vector3":
        if dtype is None:
            dtype = default_dtype(value)
        return cls(value, value, value, dtype=dtype)

    @classmethod
    def zero(cls, dtype=DEFAULT_FLOAT_DTYPE) -> "Vector3":
        return cls.repeating(0, dtype=dtype)

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> ScalarKind:
        return scalar_kind(self._data.dtype)

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the components."""
        return self._data

    def to_tuple(self) -> tuple:
        return tuple(self._data.tolist())

    def _other(self, other) -> np.ndarray:
        if isinstance(other, Vector3):
            if other.dtype != self.dtype:
                raise TypeError(f"cannot combine {self.dtype} and {other.dtype} vectors")
            return other._data
        if isinstance(other, bool) or not isinstance(other, (int, float, np.number)):
            raise TypeError(f"unsupported operand {other!r} for Vector3")
        if isinstance(other, (float, np.floating)) and self.kind.is_integer:
            raise TypeError(f"cannot combine {self.dtype} vector with a floating-point scalar")
        return np.asarray(other, dtype=self.dtype)

    def _apply(self, op, other) -> "Vector3":
        with np.errstate(over="ignore"):
            return Vector3._from_data(op(self._data, self._other(other)))

    def __add__(self, other) -> "Vector3":
        return self._apply(np.add, other)

    def __sub__(self, other) -> "Vector3":
        return self._apply(np.subtract, other)

    def __mul__(self, other) -> "Vector3":
        return self._apply(np.multiply, other)

    def __rmul__(self, other) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t) -> "Vector3":
        if self.kind.is_integer:
            raise TypeError(f"division is only defined for floating-point vectors, not {self.dtype}")
        return self._apply(np.divide, t)

    def __neg__(self) -> "Vector3":
        with np.errstate(over="ignore"):
            return Vector3._from_data(np.negative(self._data))

    def minimum(self, other: "Vector3") -> "Vector3":
        return self._apply(np.minimum, other)

    def maximum(self, other: "Vector3") -> "Vector3":
        return self._apply(np.maximum, other)

    def min(self):
        """Smallest of the three components."""
        return self._data.min()

    def max(self):
        """Largest of the three components."""
        return self._data.max()

    def clamped(self, lower: "Vector3", upper: "Vector3") -> "Vector3":
        # Assumes lower <= upper componentwise
        return self.maximum(lower).minimum(upper)

    def dot(self, other: "Vector3"):
        # The sum stays in this vector's dtype so integer results wrap
        with np.errstate(over="ignore"):
            return np.add.reduce(self._data * self._other(other), dtype=self.dtype)

    def squared_length(self):
        return self.dot(self)

    def length(self):
        if self.kind.is_integer:
            raise TypeError(f"length is only defined for floating-point vectors, not {self.dtype}")
        return np.sqrt(self.squared_length())

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index):
        return self._data[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        x, y, z = self._data.tolist()
        return f"Vector3({x}, {y}, {z}, dtype={self.dtype})"
