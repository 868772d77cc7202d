# bbox3d/scalar.py
"""
Scalar kinds understood by the bounding box types.

A scalar is a NumPy dtype. The kind of the dtype decides which operations a
box offers: floating-point boxes get centers and square-root distances,
integer boxes get wrapping arithmetic, and only signed integers can report a
negative (signed) squared distance.
"""
import enum

import numpy as np

# Dtypes used when a value has to be created without an explicit dtype
DEFAULT_FLOAT_DTYPE = np.float64
DEFAULT_INTEGER_DTYPE = np.int64


class ScalarKind(enum.Enum):
    FLOATING = "floating"
    SIGNED_INTEGER = "signed integer"
    UNSIGNED_INTEGER = "unsigned integer"

    @property
    def is_integer(self) -> bool:
        return self is not ScalarKind.FLOATING

    @property
    def is_signed(self) -> bool:
        return self is not ScalarKind.UNSIGNED_INTEGER


def scalar_kind(dtype) -> ScalarKind:
    """
    Classifies a dtype, raising TypeError for anything that is not an
    ordered real number type (bool, complex, object, strings, ...).
    """
    dtype = np.dtype(dtype)
    if dtype.kind == "f":
        return ScalarKind.FLOATING
    if dtype.kind == "i":
        return ScalarKind.SIGNED_INTEGER
    if dtype.kind == "u":
        return ScalarKind.UNSIGNED_INTEGER
    raise TypeError(f"{dtype} is not a supported scalar type")


def default_dtype(value) -> np.dtype:
    """Picks the configured default dtype for a bare Python number."""
    if isinstance(value, (np.generic, np.ndarray)):
        return value.dtype
    if isinstance(value, bool):
        raise TypeError("bool is not a supported scalar type")
    if isinstance(value, int):
        return np.dtype(DEFAULT_INTEGER_DTYPE)
    return np.dtype(DEFAULT_FLOAT_DTYPE)
