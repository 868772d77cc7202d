# bbox3d/__init__.py
"""
Axis-aligned 3D bounding boxes with containment and (signed) distance
queries, generic over NumPy floating-point and fixed-width integer scalars.
"""
import logging

from bbox3d.aabb import (
    BoundingBox,
    FloatBoundingBox,
    IntegerBoundingBox,
    SignedIntegerBoundingBox,
    bounding_box,
)
from bbox3d.errors import PreconditionError
from bbox3d.scalar import DEFAULT_FLOAT_DTYPE, DEFAULT_INTEGER_DTYPE, ScalarKind, scalar_kind
from bbox3d.size import Size
from bbox3d.vector import Vector3

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BoundingBox",
    "FloatBoundingBox",
    "IntegerBoundingBox",
    "SignedIntegerBoundingBox",
    "bounding_box",
    "PreconditionError",
    "ScalarKind",
    "scalar_kind",
    "DEFAULT_FLOAT_DTYPE",
    "DEFAULT_INTEGER_DTYPE",
    "Size",
    "Vector3",
]
