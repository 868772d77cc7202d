"""Integer bounding boxes: wrapping arithmetic and the reduced operation set."""
import numpy as np
import pytest

from bbox3d import (
    IntegerBoundingBox,
    PreconditionError,
    SignedIntegerBoundingBox,
    Size,
    Vector3,
    bounding_box,
)

SIGNED_DTYPES = [np.int16, np.int64]
UNSIGNED_DTYPES = [np.uint8, np.uint32]


def _point(dtype, x, y, z):
    return Vector3(x, y, z, dtype=dtype)


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_size_is_correct(dtype):
    box = SignedIntegerBoundingBox(_point(dtype, -1, 2, -3), _point(dtype, 5, 3, -3))
    assert box.size == Size(6, 1, 0, dtype=dtype)


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_size_initialization_is_correct(dtype):
    size = Size(10, 20, 5, dtype=dtype)
    min_point = _point(dtype, -1, 3, -7)
    box = SignedIntegerBoundingBox.from_min_size(min_point, size)

    assert box.min_point == min_point
    assert box.max_point == _point(dtype, 9, 23, -2)
    assert box.size == size


@pytest.mark.parametrize("dtype", SIGNED_DTYPES + UNSIGNED_DTYPES)
def test_points_outside_have_correct_squared_distances(dtype):
    box = bounding_box(_point(dtype, 3, 3, 3), _point(dtype, 4, 4, 4))
    points_and_squared_distances = [
        ((0, 3, 3), 9),
        ((7, 3, 3), 9),
        ((3, 2, 3), 1),
        ((3, 5, 3), 1),
        ((3, 3, 1), 4),
        ((3, 3, 6), 4),
        ((1, 1, 1), 12),
        ((6, 6, 6), 12),
    ]

    for coords, squared_distance in points_and_squared_distances:
        assert box.squared_distance(_point(dtype, *coords)) == squared_distance


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_points_inside_have_negative_signed_squared_distance(dtype):
    box = SignedIntegerBoundingBox(Vector3.zero(dtype), Vector3.repeating(2, dtype=dtype))
    assert box.signed_squared_distance(Vector3.repeating(1, dtype=dtype)) < 0


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_points_outside_have_positive_signed_squared_distance(dtype):
    box = SignedIntegerBoundingBox(Vector3.zero(dtype), Vector3.repeating(1, dtype=dtype))
    assert box.signed_squared_distance(Vector3.repeating(2, dtype=dtype)) == 3


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_point_inside_has_correct_signed_squared_distance(dtype):
    box = SignedIntegerBoundingBox(Vector3.zero(dtype), Vector3.repeating(3, dtype=dtype))
    assert box.signed_squared_distance(Vector3.repeating(2, dtype=dtype)) == -1

    deep = SignedIntegerBoundingBox(Vector3.zero(dtype), Vector3.repeating(6, dtype=dtype))
    assert deep.signed_squared_distance(Vector3.repeating(3, dtype=dtype)) == -9


@pytest.mark.parametrize("dtype", SIGNED_DTYPES)
def test_point_on_surface_has_signed_squared_distance_zero(dtype):
    box = SignedIntegerBoundingBox(Vector3.zero(dtype), Vector3.repeating(2, dtype=dtype))
    assert box.signed_squared_distance(_point(dtype, 0, 1, 1)) == 0


@pytest.mark.parametrize("dtype", SIGNED_DTYPES + UNSIGNED_DTYPES)
def test_integer_boxes_offer_no_floating_point_operations(dtype):
    box = bounding_box(Vector3.zero(dtype), Vector3.repeating(2, dtype=dtype))
    assert isinstance(box, IntegerBoundingBox)
    for name in ("center", "distance", "signed_distance", "from_center"):
        assert not hasattr(box, name)


@pytest.mark.parametrize("dtype", UNSIGNED_DTYPES)
def test_unsigned_boxes_offer_no_signed_squared_distance(dtype):
    box = bounding_box(Vector3.zero(dtype), Vector3.repeating(2, dtype=dtype))
    assert type(box) is IntegerBoundingBox
    assert not hasattr(box, "signed_squared_distance")


def test_overflowing_min_size_construction_is_a_precondition_failure():
    with pytest.raises(PreconditionError):
        SignedIntegerBoundingBox.from_min_size(_point(np.int8, 100, 0, 0), Size(100, 1, 1, dtype=np.int8))
    with pytest.raises(PreconditionError):
        IntegerBoundingBox.from_min_size(_point(np.uint8, 200, 0, 0), Size(100, 1, 1, dtype=np.uint8))


def test_min_size_construction_up_to_the_range_limit():
    box = SignedIntegerBoundingBox.from_min_size(_point(np.int8, 100, 0, 0), Size(27, 1, 1, dtype=np.int8))
    assert box.max_point == _point(np.int8, 127, 1, 1)


def test_size_of_an_oversized_signed_box_wraps_negative():
    box = SignedIntegerBoundingBox(_point(np.int8, -100, 0, 0), _point(np.int8, 100, 0, 0))
    with pytest.raises(PreconditionError):
        box.size


def test_size_of_an_oversized_unsigned_box_is_exact():
    box = IntegerBoundingBox(_point(np.uint8, 0, 0, 0), _point(np.uint8, 255, 1, 1))
    assert box.size == Size(255, 1, 1, dtype=np.uint8)


def test_squared_distance_wraps_silently():
    box = SignedIntegerBoundingBox(Vector3.zero(np.int8), Vector3.repeating(1, dtype=np.int8))
    # 11 * 11 = 121 fits, 12 * 12 = 144 wraps to -112
    assert box.squared_distance(_point(np.int8, 12, 1, 1)) == 121
    assert box.squared_distance(_point(np.int8, 13, 1, 1)) == -112


def test_unsigned_squared_distance_below_the_box():
    # 3 - 5 wraps to 254, and 254 * 254 wraps back to 4
    box = IntegerBoundingBox(Vector3.repeating(5, dtype=np.uint8), Vector3.repeating(10, dtype=np.uint8))
    assert box.squared_distance(_point(np.uint8, 3, 5, 5)) == 4
