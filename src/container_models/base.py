from collections.abc import Sequence
from functools import partial
from typing import Annotated

from numpy import array, asarray, integer, isfinite, trunc, uint8
from numpy.typing import DTypeLike, NDArray
from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from computations.channel import CHANNEL_MAX, CHANNEL_MIN

RGBA_CHANNELS = 4


def serialize_ndarray[T: integer](array_: NDArray[T]) -> list:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array[T: integer](
    dtype: DTypeLike, value: Sequence | NDArray[T]
) -> NDArray[T]:
    """
    Coerce input to a numpy array of ``dtype``.

    Values that are not exact channel levels are rejected instead of being
    cast or wrapped around.
    """
    values = asarray(value)
    if values.dtype.kind == "f":
        if not isfinite(values).all():
            raise ValueError("Array contains non-finite value(s)")
        if (values != trunc(values)).any():
            raise ValueError("Array contains non-integral value(s)")
    if values.size and (values.min() < CHANNEL_MIN or values.max() > CHANNEL_MAX):
        raise ValueError(
            f"Array's value(s) outside [{CHANNEL_MIN}:{CHANNEL_MAX}] range"
        )
    return array(values, dtype=dtype)


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


def validate_rgba(value: NDArray) -> NDArray:
    height, width, channels = value.shape
    if channels != RGBA_CHANNELS:
        raise ValueError(
            f"Expected {RGBA_CHANNELS} channels (RGBA), but got {channels}"
        )
    if height < 1 or width < 1:
        raise ValueError(
            f"Raster dimensions must be positive, got {width}x{height}"
        )
    return value


def freeze(value: NDArray) -> NDArray:
    value.setflags(write=False)
    return value


type UInt8Array3D = Annotated[
    NDArray[uint8],
    BeforeValidator(partial(coerce_to_array, uint8)),
    AfterValidator(partial(validate_shape, 3)),
    PlainSerializer(serialize_ndarray),
]

type ImageRGBA = Annotated[
    UInt8Array3D, AfterValidator(validate_rgba), AfterValidator(freeze)
]  # Shape: (H, W, 4)
