from typing import Final

CHANNEL_MIN: Final[int] = 0
CHANNEL_MAX: Final[int] = 255
CHANNEL_MIDPOINT: Final[float] = 128.0
CHANNEL_LEVELS: Final[int] = CHANNEL_MAX + 1


def clamp_to_channel(value: int | float) -> int:
    """
    Saturate a value to the 8-bit channel range and truncate it toward zero.

    Saturation happens before truncation, so infinities and integers beyond
    any fixed-width range are accepted without overflow.

    :param value: Intermediate result of a channel computation.
    :returns: Integer channel value in ``[0, 255]``.
    """
    return int(max(CHANNEL_MIN, min(CHANNEL_MAX, value)))
