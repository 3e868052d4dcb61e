from dataclasses import astuple, dataclass, fields
from numbers import Integral

from computations.channel import CHANNEL_MAX, CHANNEL_MIN


@dataclass(frozen=True, slots=True)
class Pixel:
    """Immutable RGBA colour value with four 8-bit channels.

    :param red: Red channel in ``[0, 255]``.
    :param green: Green channel in ``[0, 255]``.
    :param blue: Blue channel in ``[0, 255]``.
    :param alpha: Alpha channel in ``[0, 255]``, 255 being fully opaque.
    """

    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX

    def __post_init__(self) -> None:
        for channel in fields(self):
            value = getattr(self, channel.name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(
                    f"Channel {channel.name} must be an integer, got {value!r}"
                )
            value = int(value)
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"Channel {channel.name} must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], got {value}"
                )
            object.__setattr__(self, channel.name, value)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return astuple(self)
