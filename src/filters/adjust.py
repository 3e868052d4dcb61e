"""Per-channel curves and the pure pixel transform built on top of them.

Each filter is reduced to two channel curves: one shared by red, green and
blue, and one for alpha. Both map a channel value in ``[0, 255]`` to a new
channel value in the same range, routing every intermediate result through
:func:`~computations.channel.clamp_to_channel`.
"""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import NamedTuple, assert_never

from computations.channel import CHANNEL_MAX, CHANNEL_MIDPOINT, clamp_to_channel
from container_models.pixel import Pixel
from filters.variants import Alpha, Brightness, Contrast, Filter, Gamma

type ChannelCurve = Callable[[int], int]


def _unchanged(value: int) -> int:
    return value


class PixelCurves(NamedTuple):
    colour: ChannelCurve
    alpha: ChannelCurve

    def __call__(self, pixel: Pixel) -> Pixel:
        return Pixel(
            red=self.colour(pixel.red),
            green=self.colour(pixel.green),
            blue=self.colour(pixel.blue),
            alpha=self.alpha(pixel.alpha),
        )


def colour_curve(pixel_filter: Filter) -> ChannelCurve:
    """Return the curve a filter applies to the red, green and blue channels."""
    match pixel_filter:
        case Brightness(amount=amount):
            return lambda value: clamp_to_channel(value * amount)
        case Contrast(factor=factor):
            return lambda value: clamp_to_channel(
                factor * (value - CHANNEL_MIDPOINT) + CHANNEL_MIDPOINT
            )
        case Gamma(correction=correction):
            return lambda value: clamp_to_channel(
                CHANNEL_MAX * (value / CHANNEL_MAX) ** correction
            )
        case Alpha():
            return _unchanged
        case _:
            assert_never(pixel_filter)


def alpha_curve(pixel_filter: Filter) -> ChannelCurve:
    """Return the curve a filter applies to the alpha channel."""
    match pixel_filter:
        case Alpha(alpha=alpha):
            return lambda _: alpha
        case Brightness() | Contrast() | Gamma():
            return _unchanged
        case _:
            assert_never(pixel_filter)


def pixel_curves(pixel_filter: Filter) -> PixelCurves:
    return PixelCurves(colour_curve(pixel_filter), alpha_curve(pixel_filter))


def adjust_pixel(pixel: Pixel, pixel_filter: Filter) -> Pixel:
    """Apply a single filter to a pixel, returning a new pixel."""
    return pixel_curves(pixel_filter)(pixel)


def apply_filters(pixel: Pixel, filters: Iterable[Filter]) -> Pixel:
    """Fold ``filters`` left to right over ``pixel``."""
    return reduce(adjust_pixel, filters, pixel)
