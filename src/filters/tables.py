"""
Lookup-table compilation of filter chains.

Every filter maps each channel value independently, so a whole chain can be
evaluated once for all 256 possible channel values. Composing two tables is a
single indexing operation (``second[first]``), which lets a chain of any
length collapse into one colour table and one alpha table that are applied to
an entire raster at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

import numpy as np
from numpy.typing import NDArray

from computations.channel import CHANNEL_LEVELS
from filters.adjust import ChannelCurve, pixel_curves
from filters.variants import Filter

type ChannelTable = NDArray[np.uint8]  # Shape: (256,)


def tabulate(curve: ChannelCurve) -> ChannelTable:
    """Evaluate a channel curve for every possible channel value."""
    table = np.fromiter(
        (curve(value) for value in range(CHANNEL_LEVELS)),
        dtype=np.uint8,
        count=CHANNEL_LEVELS,
    )
    table.setflags(write=False)
    return table


@dataclass(frozen=True, eq=False)
class ChannelTables:
    """Colour (red, green, blue) and alpha lookup tables for a filter chain."""

    colour: ChannelTable
    alpha: ChannelTable

    @classmethod
    def identity(cls) -> ChannelTables:
        values = np.arange(CHANNEL_LEVELS, dtype=np.uint8)
        values.setflags(write=False)
        return cls(colour=values, alpha=values)

    @classmethod
    def from_filter(cls, pixel_filter: Filter) -> ChannelTables:
        curves = pixel_curves(pixel_filter)
        return cls(colour=tabulate(curves.colour), alpha=tabulate(curves.alpha))

    def then(self, other: ChannelTables) -> ChannelTables:
        """Tables equivalent to applying ``self`` first and ``other`` second."""
        return ChannelTables(
            colour=other.colour[self.colour], alpha=other.alpha[self.alpha]
        )

    def apply(self, data: NDArray[np.uint8]) -> NDArray[np.uint8]:
        """
        Map an ``(H, W, 4)`` RGBA array through the tables.

        :param data: Input array, left untouched.
        :returns: A newly allocated array of the same shape.
        """
        result = np.empty_like(data)
        result[..., :3] = self.colour[data[..., :3]]
        result[..., 3] = self.alpha[data[..., 3]]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelTables):
            return NotImplemented
        return np.array_equal(self.colour, other.colour) and np.array_equal(
            self.alpha, other.alpha
        )


def compile_tables(filters: Iterable[Filter]) -> ChannelTables:
    """Collapse a filter chain into a single pair of lookup tables."""
    return reduce(
        lambda tables, pixel_filter: tables.then(ChannelTables.from_filter(pixel_filter)),
        filters,
        ChannelTables.identity(),
    )
