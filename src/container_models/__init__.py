"""
Immutable data containers propagated through filter pipelines.

A `Raster` is the unit of work handed to a pipeline; a `Pixel` is the value
every filter transforms. Both are immutable, so every processing step
produces new data and never aliases its input.
"""

from .pixel import Pixel
from .raster import Raster


__all__ = ["Pixel", "Raster"]
