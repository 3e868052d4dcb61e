"""
Strategies for running a filter chain over every pixel of a raster.

Both executors satisfy the same contract: the result has the input's
dimensions, and pixel ``i`` of the result equals the chain folded over pixel
``i`` of the input. They only differ in how the work is carried out.

- ``per_pixel`` folds the chain over each pixel in row-major order.
- ``lookup_table`` compiles the chain into two 256-entry tables once and maps
  the whole RGBA array through them with NumPy indexing.
"""

from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Final, Mapping

from loguru import logger

from container_models.raster import Raster
from filters.adjust import pixel_curves
from filters.tables import compile_tables
from filters.variants import Filter
from settings import ExecutorKind

type Executor = Callable[[Raster, Sequence[Filter]], Raster]


def process_per_pixel(raster: Raster, filters: Sequence[Filter]) -> Raster:
    """
    Apply the filters to each pixel in turn.

    Channel curves are derived once per filter, not once per pixel.
    """
    logger.debug(
        f"Processing {raster.width}x{raster.height} raster pixel by pixel with {len(filters)} filter(s)"
    )
    stages = [pixel_curves(pixel_filter) for pixel_filter in filters]
    pixels = []
    for pixel in raster.pixels:
        for stage in stages:
            pixel = stage(pixel)
        pixels.append(pixel)
    return Raster.from_pixels(raster.width, raster.height, pixels)


def process_lookup_table(raster: Raster, filters: Sequence[Filter]) -> Raster:
    """Apply the filters through lookup tables compiled from the whole chain."""
    logger.debug(
        f"Processing {raster.width}x{raster.height} raster via lookup tables with {len(filters)} filter(s)"
    )
    tables = compile_tables(filters)
    return Raster(data=tables.apply(raster.data))


EXECUTORS: Final[Mapping[ExecutorKind, Executor]] = MappingProxyType(
    {
        ExecutorKind.PER_PIXEL: process_per_pixel,
        ExecutorKind.LOOKUP_TABLE: process_lookup_table,
    }
)
