"""
Filter pipeline.

:func:`process` is the pure core: it applies an ordered filter chain to every
pixel of a raster and returns a new raster. :class:`FilterPipeline` is the
host-facing wrapper that collects filters, either constructed directly or
selected by preset name, and runs them as a :class:`RasterMutation`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Self, override

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Result, ResultE, Success

from container_models.raster import Raster
from exceptions import PresetNotFoundError
from filters.variants import Filter
from pipelines.base import RasterMutation
from pipelines.executors import EXECUTORS
from presets import PresetLookup, get_default_presets
from settings import ExecutorKind, get_settings
from utils.logger import log_railway_function


def process(
    raster: Raster,
    filters: Sequence[Filter],
    executor: ExecutorKind | None = None,
) -> Raster:
    """
    Apply ``filters`` in order to every pixel of ``raster``.

    :param raster: The input raster, never modified.
    :param filters: Ordered filters; the output of each feeds the next. An
        empty sequence is the identity.
    :param executor: Processing strategy, defaults to the configured executor.
    :returns: A new raster with the same width and height.
    """
    kind = ExecutorKind(executor or get_settings().executor)
    return EXECUTORS[kind](raster, tuple(filters))


class FilterPipeline(RasterMutation):
    """Ordered filter chain applied to whole rasters.

    Example:
        >>> pipeline = FilterPipeline().add_filter(Contrast(30))
        >>> pipeline.add_preset("Mandrill").unwrap()
        >>> new_raster = pipeline.process(raster)
    """

    def __init__(
        self,
        filters: Iterable[Filter] = (),
        *,
        presets: PresetLookup | None = None,
        executor: ExecutorKind | None = None,
    ) -> None:
        """
        :param filters: Initial filters, in application order.
        :param presets: Lookup used by `add_preset`, defaults to the built-in table.
        :param executor: Processing strategy, defaults to the configured executor.
        """
        self._filters: list[Filter] = list(filters)
        self.presets = presets if presets is not None else get_default_presets()
        self.executor = executor

    @property
    def filters(self) -> tuple[Filter, ...]:
        return tuple(self._filters)

    def add_filter(self, pixel_filter: Filter) -> Self:
        """Append a filter to the end of the chain."""
        self._filters.append(pixel_filter)
        return self

    def add_preset(self, name: str) -> Result[Self, PresetNotFoundError]:
        """
        Append the filter registered under ``name``.

        :returns: `Success` with this pipeline, or a `Failure` holding a
            `PresetNotFoundError`; the chain is left unchanged on failure.
        """
        return self.presets(name).map(self.add_filter)

    @property
    def skip_predicate(self) -> bool:
        """An empty chain is the identity, so there is nothing to apply."""
        return not self._filters

    @log_railway_function(
        "Failed to apply filter pipeline",
        "Successfully applied filter pipeline",
    )
    def __call__(self, raster: Raster) -> ResultE[Raster]:
        return super().__call__(raster)

    @override
    def apply_on_raster(self, raster: Raster) -> Raster:
        return self.process(raster)

    def process(self, raster: Raster) -> Raster:
        """Apply the chain to ``raster`` and return the new raster."""
        return process(raster, self._filters, self.executor)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        chain = ", ".join(str(pixel_filter) for pixel_filter in self._filters)
        return f"{type(self).__name__}([{chain}])"


def run_pipeline(raster: Raster, *pipelines: FilterPipeline) -> ResultE[Raster]:
    """
    Run pipelines one after another, stopping at the first failure.

    Equivalent to a single pipeline holding all of their filters in order.
    """
    return flow(Success(raster), *(bind(pipeline) for pipeline in pipelines))
