"""
Raster Mutations
================

- :class:`~container_models.raster.Raster` holds the RGBA pixel data.
- :class:`RasterMutation` is an abstract interface for producing a new Raster
  from an existing one.
- Pure per-pixel computations live in the ``filters`` package; mutations only
  orchestrate them over a whole raster.

High-level Design
-----------------

                    +------------------------------------------+
                    |              <<abstract>>                |
                    |              RasterMutation              |
                    |------------------------------------------|
                    | + apply_on_raster(Raster) -> Raster      |
                    | + skip_predicate: bool                   |
                    | + __call__(Raster) -> ResultE[Raster]    |
                    +--------------------+---------------------+
                                         ^
                                         |
                              +----------+----------+
                              |   FilterPipeline    |
                              |---------------------|
                              | filters : Filter... |
                              +---------------------+

Example
-------

    from returns.pipeline import flow
    from returns.pointfree import bind

    result = flow(
        FilterPipeline([Brightness(1.1)])(raster),
        bind(FilterPipeline([Gamma(2.0)])),
    )
"""

from abc import ABC, abstractmethod

from returns.result import safe

from container_models.raster import Raster


class RasterMutation(ABC):
    """
    Represents a single mutation applied to a :class:`~container_models.raster.Raster`.

    The output of one `RasterMutation` is valid input for another, which
    enables chaining in pipelines. Mutations never modify their input raster.
    """

    @property
    def skip_predicate(self) -> bool:
        """
        Determines whether this mutation should be skipped.

        :return bool:
            - `True`  → skip `apply_on_raster`, returning the input unchanged
            - `False` → apply the mutation
        """
        return False

    @safe
    def __call__(self, raster: Raster) -> Raster:
        """
        Callable interface used by railway pipelines.

        :param raster: The `Raster` to transform.
        :return Raster: The transformed raster wrapped in a `Result`.
        """
        if self.skip_predicate:
            return raster
        return self.apply_on_raster(raster)

    @abstractmethod
    def apply_on_raster(self, raster: Raster) -> Raster:
        """
        Produce the mutated raster.

        :param raster: The input `Raster`.
        :return Raster: A new `Raster`.
        """
