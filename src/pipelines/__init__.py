"""
Filter Pipelines
================

Apply ordered filter chains to rasters. Use :func:`process` for a single pure
pass, or :class:`FilterPipeline` to build a chain incrementally (including
filters selected by preset name) and run it with railway-style results.
"""

from .executors import EXECUTORS, process_lookup_table, process_per_pixel
from .pipeline import FilterPipeline, process, run_pipeline


__all__ = [
    "EXECUTORS",
    "FilterPipeline",
    "process",
    "process_lookup_table",
    "process_per_pixel",
    "run_pipeline",
]
