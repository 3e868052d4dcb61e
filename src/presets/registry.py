"""Named preset table and the lookup protocol consumed by pipelines."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Protocol, runtime_checkable

from loguru import logger
from returns.result import Failure, Result, Success

from exceptions import PresetAlreadyRegisteredError, PresetNotFoundError
from filters.variants import Filter
from utils.logger import FailureLevel, log_railway_function


@runtime_checkable
class PresetLookup(Protocol):
    """Protocol for resolving a preset name into a filter.

    Lookups never raise for unknown names; they return a `Failure` holding a
    `PresetNotFoundError` instead.
    """

    def __call__(self, name: str) -> Result[Filter, PresetNotFoundError]: ...


class PresetTable:
    """Mapping of human-readable preset names to preconstructed filters.

    Filters are immutable, so a single instance is shared by every pipeline
    that selects the preset.

    Example:
        >>> presets = PresetTable({"Soft": Contrast(-40)})
        >>> presets.register("Bright", Brightness(1.5))
        >>> presets.lookup("Bright").unwrap() == Brightness(1.5)
        True
    """

    def __init__(self, presets: Mapping[str, Filter] | None = None) -> None:
        self._presets: dict[str, Filter] = {}
        for name, pixel_filter in (presets or {}).items():
            self.register(name, pixel_filter)

    def register(self, name: str, pixel_filter: Filter) -> None:
        """Add a preset to the table.

        :param name: Unique, non-empty preset name
        :param pixel_filter: Filter returned for ``name``
        :raises ValueError: If the name is empty
        :raises PresetAlreadyRegisteredError: If the name is already registered
        """
        if not name:
            raise ValueError("Preset name cannot be empty")
        if name in self._presets:
            raise PresetAlreadyRegisteredError(name)
        logger.debug(f"Registering preset '{name}' as {pixel_filter}")
        self._presets[name] = pixel_filter

    @log_railway_function(
        "Failed to find preset", failure_level=FailureLevel.WARNING
    )
    def lookup(self, name: str) -> Result[Filter, PresetNotFoundError]:
        """Resolve a preset name, returning a `Failure` for unknown names."""
        if (pixel_filter := self._presets.get(name)) is None:
            return Failure(PresetNotFoundError(name))
        return Success(pixel_filter)

    def __call__(self, name: str) -> Result[Filter, PresetNotFoundError]:
        return self.lookup(name)

    def __getitem__(self, name: str) -> Filter:
        try:
            return self._presets[name]
        except KeyError:
            raise PresetNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._presets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._presets)

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)
