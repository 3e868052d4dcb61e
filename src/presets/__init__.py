"""
Named filter presets.

Hosts select filters by name through any :class:`PresetLookup`; the
:class:`PresetTable` returned by :func:`get_default_presets` holds the
built-in presets and accepts additional registrations.

    from presets import get_default_presets

    get_default_presets().lookup("Mandrill")  # Success(Gamma(amount=2.0))
    get_default_presets().lookup("Unknown")   # Failure(PresetNotFoundError(...))
"""

from presets.defaults import DEFAULT_PRESETS, get_default_presets
from presets.registry import PresetLookup, PresetTable

__all__ = [
    "get_default_presets",
    "DEFAULT_PRESETS",
    # Types
    "PresetLookup",
    "PresetTable",
]
