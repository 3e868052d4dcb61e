from functools import lru_cache
from types import MappingProxyType
from typing import Final, Mapping

from filters.variants import Alpha, Brightness, Contrast, Filter, Gamma
from presets.registry import PresetTable

DEFAULT_PRESETS: Final[Mapping[str, Filter]] = MappingProxyType(
    {
        "110% Brightness": Brightness(1.1),
        "3x Contrast": Contrast(128),
        "Lena": Gamma(0.25),
        "Mandrill": Gamma(2.0),
        "80% Transparency": Alpha(0.8),
    }
)


@lru_cache(maxsize=1)
def get_default_presets() -> PresetTable:
    """Get the shared preset table holding the default presets."""
    return PresetTable(DEFAULT_PRESETS)
