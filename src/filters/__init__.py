"""
Pixel Filters
=============

The closed set of per-pixel filters and the pure transforms that apply them.

    from filters import Brightness, Gamma, apply_filters
    from container_models import Pixel

    apply_filters(Pixel(200, 100, 50), [Brightness(1.1), Gamma(2.0)])
"""

from .adjust import adjust_pixel, alpha_curve, apply_filters, colour_curve
from .tables import ChannelTables, compile_tables
from .variants import Alpha, Brightness, Contrast, Filter, Gamma


__all__ = [
    "Alpha",
    "Brightness",
    "Contrast",
    "Filter",
    "Gamma",
    "adjust_pixel",
    "alpha_curve",
    "apply_filters",
    "colour_curve",
    "ChannelTables",
    "compile_tables",
]
