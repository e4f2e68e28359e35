"""
Console presentation for PivotKarir.

Renders finished and failed comparisons with rich.
"""

from .results_view import LEVEL_COLORS, render_failure, render_results

__all__ = [
    "LEVEL_COLORS",
    "render_failure",
    "render_results",
]
