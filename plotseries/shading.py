from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from plotseries.adapters.normalize import is_number
from plotseries.vectorize import series_data_vector


def process_fillrange(fillrange: Any, attributes: Mapping[str, Any]) -> list[Any]:
    if is_number(fillrange):
        return [fillrange]
    return series_data_vector(fillrange, attributes)


def process_ribbon(ribbon: Any, attributes: Mapping[str, Any]) -> list[Any]:
    """Per-series ribbons; a 2-tuple is ``(lower, upper)`` and is paired by position.

    Pairing stops at the shorter side.
    """
    if isinstance(ribbon, tuple) and len(ribbon) == 2:
        lower, upper = ribbon
        return list(zip(_ribbon_side(lower, attributes), _ribbon_side(upper, attributes), strict=False))
    if is_number(ribbon):
        return [ribbon]
    return series_data_vector(ribbon, attributes)


def _ribbon_side(ribbon: Any, attributes: Mapping[str, Any]) -> list[Any]:
    # integers still count blank series, like any other vectorized argument
    if is_number(ribbon) and not isinstance(ribbon, (int, np.integer)):
        return [ribbon]
    return series_data_vector(ribbon, attributes)
