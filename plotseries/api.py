from __future__ import annotations

from typing import Any

from plotseries.series import SeriesRecord
from plotseries.slicer import slice_series


def slice_it(x: Any, y: Any = None, z: Any = None, **attributes: Any) -> list[SeriesRecord]:
    series_list: list[SeriesRecord] = []
    slice_series(series_list, x, y, z, attributes)
    return series_list
