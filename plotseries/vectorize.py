from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from plotseries.adapters.normalize import as_array_input, classify_input, element_kind, is_number
from plotseries.prepare import prepare_series_data
from plotseries.series import Surface


THREE_D_SERIES_TYPES = frozenset(
    {"path3d", "scatter3d", "surface", "wireframe", "contour3d", "volume", "mesh3d"}
)


def is3d(attributes: Mapping[str, Any]) -> bool:
    flag = attributes.get("is3d")
    if flag is not None:
        return bool(flag)
    return str(attributes.get("seriestype", "path")) in THREE_D_SERIES_TYPES


def series_data_vector(data: Any, attributes: Mapping[str, Any]) -> list[Any]:
    """Split one argument into a list with one prepared entry per series.

    A list of data points is one series; a list of anything else is split
    element by element and flattened. Matrix columns become separate series
    unless ``attributes`` describes a 3D plot, in which case the matrix is a
    single Surface.
    """
    data = as_array_input(data)
    kind = classify_input(data)

    if kind == "nothing":
        return [None]

    # fixed number of blank series
    if kind == "number" and _is_integer(data):
        return [np.zeros(0, dtype=np.float64) for _ in range(int(data))]

    if kind == "vector":
        if element_kind(data) != "mixed":
            return [prepare_series_data(data)]
        out: list[Any] = []
        for item in data:
            out.extend(series_data_vector(item, attributes))
        return out

    if kind == "matrix" and element_kind(data) != "mixed":
        if is3d(attributes):
            return [prepare_series_data(Surface(data))]
        return [prepare_series_data(data[:, i]) for i in range(data.shape[1])]

    return [prepare_series_data(data)]


def _is_integer(value: Any) -> bool:
    return is_number(value) and isinstance(value, (int, np.integer))
