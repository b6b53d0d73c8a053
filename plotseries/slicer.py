from __future__ import annotations

import logging
from typing import Any, MutableMapping, MutableSequence

from plotseries.adapters.normalize import is_function
from plotseries.coords import apply_function, compute_xyz
from plotseries.series import Formatted, SeriesRecord
from plotseries.shading import process_fillrange, process_ribbon
from plotseries.vectorize import series_data_vector


LOGGER = logging.getLogger(__name__)

FILLRANGE_KEY = "fillrange"
RIBBON_KEY = "ribbon"
FORMATTER_KEYS = {"x": "xformatter", "y": "yformatter", "z": "zformatter"}


def slice_series(
    series_list: MutableSequence[SeriesRecord],
    x: Any,
    y: Any,
    z: Any,
    attributes: MutableMapping[str, Any],
) -> None:
    """Split x/y/z into individual series and append one attribute record per series.

    ``fillrange`` and ``ribbon`` are consumed from ``attributes``; formatter keys
    are written into it when an axis arrives as ``Formatted``. Shorter
    per-series lists are cycled against the longest one. Records are only
    appended once every series has been built.
    """
    x = _unwrap_formatted("x", x, attributes)
    y = _unwrap_formatted("y", y, attributes)
    z = _unwrap_formatted("z", z, attributes)

    xs = series_data_vector(x, attributes)
    ys = series_data_vector(y, attributes)
    zs = series_data_vector(z, attributes)

    fillranges = process_fillrange(attributes.pop(FILLRANGE_KEY, None), attributes)
    ribbons = process_ribbon(attributes.pop(RIBBON_KEY, None), attributes)
    mf = len(fillranges)
    mr = len(ribbons)

    mx, my, mz = len(xs), len(ys), len(zs)
    if mx == 0 or my == 0 or mz == 0:
        LOGGER.debug("no series emitted: series counts x=%d y=%d z=%d", mx, my, mz)
        return

    records: list[SeriesRecord] = []
    for i in range(max(mx, my, mz)):
        record = dict(attributes)
        xi, yi, zi = compute_xyz(xs[i % mx], ys[i % my], zs[i % mz])
        record["x"], record["y"], record["z"] = xi, yi, zi
        record[FILLRANGE_KEY] = _evaluate_shading(fillranges[i % mf], xi) if mf else None
        record[RIBBON_KEY] = _evaluate_shading(ribbons[i % mr], xi) if mr else None
        records.append(record)

    series_list.extend(records)
    LOGGER.debug("sliced %d series (x=%d y=%d z=%d fillrange=%d ribbon=%d)", len(records), mx, my, mz, mf, mr)


def _unwrap_formatted(axis: str, value: Any, attributes: MutableMapping[str, Any]) -> Any:
    if not isinstance(value, Formatted):
        return value
    LOGGER.debug("using attached formatter for %s", axis)
    attributes[FORMATTER_KEYS[axis]] = value.formatter
    return value.data


def _evaluate_shading(value: Any, x: Any) -> Any:
    if is_function(value):
        return apply_function(value, x, label="shading", over="x")
    # asymmetric ribbon
    if isinstance(value, tuple) and len(value) == 2:
        return tuple(apply_function(v, x, label="ribbon", over="x") if is_function(v) else v for v in value)
    return value
