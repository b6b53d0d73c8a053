from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import logging
import math
from typing import Any

import numpy as np

from plotseries.adapters.normalize import as_array_input, as_grid, classify_input, element_kind, is_missing, is_number
from plotseries.errors import UnsupportedTypeError
from plotseries.series import Surface, Volume


LOGGER = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_SPAN = 2**64


def prepare_series_data(data: Any) -> Any:
    """Canonicalize one series container for the renderer.

    Numeric arrays come back as new float64 arrays of the same shape with
    missing and non-finite entries set to NaN. Text arrays have missing entries
    replaced by ``""``. Functions, ranges and same-typed number pairs pass
    through untouched.
    """
    data = as_array_input(data)
    kind = classify_input(data)

    if kind == "nothing":
        return None
    if kind == "pair":
        first, second = data
        if is_number(first) and is_number(second) and type(first) is type(second):
            return data
        raise UnsupportedTypeError(data)
    if kind in ("function", "range"):
        return data
    if kind in ("vector", "matrix", "array"):
        return _prepare_array(data)
    if kind == "surface":
        grid = as_grid(data.surf)
        if isinstance(grid, np.ndarray) and element_kind(grid) in ("numeric", "missing"):
            return Surface(_prepare_array(grid))
        # non-numeric surface, such as an image
        return data
    if kind == "volume":
        return Volume(prepare_series_data(as_grid(data.v)), data.x_extents, data.y_extents, data.z_extents)
    raise UnsupportedTypeError(data)


def _prepare_array(values: Any) -> np.ndarray:
    arr = values if isinstance(values, np.ndarray) else np.asarray(values, dtype=object)
    kind = element_kind(arr)
    if kind == "missing":
        return np.full(arr.shape, np.nan, dtype=np.float64)
    if kind == "numeric":
        return _prepare_numeric(arr)
    if kind == "text":
        return _prepare_text(arr)
    raise UnsupportedTypeError(values)


def _prepare_numeric(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind == "O":
        out = np.asarray(
            [np.nan if is_missing(v) else _to_float(v) for v in arr.ravel().tolist()],
            dtype=np.float64,
        ).reshape(arr.shape)
    else:
        out = arr.astype(np.float64, copy=True)
    out[~np.isfinite(out)] = np.nan
    return out


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # beyond float64; the isfinite pass turns this into NaN
        return math.inf if value > 0 else -math.inf


def _prepare_text(arr: np.ndarray) -> np.ndarray:
    cleaned = ["" if is_missing(v) else v for v in arr.ravel().tolist()]
    return np.asarray(cleaned, dtype=str).reshape(arr.shape)


def nobigs(values: Any) -> Any:
    """Narrow arbitrary-precision vectors to float64/int64, leaving everything else alone."""
    if isinstance(values, list):
        if not values:
            return values
        arr = np.asarray(values, dtype=object)
        if arr.ndim != 1:
            return values
    elif isinstance(values, np.ndarray) and values.ndim == 1 and values.dtype.kind == "O" and values.size:
        arr = values
    else:
        return values

    items = arr.tolist()
    if all(isinstance(v, (Decimal, Fraction)) for v in items):
        LOGGER.debug("narrowing %d arbitrary-precision floats to float64", len(items))
        return np.asarray([float(v) for v in items], dtype=np.float64)
    if all(isinstance(v, int) and not isinstance(v, bool) for v in items):
        LOGGER.debug("narrowing %d arbitrary-precision integers to int64", len(items))
        return np.asarray([(v - _INT64_MIN) % _INT64_SPAN + _INT64_MIN for v in items], dtype=np.int64)
    return values
