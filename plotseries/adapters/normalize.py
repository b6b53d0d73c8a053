from __future__ import annotations

from decimal import Decimal
import numbers
from typing import Any, Iterable

import numpy as np

from plotseries.series import ElementKind, Formatted, RawKind, Surface, Volume


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


NUMERIC_DTYPE_KINDS = frozenset("iufb")

if torch is not None:
    NUMPY_FLOAT_DTYPES = frozenset({torch.float16, torch.float32, torch.float64})
else:  # pragma: no cover - optional dependency
    NUMPY_FLOAT_DTYPES = frozenset()


def as_array_input(value: Any) -> Any:
    """Turn pandas and torch containers into numpy arrays; everything else is returned as-is."""
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        if tensor.is_floating_point() and tensor.dtype not in NUMPY_FLOAT_DTYPES:
            tensor = tensor.to(torch.float64)
        return tensor.numpy()

    if pd is not None and isinstance(value, (pd.Series, pd.Index)):
        return value.to_numpy()

    if pd is not None and isinstance(value, pd.DataFrame):
        return value.to_numpy()

    return value


def as_grid(value: Any) -> Any:
    value = as_array_input(value)
    if isinstance(value, list):
        return np.asarray(value, dtype=object)
    return value


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return pd is not None and value is pd.NA


def is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal, np.bool_))


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_function(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return callable(value) and not isinstance(value, (Surface, Volume, Formatted, np.ndarray))


def is_function_or_functions(value: Any) -> bool:
    if is_function(value):
        return True
    if isinstance(value, list) and value:
        return all(is_function(v) for v in value)
    if isinstance(value, np.ndarray) and value.dtype.kind == "O" and value.size:
        return all(is_function(v) for v in value.ravel().tolist())
    return False


def classify_input(value: Any) -> RawKind:
    """Tag one raw argument with the variant of the input union it belongs to.

    Containers from pandas and torch must be passed through ``as_array_input``
    first; they classify as ``"unknown"`` otherwise.
    """
    if value is None:
        return "nothing"
    if isinstance(value, Surface):
        return "surface"
    if isinstance(value, Volume):
        return "volume"
    if isinstance(value, Formatted):
        return "formatted"
    if isinstance(value, range):
        return "range"
    if isinstance(value, tuple):
        return "pair" if len(value) == 2 else "unknown"
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return "unknown"
        if value.ndim == 1:
            return "vector"
        if value.ndim == 2:
            return "matrix"
        return "array"
    if isinstance(value, list):
        return "vector"
    if is_text(value):
        return "string"
    if is_number(value):
        return "number"
    if is_function(value):
        return "function"
    return "unknown"


def element_kind(values: Any) -> ElementKind:
    """Classify the elements of a list or ndarray as one DataPoint family.

    Numbers mixed with missing markers are ``"numeric"``; text mixed with missing
    markers is ``"text"``; an all-missing (or empty) container is ``"missing"``.
    """
    if isinstance(values, np.ndarray):
        kind = values.dtype.kind
        if kind in NUMERIC_DTYPE_KINDS:
            return "numeric"
        if kind == "U":
            return "text"
        if kind != "O":
            return "mixed"
        items: Iterable[Any] = values.ravel().tolist()
    else:
        items = values

    saw_number = False
    saw_text = False
    for item in items:
        if is_missing(item):
            continue
        if is_number(item):
            saw_number = True
        elif is_text(item):
            saw_text = True
        else:
            return "mixed"
        if saw_number and saw_text:
            return "mixed"
    if saw_number:
        return "numeric"
    if saw_text:
        return "text"
    return "missing"
