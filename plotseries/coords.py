from __future__ import annotations

from typing import Any, Callable

import numpy as np

from plotseries.adapters.normalize import element_kind, is_function, is_function_or_functions
from plotseries.errors import AmbiguousFunctionError, DimensionMismatchError, MissingAxisError, UnsupportedTypeError
from plotseries.prepare import nobigs
from plotseries.series import Surface, Volume


def compute_xyz(x: Any, y: Any, z: Any) -> tuple[Any, Any, Any]:
    """Fill in omitted coordinates of one series and evaluate function axes.

    Missing x (and, for a bare z, missing y) become 1-based index ranges over
    the reference data. A function x is applied over y, a function y over x and
    a function z over the paired (x, y) points.
    """
    if x is None and y is None and z is None:
        raise MissingAxisError()
    if x is None and is_function_or_functions(y):
        raise AmbiguousFunctionError(f"If you want to plot the function `{y!r}`, you need to define the x values!")
    if x is None and y is None and is_function_or_functions(z):
        raise AmbiguousFunctionError(f"If you want to plot the function `{z!r}`, you need to define x and y values!")

    x_given = x is not None
    x = _compute_x(x, y, z)
    y = _compute_y(x, y, z, x_given=x_given)
    z = _compute_z(x, y, z)
    if x is not None and z is None and y is not None:
        n = axis_length(x, 0)
        m = axis_length(y, 0)
        if m != n:
            raise DimensionMismatchError(n, m)
    return nobigs(x), nobigs(y), nobigs(z)


def axis_length(values: Any, dim: int) -> int:
    if isinstance(values, (Surface, Volume, np.ndarray)):
        shape = values.shape
    elif isinstance(values, (range, list, tuple)):
        shape = (len(values),)
    else:
        raise UnsupportedTypeError(values)
    # trailing singleton axes, as for a column vector
    return int(shape[dim]) if dim < len(shape) else 1


def index_axis(values: Any, dim: int) -> range:
    return range(1, axis_length(values, dim) + 1)


def _compute_x(x: Any, y: Any, z: Any) -> Any:
    if x is None and y is None:
        return index_axis(z, 0)
    if x is None:
        return index_axis(y, 0)
    if is_function(x):
        return apply_function(x, y, label="x", over="y")
    return x


def _compute_y(x: Any, y: Any, z: Any, *, x_given: bool) -> Any:
    if y is None and not x_given and z is not None:
        return index_axis(z, 1)
    if is_function(y):
        return apply_function(y, x, label="y", over="x")
    return y


def _compute_z(x: Any, y: Any, z: Any) -> Any:
    if is_function(z):
        if x is None or y is None or is_function(x) or is_function(y):
            raise AmbiguousFunctionError(f"cannot evaluate z function `{z!r}` without concrete x and y values")
        n = axis_length(x, 0)
        m = axis_length(y, 0)
        if m != n:
            raise DimensionMismatchError(
                n, m, message=f"z function needs paired x and y points, got {n} x values and {m} y values."
            )
        return np.asarray([z(a, b) for a, b in zip(_elements(x), _elements(y), strict=True)])
    if isinstance(z, np.ndarray) and z.ndim == 2 and element_kind(z) in ("numeric", "missing"):
        return Surface(z)
    return z


def apply_function(func: Callable[[Any], Any], values: Any, *, label: str, over: str) -> np.ndarray:
    if values is None or is_function(values):
        raise AmbiguousFunctionError(f"cannot evaluate {label} function `{func!r}` without concrete {over} values")
    if isinstance(values, np.ndarray):
        return np.asarray([func(v) for v in values.ravel().tolist()]).reshape(values.shape)
    return np.asarray([func(v) for v in values])


def _elements(values: Any) -> list[Any]:
    if isinstance(values, np.ndarray):
        return values.ravel().tolist()
    return list(values)
