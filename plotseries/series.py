from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, TypeAlias

import numpy as np


RawKind = Literal[
    "nothing",
    "number",
    "string",
    "function",
    "range",
    "pair",
    "surface",
    "volume",
    "formatted",
    "vector",
    "matrix",
    "array",
    "unknown",
]

ElementKind = Literal["numeric", "missing", "text", "mixed"]

SeriesRecord: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class Surface:
    """2-D grid rendered as a single 3-D series instead of column series."""

    surf: Any

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(np.shape(self.surf))


@dataclass(frozen=True)
class Volume:
    v: Any
    x_extents: tuple[float, float]
    y_extents: tuple[float, float]
    z_extents: tuple[float, float]

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(np.shape(self.v))


@dataclass(frozen=True)
class Formatted:
    data: Any
    formatter: Callable[[Any], str]
