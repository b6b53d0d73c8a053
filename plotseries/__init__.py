from plotseries.api import slice_it
from plotseries.coords import compute_xyz
from plotseries.errors import (
    AmbiguousFunctionError,
    DimensionMismatchError,
    MissingAxisError,
    SeriesDataError,
    UnsupportedTypeError,
)
from plotseries.prepare import prepare_series_data
from plotseries.series import Formatted, SeriesRecord, Surface, Volume
from plotseries.shading import process_fillrange, process_ribbon
from plotseries.slicer import slice_series
from plotseries.vectorize import is3d, series_data_vector

__all__ = [
    "AmbiguousFunctionError",
    "DimensionMismatchError",
    "Formatted",
    "MissingAxisError",
    "SeriesDataError",
    "SeriesRecord",
    "Surface",
    "UnsupportedTypeError",
    "Volume",
    "compute_xyz",
    "is3d",
    "prepare_series_data",
    "process_fillrange",
    "process_ribbon",
    "series_data_vector",
    "slice_it",
    "slice_series",
]
