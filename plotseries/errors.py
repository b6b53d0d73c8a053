from __future__ import annotations


class SeriesDataError(ValueError):
    pass


class UnsupportedTypeError(SeriesDataError):
    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(f"Cannot convert {self.value_type.__name__} to series data for plotting")


class DimensionMismatchError(SeriesDataError):
    def __init__(self, expected: int, found: int, *, message: str | None = None) -> None:
        self.expected = expected
        self.found = found
        if message is None:
            message = f"Expects {expected} elements in each col of y, found {found}."
        super().__init__(message)


class MissingAxisError(SeriesDataError):
    def __init__(self) -> None:
        super().__init__("x/y/z are all nothing!")


class AmbiguousFunctionError(SeriesDataError):
    pass
