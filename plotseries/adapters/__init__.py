from .normalize import as_array_input, as_grid, classify_input, element_kind, is_function, is_function_or_functions

__all__ = [
    "as_array_input",
    "as_grid",
    "classify_input",
    "element_kind",
    "is_function",
    "is_function_or_functions",
]
