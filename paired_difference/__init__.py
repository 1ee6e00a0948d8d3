from .main import (
    CAPACITY,
    DEFAULT_INPUT,
    InputError,
    format_total,
    paired_difference,
    parse_columns,
    read_columns,
    sort_column,
)
