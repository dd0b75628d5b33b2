"""Domain-level services: binning, informat parsing and display rendering."""

from .binner import Binner
from .builtin_formats import (
    builtin_definitions,
    comma_format,
    currency_format,
    date9_format,
    iso_date_format,
    number_format,
    percent_format,
)
from .display import mask_series, render_series, render_value
from .numeric_text import ParsedNumber, parse_decorated_number, parse_number

__all__ = [
    "Binner",
    "ParsedNumber",
    "builtin_definitions",
    "comma_format",
    "currency_format",
    "date9_format",
    "iso_date_format",
    "mask_series",
    "number_format",
    "parse_decorated_number",
    "parse_number",
    "percent_format",
    "render_series",
    "render_value",
]
