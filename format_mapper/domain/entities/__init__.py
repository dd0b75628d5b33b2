from .bin_spec import BinSpec
from .format_catalog import FormatCatalog
from .format_definition import FormatDefinition
from .lookup_table import LookupTable
from .masked_value import MaskedValue

__all__ = [
    "BinSpec",
    "FormatCatalog",
    "FormatDefinition",
    "LookupTable",
    "MaskedValue",
]
