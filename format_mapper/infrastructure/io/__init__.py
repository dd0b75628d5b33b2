from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import (
    CatalogLoadError,
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    FormatMapperInfrastructureError,
)

__all__ = [
    "CSVReadOptions",
    "CSVReader",
    "CatalogLoadError",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "FormatMapperInfrastructureError",
]
