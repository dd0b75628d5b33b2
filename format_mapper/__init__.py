"""format-mapper package.

Display formats for tabular data, in the spirit of SAS ``PROC FORMAT``:

- Look-up tables mapping codes to display values
- Binning of numbers and dates into labelled intervals
- Display masks that keep the raw value and render it on demand
- Informats that read formatted text (currency, percent, dates) back
- A thread-safe registry of named formats
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("format-mapper")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from format_mapper.api import (
    bin_value,
    lookup,
    mask,
    parse,
    register_format,
    render,
    unwrap,
)
from format_mapper.config import ConfigLoader, FormatMapperConfig
from format_mapper.domain.entities import (
    BinSpec,
    FormatCatalog,
    FormatDefinition,
    LookupTable,
    MaskedValue,
)
from format_mapper.domain.exceptions import (
    DuplicateFormatError,
    DuplicateKeyError,
    FormatMapperError,
    InvalidBoundariesError,
    LabelCountMismatchError,
    MissingDefaultError,
    OutOfRangeError,
    UnknownFormatError,
    UnparsableValueError,
)
from format_mapper.domain.services import Binner
from format_mapper.registry import (
    FormatRegistry,
    build_default_registry,
    get_default_registry,
    set_default_registry,
)

__all__ = [
    "__version__",
    # Functions
    "bin_value",
    "lookup",
    "mask",
    "parse",
    "register_format",
    "render",
    "unwrap",
    # Entities
    "BinSpec",
    "Binner",
    "FormatCatalog",
    "FormatDefinition",
    "LookupTable",
    "MaskedValue",
    # Registry and configuration
    "ConfigLoader",
    "FormatMapperConfig",
    "FormatRegistry",
    "build_default_registry",
    "get_default_registry",
    "set_default_registry",
    # Errors
    "DuplicateFormatError",
    "DuplicateKeyError",
    "FormatMapperError",
    "InvalidBoundariesError",
    "LabelCountMismatchError",
    "MissingDefaultError",
    "OutOfRangeError",
    "UnknownFormatError",
    "UnparsableValueError",
]
