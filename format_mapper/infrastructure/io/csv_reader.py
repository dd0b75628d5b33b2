"""CSV input for the ``apply`` command.

Fields are kept as the text that was written (``"(1,250.00)"``, ``"001"``,
``"01JAN2020"``) so that informats, not pandas, decide what a value means.
Only empty fields become missing: codes such as ``NA`` (North America) are
data.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class CSVReadOptions:
    """How to read one file.

    ``delimiter=None`` sniffs the separator from the data, for files
    exported with ``;`` where ``,`` is the decimal mark. The default
    ``utf-8-sig`` encoding drops the byte-order mark spreadsheet tools write.
    """

    normalize_headers: bool = True
    delimiter: str | None = ","
    encoding: str = "utf-8-sig"


class CSVReader:
    """Reads every field as text so informats see the formatted strings."""

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        read_args: dict[str, Any] = {
            "sep": options.delimiter,
            "engine": "python" if options.delimiter is None else "c",
            "dtype": str,
            "keep_default_na": False,
            "encoding": options.encoding,
        }
        try:
            # pandas renames repeated headers (AGE, AGE.1), so keep the raw row
            header = pd.read_csv(path, header=None, nrows=1, **read_args)
            df = pd.read_csv(path, na_values=[""], **read_args)
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        names = [str(name) for name in header.iloc[0]]
        if options.normalize_headers:
            names = [name.strip() for name in names]
            df.columns = [str(col).strip() for col in df.columns]
        self._check_unique_headers(names, path)
        return df

    @staticmethod
    def _check_unique_headers(names: list[str], path: Path) -> None:
        # formats are assigned by column name
        duplicated = [name for name, n in Counter(names).items() if n > 1]
        if duplicated:
            raise DataParseError(
                f"Duplicate column names in {path}: {', '.join(sorted(duplicated))}"
            )
