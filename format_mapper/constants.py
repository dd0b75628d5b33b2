from typing import ClassVar


class Defaults:
    CURRENCY_SYMBOL = "$"
    DECIMAL_PLACES = 2
    PERCENT_DECIMALS = 1
    THOUSANDS_SEPARATOR = ","
    CLOSED = "right"
    INCLUDE_LOWEST = False
    CONFIG_FILE = "format_mapper.toml"
    RENDER_SUFFIX = "_fmt"


class FormatNames:
    NUMBER = "number"
    COMMA = "comma"
    CURRENCY = "currency"
    ACCOUNTING = "accounting"
    PERCENT = "percent"
    ACCOUNTING_PERCENT = "accounting-percent"
    DATE9 = "date9"
    ISO_DATE = "iso-date"


class Closure:
    RIGHT = "right"
    LEFT = "left"
    ALL: ClassVar[tuple[str, ...]] = ("right", "left")


class CurrencySymbols:
    SYMBOLS: ClassVar[frozenset[str]] = frozenset({"$", "£", "€", "¥", "₹"})


class Patterns:
    ISO_DATE = "^\\d{4}-\\d{2}-\\d{2}$"
    DATE9 = "^(\\d{1,2})([A-Za-z]{3})(\\d{4})$"


class SeparatorChars:
    ALLOWED: ClassVar[frozenset[str]] = frozenset({",", " ", "'", "_", ""})


class Months:
    ABBREVIATIONS: ClassVar[tuple[str, ...]] = (
        "JAN",
        "FEB",
        "MAR",
        "APR",
        "MAY",
        "JUN",
        "JUL",
        "AUG",
        "SEP",
        "OCT",
        "NOV",
        "DEC",
    )


class MissingValues:
    STRING_MARKERS: ClassVar[frozenset[str]] = frozenset(
        {"NAN", "<NA>", "NONE", "NULL"}
    )


class CntlinColumns:
    FMTNAME: ClassVar[list[str]] = ["FMTNAME", "FormatName", "Format Name", "Format_Name"]
    START: ClassVar[list[str]] = ["START", "CodeValue", "Code Value", "Code", "Value"]
    LABEL: ClassVar[list[str]] = ["LABEL", "CodeText", "Code Text", "Text", "Decode"]
    HLO: ClassVar[list[str]] = ["HLO"]
    OTHER_FLAG = "O"
