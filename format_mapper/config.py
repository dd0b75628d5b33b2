from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Closure, Defaults, SeparatorChars


@dataclass(frozen=True, slots=True)
class FormatMapperConfig:
    currency_symbol: str = Defaults.CURRENCY_SYMBOL
    decimal_places: int = Defaults.DECIMAL_PLACES
    percent_decimals: int = Defaults.PERCENT_DECIMALS
    thousands_separator: str = Defaults.THOUSANDS_SEPARATOR
    closed: str = Defaults.CLOSED
    include_lowest: bool = Defaults.INCLUDE_LOWEST
    catalog_path: Path | None = None

    def __post_init__(self) -> None:
        if not self.currency_symbol.strip():
            raise ValueError("currency_symbol must not be blank")
        if self.decimal_places < 0:
            raise ValueError(
                f"decimal_places must not be negative, got {self.decimal_places}"
            )
        if self.percent_decimals < 0:
            raise ValueError(
                f"percent_decimals must not be negative, got {self.percent_decimals}"
            )
        if self.thousands_separator not in SeparatorChars.ALLOWED:
            allowed = ", ".join(repr(c) for c in sorted(SeparatorChars.ALLOWED))
            raise ValueError(
                f"thousands_separator must be one of {allowed}, got {self.thousands_separator!r}"
            )
        if self.closed not in Closure.ALL:
            raise ValueError(
                f"closed must be one of {', '.join(Closure.ALL)}, got {self.closed!r}"
            )

    @classmethod
    def from_env(cls) -> FormatMapperConfig:
        raw_catalog = os.getenv("FORMAT_MAPPER_CATALOG")
        catalog_path = Path(raw_catalog.strip()) if raw_catalog and raw_catalog.strip() else None
        return cls(
            currency_symbol=os.getenv(
                "FORMAT_MAPPER_CURRENCY_SYMBOL", Defaults.CURRENCY_SYMBOL
            ),
            decimal_places=int(
                os.getenv("FORMAT_MAPPER_DECIMAL_PLACES", str(Defaults.DECIMAL_PLACES))
            ),
            percent_decimals=int(
                os.getenv(
                    "FORMAT_MAPPER_PERCENT_DECIMALS", str(Defaults.PERCENT_DECIMALS)
                )
            ),
            thousands_separator=os.getenv(
                "FORMAT_MAPPER_THOUSANDS_SEPARATOR", Defaults.THOUSANDS_SEPARATOR
            ),
            closed=os.getenv("FORMAT_MAPPER_CLOSED", Defaults.CLOSED),
            include_lowest=_coerce_bool(
                os.getenv("FORMAT_MAPPER_INCLUDE_LOWEST", str(Defaults.INCLUDE_LOWEST)),
                key="FORMAT_MAPPER_INCLUDE_LOWEST",
            ),
            catalog_path=catalog_path,
        )


class ConfigLoader:
    @staticmethod
    def load(config_file: Path | None = None) -> FormatMapperConfig:
        config = FormatMapperConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: FormatMapperConfig
    ) -> FormatMapperConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        render = _get_table(data, "render")
        binning = _get_table(data, "binning")
        paths = _get_table(data, "paths")
        currency_symbol = base_config.currency_symbol
        if (value := render.get("currency_symbol")) is not None:
            currency_symbol = str(value)
        decimal_places = base_config.decimal_places
        if (value := render.get("decimal_places")) is not None:
            decimal_places = _coerce_int(value, key="render.decimal_places")
        percent_decimals = base_config.percent_decimals
        if (value := render.get("percent_decimals")) is not None:
            percent_decimals = _coerce_int(value, key="render.percent_decimals")
        thousands_separator = base_config.thousands_separator
        if (value := render.get("thousands_separator")) is not None:
            thousands_separator = str(value)
        closed = base_config.closed
        if (value := binning.get("closed")) is not None:
            closed = str(value)
        include_lowest = base_config.include_lowest
        if (value := binning.get("include_lowest")) is not None:
            include_lowest = _coerce_bool(value, key="binning.include_lowest")
        catalog_path = base_config.catalog_path
        if value := paths.get("catalog"):
            catalog_path = Path(str(value))
        return FormatMapperConfig(
            currency_symbol=currency_symbol,
            decimal_places=decimal_places,
            percent_decimals=percent_decimals,
            thousands_separator=thousands_separator,
            closed=closed,
            include_lowest=include_lowest,
            catalog_path=catalog_path,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "y"):
            return True
        if lowered in ("false", "no", "0", "n", ""):
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
