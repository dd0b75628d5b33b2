from .catalog_repository import FormatCatalogRepository
from .cntlin_loader import load_cntlin_csv
from .sas_catalog_loader import load_sas_catalog
from .toml_catalog_loader import load_toml_catalog

__all__ = [
    "FormatCatalogRepository",
    "load_cntlin_csv",
    "load_sas_catalog",
    "load_toml_catalog",
]
