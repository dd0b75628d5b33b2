import pytest

from format_mapper.registry import set_default_registry

_ENV_VARS = (
    "FORMAT_MAPPER_CURRENCY_SYMBOL",
    "FORMAT_MAPPER_DECIMAL_PLACES",
    "FORMAT_MAPPER_PERCENT_DECIMALS",
    "FORMAT_MAPPER_THOUSANDS_SEPARATOR",
    "FORMAT_MAPPER_CLOSED",
    "FORMAT_MAPPER_INCLUDE_LOWEST",
    "FORMAT_MAPPER_CATALOG",
)


@pytest.fixture(autouse=True)
def _isolated_format_environment(monkeypatch: pytest.MonkeyPatch):
    """Run every test with default settings and a fresh default registry.

    Tests that register formats on the process-wide registry must not leak
    them into other tests, and a developer's own FORMAT_MAPPER_* variables
    must not change the expected renderings.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_registry(None)
    yield
    set_default_registry(None)
