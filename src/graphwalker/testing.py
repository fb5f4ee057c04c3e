import copy
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import pytest

from .config import GRAPHWALKER_CONFIG, GraphWalkerConfig
from .query.paths import clear_path_cache

_MOCK_OBJECT: dict[str, Any] = {
    "firstName": "John",
    "lastName": "Smith",
    "age": 25,
    "address": {
        "streetAddress": "21 2nd Street",
        "city": "New York",
        "state": "NY",
        "postalCode": "10021",
    },
    "phoneNumber": [
        {"type": "home", "number": "212 555-1234"},
        {"type": "fax", "areaCode": "212", "number": "555-4567"},
    ],
}


def mock_object() -> dict[str, Any]:
    """Return a fresh copy of the sample person document used in tests."""
    return copy.deepcopy(_MOCK_OBJECT)


@contextmanager
def graphwalker_test_env(**overrides: Any) -> Generator[GraphWalkerConfig, None, None]:
    """Temporarily reset ``GRAPHWALKER_CONFIG`` to defaults plus ``overrides``.

    The parse cache is cleared on entry and exit so cached segments never
    leak between tests.
    """
    snapshot = GRAPHWALKER_CONFIG.model_dump()
    fresh = GraphWalkerConfig(**overrides)
    for name, value in fresh.model_dump().items():
        setattr(GRAPHWALKER_CONFIG, name, value)
    clear_path_cache()
    try:
        yield GRAPHWALKER_CONFIG
    finally:
        for name, value in snapshot.items():
            setattr(GRAPHWALKER_CONFIG, name, value)
        clear_path_cache()


@pytest.fixture()
def graphwalker_tmp_config() -> Generator[GraphWalkerConfig, None, None]:
    """Run the test against a default configuration."""
    with graphwalker_test_env() as config:
        yield config


@pytest.fixture()
def mock_graph() -> dict[str, Any]:
    return mock_object()
