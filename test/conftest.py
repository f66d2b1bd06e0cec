"""Shared fixtures for lite-bundle tests."""

import pytest

from lite_bundle.bundle.cache import UnitCache, get_default_cache
from lite_bundle.config import set_config
from lite_bundle.core.models import Snapshot, Unit


@pytest.fixture(autouse=True)
def reset_process_state():
    """Every test starts with an empty process cache and env-derived config."""
    get_default_cache().clear()
    set_config(None)
    yield
    get_default_cache().clear()
    set_config(None)


@pytest.fixture
def cache():
    return UnitCache()


def make_units(texts, paths=None):
    paths = paths or {}
    return [Unit(id=uid, path=paths.get(uid, f"./{uid}.js"), text=text) for uid, text in texts.items()]


def make_snapshot(texts, paths=None):
    return Snapshot(make_units(texts, paths))


@pytest.fixture
def fruit_cache(cache):
    cache.replace(
        [
            Unit(id="1", path="./src/app.js", text="const a = 'apple';"),
            Unit(id="2", path="node_modules/react/index.js", text="const b = 'banana';"),
            Unit(id="3", path="webpack/bootstrap", text="const c = 'cherry';"),
        ]
    )
    return cache
