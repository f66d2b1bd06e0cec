"""Tests for the single-slot unit cache."""

import pytest

from lite_bundle.bundle.cache import UnitCache
from lite_bundle.core.models import Snapshot, Unit
from lite_bundle.errors import NoBundle, UnitNotFound


def test_empty_cache_raises_no_bundle(cache):
    assert cache.is_empty
    with pytest.raises(NoBundle, match="No bundle found"):
        cache.current()
    with pytest.raises(NoBundle):
        cache.get("1")


def test_replace_installs_snapshot(cache):
    snapshot = cache.replace([Unit(id="1", path="a.js", text="a()")])
    assert cache.current() is snapshot
    assert cache.get("1").text == "a()"


def test_replace_discards_previous_snapshot(cache):
    first = cache.replace([Unit(id="1", path="a.js", text="a()"), Unit(id="2", path="b.js", text="b()")])
    second = cache.replace([Unit(id="3", path="c.js", text="c()")])

    assert cache.current() is second
    assert list(second) == ["3"]
    with pytest.raises(UnitNotFound):
        cache.get("1")
    # the old handle is untouched
    assert list(first) == ["1", "2"]
    assert second.generation > first.generation


def test_get_is_idempotent(cache):
    cache.replace([Unit(id="1", path="a.js", text="const a = 1;")])
    assert cache.get("1").text == cache.get("1").text == "const a = 1;"


def test_unknown_unit(cache):
    cache.replace([Unit(id="1", path="a.js", text="")])
    with pytest.raises(UnitNotFound) as exc:
        cache.get("nope")
    assert exc.value.unit_id == "nope"
    assert "Module nope not found." in str(exc.value)


def test_clear(cache):
    cache.replace([Unit(id="1", path="a.js", text="")])
    cache.clear()
    with pytest.raises(NoBundle):
        cache.current()


def test_snapshot_is_read_only_and_ordered():
    snapshot = Snapshot([Unit(id="b", path="b.js", text=""), Unit(id="a", path="a.js", text="")])
    assert list(snapshot) == ["b", "a"]
    assert [u.id for u in snapshot.units()] == ["b", "a"]
    with pytest.raises(TypeError):
        snapshot["c"] = Unit(id="c", path="c.js", text="")


def test_snapshot_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        Snapshot([Unit(id="1", path="a.js", text=""), Unit(id="1", path="b.js", text="")])


def test_caches_are_independent():
    one, two = UnitCache(), UnitCache()
    one.replace([Unit(id="1", path="a.js", text="")])
    assert two.is_empty
