"""Unit tests for the in-memory product registry."""

from __future__ import annotations

import threading

import pytest

from tronics.services.errors import ProductNotFoundError, ProductValidationError
from tronics.services.product_registry import KeyPolicy, ProductRegistry

pytestmark = pytest.mark.unit


def test_create_then_get_returns_product(registry):
    created = registry.create("abcd")
    key = next(iter(created))

    assert registry.get(key) == {key: "abcd"}


def test_create_rejects_short_name(registry):
    registry.create("phone")

    with pytest.raises(ProductValidationError):
        registry.create("abc")

    assert registry.count() == 1


def test_create_rejects_empty_name(registry):
    with pytest.raises(ProductValidationError):
        registry.create("")

    assert registry.list() == []


def test_scenario_create_list_delete(registry):
    """Walk through the create/list/delete/get scenario on an empty registry."""
    assert registry.list() == []

    assert registry.create("phone") == {1: "phone"}
    assert registry.list() == [{1: "phone"}]

    assert registry.create("watch") == {2: "watch"}
    assert registry.list() == [{1: "phone"}, {2: "watch"}]

    assert registry.delete(1) == {1: "phone"}
    assert registry.list() == [{2: "watch"}]

    with pytest.raises(ProductNotFoundError):
        registry.get(1)


def test_delete_removes_exactly_one_entry(registry):
    for name in ("phone", "watch", "laptop"):
        registry.create(name)

    registry.delete(2)

    assert registry.list() == [{1: "phone"}, {3: "laptop"}]
    with pytest.raises(ProductNotFoundError):
        registry.get(2)


def test_delete_missing_product_raises(registry):
    registry.create("phone")

    with pytest.raises(ProductNotFoundError) as excinfo:
        registry.delete(42)

    assert excinfo.value.product_id == 42
    assert registry.count() == 1


def test_update_changes_only_target_entry(registry):
    for name in ("phone", "watch", "laptop"):
        registry.create(name)

    updated = registry.update(2, "newname")

    assert updated == {2: "newname"}
    assert registry.list() == [{1: "phone"}, {2: "newname"}, {3: "laptop"}]


def test_update_missing_product_checked_before_name(registry):
    with pytest.raises(ProductNotFoundError):
        registry.update(7, "ab")


def test_update_rejects_invalid_name(registry):
    registry.create("phone")

    with pytest.raises(ProductValidationError):
        registry.update(1, "ab")

    assert registry.get(1) == {1: "phone"}


def test_list_length_tracks_creates_minus_deletes(registry):
    for name in ("alpha", "bravo", "charlie", "delta"):
        registry.create(name)
    registry.delete(1)
    registry.delete(3)
    with pytest.raises(ProductValidationError):
        registry.create("no")

    assert len(registry.list()) == 2


def test_list_returns_copies(registry):
    registry.create("phone")

    listed = registry.list()
    listed[0][1] = "tampered"
    listed.append({9: "ghost"})

    assert registry.list() == [{1: "phone"}]


def test_monotonic_policy_never_reuses_keys():
    registry = ProductRegistry(key_policy=KeyPolicy.MONOTONIC)
    registry.create("phone")
    registry.create("watch")
    registry.delete(2)
    registry.delete(1)

    assert registry.create("laptop") == {3: "laptop"}


def test_count_policy_reuses_live_key_after_delete():
    registry = ProductRegistry(key_policy="count")
    registry.create("phone")
    registry.create("watch")
    registry.delete(1)

    # Two live entries now share key 2; lookups resolve to the newest.
    assert registry.create("laptop") == {2: "laptop"}
    assert registry.list() == [{2: "watch"}, {2: "laptop"}]
    assert registry.get(2) == {2: "laptop"}


def test_unknown_key_policy_is_rejected():
    with pytest.raises(ValueError):
        ProductRegistry(key_policy="random")


def test_seed_skips_validation():
    registry = ProductRegistry()
    registry.seed(["mobiles", "tv", "laptops"])

    assert registry.list() == [{1: "mobiles"}, {2: "tv"}, {3: "laptops"}]
    assert registry.create("camera") == {4: "camera"}


def test_concurrent_creates_assign_unique_keys(registry):
    def worker():
        for _ in range(50):
            registry.create("gadget")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    keys = [next(iter(entry)) for entry in registry.list()]
    assert len(keys) == 400
    assert len(set(keys)) == 400
