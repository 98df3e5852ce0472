"""Tests for the key/value store and its environment fallback."""

from __future__ import annotations

import pytest

import envloader
from envloader.store import ConfigStore


def test_stored_value_wins_over_environment(
    store: ConfigStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A loaded key is returned even when the environment differs."""
    monkeypatch.setenv("ENVLOADER_TEST_KEY", "from-env")
    store.set("ENVLOADER_TEST_KEY", "from-file")

    assert store.get("ENVLOADER_TEST_KEY") == "from-file"


def test_empty_stored_value_is_returned(
    store: ConfigStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An explicit empty value does not fall through to the environment."""
    monkeypatch.setenv("ENVLOADER_TEST_KEY", "from-env")
    store.set("ENVLOADER_TEST_KEY", "")

    assert store.get("ENVLOADER_TEST_KEY") == ""


def test_missing_key_falls_back_to_environment(
    store: ConfigStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keys absent from the store are read from the live environment."""
    monkeypatch.setenv("ENVLOADER_ONLY_IN_ENV", "present")
    monkeypatch.delenv("ENVLOADER_NOWHERE", raising=False)

    assert store.get("ENVLOADER_ONLY_IN_ENV") == "present"
    assert store.get("ENVLOADER_NOWHERE") == ""


def test_mapping_helpers(store: ConfigStore) -> None:
    """Membership, length and copies reflect stored keys only."""
    store.set("A", "1")
    store.set("A", "2")
    store.set("B", "3")

    assert "A" in store and "PATH" not in store
    assert len(store) == 2
    assert sorted(store) == ["A", "B"]
    snapshot = store.as_dict()
    snapshot["C"] = "4"
    assert "C" not in store

    store.clear()
    assert len(store) == 0


def test_module_get_uses_default_store(monkeypatch: pytest.MonkeyPatch) -> None:
    """``envloader.get`` reads the shared store."""
    monkeypatch.setattr(envloader.store, "DEFAULT_STORE", ConfigStore({"SHARED": "yes"}))

    assert envloader.get("SHARED") == "yes"
