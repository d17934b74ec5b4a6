"""Model catalog lookups — no config, no network."""
from __future__ import annotations

import json

import pytest

import relay.registry as registry


@pytest.mark.parametrize("model", registry.MODELS, ids=lambda m: m.name)
def test_find_by_name_any_case(model):
    assert registry.find(model.name) == model
    assert registry.find(model.name.upper()) == model


@pytest.mark.parametrize("model", registry.MODELS, ids=lambda m: m.name)
def test_find_by_alias_any_case(model):
    for alias in model.aliases:
        assert registry.find(alias) == model
        assert registry.find(alias.upper()) == model


def test_find_unknown_returns_none():
    assert registry.find("gpt-5-ultra") is None
    assert registry.find("") is None


def test_default_is_first_entry():
    assert registry.default() == registry.MODELS[0]
    assert registry.default().name == "gpt-4o"


def test_to_json_matches_registry_order():
    data = json.loads(registry.to_json())
    assert [m["name"] for m in data] == [m.name for m in registry.MODELS]
    assert data[0] == {"name": "gpt-4o", "aliases": ["4o"]}


def test_to_json_is_compact_and_stable():
    first = registry.to_json()
    assert first == registry.to_json()
    assert first.startswith('[{"name":"gpt-4o","aliases":["4o"]}')
