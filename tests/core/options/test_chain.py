# tests/core/options/test_chain.py
"""Testes da AssetChain (consulta com fallback explícito de ancestrais)."""

import pytest

from atlas_compose.core.options.chain import AssetChain


def test_own_entries_shadow_inherited():
    base = AssetChain(own={"Foo": "F0", "Baz": "Z"})
    child = AssetChain(own={"Foo": "F1", "Bar": "B"}, fallback=base)

    assert child["Foo"] == "F1"
    assert child["Baz"] == "Z"
    assert child.lookup("missing") is None
    assert child.has_own("Bar")
    assert not child.has_own("Baz")


def test_iteration_is_flattened_and_deduplicated():
    base = AssetChain(own={"a": 1, "b": 2})
    child = AssetChain(own={"b": 20, "c": 3}, fallback=base)

    assert list(child) == ["b", "c", "a"]
    assert len(child) == 3
    assert child.to_dict() == {"b": 20, "c": 3, "a": 1}


def test_plain_mapping_tail_and_depth():
    chain = AssetChain(own={"x": 1}, fallback=AssetChain(fallback={"y": 2}))

    assert chain["y"] == 2
    assert "y" in chain
    assert chain.depth() == 3
    assert AssetChain().depth() == 1


def test_missing_key_raises_key_error_and_own_is_read_only():
    chain = AssetChain(own={"x": None})

    assert "x" in chain
    assert chain["x"] is None
    with pytest.raises(KeyError):
        chain["nope"]
    with pytest.raises(TypeError):
        chain.own["y"] = 1  # type: ignore[index]


def test_own_is_copied_from_source():
    source = {"x": 1}
    chain = AssetChain(own=source)
    source["x"] = 2

    assert chain["x"] == 1
