# tests/core/options/test_data.py
"""
Testes do merge profundo de `data` / `provide`.

Os testes asseguram que:
- o primeiro valor instalado vence (dados do ancestral nunca sobrescrevem)
- mapeamentos aninhados são mesclados recursivamente
- cada chave nova é registrada exatamente uma vez via colaborador reativo
- o merge de definição permanece adiado (factory), inclusive com um só lado
- o merge de instância avalia factories contra a instância ativa
"""

from atlas_compose.core.options.data import (
    merge_data,
    merge_data_definition,
    merge_data_instance,
)


def test_first_installed_value_wins():
    assert merge_data({"x": 1}, {"x": 2, "y": 3}) == {"x": 1, "y": 3}


def test_merge_data_returns_mutated_target():
    target = {"x": 1}
    out = merge_data(target, {"y": 2})
    assert out is target
    assert target == {"x": 1, "y": 2}


def test_merge_data_with_absent_source():
    target = {"x": 1}
    assert merge_data(target, None) is target


def test_nested_mappings_merge_recursively():
    target = {"user": {"name": "ana"}, "tags": ["a"]}
    source = {"user": {"name": "bia", "age": 3}, "tags": ["b", "c"]}

    assert merge_data(target, source) == {
        "user": {"name": "ana", "age": 3},
        "tags": ["a"],
    }


def test_non_mapping_target_value_is_kept():
    assert merge_data({"x": None}, {"x": {"y": 1}}) == {"x": None}
    assert merge_data({"x": 1}, {"x": {"y": 1}}) == {"x": 1}


def test_reactive_registration_once_per_new_key(reactive):
    target = {"x": 1, "nested": {"a": 1}}
    merge_data(target, {"x": 2, "y": 3, "nested": {"a": 2, "b": 4}}, reactive)

    assert sorted(reactive.keys()) == ["b", "y"]
    assert target == {"x": 1, "y": 3, "nested": {"a": 1, "b": 4}}


def test_definition_both_absent_is_none():
    assert merge_data_definition(None, None) is None


def test_definition_single_side_stays_deferred():
    """
    Com apenas um lado presente o resultado continua sendo uma factory.

    Invariantes:
        - Uma factory do filho é devolvida sem embrulho
        - Um mapeamento literal é embrulhado em factory
    """
    def child_fn(vm):
        return {"x": vm}

    assert merge_data_definition(None, child_fn) is child_fn

    literal = {"x": 1}
    wrapped = merge_data_definition(literal, None)
    assert callable(wrapped)
    assert wrapped(None) is literal


def test_definition_factories_run_per_call():
    calls = []

    def parent_fn(vm):
        calls.append(("parent", vm))
        return {"x": 2, "y": 3}

    def child_fn(vm):
        calls.append(("child", vm))
        return {"x": 1}

    merged = merge_data_definition(parent_fn, child_fn)
    assert calls == []

    first = merged("vm-1")
    second = merged("vm-2")

    assert first == {"x": 1, "y": 3}
    assert second == {"x": 1, "y": 3}
    assert first is not second
    assert calls == [("child", "vm-1"), ("parent", "vm-1"), ("child", "vm-2"), ("parent", "vm-2")]


def test_instance_binds_factories_to_vm(vm, reactive):
    seen = []

    def parent_fn(v):
        seen.append(v)
        return {"x": 2, "y": 3}

    merged = merge_data_instance(parent_fn, {"x": 1}, vm, reactive)

    assert merged() == {"x": 1, "y": 3}
    assert seen == [vm]
    assert reactive.keys() == ["y"]


def test_instance_without_instance_data_returns_defaults(vm):
    defaults = {"x": 2}
    merged = merge_data_instance(lambda v: defaults, None, vm)
    assert merged() is defaults

    empty = merge_data_instance({"x": 2}, {}, vm)
    assert empty() == {"x": 2}


def test_instance_both_absent_is_none(vm):
    assert merge_data_instance(None, None, vm) is None


def test_definition_child_factory_returning_none_falls_back_to_parent():
    merged = merge_data_definition({"x": 1}, lambda vm: None)
    assert merged(None) == {"x": 1}


def test_non_mapping_source_leaves_target_untouched():
    target = {"x": 1}
    assert merge_data(target, ["y"]) == {"x": 1}
