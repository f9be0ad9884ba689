# src/atlas_compose/core/options/data.py
"""
Merge profundo de campos portadores de dados (`data`, `provide`).

Cada operando pode ser um mapeamento literal ou uma factory (callable que
recebe o handle da instância e devolve um mapeamento). O resultado do
merge é sempre adiado: uma factory que, quando avaliada pelo fluxo de
instanciação, resolve os operandos e combina os dicionários via
`merge_data`.

Política de merge (v1):
    - chave ausente no destino → instalada via colaborador reativo
    - chave presente e ambos os valores mapeamentos → merge recursivo
    - chave presente nos demais casos → valor do destino preservado

O destino é o dado do filho (ou da instância): o primeiro valor instalado
vence, e dados de ancestrais nunca sobrescrevem dados já presentes.

Invariantes:
    - `merge_data` é a única mutação in-place sancionada do engine
    - Cada chave nova é registrada exatamente uma vez, no momento da introdução
    - Factories de instância são executadas por instância, nunca no merge estático
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, Optional

from .types import ReactiveSetter


def plain_set(target: Dict[str, Any], key: str, value: Any) -> None:
    target[key] = value


def merge_data(
    target: MutableMapping,
    source: Optional[Mapping],
    reactive: Optional[ReactiveSetter] = None,
) -> MutableMapping:
    """
    Mescla `source` em `target` (in-place) e devolve `target`.

    Args:
        target: Dados que já pertencem ao filho / à instância.
        source: Dados do ancestral.
        reactive: Colaborador que instala chaves novas de forma observável.
            Por padrão, atribuição simples.

    Returns:
        O próprio `target`, mutado.
    """
    if not isinstance(source, Mapping):
        return target

    install = reactive or plain_set

    for key, incoming in source.items():
        if key not in target:
            install(target, key, incoming)
            continue

        current = target[key]
        # dict + dict -> merge recursivo; demais casos: destino vence
        if isinstance(current, MutableMapping) and isinstance(incoming, Mapping):
            merge_data(current, incoming, reactive)

    return target


def _evaluate(value: Any, vm: Any) -> Any:
    return value(vm) if callable(value) else value


def _deferred(value: Any) -> Callable[..., Any]:
    if callable(value):
        return value

    def data_fn(vm: Any = None) -> Any:
        return value

    return data_fn


def merge_data_definition(
    parent: Any,
    child: Any,
    reactive: Optional[ReactiveSetter] = None,
) -> Optional[Callable[..., Any]]:
    """
    Variante de definição (merge estático entre definições).

    O resultado permanece uma factory: factories específicas de instância
    precisam continuar rodando uma vez por instância.
    """
    if child is None and parent is None:
        return None
    if child is None:
        return _deferred(parent)
    if parent is None:
        return _deferred(child)

    def merged_data_fn(vm: Any = None) -> Any:
        child_data = _evaluate(child, vm)
        parent_data = _evaluate(parent, vm)
        if child_data is None:
            return parent_data
        return merge_data(child_data, parent_data, reactive)

    return merged_data_fn


def merge_data_instance(
    parent: Any,
    child: Any,
    vm: Any,
    reactive: Optional[ReactiveSetter] = None,
) -> Optional[Callable[..., Any]]:
    """Variante de instância: factory ligada à instância ativa `vm`."""
    if child is None and parent is None:
        return None

    def merged_instance_data_fn(_vm: Any = None) -> Any:
        instance_data = _evaluate(child, vm)
        default_data = _evaluate(parent, vm)
        if instance_data is not None:
            return merge_data(instance_data, default_data, reactive)
        return default_data

    return merged_instance_data_fn
