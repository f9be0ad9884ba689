# src/atlas_compose/core/options/strategies.py
"""
Implementação das famílias de estratégias de merge por campo.

Cada estratégia recebe `(parent, child, ctx, key)` e devolve o valor
mesclado do campo. O engine nunca chama estas funções diretamente:
ele resolve a `FieldStrategy` do campo na `StrategyTable` e delega a
`apply_strategy`, que despacha pela tag (`StrategyKind`).

Famílias:
    - OVERRIDE       → filho quando definido, senão pai
    - HOOK           → pai + filho, ambos normalizados para lista
    - OBJECT         → cópia rasa do pai sobrescrita pelas chaves do filho
    - DATA / PROVIDE → merge profundo adiado (ver `data`)
    - WATCH          → concatenação por chave de handlers
    - ASSET          → `AssetChain` com entradas próprias do filho
    - INSTANCE_ONLY  → OVERRIDE, com diagnóstico fora da criação de instância
    - CUSTOM         → função fornecida pelo chamador

Decisões arquiteturais:
    - Ausência é sempre `None`
    - Formas inválidas geram diagnóstico via `ctx.warn` e são tratadas
      como ausentes; nenhuma estratégia levanta exceção para dados malformados
    - Valores do pai nunca são mutados; OBJECT e WATCH copiam as entradas

Limites explícitos:
    - Não normaliza declarações abreviadas (ver `normalize`)
    - Não resolve `extends`/`mixins` (ver `engine`)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from ..errors import data_not_function, instance_only_option, option_invalid_type
from .chain import AssetChain
from .context import MergeContext
from .data import merge_data_definition, merge_data_instance
from .naming import is_plain_mapping, raw_type_name
from .types import NATIVE_WATCH, FieldStrategy, StrategyKind


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _check_mapping(child: Any, ctx: MergeContext, key: str) -> bool:
    if child is None or is_plain_mapping(child):
        return True
    ctx.warn(option_invalid_type(option=key, received=raw_type_name(child)))
    return False


# -----------------------------
# Famílias
# -----------------------------
def default_strategy(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    return parent if child is None else child


def merge_hook(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if child is None:
        return parent
    if parent is None:
        return _as_list(child)
    return _as_list(parent) + _as_list(child)


def merge_object(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if not _check_mapping(child, ctx, key):
        child = None
    if not is_plain_mapping(parent):
        return child

    merged: Dict[str, Any] = dict(parent.items())
    if child is not None:
        merged.update(child)
    return merged


def merge_watch(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if parent is NATIVE_WATCH:
        parent = None
    if child is NATIVE_WATCH:
        child = None
    if not is_plain_mapping(parent):
        parent = None

    if child is None:
        return AssetChain(fallback=parent)
    if not _check_mapping(child, ctx, key):
        return AssetChain(fallback=parent)
    if parent is None:
        return child

    merged: Dict[str, Any] = dict(parent.items())
    for name, handler in child.items():
        merged[name] = _as_list(merged.get(name)) + _as_list(handler)
    return merged


def merge_assets(parent: Any, child: Any, ctx: MergeContext, key: str) -> AssetChain:
    fallback = parent if is_plain_mapping(parent) else None
    if not _check_mapping(child, ctx, key):
        child = None
    return AssetChain(own=child, fallback=fallback)


def merge_data_field(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if ctx.is_instance:
        return merge_data_instance(parent, child, ctx.vm, ctx.reactive)

    if child is not None and not callable(child):
        ctx.warn(data_not_function(received=raw_type_name(child)))
        return parent
    return merge_data_definition(parent, child, ctx.reactive)


def merge_provide(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if ctx.is_instance:
        return merge_data_instance(parent, child, ctx.vm, ctx.reactive)
    return merge_data_definition(parent, child, ctx.reactive)


def merge_instance_only(parent: Any, child: Any, ctx: MergeContext, key: str) -> Any:
    if not ctx.is_instance and child is not None:
        ctx.warn(instance_only_option(option=key))
    return default_strategy(parent, child, ctx, key)


_DISPATCH: Dict[StrategyKind, Callable[[Any, Any, MergeContext, str], Any]] = {
    StrategyKind.OVERRIDE: default_strategy,
    StrategyKind.HOOK: merge_hook,
    StrategyKind.OBJECT: merge_object,
    StrategyKind.DATA: merge_data_field,
    StrategyKind.PROVIDE: merge_provide,
    StrategyKind.WATCH: merge_watch,
    StrategyKind.ASSET: merge_assets,
    StrategyKind.INSTANCE_ONLY: merge_instance_only,
}


def apply_strategy(
    strategy: FieldStrategy,
    parent: Any,
    child: Any,
    ctx: MergeContext,
    key: str,
) -> Any:
    """Aplica `strategy` ao par `(parent, child)` do campo `key`."""
    if strategy.kind is StrategyKind.CUSTOM:
        return strategy.fn(parent, child, ctx, key)
    return _DISPATCH[strategy.kind](parent, child, ctx, key)
