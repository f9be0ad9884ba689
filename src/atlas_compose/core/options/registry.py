# src/atlas_compose/core/options/registry.py
"""
Registro e tabela imutável de estratégias de merge por campo.

Este módulo define o `StrategyRegistry`, o construtor incremental da
tabela de estratégias, e a `StrategyTable`, a tabela imutável consultada
pelo engine de merge.

O registry atua como uma camada de proteção antecipada, garantindo que:
    - cada campo possua um identificador válido
    - nenhum campo seja registrado duas vezes por engano
    - a tabela entregue ao engine nunca mude após construída

Responsabilidades do módulo:
    - Converter declarações (kind, str ou callable) em `FieldStrategy`
    - Validar unicidade de identificadores de campo
    - Congelar o registro em uma `StrategyTable` somente leitura
    - Construir a tabela canônica (`build_default_table`)

Decisões arquiteturais:
    - A tabela é construída uma vez e passada por referência ao engine
    - Extensões são adicionadas no builder, nunca em uma tabela viva
    - Substituições são explícitas (`replace`), nunca silenciosas (`add`)
    - Campos não registrados resolvem para a estratégia OVERRIDE

Invariantes:
    - Cada campo registrado possui exatamente uma `FieldStrategy`
    - Uma `StrategyTable` nunca é alterada após criada
    - A ordem de registro é preservada para inspeção

Limites explícitos:
    - Não executa merges (ver `strategies`)
    - Não emite diagnósticos
    - Não infere estratégias a partir da forma dos valores

Este módulo existe para eliminar estado global mutável na seleção de
estratégias, preservando extensibilidade explícita.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .constants import ASSET_FIELDS, INSTANCE_ONLY_FIELDS, LIFECYCLE_HOOKS, OBJECT_FIELDS
from .types import FieldStrategy, StrategyKind


class DuplicateStrategyError(ValueError):
    """
    Exceção levantada quando um campo é registrado duas vezes no builder.

    Decisões arquiteturais:
        - Registro duplicado é erro de programação, detectado no momento do `add`
        - Substituição intencional deve usar `StrategyRegistry.replace`

    Limites explícitos:
        - Não tenta resolver o conflito automaticamente
    """


def as_field_strategy(strategy: Any) -> FieldStrategy:
    """Converte `FieldStrategy`, `StrategyKind`/str ou callable em `FieldStrategy`."""
    if isinstance(strategy, FieldStrategy):
        return strategy
    if isinstance(strategy, str):
        return FieldStrategy(StrategyKind(strategy))
    if callable(strategy):
        return FieldStrategy(StrategyKind.CUSTOM, fn=strategy)
    raise TypeError(
        f"strategy must be a FieldStrategy, StrategyKind or callable, got {type(strategy).__name__}"
    )


@dataclass(frozen=True)
class StrategyTable:
    """
    Tabela imutável campo → estratégia.

    Consultada pelo engine a cada campo presente no pai ou no filho.
    Campos ausentes da tabela resolvem para `default` (OVERRIDE).
    """

    entries: Mapping[str, FieldStrategy]
    default: FieldStrategy = FieldStrategy(StrategyKind.OVERRIDE)

    def resolve(self, field_id: str) -> FieldStrategy:
        return self.entries.get(field_id, self.default)

    def fields(self) -> List[str]:
        return list(self.entries)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self.entries


@dataclass
class StrategyRegistry:
    """
    Builder canônico da tabela de estratégias.

    Decisões arquiteturais:
        - A validação ocorre no registro, antes de qualquer merge
        - A ordem de inserção é preservada separadamente
        - `freeze` produz uma cópia imutável; o builder pode seguir sendo usado

    Invariantes:
        - Cada campo aparece no máximo uma vez
        - Apenas `FieldStrategy` válidas são armazenadas
    """

    _entries: Dict[str, FieldStrategy] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, field_id: str, strategy: Any) -> "StrategyRegistry":
        _check_field_id(field_id)
        if field_id in self._entries:
            raise DuplicateStrategyError(f"Duplicate strategy for field: {field_id}")

        self._entries[field_id] = as_field_strategy(strategy)
        self._order.append(field_id)
        return self

    def replace(self, field_id: str, strategy: Any) -> "StrategyRegistry":
        _check_field_id(field_id)
        if field_id not in self._entries:
            self._order.append(field_id)
        self._entries[field_id] = as_field_strategy(strategy)
        return self

    def get(self, field_id: str) -> FieldStrategy:
        return self._entries[field_id]

    def list(self) -> List[str]:
        return list(self._order)

    def freeze(self) -> StrategyTable:
        ordered = {fid: self._entries[fid] for fid in self._order}
        return StrategyTable(entries=MappingProxyType(ordered))


def _check_field_id(field_id: Any) -> None:
    if not isinstance(field_id, str) or not field_id.strip():
        raise ValueError("field id must be a non-empty string")


def build_default_table(extra: Optional[Mapping[str, Any]] = None) -> StrategyTable:
    """
    Constrói a tabela canônica de estratégias.

    Registro canônico (v1):
        - hooks de ciclo de vida → HOOK
        - components / directives / filters → ASSET
        - watch → WATCH
        - props / methods / inject / computed → OBJECT
        - data → DATA; provide → PROVIDE
        - el / propsData → INSTANCE_ONLY

    Args:
        extra: estratégias adicionais (ou substituições) por campo, aplicadas
            por último.

    Returns:
        StrategyTable: tabela imutável pronta para o engine.
    """
    registry = StrategyRegistry()
    for hook in LIFECYCLE_HOOKS:
        registry.add(hook, StrategyKind.HOOK)
    for asset_field in ASSET_FIELDS:
        registry.add(asset_field, StrategyKind.ASSET)
    registry.add("watch", StrategyKind.WATCH)
    for object_field in OBJECT_FIELDS:
        registry.add(object_field, StrategyKind.OBJECT)
    registry.add("data", StrategyKind.DATA)
    registry.add("provide", StrategyKind.PROVIDE)
    for instance_field in INSTANCE_ONLY_FIELDS:
        registry.add(instance_field, StrategyKind.INSTANCE_ONLY)

    for field_id, strategy in (extra or {}).items():
        registry.replace(field_id, strategy)

    return registry.freeze()


DEFAULT_STRATEGY_TABLE = build_default_table()
