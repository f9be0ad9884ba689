# src/atlas_compose/core/options/engine.py
"""
Engine de merge de options do Atlas Compose.

Ponto de entrada recursivo que resolve a configuração final de um
componente a partir de um pai e de um filho:

    1. Construtor de componente → substituído pela sua definição (`options`)
    2. Nomes de `components` do filho checados contra tags embutidas/reservadas
    3. Normalização de props / inject / directives do filho
    4. `extends` do filho incorporado ao pai
    5. Cada entrada de `mixins`, em ordem, incorporada ao pai
    6. Cada campo do pai e, depois, cada campo exclusivo do filho resolvido
       pela estratégia registrada na tabela

Decisões arquiteturais:
    - O modo de merge é escolhido uma vez por chamada pública: `mode`
      explícito, ou inferido pela presença de `vm`
    - Estratégias são consultadas pela identidade do campo, nunca pela forma
    - Dados malformados geram diagnósticos; o engine nunca aborta
    - A cadeia de nós em expansão é rastreada por identidade; reentrar em
      um nó ativo emite CYCLIC_INHERITANCE e interrompe o ciclo

Invariantes:
    - O resultado é sempre um dict novo (nunca o mapeamento do pai)
    - Nenhum campo é visitado duas vezes
    - Definições já resolvidas (de construtores) pulam os passos 2, 4 e 5;
      a normalização (passo 3) é idempotente e sempre roda

Limites explícitos:
    - Não instancia componentes
    - Não avalia factories de `data`/`provide`
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Optional

from ..config.settings import EngineSettings
from ..diagnostics import DiagnosticLog
from ..errors import (
    component_reserved_name,
    cyclic_inheritance,
    option_invalid_type,
    option_not_sequence,
)
from .assets import resolve_asset
from .constants import BUILTIN_TAGS, EXTENDS, MIXINS
from .context import MergeContext
from .naming import is_plain_mapping, raw_type_name
from .normalize import normalize
from .registry import DEFAULT_STRATEGY_TABLE, StrategyTable, build_default_table
from .strategies import apply_strategy
from .types import ComponentConstructor, MergeMode, ReactiveSetter


class OptionsEngine:
    """
    Engine canônico de options (tabela + settings + diagnósticos).

    Uma instância pode ser reutilizada por muitas chamadas; cada chamada
    cria o seu próprio `MergeContext`, mas todas compartilham o mesmo
    `DiagnosticLog`.
    """

    def __init__(
        self,
        *,
        table: Optional[StrategyTable] = None,
        settings: Optional[EngineSettings] = None,
        diagnostics: Optional[DiagnosticLog] = None,
        reactive: Optional[ReactiveSetter] = None,
    ):
        self.settings: EngineSettings = settings or EngineSettings()
        self.table: StrategyTable = table or _table_for(self.settings)
        self.diagnostics: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
        self.reactive = reactive

    def merge(
        self,
        parent: Any,
        child: Any,
        vm: Any = None,
        *,
        mode: Optional[MergeMode] = None,
    ) -> Dict[str, Any]:
        """
        Resolve a configuração de `child` sobre `parent`.

        Args:
            parent: Configuração já resolvida do pai (ou None).
            child: Definição do filho ou construtor de componente.
            vm: Handle da instância em criação; ausente em merges entre definições.
            mode: Modo explícito do merge; quando omitido, é inferido de `vm`.

        Returns:
            Dict[str, Any]: nova configuração resolvida.
        """
        ctx = MergeContext.for_call(
            vm,
            mode=mode,
            table=self.table,
            settings=self.settings,
            diagnostics=self.diagnostics,
            reactive=self.reactive,
        )
        return _merge(parent, child, ctx)

    def resolve_asset(
        self,
        options: Mapping,
        category: str,
        asset_id: Any,
        warn_missing: bool = False,
    ) -> Any:
        return resolve_asset(
            options,
            category,
            asset_id,
            warn_missing,
            diagnostics=self.diagnostics,
            settings=self.settings,
        )


def merge_options(
    parent: Any,
    child: Any,
    vm: Any = None,
    *,
    mode: Optional[MergeMode] = None,
    table: Optional[StrategyTable] = None,
    settings: Optional[EngineSettings] = None,
    diagnostics: Optional[DiagnosticLog] = None,
    reactive: Optional[ReactiveSetter] = None,
) -> Dict[str, Any]:
    """Atalho funcional para `OptionsEngine(...).merge(parent, child, vm, mode=mode)`."""
    engine = OptionsEngine(
        table=table,
        settings=settings,
        diagnostics=diagnostics,
        reactive=reactive,
    )
    return engine.merge(parent, child, vm, mode=mode)


def _table_for(settings: EngineSettings) -> StrategyTable:
    if settings.strategies:
        return build_default_table(settings.strategies)
    return DEFAULT_STRATEGY_TABLE


# -----------------------------
# Recursão
# -----------------------------
def _merge(parent: Any, child: Any, ctx: MergeContext) -> Dict[str, Any]:
    resolved = False
    if isinstance(child, ComponentConstructor) and is_plain_mapping(child.options):
        child = child.options
        resolved = True

    if parent is None:
        parent = {}
    node = child
    if child is None:
        child = {}
    elif not is_plain_mapping(child):
        ctx.warn(option_invalid_type(option="child", received=raw_type_name(child)))
        child = {}
    elif not isinstance(child, MutableMapping):
        child = dict(child)

    if not ctx.enter(node):
        ctx.report(cyclic_inheritance(chain=ctx.describe_chain(node)))
        return dict(parent.items())

    try:
        if not resolved and not ctx.settings.production:
            _check_components(child, ctx)
        normalize(child, ctx)
        if not resolved:
            parent = _expand_inheritance(parent, child, ctx)

        return _merge_fields(parent, child, ctx)
    finally:
        ctx.leave(node)


def _expand_inheritance(parent: Mapping, child: Mapping, ctx: MergeContext) -> Mapping:
    base = child.get(EXTENDS)
    if base is not None:
        parent = _merge(parent, base, ctx)

    mixins = child.get(MIXINS)
    if mixins is None:
        return parent
    if not isinstance(mixins, (list, tuple)):
        ctx.warn(option_not_sequence(option=MIXINS, received=raw_type_name(mixins)))
        return parent

    for mixin in mixins:
        parent = _merge(parent, mixin, ctx)
    return parent


def _merge_fields(parent: Mapping, child: Mapping, ctx: MergeContext) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for key in parent:
        strategy = ctx.table.resolve(key)
        result[key] = apply_strategy(strategy, parent[key], child.get(key), ctx, key)

    for key in child:
        if key in parent:
            continue
        strategy = ctx.table.resolve(key)
        result[key] = apply_strategy(strategy, None, child[key], ctx, key)

    return result


def _check_components(child: Mapping, ctx: MergeContext) -> None:
    components = child.get("components")
    if not is_plain_mapping(components):
        return
    for name in components:
        if not isinstance(name, str):
            continue
        if name.lower() in BUILTIN_TAGS or ctx.settings.is_reserved_tag(name):
            ctx.warn(component_reserved_name(name=name))
