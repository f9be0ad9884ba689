# src/atlas_compose/__init__.py
"""
Atlas Compose — engine de composição de definições de componentes.

Este pacote raiz define o namespace público do Atlas Compose: a resolução
da configuração final de um componente a partir de uma cadeia de
configurações pai e filha, com regras de merge específicas por campo, e a
consulta por nome dos assets dessa configuração resolvida.

Arquitetura em alto nível:
    - core.config      → settings do engine (YAML/JSON, deep-merge, validação)
    - core.options     → estratégias, normalização, merge recursivo e assets
    - core.diagnostics → canal estruturado de diagnósticos não fatais

Limites explícitos:
    - Não instancia componentes
    - Não implementa o subsistema reativo
    - Não é uma biblioteca genérica de merge de JSON
"""

from .core.config.loader import load_settings
from .core.config.settings import EngineSettings
from .core.diagnostics import DiagnosticLog
from .core.errors import DiagnosticPayload
from .core.options.assets import resolve_asset
from .core.options.chain import AssetChain
from .core.options.constants import ASSET_TYPES, LIFECYCLE_HOOKS
from .core.options.data import merge_data
from .core.options.engine import OptionsEngine, merge_options
from .core.options.normalize import normalize_directives, normalize_inject, normalize_props
from .core.options.registry import (
    DEFAULT_STRATEGY_TABLE,
    StrategyRegistry,
    StrategyTable,
    build_default_table,
)
from .core.options.types import NATIVE_WATCH, FieldStrategy, MergeMode, StrategyKind

__all__ = [
    "merge_options",
    "resolve_asset",
    "OptionsEngine",
    "merge_data",
    "normalize_props",
    "normalize_inject",
    "normalize_directives",
    "StrategyRegistry",
    "StrategyTable",
    "FieldStrategy",
    "StrategyKind",
    "MergeMode",
    "build_default_table",
    "DEFAULT_STRATEGY_TABLE",
    "AssetChain",
    "NATIVE_WATCH",
    "LIFECYCLE_HOOKS",
    "ASSET_TYPES",
    "DiagnosticLog",
    "DiagnosticPayload",
    "EngineSettings",
    "load_settings",
]
