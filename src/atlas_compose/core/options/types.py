# src/atlas_compose/core/options/types.py
"""
Tipos canônicos do engine de options do Atlas Compose.

Este módulo define as estruturas e enums fundamentais que padronizam a
comunicação entre a tabela de estratégias, o normalizador e o engine
de merge.

Os tipos aqui definidos representam:
    - o modo explícito de merge (definição vs. instância)
    - a variante marcada (tagged) de cada estratégia de campo
    - a forma marcada de uma declaração abreviada após o parsing
    - o sentinel do `watch` nativo de plataforma
    - o contrato mínimo de um construtor de componente

Componentes principais:
    - MergeMode        → DEFINITION (herança estática) ou INSTANCE (criação)
    - StrategyKind     → família de merge associada a um campo
    - FieldStrategy    → entrada imutável da tabela de estratégias
    - DeclarationForm  → SEQUENCE, MAPPING ou INVALID
    - Declaration      → resultado marcado do parsing de uma declaração
    - NATIVE_WATCH     → sentinel tratado como ausente pelo merge de `watch`

Princípios fundamentais:
    - O engine despacha por tag explícita, nunca por inspeção de forma
    - Tipos são estáveis e não dependem do engine
    - Nenhuma lógica de merge vive neste módulo

Invariantes:
    - Enums possuem valores textuais canônicos
    - FieldStrategy é imutável; apenas CUSTOM carrega função

Limites explícitos:
    - Não executa merges
    - Não registra estratégias
    - Não emite diagnósticos

Este módulo existe para garantir consistência e clareza semântica
entre as camadas do engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import MergeContext


MergeStrategyFn = Callable[[Any, Any, "MergeContext", str], Any]
ReactiveSetter = Callable[[Dict[str, Any], str, Any], None]


class MergeMode(str, Enum):
    """
    Modo explícito de merge.

    - DEFINITION: merge estático entre definições (herança, `extends`, mixins)
    - INSTANCE: merge no momento de criação de uma instância

    O modo é escolhido uma única vez no ponto de entrada e carregado pelo
    `MergeContext`; estratégias nunca o deduzem da nulidade de argumentos.
    """
    DEFINITION = "definition"
    INSTANCE = "instance"


class StrategyKind(str, Enum):
    """
    Famílias de merge associadas a campos de configuração.

    Tipos definidos:
        - OVERRIDE: valor do filho quando definido, senão o do pai
        - HOOK: concatenação pai-depois-filho de listas de callables
        - OBJECT: merge raso de mapeamentos (filho sobrescreve por chave)
        - DATA: merge profundo adiado de `data` (exige função em definições)
        - PROVIDE: merge profundo adiado de `provide`
        - WATCH: concatenação por chave de handlers de observadores
        - ASSET: cadeia de ancestrais (próprios sombreiam herdados)
        - INSTANCE_ONLY: option válida apenas na criação de instância
        - CUSTOM: função fornecida pelo chamador

    Invariantes:
        - Todo campo resolve para exatamente um `StrategyKind`
        - Campos não registrados usam OVERRIDE
    """
    OVERRIDE = "override"
    HOOK = "hook"
    OBJECT = "object"
    DATA = "data"
    PROVIDE = "provide"
    WATCH = "watch"
    ASSET = "asset"
    INSTANCE_ONLY = "instance_only"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FieldStrategy:
    """Entrada imutável da tabela: variante marcada + função (somente CUSTOM)."""

    kind: StrategyKind
    fn: Optional[MergeStrategyFn] = None

    def __post_init__(self) -> None:
        if self.kind is StrategyKind.CUSTOM and self.fn is None:
            raise ValueError("custom strategy requires a merge function")
        if self.kind is not StrategyKind.CUSTOM and self.fn is not None:
            raise ValueError(f"strategy kind '{self.kind.value}' does not accept a merge function")


class DeclarationForm(str, Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    INVALID = "invalid"


@dataclass(frozen=True)
class Declaration:
    """Declaração abreviada já classificada pelo parsing."""

    form: DeclarationForm
    value: Any


class _NativeWatch:
    """Sentinel do `watch` embutido de plataforma (tratado como ausente)."""

    _instance: Optional["_NativeWatch"] = None

    def __new__(cls) -> "_NativeWatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NATIVE_WATCH"

    def __bool__(self) -> bool:
        return False


NATIVE_WATCH = _NativeWatch()


@runtime_checkable
class ComponentConstructor(Protocol):
    """
    Contrato mínimo de um construtor de componente.

    Um construtor é um callable que carrega sua definição já resolvida em
    `options`. Quando passado como filho ao engine, é substituído por essa
    definição antes de qualquer normalização.
    """
    options: Dict[str, Any]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        ...
