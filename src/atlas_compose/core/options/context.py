# src/atlas_compose/core/options/context.py
"""
Contexto de uma resolução de options.

Este módulo define o `MergeContext`, o contexto canônico passado a todas
as estratégias, ao normalizador e ao engine durante uma chamada de
`merge_options`.

O MergeContext consolida:
    - o modo explícito de merge (definição ou instância)
    - o handle da instância ativa (somente no modo INSTANCE)
    - a tabela imutável de estratégias
    - os settings do engine (modo production, tags reservadas)
    - o canal de diagnósticos
    - o colaborador de registro reativo
    - a cadeia de nós em expansão (detecção de herança cíclica)

Decisões arquiteturais:
    - Estratégias interagem com o mundo externo apenas via MergeContext
    - Diagnósticos condicionados a desenvolvimento passam por `warn`;
      diagnósticos incondicionais passam por `report`
    - A cadeia ativa é rastreada por identidade do nó, não por igualdade

Invariantes:
    - Cada chamada pública de merge cria exatamente um MergeContext
    - Um nó nunca aparece duas vezes na cadeia ativa

Limites explícitos:
    - Não executa merges
    - Não persiste diagnósticos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..config.settings import EngineSettings
from ..diagnostics import DiagnosticLog
from ..errors import DiagnosticPayload
from .registry import DEFAULT_STRATEGY_TABLE, StrategyTable
from .types import MergeMode, ReactiveSetter


@dataclass
class MergeContext:
    """Contexto compartilhado de uma única resolução de options."""

    mode: MergeMode
    vm: Any = None
    table: StrategyTable = DEFAULT_STRATEGY_TABLE
    settings: EngineSettings = field(default_factory=EngineSettings)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    reactive: Optional[ReactiveSetter] = None

    _active: List[Mapping] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def for_call(
        cls,
        vm: Any = None,
        mode: Optional[MergeMode] = None,
        **kwargs: Any,
    ) -> "MergeContext":
        """Cria o contexto de uma chamada; sem `mode`, o modo é inferido de `vm`."""
        if mode is None:
            mode = MergeMode.INSTANCE if vm is not None else MergeMode.DEFINITION
        return cls(mode=mode, vm=vm, **kwargs)

    @property
    def is_instance(self) -> bool:
        return self.mode is MergeMode.INSTANCE

    # -----------------------------
    # Diagnósticos
    # -----------------------------
    def warn(self, payload: DiagnosticPayload) -> None:
        if not self.settings.production:
            self.diagnostics.warn(payload)

    def report(self, payload: DiagnosticPayload) -> None:
        self.diagnostics.warn(payload)

    # -----------------------------
    # Cadeia de herança ativa
    # -----------------------------
    def enter(self, node: Mapping) -> bool:
        if any(active is node for active in self._active):
            return False
        self._active.append(node)
        return True

    def leave(self, node: Mapping) -> None:
        if self._active and self._active[-1] is node:
            self._active.pop()

    def describe_chain(self, node: Optional[Mapping] = None) -> List[str]:
        chain = list(self._active)
        if node is not None:
            chain.append(node)
        return [_node_name(n) for n in chain]


def _node_name(node: Mapping) -> str:
    name = node.get("name") if hasattr(node, "get") else None
    if isinstance(name, str) and name:
        return name
    return f"<anonymous@{id(node):#x}>"
