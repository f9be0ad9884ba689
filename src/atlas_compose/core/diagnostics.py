# src/atlas_compose/core/diagnostics.py
"""
Canal estruturado de diagnósticos do Atlas Compose.

Este módulo define o `DiagnosticLog`, o agregador de sinais não fatais
emitidos pelo engine de merge, pelo normalizador e pelo resolvedor de
assets.

Diagnósticos não são strings livres: cada evento é um dicionário
estruturado contendo o payload canônico (`type`, `message`, `details`,
`hint`), o nível e um timestamp UTC.

Decisões arquiteturais:
    - Diagnósticos nunca interrompem a resolução
    - Eventos são acumulados de forma incremental e inspecionáveis
    - Mensagens são agrupadas pelo código estável do diagnóstico
    - Um `sink` opcional permite encaminhar eventos para fora do processo

Invariantes:
    - Cada chamada a `warn` produz exatamente um evento
    - A ordem de emissão é preservada
    - O canal não altera o resultado do merge

Limites explícitos:
    - Não persiste eventos
    - Não decide se um diagnóstico deve ser emitido (política do chamador)
    - Não lança exceções para sinalizar problemas de definição

Este módulo existe para dar ao chamador que precisa de falha dura
um canal explícito onde inspecionar problemas não fatais.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .errors import DiagnosticPayload


@dataclass
class DiagnosticLog:
    """Agregador de eventos de diagnóstico (eventos + warnings por código)."""

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)
    sink: Optional[Callable[[Dict[str, Any]], None]] = field(default=None, repr=False)

    def log(self, *, level: str, message: str, **extra: Any) -> Dict[str, Any]:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
        if self.sink is not None:
            self.sink(event)
        return event

    def warn(self, payload: DiagnosticPayload) -> Dict[str, Any]:
        data = payload.to_dict()
        message = data.pop("message")
        event = self.log(level="WARNING", message=message, **data)
        self.warnings.setdefault(payload.type, []).append(message)
        return event

    def codes(self) -> List[str]:
        return [e["type"] for e in self.events if "type" in e]

    def has(self, code: str) -> bool:
        return code in self.warnings

    def clear(self) -> None:
        self.events.clear()
        self.warnings.clear()
