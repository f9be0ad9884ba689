# src/atlas_compose/core/options/chain.py
"""
Estrutura de consulta com fallback de ancestrais.

Este módulo define a `AssetChain`, a estrutura explícita de dois níveis
usada pelo merge de assets nomeados (`components`, `directives`,
`filters`) e pelo placeholder vazio do merge de `watch`.

Uma `AssetChain` possui:
    - `own`: entradas registradas diretamente neste nível
    - `fallback`: referência opcional ao nível anterior (outra
      `AssetChain` ou um mapeamento comum)

A consulta percorre `own` primeiro e, se a chave não estiver presente,
segue pelo `fallback` até o fim da cadeia.

Decisões arquiteturais:
    - Nenhum mecanismo de protótipo em runtime é utilizado
    - A cadeia é somente leitura após construída
    - A iteração expõe a visão achatada (próprias sombreiam herdadas)
    - O percurso da cadeia é iterativo (sem recursão)

Invariantes:
    - Entradas próprias sempre sombreiam entradas herdadas de mesmo nome
    - Descendentes enxergam assets de qualquer ancestral sem cópia
    - `has_own` nunca consulta o fallback

Limites explícitos:
    - Não normaliza nomes (responsabilidade do resolvedor de assets)
    - Não emite diagnósticos
    - Não detecta ciclos na cadeia (cadeias são construídas pelo engine)

Este módulo existe para preservar a visibilidade transparente de assets
herdados sem copiá-los para cada descendente.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

_MISSING = object()


class AssetChain(Mapping):
    """Mapeamento somente leitura com entradas próprias e fallback encadeado."""

    __slots__ = ("_own", "_fallback")

    def __init__(
        self,
        own: Optional[Mapping] = None,
        fallback: Optional[Mapping] = None,
    ) -> None:
        self._own: Dict[str, Any] = dict(own.items()) if own is not None else {}
        self._fallback = fallback

    @property
    def own(self) -> Mapping:
        return MappingProxyType(self._own)

    @property
    def fallback(self) -> Optional[Mapping]:
        return self._fallback

    def has_own(self, key: str) -> bool:
        return key in self._own

    def lookup(self, key: str, default: Any = None) -> Any:
        node: Any = self
        while isinstance(node, AssetChain):
            if key in node._own:
                return node._own[key]
            node = node._fallback
        if node is None:
            return default
        return node.get(key, default)

    def depth(self) -> int:
        n = 0
        node: Any = self
        while isinstance(node, AssetChain):
            n += 1
            node = node._fallback
        return n if node is None else n + 1

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.items())

    def __getitem__(self, key: str) -> Any:
        value = self.lookup(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return self.lookup(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        seen = set()
        node: Any = self
        while isinstance(node, AssetChain):
            for key in node._own:
                if key not in seen:
                    seen.add(key)
                    yield key
            node = node._fallback
        if node is not None:
            for key in node:
                if key not in seen:
                    seen.add(key)
                    yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"AssetChain(own={self._own!r}, fallback={self._fallback!r})"
