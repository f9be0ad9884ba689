# src/atlas_compose/core/config/merge.py
"""
Deep-merge determinístico de settings do engine.

Este módulo implementa a política de deep-merge usada para combinar os
settings base (defaults embutidos ou arquivo de defaults) com um arquivo
local de override.

Esta política é deliberadamente distinta do merge de options de
componentes: aqui as regras dependem apenas da forma dos valores, pois
settings são dados declarativos simples (escalares, listas e dicts).

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
    - Conflitos estruturais interrompem o merge

Limites explícitos:
    - Não carrega arquivos
    - Não valida a semântica dos settings (ver `settings`)
    - Não é usado pelo engine de options de componentes
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `override` sobre `base`, produzindo um novo dicionário.

    Args:
        base (Dict[str, Any]): Settings base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo dicionário resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, incoming in override.items():
        current = result.get(key)

        if key not in result or current is None:
            result[key] = deepcopy(incoming)
        elif isinstance(current, dict) and isinstance(incoming, dict):
            result[key] = deep_merge(current, incoming)
        elif isinstance(current, list) and isinstance(incoming, list):
            # lista -> sobrescrita total
            result[key] = deepcopy(incoming)
        elif type(current) is not type(incoming):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(incoming).__name__}"
            )
        else:
            result[key] = deepcopy(incoming)

    return result
