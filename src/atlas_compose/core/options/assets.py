# src/atlas_compose/core/options/assets.py
"""
Resolução de assets nomeados (components, directives, filters).

A consulta é feita sobre uma configuração já resolvida, tolerando três
grafias do mesmo id: exata, camelCase e PascalCase.

Ordem de resolução:
    1. entradas próprias do nível mais próximo (três grafias)
    2. cadeia de ancestrais via `AssetChain` (três grafias, primeiro valor
       não nulo)

Asset ausente devolve `None`; o diagnóstico ASSET_NOT_FOUND só é emitido
quando solicitado (`warn_missing`) e fora do modo production.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..config.settings import EngineSettings
from ..diagnostics import DiagnosticLog
from ..errors import asset_not_found
from .chain import AssetChain
from .naming import camelize, capitalize, is_plain_mapping


def _has_own(assets: Mapping, key: str) -> bool:
    if isinstance(assets, AssetChain):
        return assets.has_own(key)
    return key in assets


def resolve_asset(
    options: Mapping,
    category: str,
    asset_id: Any,
    warn_missing: bool = False,
    *,
    diagnostics: Optional[DiagnosticLog] = None,
    settings: Optional[EngineSettings] = None,
) -> Any:
    """
    Resolve o asset `asset_id` da categoria `category` (ex.: "components").

    Args:
        options: Configuração resolvida (saída de `merge_options`).
        category: Campo plural da categoria.
        asset_id: Id do asset; valores não-str resolvem para None.
        warn_missing: Emite ASSET_NOT_FOUND quando nada for encontrado.
        diagnostics: Canal de diagnósticos (obrigatório para o aviso).
        settings: Settings do engine (modo production).

    Returns:
        O asset encontrado ou None.
    """
    if not isinstance(asset_id, str):
        return None

    assets = options.get(category) if is_plain_mapping(options) else None
    if not is_plain_mapping(assets):
        assets = {}

    camelized = camelize(asset_id)
    pascal = capitalize(camelized)
    candidates = (asset_id, camelized, pascal)

    for key in candidates:
        if _has_own(assets, key):
            return assets[key]

    found = None
    for key in candidates:
        found = assets.get(key)
        if found is not None:
            break

    if found is None and warn_missing and diagnostics is not None:
        production = settings.production if settings is not None else False
        if not production:
            diagnostics.warn(asset_not_found(category=category, asset_id=asset_id))

    return found
