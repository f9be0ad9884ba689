# src/atlas_compose/core/config/loader.py
"""
Loader canônico de settings do Atlas Compose.

Este módulo é responsável por carregar, validar estruturalmente e resolver
os settings efetivos do engine de options.

Os settings são resolvidos a partir de:
    - defaults embutidos (`DEFAULT_SETTINGS`) ou um arquivo de defaults
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de settings em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver os settings finais via deep-merge determinístico
    - Garantir precedência explícita do override local sobre defaults

Invariantes:
    - Um arquivo de defaults informado é obrigatório
    - Overrides nunca mutam os defaults
    - O resultado é sempre um `EngineSettings` validado

Limites explícitos:
    - Não constrói o engine nem a tabela de estratégias
    - Não interage com definições de componentes
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .errors import (
    InvalidConfigRootTypeError,
    SettingsFileNotFoundError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .settings import DEFAULT_SETTINGS, EngineSettings


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        SettingsFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SettingsFileNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> EngineSettings:
    """
    Carrega e resolve os settings efetivos do engine.

    Política de resolução:
        - Sem `defaults_path`, a base são os defaults embutidos
        - Com `defaults_path`, o arquivo é obrigatório e é combinado sobre
          os defaults embutidos
        - O arquivo local é opcional; quando presente tem prioridade

    Args:
        defaults_path (Optional[str]): Caminho opcional para o arquivo base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        EngineSettings: Settings finais validados.

    Raises:
        SettingsFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        UnknownSettingError: Se houver chaves desconhecidas.
        InvalidSettingValueError: Se algum valor for inválido.
    """
    effective: Dict[str, Any] = dict(DEFAULT_SETTINGS)

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return EngineSettings.from_dict(effective)
