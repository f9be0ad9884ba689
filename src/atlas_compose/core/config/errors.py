# src/atlas_compose/core/config/errors.py
"""
Exceções canônicas da camada de settings do Atlas Compose.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a validação dos settings do engine.

Diferentemente dos diagnósticos do merge de options (sempre não fatais),
as exceções aqui definidas representam **falhas fatais de configuração
do próprio engine**: um arquivo de settings ausente ou inválido impede
que o engine seja construído com segurança.

Invariantes:
    - Todas as exceções de settings herdam de `ConfigError`
    - Nenhuma exceção é levantada pelo merge de options de componentes

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do engine de options
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados aos settings do Atlas Compose.

    Esta hierarquia permite:
        - captura genérica de erros de settings
        - distinção clara entre falhas de settings e diagnósticos de merge
    """


class SettingsFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de settings explicitamente
    informado como base (defaults) não existe.

    Decisões arquiteturais:
        - Um caminho de defaults informado é obrigatório
        - O override local ausente não é erro (ver `load_settings`)
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de settings não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo de settings
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    de settings (defaults + override local).

    Exemplo de conflito:
        - base:     {"production": false}
        - override: {"production": {"enabled": true}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class UnknownSettingError(ConfigError):
    """
    Exceção levantada quando os settings contêm chaves não reconhecidas.

    Decisões arquiteturais:
        - Chaves desconhecidas indicam erro de digitação ou versão incompatível
        - Não são ignoradas silenciosamente
    """


class InvalidSettingValueError(ConfigError):
    """
    Exceção levantada quando um setting reconhecido possui valor de tipo
    ou conteúdo inválido (ex.: `production: "yes"`, estratégia inexistente).
    """
