# tests/core/config/test_loader.py
"""
Testes do carregador de settings (load_settings).

Este módulo valida o comportamento do loader responsável por:
- carregar arquivos de settings base (defaults) e locais (override)
- validar estrutura mínima (tipo raiz, formato)
- validar chaves e valores (EngineSettings.from_dict)

Os testes asseguram que:
- sem arquivos, os defaults embutidos são usados
- um arquivo de defaults informado é obrigatório
- o arquivo local é opcional e tem prioridade
- formatos não suportados e raízes inválidas são rejeitados
- chaves desconhecidas e valores inválidos são fatais

Decisões arquiteturais:
    - Erros de settings são fatais (ao contrário dos diagnósticos de merge)
    - Overrides locais nunca silenciam erros de defaults ausentes
"""

from pathlib import Path

import pytest

try:
    from atlas_compose.core.config.loader import load_settings
    from atlas_compose.core.config.settings import EngineSettings
    from atlas_compose.core.config.errors import (
        ConfigTypeConflictError,
        InvalidConfigRootTypeError,
        InvalidSettingValueError,
        SettingsFileNotFoundError,
        UnknownSettingError,
        UnsupportedConfigFormatError,
    )
    from atlas_compose.core.options.types import StrategyKind
except Exception as e:  # noqa: BLE001
    load_settings = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de settings e suas exceções tipadas estejam disponíveis.

    Invariantes:
        - Se os módulos existem, a função não produz efeitos colaterais
        - Se algum módulo está ausente, o teste falha imediatamente
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings loader. Implement:\n"
            "- src/atlas_compose/core/config/loader.py (load_settings)\n"
            "- src/atlas_compose/core/config/settings.py (EngineSettings)\n"
            "- src/atlas_compose/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_builtin_defaults_without_files():
    _require_imports()
    settings = load_settings()

    assert isinstance(settings, EngineSettings)
    assert settings.production is False
    assert settings.is_reserved_tag("div")
    assert settings.is_reserved_tag("foreignObject")
    assert not settings.is_reserved_tag("my-button")
    assert dict(settings.strategies) == {}


def test_missing_defaults_file_raises(tmp_path: Path):
    """
    Verifica que um arquivo de defaults informado e ausente é erro fatal.

    Invariantes:
        - Nenhum settings parcial é retornado
    """
    _require_imports()
    with pytest.raises(SettingsFileNotFoundError):
        load_settings(defaults_path=str(tmp_path / "settings.defaults.yaml"))


def test_local_override_is_applied(tmp_path: Path, settings_defaults_yaml, settings_local_yaml):
    """
    Verifica a precedência do override local sobre os defaults.

    Decisões arquiteturais:
        - Escalares do local sobrescrevem os defaults
        - Mapeamentos (`strategies`) são combinados por chave
        - Listas (`reserved_tags`) não sobrescritas são preservadas
    """
    _require_imports()
    defaults = tmp_path / "settings.defaults.yaml"
    local = tmp_path / "settings.local.yaml"
    defaults.write_text(settings_defaults_yaml, encoding="utf-8")
    local.write_text(settings_local_yaml, encoding="utf-8")

    settings = load_settings(defaults_path=str(defaults), local_path=str(local))

    assert settings.production is True
    assert settings.reserved_tags == frozenset({"div", "span", "svg"})
    assert dict(settings.strategies) == {
        "beforeRouteEnter": StrategyKind.HOOK,
        "validations": StrategyKind.OBJECT,
    }


def test_missing_local_file_is_ignored(tmp_path: Path, settings_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "settings.defaults.yaml"
    defaults.write_text(settings_defaults_yaml, encoding="utf-8")

    settings = load_settings(
        defaults_path=str(defaults),
        local_path=str(tmp_path / "settings.local.yaml"),
    )

    assert settings.production is False


def test_json_and_empty_files(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "settings.json"
    defaults.write_text('{"production": true}', encoding="utf-8")
    local = tmp_path / "settings.local.yml"
    local.write_text("", encoding="utf-8")

    settings = load_settings(defaults_path=str(defaults), local_path=str(local))

    assert settings.production is True


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "settings.toml"
    defaults.write_text("production = true", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_settings(defaults_path=str(defaults))


def test_non_dict_root_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "settings.yaml"
    defaults.write_text("- production\n- true\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_settings(defaults_path=str(defaults))


def test_unknown_setting_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "settings.yaml"
    defaults.write_text("log_level: INFO\n", encoding="utf-8")

    with pytest.raises(UnknownSettingError):
        load_settings(defaults_path=str(defaults))


@pytest.mark.parametrize(
    "content",
    [
        "reserved_tags:\n  - 1\n",
        "strategies:\n  foo: custom\n",
        "strategies:\n  foo: concat\n",
    ],
)
def test_invalid_setting_values_raise(tmp_path: Path, content: str):
    _require_imports()
    defaults = tmp_path / "settings.yaml"
    defaults.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidSettingValueError):
        load_settings(defaults_path=str(defaults))


def test_type_conflict_with_defaults_raises(tmp_path: Path):
    """Um escalar de tipo diferente do default é conflito estrutural no merge."""
    _require_imports()
    defaults = tmp_path / "settings.yaml"
    defaults.write_text("production: 'yes'\n", encoding="utf-8")

    with pytest.raises(ConfigTypeConflictError):
        load_settings(defaults_path=str(defaults))


def test_from_dict_validates_without_files():
    _require_imports()
    with pytest.raises(InvalidSettingValueError):
        EngineSettings.from_dict({"production": "yes"})
    with pytest.raises(InvalidSettingValueError):
        EngineSettings.from_dict(["production"])

    settings = EngineSettings.from_dict({"reserved_tags": ["X-Legacy"]})
    assert settings.reserved_tags == frozenset({"x-legacy"})
    assert settings.is_reserved_tag("X-LEGACY")
