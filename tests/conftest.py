# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Compose.

Este módulo define fixtures reutilizáveis que fornecem:
- um colaborador reativo que registra cada chave instalada
- um canal de diagnósticos limpo por teste
- um handle de instância fake
- conteúdos YAML de settings (defaults e overrides locais)
- um construtor de componente mínimo

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - O construtor fake utiliza duck typing em vez de herança

Invariantes:
    - Nenhuma fixture executa merge real
    - Nenhuma fixture realiza I/O

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica de domínio
"""

from typing import Any, Dict, List, Tuple

import pytest


class RecordingReactive:
    """Colaborador reativo que instala a chave e registra a chamada."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, str, Any]] = []

    def __call__(self, target: Dict[str, Any], key: str, value: Any) -> None:
        self.calls.append((id(target), key, value))
        target[key] = value

    def keys(self) -> List[str]:
        return [key for _, key, _ in self.calls]


class FakeVm:
    """Handle de instância mínimo (apenas identidade + atributos livres)."""

    def __init__(self, **attrs: Any) -> None:
        self.__dict__.update(attrs)


class FakeConstructor:
    """Construtor de componente: callable com a definição resolvida em `options`."""

    def __init__(self, options: Dict[str, Any]) -> None:
        self.options = options

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return None


@pytest.fixture
def reactive() -> RecordingReactive:
    return RecordingReactive()


@pytest.fixture
def diagnostics():
    from atlas_compose.core.diagnostics import DiagnosticLog

    return DiagnosticLog()


@pytest.fixture
def vm() -> FakeVm:
    return FakeVm(uid=1)


@pytest.fixture
def make_constructor():
    return FakeConstructor


@pytest.fixture
def settings_defaults_yaml() -> str:
    """
    YAML de settings base, semelhante a um `settings.defaults.yaml` real.

    Returns:
        str: Conteúdo YAML com production desligado e uma estratégia extra.
    """
    return """\
production: false
reserved_tags:
  - div
  - span
  - svg
strategies:
  beforeRouteEnter: hook
"""


@pytest.fixture
def settings_local_yaml() -> str:
    """
    YAML de overrides locais (apenas o que muda em relação aos defaults).

    Returns:
        str: Conteúdo YAML ligando o modo production e acrescentando estratégia.
    """
    return """\
production: true
strategies:
  validations: object
"""
