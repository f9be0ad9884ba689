# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Atlas Compose.

Este módulo garante apenas que o pacote importa sem falhas e que o
namespace público expõe os pontos de entrada esperados.

Limites explícitos:
    - Não testar lógica de merge
    - Não acumular asserts funcionais
"""


def test_public_api_is_importable():
    """
    Verifica que o pacote raiz importa e expõe os dois pontos de entrada.

    Invariantes:
        - `merge_options` e `resolve_asset` são callables
        - `__all__` lista apenas nomes existentes
    """
    import atlas_compose

    assert callable(atlas_compose.merge_options)
    assert callable(atlas_compose.resolve_asset)
    for name in atlas_compose.__all__:
        assert hasattr(atlas_compose, name), name
