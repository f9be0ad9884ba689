# src/atlas_compose/core/config/__init__.py
"""
Camada de settings do Atlas Compose.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e validar os settings que controlam o engine de options
(modo production, tags reservadas, estratégias adicionais por campo).

Responsabilidades do pacote:
    - Carregamento de arquivos de settings (defaults + overrides locais)
    - Resolução dos settings finais via deep-merge determinístico
    - Validação tipada dos settings (`EngineSettings`)

Princípios fundamentais:
    - Settings não contêm definições de componentes
    - Overrides são sempre explícitos
    - Erros de settings são fatais, ao contrário dos diagnósticos de merge

Limites explícitos:
    - Não executa merge de options de componentes
    - Não emite diagnósticos
"""
