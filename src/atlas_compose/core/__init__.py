# src/atlas_compose/core/__init__.py
"""
Core do Atlas Compose.

Este pacote contém a implementação canônica do motor de composição de
definições de componentes: a resolução da configuração final de um
componente a partir de uma cadeia de configurações pai e filha, e a
consulta posterior de assets nomeados dessa configuração resolvida.

O core é projetado para ser:
    - determinístico
    - síncrono e livre de estado global mutável
    - testável de forma isolada
    - tolerante a entradas malformadas (diagnóstico, nunca aborto)

Componentes principais:
    - config      → settings do engine (loader YAML/JSON, deep-merge, validação)
    - options     → tabela de estratégias, normalização, merge recursivo e assets
    - diagnostics → canal estruturado de diagnósticos não fatais
    - errors      → catálogo canônico de códigos de diagnóstico

Princípios fundamentais:
    - Cada regra de merge é associada a um campo fixo, nunca inferida do valor
    - Formas abreviadas são normalizadas antes de qualquer merge
    - Diagnósticos são sinais estruturados, nunca exceções

Limites explícitos:
    - Não instancia componentes
    - Não invoca hooks de ciclo de vida
    - Não implementa o subsistema reativo (apenas o consome)
    - Não renderiza nem compila templates

Este pacote existe como a fonte de verdade da composição de definições.
"""
