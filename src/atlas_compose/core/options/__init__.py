# src/atlas_compose/core/options/__init__.py
"""
# Options Core — Atlas Compose

Este pacote implementa a resolução da configuração final de componentes.

## Componentes

- **types**
  - `MergeMode`: merge entre definições ou na criação de instância
  - `StrategyKind` / `FieldStrategy`: variante marcada de estratégia por campo
  - `NATIVE_WATCH`: sentinel de `watch` nativo (tratado como ausente)

- **registry**
  - `StrategyRegistry`: builder validado da tabela de estratégias
  - `StrategyTable`: tabela imutável consultada pelo engine

- **strategies** / **data**
  - famílias de merge e merge profundo de `data`/`provide`

- **normalize**
  - passes de props, inject e directives

- **engine**
  - `merge_options` / `OptionsEngine`: ponto de entrada recursivo

- **assets** / **chain**
  - `resolve_asset` e `AssetChain` (fallback explícito de ancestrais)
"""
