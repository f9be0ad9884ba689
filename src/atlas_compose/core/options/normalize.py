# src/atlas_compose/core/options/normalize.py
"""
Normalização de declarações abreviadas.

Três passes independentes e insensíveis à ordem, executados uma vez por
nó de configuração antes de qualquer merge:

    - props: lista de nomes ou mapeamento nome → tipo/descritor
      → `{nomeCamelCase: {"type": ...}}`
    - inject: lista de nomes ou mapeamento nome → origem/descritor
      → `{nome: {"from": origem, ...}}`
    - directives: callable solto → `{"bind": fn, "update": fn}`

Antes de cada passe, `parse_declaration` classifica o valor bruto em uma
forma marcada (SEQUENCE, MAPPING, INVALID); os passes despacham sobre
essa tag.

Decisões arquiteturais:
    - Cada passe muta apenas o seu próprio campo do nó filho
      (o nó ainda não é compartilhado)
    - Campo ausente (None) não é tocado
    - Forma inválida gera diagnóstico e o campo vira `{}`
    - Entradas ou chaves que não são `str` geram diagnóstico e são descartadas;
      as demais entradas da declaração são mantidas

Invariantes:
    - Após a normalização nenhuma forma abreviada é visível ao merge
    - Normalizar uma forma já normalizada não a altera
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Dict, Optional

from ..errors import (
    declaration_invalid_key,
    inject_invalid_entry,
    option_invalid_shape,
    props_invalid_entry,
)
from .context import MergeContext
from .naming import camelize, is_plain_mapping, raw_type_name
from .types import Declaration, DeclarationForm, MergeMode


def parse_declaration(value: Any) -> Declaration:
    if isinstance(value, (list, tuple)):
        return Declaration(DeclarationForm.SEQUENCE, value)
    if is_plain_mapping(value):
        return Declaration(DeclarationForm.MAPPING, value)
    return Declaration(DeclarationForm.INVALID, value)


def normalize_props(options: Dict[str, Any], ctx: Optional[MergeContext] = None) -> None:
    props = options.get("props")
    if props is None:
        return
    ctx = ctx or MergeContext(mode=MergeMode.DEFINITION)

    decl = parse_declaration(props)
    normalized: Dict[str, Any] = {}

    if decl.form is DeclarationForm.SEQUENCE:
        for name in decl.value:
            if isinstance(name, str):
                normalized[camelize(name)] = {"type": None}
            else:
                ctx.warn(props_invalid_entry(received=raw_type_name(name)))

    elif decl.form is DeclarationForm.MAPPING:
        for key, value in decl.value.items():
            if not isinstance(key, str):
                ctx.warn(declaration_invalid_key(option="props", received=raw_type_name(key)))
                continue
            normalized[camelize(key)] = value if is_plain_mapping(value) else {"type": value}

    else:
        ctx.warn(option_invalid_shape(option="props", received=raw_type_name(props)))

    options["props"] = normalized


def normalize_inject(options: Dict[str, Any], ctx: Optional[MergeContext] = None) -> None:
    inject = options.get("inject")
    if inject is None:
        return
    ctx = ctx or MergeContext(mode=MergeMode.DEFINITION)

    decl = parse_declaration(inject)
    normalized: Dict[str, Any] = {}

    if decl.form is DeclarationForm.SEQUENCE:
        for name in decl.value:
            if isinstance(name, str):
                normalized[name] = {"from": name}
            else:
                ctx.warn(inject_invalid_entry(received=raw_type_name(name)))

    elif decl.form is DeclarationForm.MAPPING:
        for key, value in decl.value.items():
            if not isinstance(key, str):
                ctx.warn(declaration_invalid_key(option="inject", received=raw_type_name(key)))
                continue
            if is_plain_mapping(value):
                normalized[key] = {"from": key, **value}
            else:
                normalized[key] = {"from": value}

    else:
        ctx.warn(option_invalid_shape(option="inject", received=raw_type_name(inject)))

    options["inject"] = normalized


def normalize_directives(options: Dict[str, Any]) -> None:
    directives = options.get("directives")
    # cadeias já resolvidas são somente leitura e já normalizadas
    if not isinstance(directives, MutableMapping):
        return
    for key, definition in list(directives.items()):
        if callable(definition):
            directives[key] = {"bind": definition, "update": definition}


def normalize(options: Dict[str, Any], ctx: Optional[MergeContext] = None) -> None:
    """Executa os três passes sobre `options`."""
    normalize_props(options, ctx)
    normalize_inject(options, ctx)
    normalize_directives(options)
