"""
Atlas Compose — Canonical Diagnostic Structures (v1)

Este módulo define o padrão canônico de diagnósticos do Atlas Compose.
Diagnósticos são sinais não fatais emitidos durante normalização, merge
de options e resolução de assets, devendo ser:

- explícitos
- serializáveis
- agrupáveis por código estável
- acionáveis

Nenhum diagnóstico interrompe a resolução: o engine sempre devolve um
resultado utilizável (possivelmente degradado).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiagnosticPayload:
    """
    Payload canônico de diagnóstico do Atlas Compose.

    Campos:
    - type: código estável do diagnóstico (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor da definição (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do diagnóstico."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de códigos (v1)
# ---------------------------------------------------------------------------

# Forma das options
OPTION_INVALID_TYPE = "OPTION_INVALID_TYPE"
OPTION_INVALID_SHAPE = "OPTION_INVALID_SHAPE"
PROPS_INVALID_ENTRY = "PROPS_INVALID_ENTRY"
INJECT_INVALID_ENTRY = "INJECT_INVALID_ENTRY"
DECLARATION_INVALID_KEY = "DECLARATION_INVALID_KEY"
DATA_NOT_FUNCTION = "DATA_NOT_FUNCTION"
INSTANCE_ONLY_OPTION = "INSTANCE_ONLY_OPTION"

# Nomes e assets
COMPONENT_RESERVED_NAME = "COMPONENT_RESERVED_NAME"
ASSET_NOT_FOUND = "ASSET_NOT_FOUND"

# Herança
CYCLIC_INHERITANCE = "CYCLIC_INHERITANCE"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def option_invalid_type(
    *,
    option: str,
    received: str,
    hint: str = "Declare a option como um mapeamento (dict) de nome para valor.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=OPTION_INVALID_TYPE,
        message=(
            f'Invalid value for option "{option}": expected an Object, '
            f"but got {received}."
        ),
        details={"option": option, "received": received},
        hint=hint,
    )


def option_not_sequence(
    *,
    option: str,
    received: str,
    hint: str = "Declare a option como uma lista de definições.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=OPTION_INVALID_TYPE,
        message=(
            f'Invalid value for option "{option}": expected an Array, '
            f"but got {received}."
        ),
        details={"option": option, "received": received},
        hint=hint,
    )


def option_invalid_shape(
    *,
    option: str,
    received: str,
    hint: str = "Use uma lista de nomes ou um mapeamento de nome para descritor.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=OPTION_INVALID_SHAPE,
        message=(
            f'Invalid value for option "{option}": expected an Array or an Object, '
            f"but got {received}."
        ),
        details={"option": option, "received": received},
        hint=hint,
    )


def props_invalid_entry(
    *,
    received: str,
    hint: str = "Na sintaxe de lista, cada prop deve ser declarada pelo nome (str).",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=PROPS_INVALID_ENTRY,
        message="props must be strings when using array syntax.",
        details={"option": "props", "received": received},
        hint=hint,
    )


def inject_invalid_entry(
    *,
    received: str,
    hint: str = "Na sintaxe de lista, cada inject deve ser declarado pelo nome (str).",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=INJECT_INVALID_ENTRY,
        message="inject must be strings when using array syntax.",
        details={"option": "inject", "received": received},
        hint=hint,
    )


def declaration_invalid_key(
    *,
    option: str,
    received: str,
    hint: str = "Use nomes (str) como chaves da declaração.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=DECLARATION_INVALID_KEY,
        message=f'Invalid key in option "{option}": expected a String, but got {received}.',
        details={"option": option, "received": received},
        hint=hint,
    )


def data_not_function(
    *,
    received: str,
    hint: str = "Em definições de componente, declare `data` como função que retorna um novo dict.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=DATA_NOT_FUNCTION,
        message=(
            'The "data" option should be a function that returns a '
            "per-instance value in component definitions."
        ),
        details={"option": "data", "received": received},
        hint=hint,
    )


def instance_only_option(
    *,
    option: str,
    hint: str = "Passe esta option apenas no merge de criação de instância.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=INSTANCE_ONLY_OPTION,
        message=f'option "{option}" can only be used during instance creation.',
        details={"option": option},
        hint=hint,
    )


def component_reserved_name(
    *,
    name: str,
    hint: str = "Renomeie o componente para um id que não colida com tags embutidas ou reservadas.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=COMPONENT_RESERVED_NAME,
        message=f"Do not use built-in or reserved HTML elements as component id: {name}",
        details={"name": name},
        hint=hint,
    )


def asset_not_found(
    *,
    category: str,
    asset_id: str,
    hint: str = "Registre o asset na definição, em um mixin ou em uma configuração base.",
) -> DiagnosticPayload:
    singular = category[:-1] if category.endswith("s") else category
    return DiagnosticPayload(
        type=ASSET_NOT_FOUND,
        message=f"Failed to resolve {singular}: {asset_id}",
        details={"category": category, "id": asset_id},
        hint=hint,
    )


def cyclic_inheritance(
    *,
    chain: List[str],
    hint: str = "Remova a referência circular em `extends`/`mixins`; o nó repetido foi ignorado.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=CYCLIC_INHERITANCE,
        message="Cyclic inheritance detected: " + " -> ".join(chain),
        details={"chain": list(chain)},
        hint=hint,
    )
