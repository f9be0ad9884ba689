"""Helpers de nomes e forma usados pelo normalizador e pelo resolvedor de assets."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_CAMELIZE_RE = re.compile(r"-(\w)")


def camelize(name: str) -> str:
    """`my-comp` -> `myComp`."""
    return _CAMELIZE_RE.sub(lambda m: m.group(1).upper(), name)


def capitalize(name: str) -> str:
    """`myComp` -> `MyComp`."""
    return name[:1].upper() + name[1:]


def is_plain_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def raw_type_name(value: Any) -> str:
    if value is None:
        return "None"
    return type(value).__name__
