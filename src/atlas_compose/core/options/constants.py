"""Identidades de campo reconhecidas pelo engine de options."""

from __future__ import annotations

from typing import FrozenSet, Tuple

LIFECYCLE_HOOKS: Tuple[str, ...] = (
    "beforeCreate",
    "created",
    "beforeMount",
    "mounted",
    "beforeUpdate",
    "updated",
    "beforeDestroy",
    "destroyed",
    "activated",
    "deactivated",
    "errorCaptured",
    "serverPrefetch",
)

# categorias de assets nomeados; o campo é o plural ("components", ...)
ASSET_TYPES: Tuple[str, ...] = ("component", "directive", "filter")
ASSET_FIELDS: Tuple[str, ...] = tuple(t + "s" for t in ASSET_TYPES)

OBJECT_FIELDS: Tuple[str, ...] = ("props", "methods", "inject", "computed")
INSTANCE_ONLY_FIELDS: Tuple[str, ...] = ("el", "propsData")

EXTENDS = "extends"
MIXINS = "mixins"

BUILTIN_TAGS: FrozenSet[str] = frozenset({"slot", "component"})
