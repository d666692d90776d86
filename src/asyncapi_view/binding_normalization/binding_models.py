"""Protocol binding entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

BINDING_VERSION_KEY = "bindingVersion"

BindingScalar: TypeAlias = str | int | float | bool | None
BindingValue: TypeAlias = "BindingScalar | Binding"
Binding: TypeAlias = Mapping[str, BindingValue]
