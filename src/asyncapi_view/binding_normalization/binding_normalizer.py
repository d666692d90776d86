"""Binding normalization service.

Protocol bindings differ in shape per protocol (``kafka``, ``amqp``, ``jms`` ...).
Message-level bindings are kept as a mapping keyed by protocol identifier, while
each protocol's own binding becomes a generic read-only tree of scalars and
nested bindings.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from asyncapi_view.example_rendering import Example
from asyncapi_view.frozen_values import freeze_value

from .binding_models import BINDING_VERSION_KEY, Binding, BindingValue

_SCALAR_TYPES = (str, int, float, bool)


def normalize_binding(raw_binding: Mapping[str, Any] | None) -> Binding | None:
    """Convert one raw binding into a canonical tree without binding-version markers."""
    if raw_binding is None:
        return None
    normalized: dict[str, BindingValue] = {}
    for key, value in raw_binding.items():
        if key == BINDING_VERSION_KEY:
            continue
        if isinstance(value, Mapping):
            normalized[key] = normalize_binding(value)
        else:
            normalized[key] = freeze_value(value)
    return MappingProxyType(normalized)


def normalize_bindings(raw_bindings: Mapping[str, Any] | None) -> Mapping[str, Binding]:
    """Normalize a protocol-keyed bindings object, preserving protocol order."""
    if raw_bindings is None:
        return MappingProxyType({})
    normalized: dict[str, Binding] = {}
    for protocol, raw_binding in raw_bindings.items():
        normalized[protocol] = normalize_binding(raw_binding if raw_binding is not None else {})
    return MappingProxyType(normalized)


def example_value(value: Any) -> Any:
    """Return the example carried by a binding value.

    Scalars are their own example. An object exposes an example only through a
    nested ``example`` object, whose ``value`` is returned. Anything else yields None.
    """
    if isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, Mapping):
        nested = value.get("example")
        if isinstance(nested, Mapping):
            return nested.get("value")
    return None


def create_binding_example(raw_binding: Mapping[str, Any] | None) -> Example | None:
    """Synthesize an editable example object from one raw protocol binding."""
    if raw_binding is None:
        return None
    example_object = {
        key: example_value(value)
        for key, value in raw_binding.items()
        if key != BINDING_VERSION_KEY
    }
    return Example.of(example_object)
