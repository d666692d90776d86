"""Binding normalization exports."""

from .binding_models import BINDING_VERSION_KEY, Binding, BindingScalar, BindingValue
from .binding_normalizer import (
    create_binding_example,
    example_value,
    normalize_binding,
    normalize_bindings,
)

__all__ = [
    "BINDING_VERSION_KEY",
    "Binding",
    "BindingScalar",
    "BindingValue",
    "create_binding_example",
    "example_value",
    "normalize_binding",
    "normalize_bindings",
]
