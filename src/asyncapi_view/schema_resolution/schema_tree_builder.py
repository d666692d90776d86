"""Recursive schema tree building service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from asyncapi_view.example_rendering import Example
from asyncapi_view.frozen_values import freeze_value
from asyncapi_view.reference_resolution import ReferenceResolver

from .schema_models import ARRAY_MARKER, SchemaNode

_REF_KEY = "$ref"
_NAME_SEPARATOR = "."


class SchemaTreeError(Exception):
    """Raised when a raw schema node cannot be mapped."""


class SchemaTreeBuilder:
    """Maps raw schema nodes into resolved SchemaNode trees.

    Recursion follows ``properties`` and ``items`` exactly as present in the raw
    document. Self-referential raw schemas are not detected and exhaust the
    recursion limit.
    """

    def __init__(self, resolver: ReferenceResolver) -> None:
        self._resolver = resolver

    def build_all(self, raw_schemas: Mapping[str, Any] | None) -> Mapping[str, SchemaNode]:
        """Build every top-level schema, preserving names and order."""
        if raw_schemas is None:
            return MappingProxyType({})
        return MappingProxyType(
            {name: self.build(name, raw_schema) for name, raw_schema in raw_schemas.items()}
        )

    def build(self, name: str, raw: Any) -> SchemaNode:
        if not isinstance(raw, Mapping):
            raise SchemaTreeError(f"Schema '{name}' must be an object.")

        ref = raw.get(_REF_KEY)
        raw_properties = raw.get("properties")
        raw_items = raw.get("items")

        properties = None
        if raw_properties is not None:
            if not isinstance(raw_properties, Mapping):
                raise SchemaTreeError(f"Schema '{name}' properties must be an object.")
            properties = self.build_all(raw_properties)

        items = None
        if raw_items is not None:
            # Array items are named after the collection's reference, not the property name.
            items = self.build(f"{ref or ''}{ARRAY_MARKER}", raw_items)

        example = Example.of(raw["example"]) if "example" in raw else None

        return SchemaNode(
            name=name,
            title=name.rsplit(_NAME_SEPARATOR, 1)[-1],
            anchor_identifier=f"#{name}",
            description=raw.get("description"),
            ref_name=ref,
            ref_title=self._resolver.resolve(ref),
            anchor_url=self._resolver.anchor_url(ref),
            type=freeze_value(raw.get("type")),
            format=raw.get("format"),
            enum=_as_tuple(raw.get("enum")),
            properties=properties,
            items=items,
            required=_as_tuple(raw.get("required")),
            example=example,
        )


def _as_tuple(value: Any) -> tuple[Any, ...] | None:
    if value is None:
        return None
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(freeze_value(element) for element in value)
    return (freeze_value(value),)
