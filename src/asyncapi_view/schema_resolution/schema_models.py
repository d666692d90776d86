"""Resolved schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from asyncapi_view.example_rendering import Example

ARRAY_MARKER = "[]"


@dataclass(frozen=True)
class SchemaRef:
    """Reference from a message to a component schema."""

    name: str | None
    title: str | None
    anchor_url: str | None


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """Display-ready schema node with every reference materialized."""

    name: str
    title: str
    anchor_identifier: str
    description: str | None = None
    ref_name: str | None = None
    ref_title: str | None = None
    anchor_url: str | None = None
    type: str | None = None
    format: str | None = None
    enum: tuple[Any, ...] | None = None
    properties: Mapping[str, SchemaNode] | None = None
    items: SchemaNode | None = None
    required: tuple[str, ...] | None = None
    example: Example | None = None
