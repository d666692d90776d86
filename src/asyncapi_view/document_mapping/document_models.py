"""Resolved document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from asyncapi_view.channel_operations import ChannelOperation
from asyncapi_view.schema_resolution import SchemaNode


@dataclass(frozen=True)
class Info:
    """Document information, keeping the raw document for byte-level consumers."""

    title: str | None
    version: str | None
    description: str | None
    raw_document: Mapping[str, Any]


@dataclass(frozen=True)
class Components:
    """Resolved reusable components."""

    schemas: Mapping[str, SchemaNode]


@dataclass(frozen=True)
class ResolvedDocument:
    """Fully resolved document handed to the rendering layer."""

    info: Info
    servers: Mapping[str, Any]
    channel_operations: tuple[ChannelOperation, ...]
    components: Components
