"""Operation view entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from asyncapi_view.binding_normalization import create_binding_example
from asyncapi_view.channel_operations import Operation
from asyncapi_view.example_rendering import Example, count_lines
from asyncapi_view.schema_resolution import SchemaNode


class LineCountField(str, Enum):
    """Editable text areas whose line counts follow user edits."""

    EXAMPLE = "example"
    HEADERS = "headers"
    MESSAGE_BINDING_EXAMPLE = "message_binding_example"


@dataclass(frozen=True)
class OperationView:  # pylint: disable=too-many-instance-attributes
    """Editable state derived from one resolved operation."""

    channel_name: str
    operation: Operation
    protocol_name: str
    schema_identifier: str
    schema: SchemaNode
    default_example: Example | None
    default_example_type: str | None
    example_line_count: int
    headers_schema_identifier: str
    headers: SchemaNode
    headers_example: Example | None
    headers_line_count: int
    message_binding_example: Example | None = None
    message_binding_example_line_count: int = 0

    def with_binding_example(self) -> OperationView:
        """Build the message binding example for this view's protocol on demand."""
        raw_bindings = self.operation.message.raw_bindings or {}
        binding_example = create_binding_example(raw_bindings.get(self.protocol_name))
        return replace(
            self,
            message_binding_example=binding_example,
            message_binding_example_line_count=(
                binding_example.line_count if binding_example is not None else 0
            ),
        )

    def with_line_count(self, field: LineCountField, text: str) -> OperationView:
        """Return a view whose line count for field follows the edited text."""
        line_count = count_lines(text)
        if field is LineCountField.EXAMPLE:
            return replace(self, example_line_count=line_count)
        if field is LineCountField.HEADERS:
            return replace(self, headers_line_count=line_count)
        return replace(self, message_binding_example_line_count=line_count)
