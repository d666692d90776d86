"""Operation view exports."""

from .notifications import ERROR_LABEL, PUBLISHED_LABEL, Notifier
from .operation_view_builder import (
    SchemaLookupError,
    derive_operation_view,
    schema_identifier,
)
from .publish_flow import PublishFlow
from .view_models import LineCountField, OperationView

__all__ = [
    "ERROR_LABEL",
    "LineCountField",
    "Notifier",
    "OperationView",
    "PUBLISHED_LABEL",
    "PublishFlow",
    "SchemaLookupError",
    "derive_operation_view",
    "schema_identifier",
]
