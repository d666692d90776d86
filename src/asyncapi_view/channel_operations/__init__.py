"""Channel operation exports."""

from .operation_merger import ChannelResolutionError, OperationMerger
from .operation_models import (
    CHANNEL_ANCHOR_PREFIX,
    ChannelOperation,
    Message,
    Operation,
    OperationDirection,
    direction_for_action,
)

__all__ = [
    "CHANNEL_ANCHOR_PREFIX",
    "ChannelOperation",
    "ChannelResolutionError",
    "Message",
    "Operation",
    "OperationDirection",
    "OperationMerger",
    "direction_for_action",
]
