"""Operation merger tests."""

from __future__ import annotations

from typing import Any

import pytest
from asyncapi_view.channel_operations import (
    ChannelResolutionError,
    OperationDirection,
    OperationMerger,
    direction_for_action,
)
from asyncapi_view.reference_resolution import ReferenceResolver


def _merger() -> OperationMerger:
    return OperationMerger(ReferenceResolver(base_url="#"))


def _message(title: str, **overrides: Any) -> dict[str, Any]:
    message: dict[str, Any] = {
        "name": f"com.example.{title}",
        "title": title,
        "payload": {"$ref": f"#/components/schemas/{title}"},
        "headers": {"$ref": "#/components/schemas/Headers"},
    }
    message.update(overrides)
    return message


def _operation(channel: str, action: str, *messages: dict[str, Any]) -> dict[str, Any]:
    return {
        "action": action,
        "channel": {"$ref": f"#/channels/{channel}"},
        "messages": list(messages),
    }


def _channels(**protocols: str) -> dict[str, Any]:
    return {name: {"bindings": {protocol: {}}} for name, protocol in protocols.items()}


def test_direction_mapping_inverts_send() -> None:
    assert direction_for_action("send") is OperationDirection.SUBSCRIBE
    assert direction_for_action("receive") is OperationDirection.PUBLISH
    assert direction_for_action("unexpected") is OperationDirection.PUBLISH
    assert direction_for_action(None) is OperationDirection.PUBLISH


def test_merge_preserves_operation_then_message_order() -> None:
    operations = {
        "A": _operation("a", "send", _message("m1"), _message("m2")),
        "B": _operation("b", "receive", _message("m3")),
    }

    merged = _merger().merge(operations, _channels(a="kafka", b="kafka"))

    assert [(item.name, item.operation.message.title) for item in merged] == [
        ("a", "m1"),
        ("a", "m2"),
        ("b", "m3"),
    ]


def test_merge_resolves_order_scenario() -> None:
    operations = {
        "orders_send": _operation(
            "orders",
            "send",
            {"title": "OrderEvent", "payload": {"$ref": "#/components/schemas/OrderEvent"}},
        )
    }
    channels = {"orders": {"description": "Orders", "bindings": {"kafka": {}}}}

    (channel_operation,) = _merger().merge(operations, channels)

    assert channel_operation.name == "orders"
    assert channel_operation.description == "Orders"
    assert channel_operation.operation.protocol == "kafka"
    assert channel_operation.operation.operation == "subscribe"
    assert channel_operation.operation.message.payload.title == "OrderEvent"
    assert channel_operation.operation.message.payload.anchor_url == "#OrderEvent"
    assert channel_operation.anchor_identifier == "channel-kafka-orders-subscribe-OrderEvent"


def test_protocol_is_first_channel_binding_key_not_message_binding() -> None:
    operations = {
        "op": _operation("orders", "receive", _message("M", bindings={"amqp": {"ack": True}}))
    }
    channels = {"orders": {"bindings": {"kafka": {}, "amqp": {}}}}

    (channel_operation,) = _merger().merge(operations, channels)

    assert channel_operation.operation.protocol == "kafka"
    assert channel_operation.operation.bindings == {"kafka": {}, "amqp": {}}
    assert channel_operation.operation.message.bindings == {"amqp": {"ack": True}}


def test_channel_without_bindings_fails_loudly() -> None:
    operations = {"op": _operation("orders", "send", _message("M"))}

    with pytest.raises(ChannelResolutionError, match="no protocol bindings"):
        _merger().merge(operations, {"orders": {"bindings": {}}})

    with pytest.raises(ChannelResolutionError, match="no protocol bindings"):
        _merger().merge(operations, {"orders": {}})


def test_unknown_channel_reference_fails() -> None:
    operations = {"op": _operation("missing", "send", _message("M"))}

    with pytest.raises(ChannelResolutionError, match="unknown channel 'missing'"):
        _merger().merge(operations, _channels(orders="kafka"))


def test_message_bindings_are_normalized_and_raw_bindings_kept() -> None:
    raw_bindings = {"kafka": {"key": {"type": "string"}, "bindingVersion": "0.4.0"}}
    operations = {"op": _operation("orders", "send", _message("M", bindings=raw_bindings))}

    (channel_operation,) = _merger().merge(operations, _channels(orders="kafka"))
    message = channel_operation.operation.message

    assert message.bindings == {"kafka": {"key": {"type": "string"}}}
    assert message.raw_bindings == raw_bindings


def test_message_without_headers_has_absent_header_reference() -> None:
    operations = {"op": _operation("orders", "send", {"title": "M", "payload": {}})}

    (channel_operation,) = _merger().merge(operations, _channels(orders="kafka"))
    headers = channel_operation.operation.message.headers

    assert headers.name is None
    assert headers.title is None
    assert headers.anchor_url is None


def test_referenced_component_message_is_dereferenced() -> None:
    operations = {
        "op": _operation("orders", "send", {"$ref": "#/channels/orders/messages/Cancelled"})
    }
    component_messages = {"Cancelled": _message("Cancelled")}

    (channel_operation,) = _merger().merge(
        operations, _channels(orders="kafka"), component_messages
    )

    assert channel_operation.operation.message.title == "Cancelled"
    assert channel_operation.anchor_identifier == "channel-kafka-orders-subscribe-Cancelled"


def test_message_reference_to_unknown_component_message_fails() -> None:
    operations = {"op": _operation("orders", "send", {"$ref": "#/components/messages/Missing"})}

    with pytest.raises(ChannelResolutionError, match="names no component message"):
        _merger().merge(operations, _channels(orders="kafka"), {"Cancelled": _message("C")})

    with pytest.raises(ChannelResolutionError, match="names no component message"):
        _merger().merge(operations, _channels(orders="kafka"))


def test_merged_records_do_not_share_state_with_raw_input() -> None:
    raw_bindings = {"kafka": {"key": "order-42", "groups": ["a"]}}
    operations = {"op": _operation("orders", "send", _message("M", bindings=raw_bindings))}
    channels = {"orders": {"bindings": {"kafka": {"topic": "orders"}}}}

    (channel_operation,) = _merger().merge(operations, channels)
    raw_bindings["kafka"]["key"] = "changed"
    raw_bindings["kafka"]["groups"].append("b")
    channels["orders"]["bindings"]["kafka"]["topic"] = "changed"
    message = channel_operation.operation.message

    assert message.raw_bindings == {"kafka": {"key": "order-42", "groups": ("a",)}}
    assert message.bindings == {"kafka": {"key": "order-42", "groups": ("a",)}}
    assert channel_operation.operation.bindings == {"kafka": {"topic": "orders"}}
    with pytest.raises(TypeError):
        message.raw_bindings["kafka"]["key"] = "changed"  # type: ignore[index]


def test_operation_without_messages_yields_no_records() -> None:
    operations = {"op": {"action": "send", "channel": {"$ref": "#/channels/orders"}}}

    assert _merger().merge(operations, _channels(orders="kafka")) == ()


def test_merging_twice_yields_equal_records() -> None:
    operations = {"op": _operation("orders", "send", _message("M"))}
    channels = _channels(orders="kafka")

    assert _merger().merge(operations, channels) == _merger().merge(operations, channels)
