"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from asyncapi_view.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from asyncapi_view.document_mapping import (
    DocumentMapper,
    DocumentMappingError,
    DocumentReadError,
    ResolvedDocument,
    document_to_dict,
    load_raw_document,
)
from asyncapi_view.example_rendering import Example
from asyncapi_view.operation_view import (
    ERROR_LABEL,
    PublishFlow,
    SchemaLookupError,
    derive_operation_view,
)
from asyncapi_view.publishing import KafkaPublisher, PublisherRegistry
from asyncapi_view.reference_resolution import ReferenceResolver, build_base_url


class CliError(Exception):
    """Custom CLI error."""


class ConsoleNotifier:  # pylint: disable=too-few-public-methods
    """Notifier printing transient notifications to the terminal."""

    def notify(self, message: str, label: str, duration_ms: int) -> None:
        del duration_ms
        click.echo(f"{label}: {message}", err=label == ERROR_LABEL)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="asyncapi-view")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Resolve AsyncAPI documents into display-ready models."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML viewer configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML viewer configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


_document_option = click.option(
    "--document",
    "document_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the AsyncAPI JSON/YAML document",
)
_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML viewer configuration file",
)


@cli.command(name="resolve")
@_document_option
@_config_option
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the resolved JSON document (defaults to stdout)",
)
@click.option(
    "--include-raw",
    is_flag=True,
    default=False,
    help="Embed the raw source document under info.asyncApiJson.",
)
def resolve(
    document_path: str, config_path: str | None, output_path: str | None, include_raw: bool
) -> None:
    """Resolve a document and print the display-ready JSON model."""
    _, document = _load_resolved_document(document_path, config_path)
    try:
        rendered = json.dumps(
            document_to_dict(document, include_raw=include_raw), indent=2, ensure_ascii=False
        )
    except (TypeError, ValueError) as exc:
        raise CliError(f"Resolved document cannot be rendered as JSON: {exc}") from exc
    if output_path is None:
        click.echo(rendered)
        return
    try:
        Path(output_path).write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="operations")
@_document_option
@_config_option
def list_operations(document_path: str, config_path: str | None) -> None:
    """List channel operations in display order."""
    _, document = _load_resolved_document(document_path, config_path)
    for channel_operation in document.channel_operations:
        click.echo(
            "\t".join(
                (
                    channel_operation.anchor_identifier,
                    channel_operation.operation.operation.value,
                    channel_operation.name,
                )
            )
        )


@cli.command(name="publish")
@_document_option
@_config_option
@click.option(
    "--anchor",
    "anchor_identifier",
    required=True,
    help="Anchor identifier of the channel operation (see the operations command)",
)
@click.option("--payload", required=False, help="Example payload JSON (defaults to example)")
@click.option("--payload-type", required=False, help="Payload type (defaults to message name)")
@click.option("--headers", required=False, help="Headers JSON (defaults to headers example)")
@click.option("--bindings", required=False, help="Message bindings JSON (defaults to example)")
@click.pass_context
def publish(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    document_path: str,
    config_path: str | None,
    anchor_identifier: str,
    payload: str | None,
    payload_type: str | None,
    headers: str | None,
    bindings: str | None,
) -> None:
    """Publish an example message for one channel operation."""
    configuration, document = _load_resolved_document(document_path, config_path)
    channel_operation = next(
        (
            candidate
            for candidate in document.channel_operations
            if candidate.anchor_identifier == anchor_identifier
        ),
        None,
    )
    if channel_operation is None:
        raise CliError(f"Unknown channel operation: {anchor_identifier}")
    try:
        view = derive_operation_view(
            document, channel_operation.name, channel_operation.operation
        ).with_binding_example()
    except SchemaLookupError as exc:
        raise CliError(str(exc)) from exc

    example = payload if payload is not None else _example_text(view.default_example)
    if example is None:
        raise CliError("No example payload given and the payload schema has no example.")

    flow = PublishFlow(
        _build_publishers(configuration), ConsoleNotifier(), configuration.notifications
    )
    try:
        future = flow.publish(
            view,
            example,
            payload_type if payload_type is not None else view.default_example_type,
            headers if headers is not None else _example_text(view.headers_example),
            bindings if bindings is not None else _example_text(view.message_binding_example),
        )
        failed = future is None or future.exception() is not None
    finally:
        flow.shutdown()
    if failed:
        ctx.exit(1)


def _load_resolved_document(
    document_path: str, config_path: str | None
) -> tuple[Configuration, ResolvedDocument]:
    try:
        configuration = (
            load_configuration(config_path) if config_path else default_configuration()
        )
        resolver = ReferenceResolver(
            build_base_url(configuration.viewer.location_path, configuration.viewer.location_query)
        )
        document = DocumentMapper(resolver).to_resolved_document(load_raw_document(document_path))
    except (ConfigurationError, DocumentReadError, DocumentMappingError, OSError) as exc:
        raise CliError(str(exc)) from exc
    return configuration, document


def _build_publishers(configuration: Configuration) -> PublisherRegistry:
    registry = PublisherRegistry()
    if configuration.kafka is not None:
        registry.register("kafka", KafkaPublisher(configuration.kafka))
    return registry


def _example_text(example: Example | None) -> str | None:
    return example.text if example is not None else None


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
