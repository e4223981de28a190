"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from test_launch_resolver.argument_lookup import DocumentArgumentLookup, ResolutionError
from test_launch_resolver.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from test_launch_resolver.launch_overrides import OverrideLoadError, load_override_config
from test_launch_resolver.launch_resolution import LaunchDescriptorResolver
from test_launch_resolver.run_requests import RequestValidationError, read_run_request
from test_launch_resolver.runners import ArtifactLookupError, BundledTestRunner


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="test-launch-resolver")
@click.option("--verbose", is_flag=True, default=False, help="Log resolution details to stderr.")
def cli(verbose: bool) -> None:
    """Resolve Java test run requests into debugger launch configurations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML settings file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON settings file",
)
@click.option(
    "--request",
    "request_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON run request document",
)
@click.option(
    "--override",
    "override_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON launch override document",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the launch configuration JSON here instead of stdout",
)
def resolve(
    config_path: str, request_path: str, override_path: str | None, output_path: str | None
) -> None:
    """Resolve one run request into a launch configuration."""
    try:
        configuration = load_configuration(config_path)
        request = read_run_request(request_path)
        override = load_override_config(override_path) if override_path else None
        resolver = LaunchDescriptorResolver(
            DocumentArgumentLookup.from_path(configuration.arguments.document_path),
            runner=BundledTestRunner(configuration.runner, test_names=[request.full_name]),
        )
        descriptor = resolver.resolve(request, override)
    except (
        ConfigurationError,
        RequestValidationError,
        OverrideLoadError,
        ResolutionError,
        ArtifactLookupError,
    ) as exc:
        raise CliError(str(exc)) from exc

    # Pass-through values may hold YAML scalars JSON lacks, such as dates.
    rendered = json.dumps(descriptor.to_mapping(), indent=2, default=str)
    if output_path is None:
        click.echo(rendered)
        return
    try:
        Path(output_path).write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
