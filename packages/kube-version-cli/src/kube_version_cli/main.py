# SPDX-License-Identifier: MIT
"""CLI entry point for the kube-version command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from kube_version import KubeVersionError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_parse_error(ctx: Context, value: str, error: KubeVersionError) -> None:
    """Report a parse failure, with the wrapped causes when verbose."""
    echo_error(f"{value!r}: {error}")
    if not ctx.verbose:
        return
    cause = getattr(error, "source", None)
    depth = 1
    while isinstance(cause, KubeVersionError):
        click.secho(f"{'  ' * depth}caused by {type(cause).__name__}: {cause}", err=True)
        cause = getattr(cause, "source", None)
        depth += 1


@click.group()
@click.version_option(package_name="kube-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look for pyproject.toml starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Kubernetes API version tool.

    Parse, sort, and check Kubernetes API versions such as v1, v2beta1 or
    certificates.k8s.io/v1alpha1.

    \b
    Examples:
        kube-version parse apps/v1 v2beta1
        kube-version sort --priority v1beta1 v1 v2alpha1
        kube-version check --strict v1 v1beta1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, sort, check

cli.add_command(parse.parse)
cli.add_command(sort.sort)
cli.add_command(check.check)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
