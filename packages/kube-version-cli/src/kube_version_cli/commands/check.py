# SPDX-License-Identifier: MIT
"""Validate API versions."""

from __future__ import annotations

from typing import Optional

import click

from kube_version import KubeVersionError, parse_api_version

from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_parse_error,
    echo_success,
    pass_context,
)


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Treat alpha and beta versions as errors.",
)
@click.option(
    "--validate-group/--no-validate-group",
    default=None,
    help="Check that API groups are DNS subdomains.",
)
@pass_context
def check(
    ctx: Context,
    values: tuple[str, ...],
    strict: Optional[bool],
    validate_group: Optional[bool],
) -> None:
    """Check that every value is a valid API version.

    All values are checked and every failure is reported.

    \b
    Examples:
        kube-version check v1 apps/v1beta1
        kube-version check --strict --validate-group apps/v1
    """
    config = ctx.load_config()
    allow_prerelease = config.allow_prerelease if strict is None else not strict
    if validate_group is None:
        validate_group = config.validate_group

    errors = 0
    for value in values:
        try:
            api_version = parse_api_version(value, validate_group=validate_group)
        except KubeVersionError as e:
            echo_parse_error(ctx, value, e)
            errors += 1
            continue

        if not allow_prerelease and api_version.version.is_prerelease:
            echo_error(f"{value!r}: pre-release version {api_version.version} is not allowed")
            errors += 1
            continue

        if ctx.verbose:
            echo_info(f"{value}: ok")

    if errors:
        echo_error(f"\n{errors} of {len(values)} version(s) invalid")
        raise SystemExit(1)

    echo_success(f"All {len(values)} version(s) valid.")
