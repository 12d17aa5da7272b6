# SPDX-License-Identifier: MIT
"""Sort resource versions."""

from __future__ import annotations

from typing import Optional

import click

from kube_version import KubeVersionError, parse_version, priority_key, version_key

from ..main import Context, echo_info, echo_parse_error, pass_context


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--priority/--natural",
    default=None,
    help="Sort by Kubernetes version priority (preferred first) or oldest to newest.",
)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Reverse the sort order.",
)
@pass_context
def sort(
    ctx: Context,
    values: tuple[str, ...],
    priority: Optional[bool],
    reverse: bool,
) -> None:
    """Sort resource versions and print one per line.

    \b
    Examples:
        kube-version sort v2 v1beta1 v1
        kube-version sort --priority v1alpha1 v1 v2beta1
    """
    config = ctx.load_config()
    if priority is None:
        priority = config.priority_order

    parsed = []
    for value in values:
        try:
            parsed.append(parse_version(value))
        except KubeVersionError as e:
            echo_parse_error(ctx, value, e)
            raise SystemExit(1)

    key = priority_key if priority else version_key
    for version in sorted(parsed, key=key, reverse=reverse):
        echo_info(str(version))
