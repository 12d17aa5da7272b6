# SPDX-License-Identifier: MIT
"""Parse API versions and show their components."""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from kube_version import ApiVersion, KubeVersionError, parse_api_version

from ..main import Context, echo_info, echo_parse_error, pass_context


def api_version_to_dict(value: str, api_version: ApiVersion) -> dict[str, Any]:
    """Convert a parsed API version to a JSON-serializable dictionary."""
    level = api_version.version.level
    return {
        "input": value,
        "group": api_version.group,
        "version": str(api_version.version),
        "major": api_version.version.major,
        "level": (
            None
            if level is None
            else {"stability": level.stability.identifier, "number": level.number}
        ),
    }


def _format_text(data: dict[str, Any]) -> str:
    level = data["level"]
    lines = [
        data["input"],
        f"  group:   {data['group'] if data['group'] is not None else '(core)'}",
        f"  version: {data['version']}",
        f"  major:   {data['major']}",
        f"  level:   {'-' if level is None else level['stability'] + str(level['number'])}",
    ]
    return "\n".join(lines)


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output the parsed versions as JSON.",
)
@click.option(
    "--validate-group/--no-validate-group",
    default=None,
    help="Check that API groups are DNS subdomains.",
)
@pass_context
def parse(
    ctx: Context,
    values: tuple[str, ...],
    as_json: bool,
    validate_group: Optional[bool],
) -> None:
    """Parse API versions and print their components.

    \b
    Examples:
        kube-version parse v1
        kube-version parse --json apps/v1 batch/v2alpha1
    """
    config = ctx.load_config()
    if validate_group is None:
        validate_group = config.validate_group

    results: list[dict[str, Any]] = []
    failed = False

    for value in values:
        try:
            api_version = parse_api_version(value, validate_group=validate_group)
        except KubeVersionError as e:
            echo_parse_error(ctx, value, e)
            failed = True
            continue
        results.append(api_version_to_dict(value, api_version))

    if as_json:
        echo_info(json.dumps(results, indent=2))
    else:
        for data in results:
            echo_info(_format_text(data))

    if failed:
        raise SystemExit(1)
