# SPDX-License-Identifier: MIT
"""Optional validation of API group names.

Kubernetes API groups are DNS subdomains (RFC 1123): at most 253 characters
made of dot-separated DNS labels, for example ``certificates.k8s.io``.
Parsing never calls this on its own; it is opt-in through
``parse_api_version(..., validate_group=True)``.
"""

from __future__ import annotations

import re

from .errors import InvalidGroupError

MAX_GROUP_LENGTH = 253
MAX_LABEL_LENGTH = 63

DNS_SUBDOMAIN_PATTERN = re.compile(
    r"[a-z0-9](?:[-a-z0-9]*[a-z0-9])?(?:\.[a-z0-9](?:[-a-z0-9]*[a-z0-9])?)*"
)


def validate_group(group: str) -> str:
    """Validate that ``group`` is a DNS subdomain.

    Args:
        group: The API group to validate

    Returns:
        The group, unchanged

    Raises:
        InvalidGroupError: If the group is not a valid DNS subdomain

    Examples:
        >>> validate_group("apps")
        'apps'
        >>> validate_group("Apps")
        Traceback (most recent call last):
        ...
        kube_version.errors.InvalidGroupError: invalid API group 'Apps': ...
    """
    if not group:
        raise InvalidGroupError(group, "group cannot be empty")

    if len(group) > MAX_GROUP_LENGTH:
        raise InvalidGroupError(
            group, f"must be no more than {MAX_GROUP_LENGTH} characters, got {len(group)}"
        )

    if not DNS_SUBDOMAIN_PATTERN.fullmatch(group):
        raise InvalidGroupError(
            group,
            "must consist of lowercase alphanumerics, '-' and '.', "
            "and start and end with an alphanumeric character",
        )

    for label in group.split("."):
        if len(label) > MAX_LABEL_LENGTH:
            raise InvalidGroupError(
                group, f"label {label!r} is longer than {MAX_LABEL_LENGTH} characters"
            )

    return group


def is_valid_group(group: str) -> bool:
    """Check if a string is a valid API group name."""
    if not isinstance(group, str):
        return False
    try:
        validate_group(group)
    except InvalidGroupError:
        return False
    return True
