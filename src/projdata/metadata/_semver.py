"""Semantic version checks for project metadata."""

import re
from typing import Final

from projdata.exceptions import ValidationError

# Reference pattern from semver.org, restricted to ASCII digits.
SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)

EXAMPLE_VERSION: Final[str] = "1.0.0"
INVALID_VERSION_ID: Final[str] = "invalid-version"


def is_valid_version(version: str) -> bool:
    """Return True if the version matches MAJOR.MINOR.PATCH[-pre][+build]."""
    return SEMVER_PATTERN.fullmatch(version) is not None


def validate_version(version: str) -> None:
    """Validate a version string against the semver grammar.

    Args:
        version: The version string to check.

    Raises:
        ValidationError: If the version does not match. The message names the
            offending value and the solution suggests a valid example.
    """
    if is_valid_version(version):
        return

    msg = (
        f"The project version '{version}' is invalid; "
        f"expected MAJOR.MINOR.PATCH (example: '{EXAMPLE_VERSION}')"
    )
    raise ValidationError(
        msg,
        field="version",
        value=version,
        problem_id=INVALID_VERSION_ID,
        solution=f"Provide a valid version (example: 'version = \"{EXAMPLE_VERSION}\"')",
    )
