"""Version token value object.

A version token is the (resource, version) pair a client asks for through a
vendor media type. The parser accepts the full media type as it appears in an
Accept header as well as the bare short form:

    application/vnd.flipfoundry.greeting.v1+json   ->  greeting v1
    vnd.flipfoundry.greeting.v1                    ->  greeting v1
    greeting.v1                                    ->  greeting v1

Anything that does not reduce to <resource>.v<positive integer> is malformed
and parses to None, as is a full media type outside the application/ tree.
Versions are capped at nine digits. Malformed tokens are expected input
(browsers send text/html, tools send */*), so parsing never raises.

Usage:
    from src.domain.value_objects import VersionToken, parse_version_token

    token = parse_version_token("application/vnd.flipfoundry.greeting.v2+json")
    token.media_type(vendor="flipfoundry")
    # 'application/vnd.flipfoundry.greeting.v2+json'
"""

import re
from dataclasses import dataclass

RESOURCE_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")
_TOKEN_PATTERN = re.compile(r"^(?P<resource>[a-z0-9][a-z0-9_-]*)\.v(?P<version>[1-9][0-9]{0,8})$")
_VENDOR_TREE = "vnd."
_TOP_LEVEL_TYPE = "application"


def validate_resource_name(resource: str) -> None:
    """Validate a resource name.

    Args:
        resource: Candidate resource name.

    Raises:
        ValueError: If the name is empty or contains characters outside
            lower-case letters, digits, "_" and "-".
    """
    if not RESOURCE_NAME_PATTERN.match(resource):
        raise ValueError(f"invalid resource name: {resource!r}")


def validate_version_number(version: int) -> None:
    """Validate a version number.

    Args:
        version: Candidate version number.

    Raises:
        ValueError: If version is not a positive integer.
    """
    # bool is an int subclass; True is not a version
    if isinstance(version, bool) or not isinstance(version, int) or version <= 0:
        raise ValueError(f"version must be a positive integer, got {version!r}")


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionToken:
    """A (resource, version) pair.

    Also used as the reference type for a descriptor's successor.

    Attributes:
        resource: Resource name (lower case).
        version: Positive version number.

    Raises:
        ValueError: If resource or version is invalid.
    """

    resource: str
    version: int

    def __post_init__(self) -> None:
        """Validate token fields.

        Raises:
            ValueError: If resource or version is invalid.
        """
        validate_resource_name(self.resource)
        validate_version_number(self.version)

    def media_type(self, vendor: str, suffix: str | None = "json") -> str:
        """Render the canonical vendor media type for this token.

        Args:
            vendor: Vendor segment (e.g., "flipfoundry").
            suffix: Structured syntax suffix, or None for no suffix.

        Returns:
            str: e.g. "application/vnd.flipfoundry.greeting.v1+json".
        """
        media_type = f"application/{_VENDOR_TREE}{vendor}.{self}"
        return f"{media_type}+{suffix}" if suffix else media_type

    def __str__(self) -> str:
        """Short form, e.g. "greeting.v1"."""
        return f"{self.resource}.v{self.version}"


def parse_version_token(raw: str, vendor: str | None = None) -> VersionToken | None:
    """Parse a media type or short token into a VersionToken.

    Args:
        raw: Media range from an Accept header, or a short "greeting.v1" token.
        vendor: When given, vendor media types naming another vendor are
            rejected. Short tokens carry no vendor and are always accepted.

    Returns:
        VersionToken | None: Parsed token, or None if the input is malformed.

    Examples:
        >>> parse_version_token("application/vnd.flipfoundry.departing.v1+json")
        VersionToken(resource='departing', version=1)
        >>> parse_version_token("application/json") is None
        True
        >>> parse_version_token("vnd.acme.greeting.v1", vendor="flipfoundry") is None
        True
    """
    value = raw.split(";", 1)[0].strip().lower()
    value = value.split("+", 1)[0]
    if "/" in value:
        media_type, _, value = value.partition("/")
        if media_type != _TOP_LEVEL_TYPE:
            return None

    if value.startswith(_VENDOR_TREE):
        token_vendor, _, value = value[len(_VENDOR_TREE) :].partition(".")
        if not value:
            return None
        if vendor is not None and token_vendor != vendor.lower():
            return None

    match = _TOKEN_PATTERN.match(value)
    if match is None:
        return None
    return VersionToken(
        resource=match.group("resource"),
        version=int(match.group("version")),
    )
