"""Accept header parsing.

Splits a content-negotiation header into media ranges ordered by the client's
stated preference. Weights come from the "q" parameter (RFC 9110 section
12.4.2); a range with q=0 means "not acceptable" and is dropped, as is a range
whose weight does not parse. Ranges with equal weight keep the order the client
wrote them in, so the dispatcher's first-match rule is deterministic.

Usage:
    from src.domain.value_objects import parse_accept_header

    parse_accept_header(
        "application/vnd.flipfoundry.greeting.v1+json;q=0.5, "
        "application/vnd.flipfoundry.greeting.v2+json"
    )
    # ['application/vnd.flipfoundry.greeting.v2+json',
    #  'application/vnd.flipfoundry.greeting.v1+json']
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class MediaRange:
    """One media range from an Accept header.

    Attributes:
        media_type: Media range without parameters.
        quality: Weight in (0, 1].
    """

    media_type: str
    quality: float = 1.0


def parse_media_ranges(header: str | None) -> list[MediaRange]:
    """Parse an Accept header into weighted media ranges.

    Args:
        header: Raw header value (None or empty means no preference given).

    Returns:
        list[MediaRange]: Acceptable ranges, highest weight first, stable
            for equal weights.
    """
    if not header:
        return []

    ranges: list[MediaRange] = []
    for part in header.split(","):
        media_type, *params = (piece.strip() for piece in part.split(";"))
        if not media_type:
            continue

        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 0.0

        # Also rejects nan/inf
        if not 0.0 < quality <= 1.0:
            continue
        ranges.append(MediaRange(media_type=media_type, quality=quality))

    ranges.sort(key=lambda media_range: -media_range.quality)
    return ranges


def parse_accept_header(header: str | None) -> list[str]:
    """Parse an Accept header into media ranges in preference order.

    Args:
        header: Raw header value.

    Returns:
        list[str]: Media ranges, most preferred first.
    """
    return [media_range.media_type for media_range in parse_media_ranges(header)]
