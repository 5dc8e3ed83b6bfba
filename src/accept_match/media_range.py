import logging

from .models import MediaRange

logger = logging.getLogger(__name__)


class MalformedMediaRange(ValueError):
    def __init__(self, media_range: str) -> None:
        super().__init__(f"Malformed media-range: {media_range}")
        self.media_range = media_range


def parse_media_type(media_type: str) -> MediaRange:
    """Split a media type into type, subtype, parameters and generic subtype.

    "application/xhtml+xml;q=0.5" -> ("application", "xhtml+xml", {"q": "0.5"}, "xml")
    """
    full_type, *param_parts = media_type.split(";")

    params: dict[str, str] = {}
    for param in param_parts:
        if "=" in param:
            key, value, *_ = param.split("=")
            params[key.strip()] = value.strip()

    full_type = full_type.strip()
    # Java URLConnection sends a single "*"
    if full_type == "*":
        full_type = "*/*"

    # anything after a second "/" is dropped
    type_, subtype, *_ = *full_type.split("/"), ""
    type_, subtype = type_.strip(), subtype.strip()
    if not subtype:
        raise MalformedMediaRange(media_type)

    # https://www.rfc-editor.org/rfc/rfc6838#section-4.2.8
    _, plus, suffix = subtype.partition("+")
    generic_subtype = suffix if plus else subtype

    return MediaRange(type_, subtype, params, generic_subtype)


def _is_valid_quality(value: str | None) -> bool:
    if not value:
        return False
    try:
        return 0.0 <= float(value) <= 1.0
    except ValueError:
        return False


def parse_and_normalize_media_range(media_range: str) -> MediaRange:
    """Like `parse_media_type`, but guarantees a valid "q" parameter (defaults to "1")."""
    parsed = parse_media_type(media_range)
    q = parsed.params.get("q")
    if _is_valid_quality(q):
        return parsed

    if q is not None:
        logger.debug("Replacing invalid quality %r in %r", q, media_range)
    return MediaRange(
        parsed.type,
        parsed.subtype,
        {**parsed.params, "q": "1"},
        parsed.generic_subtype,
    )


def parse_ranges(header: str) -> list[MediaRange]:
    return [parse_and_normalize_media_range(r) for r in header.split(",")]
