# personhub/api/negotiation.py
import enum

from fastapi import Request


class MediaType(str, enum.Enum):
    JSON = "application/json"
    HTML = "text/html"


def declared_content_type(request: Request) -> str | None:
    """Return the bare media type of the ``Content-Type`` header, if any."""

    raw = request.headers.get("content-type")
    if not raw:
        return None
    media_type = raw.split(";", 1)[0].strip().lower()
    return media_type or None


def negotiate(request: Request) -> MediaType:
    """Pick the representation for ``request`` from its declared content type.

    Only ``application/json`` selects JSON; anything else, including a missing
    header, is answered with HTML.
    """

    if declared_content_type(request) == MediaType.JSON.value:
        return MediaType.JSON
    return MediaType.HTML
