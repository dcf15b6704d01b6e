"""Media Types — guesses a response content type from a configuration file name.

Invariants:
    - Suffix match is case-sensitive ("report.PDF" is not ".pdf")
    - Only the trailing suffix matters ("a.b.json" → application/json)
    - Unknown suffixes fall back to text/plain
"""

DEFAULT_MEDIA_TYPE = "text/plain"

_SUFFIX_MEDIA_TYPES: tuple[tuple[str, str], ...] = (
    (".xml", "application/xml"),
    (".wadl", "application/wadl+xml"),
    (".wsdl", "application/wsdl+xml"),
    (".xsd", "application/xsd+xml"),
    (".json", "application/json"),
    (".html", "application/html"),
    (".htm", "application/html"),
    (".properties", "text/x-java-properties"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".png", "image/png"),
    (".gif", "image/gif"),
    (".svg", "image/svg+xml"),
)


def guess_media_type(file_name: str) -> str:
    """Return the media type for file_name, first matching suffix wins."""
    for suffix, media_type in _SUFFIX_MEDIA_TYPES:
        if file_name.endswith(suffix):
            return media_type
    return DEFAULT_MEDIA_TYPE
