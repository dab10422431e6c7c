"""URL construction for the DigitalOcean v2 API.

Resource URLs are built from the API endpoint, a resource name and an
ordered list of path parts. Textual parts are lower-cased and
percent-encoded; any other part (e.g. a numeric droplet ID) is inserted
as-is.
"""

from typing import Any
from urllib.parse import quote

DEFAULT_ENDPOINT = "https://api.digitalocean.com/v2/"


def normalize_part(part: Any) -> str:
    """Normalize a single path part for insertion into a URL.

    Args:
        part: Resource identifier or sub-resource name.

    Returns:
        Lower-cased, percent-encoded string for textual parts, ``str(part)``
        for everything else.
    """
    if isinstance(part, str):
        return quote(part.lower(), safe="")
    return str(part)


def build_url(endpoint: str, resource: str, *parts: Any) -> str:
    """Build a fully qualified resource URL.

    The resource name is appended verbatim so nested pseudo-resources such as
    ``account/keys`` keep their slash. Parts are normalized and joined with
    ``/``. Without parts the URL ends in a trailing slash:

        build_url(DEFAULT_ENDPOINT, "domains")
            -> "https://api.digitalocean.com/v2/domains/"
        build_url(DEFAULT_ENDPOINT, "domains", "Example.COM", "records")
            -> "https://api.digitalocean.com/v2/domains/example.com/records"

    Args:
        endpoint: API base endpoint ending in ``/``.
        resource: Resource collection name.
        *parts: Path parts appended after the resource.

    Returns:
        The resource URL.
    """
    nested = "/".join(normalize_part(part) for part in parts)
    return f"{endpoint}{resource}/{nested}"
