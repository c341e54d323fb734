from ._components import UriComponents, parse_url
from ._format import components_to_string


class MissingAuthorityError(ValueError):
    """Raised when a URI lacks the scheme or host required to build its root."""


def retrieve_uri(url: str) -> str:
    """Retrieve the ``/path?query#fragment`` part of a URL."""
    url_parts = parse_url(url)
    return components_to_string(
        UriComponents(
            path=url_parts.get("path", ""),
            query=url_parts.get("query", ""),
            fragment=url_parts.get("fragment", ""),
        )
    )


def retrieve_host(url: str) -> str:
    """Retrieve the ``scheme://host[:port]`` part of a URL.

    Raises:
        MissingAuthorityError: if ``url`` has no scheme or no host.
    """
    url_parts = parse_url(url)
    if "host" not in url_parts or "scheme" not in url_parts:
        raise MissingAuthorityError(f"Wrong URL passed, host and scheme not set: {url}")

    host = f"{url_parts['scheme']}://{url_parts['host']}"
    if "port" in url_parts:
        host += f":{url_parts['port']}"
    return host


def append_path(url: str, path: str) -> str:
    """Append ``path`` to ``url``, dropping the query and fragment of ``url``.

    Exactly one ``/`` separates the two, unless ``path`` is empty or a fragment (``#...``), in which
    case it is appended as is.
    """
    cut_url = parse_url(url)
    cut_url.pop("query", None)
    cut_url.pop("fragment", None)
    base = components_to_string(cut_url)

    if path == "" or path.startswith("#"):
        return base + path

    return base.rstrip("/") + "/" + path.lstrip("/")
