"""Merge a (possibly relative) URI reference onto a base URI.

Each component level of the reference (authority, path, query, fragment) overrides the base and
resets every component more specific than itself. No dot-segment removal is performed.
"""
import logging
import posixpath

from ._components import InvalidUriError, UriComponents, parse_url
from ._format import components_to_string

api_logger = logging.getLogger("urimerge")
api_logger.setLevel(logging.INFO)
api_logger.addHandler(logging.StreamHandler())


def _parse_reference(base_uri: str, uri: str) -> UriComponents:
    try:
        return parse_url(uri)
    except InvalidUriError:
        api_logger.debug(f"Unable to parse {uri!r} on its own, retrying appended to {base_uri!r}")

    try:
        return parse_url(base_uri + uri)
    except InvalidUriError:
        raise InvalidUriError(uri) from None


def _resolve_path(base_path: str, path: str) -> str:
    """Resolve a reference path against the base path."""
    if path.startswith("/"):
        return path
    if not base_path:
        return "/" + path
    if base_path.endswith("/"):
        # the base is a directory, relative paths are below it
        return base_path + path
    # replace the last segment of the base
    return posixpath.dirname(base_path).rstrip("/") + "/" + path


def merge_urls(base_uri: str, uri: str) -> str:
    """Merge ``uri`` onto ``base_uri``.

    If ``uri`` is absolute (has both a scheme and a host) it is returned unchanged. Otherwise the
    components present in ``uri`` replace those of ``base_uri``:

        * a host replaces the base host (the base port and userinfo are kept), and clears the path,
          query and fragment;
        * an absolute path replaces the base path, a relative path replaces the last segment of
          the base path (or is appended if the base path ends with ``/``). Either clears the query
          and fragment. An empty path keeps the base path but still clears query and fragment;
        * a query replaces the base query and clears the fragment;
        * a fragment replaces the base fragment.

    Args:
        base_uri:
            The base URI.
        uri:
            The URI reference to merge.

    Returns:
        The merged URI.

    Raises:
        InvalidUriError: if either URI can not be parsed.

    Examples:
        >>> urimerge.merge_urls("http://example.com/a/b", "c")
        'http://example.com/a/c'
        >>> urimerge.merge_urls("http://example.com/a?x=1", "?y=2")
        'http://example.com/a?y=2'
    """
    base = parse_url(base_uri)
    parts = _parse_reference(base_uri, uri)

    if "host" in parts and "scheme" in parts:
        api_logger.debug(f"{uri!r} is absolute, not merging")
        return uri

    merged = base.copy()

    if "host" in parts:
        # only the host is taken from the reference, port and userinfo stay those of the base
        merged["host"] = parts["host"]
        merged.pop("path", None)
        merged.pop("query", None)
        merged.pop("fragment", None)

    if "path" in parts:
        if parts["path"]:
            merged["path"] = _resolve_path(merged.get("path", ""), parts["path"])
        merged.pop("query", None)
        merged.pop("fragment", None)

    if "query" in parts:
        merged["query"] = parts["query"]
        merged.pop("fragment", None)

    if "fragment" in parts:
        merged["fragment"] = parts["fragment"]

    return components_to_string(merged)
