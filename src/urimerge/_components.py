"""URI components.

Splits a URI string into its components. Only components that are present in the string are
set, so callers can tell an absent query from an empty one.
"""
import urllib.parse

from typing_extensions import TypedDict


class InvalidUriError(ValueError):
    """Raised when a string can not be decomposed into URI components."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Invalid URI {uri}")
        self.uri = uri


class UriComponents(TypedDict, total=False):
    """The components of a parsed URI.

    A key is only present if the corresponding component was present in the parsed string.

    Args:
        scheme:
            URI scheme, e.g. ``https``, without the trailing ``:``.
        host:
            Host name, case preserved.
        port:
            Port number, 0-65535.
        user:
            User name from the userinfo subcomponent.
        password:
            Password from the userinfo subcomponent.
        path:
            Path, may be absolute (``/...``) or relative.
        query:
            Raw query string, without the leading ``?``.
        fragment:
            Raw fragment, without the leading ``#``.
    """

    scheme: str
    host: str
    port: int
    user: str
    password: str
    path: str
    query: str
    fragment: str


def _split_host(hostport: str) -> str:
    # a port delimiter can only follow the closing bracket of an IP literal
    colon = hostport.rfind(":")
    if colon > hostport.rfind("]"):
        return hostport[:colon]
    return hostport


_REMOVED_CHARACTERS = str.maketrans("", "", "\t\r\n")
_LEADING_CHARACTERS = "".join(chr(c) for c in range(0x21))


def _has_authority_marker(uri: str, scheme: str) -> bool:
    # look at the same text urlsplit splits, with tabs and newlines removed
    rest = uri.translate(_REMOVED_CHARACTERS).lstrip(_LEADING_CHARACTERS)
    if scheme:
        rest = rest[len(scheme) + 1 :]
    return rest.startswith("//")


def parse_url(uri: str) -> UriComponents:
    """Split a URI into its components.

    Args:
        uri:
            The URI to split. May be absolute, scheme-relative or relative.

    Returns:
        A :class:`UriComponents` dictionary holding the components present in ``uri``. The empty
        string yields ``{"path": ""}``.

    Raises:
        InvalidUriError: if ``uri`` is not syntactically decomposable, e.g. it has an invalid port,
        unbalanced brackets, or an empty authority on a scheme other than ``file``.

    Examples:
        >>> urimerge.parse_url("https://example.com:8080/a?x=1#top")
        {'scheme': 'https', 'host': 'example.com', 'port': 8080, 'path': '/a', 'query': 'x=1', 'fragment': 'top'}
    """
    try:
        split = urllib.parse.urlsplit(uri)
        port = split.port
    except ValueError as e:
        raise InvalidUriError(uri) from e

    components = UriComponents()
    if split.scheme:
        components["scheme"] = split.scheme

    if split.netloc:
        userinfo, at, hostport = split.netloc.rpartition("@")
        host = _split_host(hostport)
        if not host:
            raise InvalidUriError(uri)
        components["host"] = host
        if port is not None:
            components["port"] = port
        if at:
            user, colon, password = userinfo.partition(":")
            components["user"] = user
            if colon:
                components["password"] = password
    elif split.scheme != "file" and _has_authority_marker(uri, split.scheme):
        raise InvalidUriError(uri)

    if split.path or not uri:
        components["path"] = split.path

    before_fragment, hash_mark, _ = uri.partition("#")
    if "?" in before_fragment:
        components["query"] = split.query
    if hash_mark:
        components["fragment"] = split.fragment

    return components
