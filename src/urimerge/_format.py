from ._components import UriComponents


def components_to_string(components: UriComponents) -> str:
    """Reassemble a URI string from its components.

    The components are concatenated as stored: no percent-encoding, case normalization or
    dot-segment removal is performed. Empty components are omitted along with their delimiters,
    except that a ``file`` scheme always gets the ``//`` authority marker.

    Args:
        components:
            The components, as returned by :func:`urimerge.parse_url`.

    Returns:
        The URI string.

    Examples:
        >>> urimerge.components_to_string({"scheme": "file", "path": "/tmp/x"})
        'file:///tmp/x'
        >>> urimerge.components_to_string({"host": "example.com", "path": "a"})
        '//example.com/a'
    """
    uri = ""
    scheme = components.get("scheme", "")
    host = components.get("host", "")
    path = components.get("path", "")

    if scheme:
        uri += f"{scheme}:"

    if host or scheme == "file":
        uri += f"//{host}"
        if components.get("port") is not None:
            uri += f":{components['port']}"

    # an authority must be followed by an absolute path
    if host and path and not path.startswith("/"):
        path = "/" + path

    uri += path

    if components.get("query"):
        uri += f"?{components['query']}"

    if components.get("fragment"):
        uri += f"#{components['fragment']}"

    return uri
