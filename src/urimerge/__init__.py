"""Merge, split and reassemble URIs.

The API resolves URI references against a base URI using a simplified form of the RFC 3986
reference resolution rules, and provides a number of helper functions including:

    * Split a URI into its components, and reassemble it
    * Merge a relative reference onto a base URI
    * Retrieve the ``scheme://host[:port]`` root or the ``/path?query#fragment`` part of a URI
    * Append a path to a URI

Dot segments (``.`` and ``..``) are not removed, and no percent-encoding or case normalization is
performed: merged URIs are the literal concatenation of their components.
"""

from importlib import metadata

from ._components import InvalidUriError, UriComponents, parse_url
from ._format import components_to_string
from ._merge import merge_urls
from ._util import MissingAuthorityError, append_path, retrieve_host, retrieve_uri

try:
    __version__ = metadata.version("urimerge")
except metadata.PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-unknown"

__all__ = [
    "InvalidUriError",
    "MissingAuthorityError",
    "UriComponents",
    "append_path",
    "components_to_string",
    "merge_urls",
    "parse_url",
    "retrieve_host",
    "retrieve_uri",
]
