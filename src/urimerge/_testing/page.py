"""Assert that rendered page content contains an expected text.

Whitespace is normalized on both sides and the comparison ignores case, so the assertion holds
however the page happens to wrap or indent the text.
"""
import os
import re
from typing import Optional, Union

import requests

OUTPUT_DIR_ENVVAR = "URIMERGE_OUTPUT_DIR"
"""Environment variable naming the directory where complete page responses are kept."""

PAGE_EXCERPT_LENGTH = 300
"""Number of characters of the actual page content shown in a failure message."""

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def _normalize_text(text: str) -> str:
    text = text.replace("\r", " ").replace("\n", " ")
    return _WHITESPACE_RUN.sub(" ", text).strip()


def _output_dir() -> Optional[str]:
    return os.environ.get(OUTPUT_DIR_ENVVAR) or None


class PageContains:
    """Constraint matching page content that contains ``expected``.

    Args:
        expected:
            The text the page must contain.
        uri:
            The URI of the page, reported in failure messages.

    Examples:
        >>> PageContains("text", "/index.html").evaluate("a long text string")
        >>> PageContains("text", "/index.html").evaluate("other string")
        Traceback (most recent call last):
        ...
        AssertionError: Failed asserting that on page /index.html
        --> other string
        --> contains "text".
    """

    def __init__(self, expected: str, uri: str = "") -> None:
        self.expected = _normalize_text(expected)
        self.uri = uri

    def __str__(self) -> str:
        return f'contains "{self.expected}"'

    def matches(self, content: str) -> bool:
        return self.expected.casefold() in _normalize_text(content).casefold()

    def failure_description(self, content: str) -> str:
        message = self._uri_message("on page")
        message += "\n--> "
        message += content[:PAGE_EXCERPT_LENGTH]
        output_dir = _output_dir()
        if len(content) > PAGE_EXCERPT_LENGTH and output_dir is not None:
            message += f"\n[Content too long to display. See complete response in '{output_dir}' directory]"

        return message + "\n--> " + str(self)

    def evaluate(self, content: Union[str, requests.Response]) -> None:
        """Raise ``AssertionError`` unless ``content`` contains the expected text.

        ``content`` may be a :class:`requests.Response`, in which case its decoded body is checked,
        and its URL is reported if the constraint was not given one.
        """
        if isinstance(content, requests.Response):
            constraint = self if self.uri else PageContains(self.expected, content.url)
            constraint.evaluate(content.text)
            return

        if not self.matches(content):
            raise AssertionError(f"Failed asserting that {self.failure_description(content)}.")

    def _uri_message(self, on_page: str = "") -> str:
        if not self.uri:
            return ""
        return f"{on_page} {self.uri}"


def assert_page_contains(content: Union[str, requests.Response], expected: str, uri: str = "") -> None:
    """Assert that ``content`` contains ``expected``, ignoring case and whitespace layout."""
    __tracebackhide__ = True
    PageContains(expected, uri).evaluate(content)
