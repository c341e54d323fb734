"""Assertion helpers for tests of code that renders pages."""

from .page import OUTPUT_DIR_ENVVAR, PageContains, assert_page_contains

__all__ = [
    "OUTPUT_DIR_ENVVAR",
    "PageContains",
    "assert_page_contains",
]
