"""Shared pytest fixtures for the einsum-share-url test suite.

* No network access in any test.
* The package ships no decoder; tests reverse the pipeline with the
  standard library.
"""

from __future__ import annotations

import base64
import gzip
from collections.abc import Callable
from urllib.parse import unquote

import pytest


def _decode_query_value(value: str) -> bytes:
    return gzip.decompress(base64.b64decode(unquote(value), validate=True))


@pytest.fixture
def decode_query_value() -> Callable[[str], bytes]:
    """Percent-decode, base64-decode and gunzip a single ``e``/``s`` value."""
    return _decode_query_value
