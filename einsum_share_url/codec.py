import base64
import zlib
from typing import Iterable
from urllib.parse import quote

from .exceptions import CompressionError


BASE_URL = "https://seriousseal.github.io/tensor_expressions_webapp/"

COMPRESSION_LEVEL = 9
MEM_LEVEL = 8
# gzip framing instead of a raw zlib stream
GZIP_WBITS = zlib.MAX_WBITS | 16
CHUNK_SIZE = 32768

# characters kept verbatim besides ASCII letters and digits
_URL_SAFE = "-_.~"


def compress_data(data: bytes) -> bytes:
    """bytes -> gzip stream at maximum compression.

    The gzip header is written without a timestamp, so identical input
    always produces identical output.
    """
    try:
        compressor = zlib.compressobj(
            COMPRESSION_LEVEL,
            zlib.DEFLATED,
            GZIP_WBITS,
            MEM_LEVEL,
            zlib.Z_DEFAULT_STRATEGY,
        )
    except (zlib.error, ValueError) as exc:
        raise CompressionError(f"deflate init failed: {exc}") from exc

    chunks: list[bytes] = []
    try:
        view = memoryview(data)
        for start in range(0, len(view), CHUNK_SIZE):
            chunks.append(compressor.compress(view[start : start + CHUNK_SIZE]))
        chunks.append(compressor.flush(zlib.Z_FINISH))
    except zlib.error as exc:
        raise CompressionError(f"compression failed: {exc}") from exc
    finally:
        del compressor

    return b"".join(chunks)


def encode_base64(data: bytes) -> str:
    """bytes -> standard base64 string with `=` padding."""
    return base64.b64encode(data).decode("ascii")


def url_encode(text: str) -> str:
    """Percent-encode everything except ASCII alphanumerics and `-_.~`."""
    return quote(text, safe=_URL_SAFE)


def encode_payload(text: str) -> str:
    """Serialized value -> gzip -> base64 -> percent-encoded query value."""
    compressed = compress_data(text.encode("utf-8"))
    return url_encode(encode_base64(compressed))


def format_index_sizes(sizes: Iterable[int]) -> str:
    """Render index sizes as the comma-separated list the URL builder wraps."""
    return ", ".join(str(size) for size in sizes)


def create_shareable_url(expression: str, sizes: str, *, base_url: str = BASE_URL) -> str:
    """Build a tensor_expressions_webapp link for an expression and its index sizes.

    ``expression`` is wrapped in double quotes and ``sizes`` in square brackets
    to form JSON values; neither is escaped or validated.
    """
    json_expr = '"' + expression + '"'
    json_sizes = "[" + sizes + "]"

    encoded_expr = encode_payload(json_expr)
    encoded_sizes = encode_payload(json_sizes)

    return f"{base_url}?e={encoded_expr}&s={encoded_sizes}"
