"""Uncompress HTTP response bodies from their ``Content-Encoding`` header.

Usage::

    from body_decoder import Response, decode

    response = Response.from_mapping({"Content-Encoding": "gzip"}, raw_body)
    body = decode(response)

Supported encodings: ``br``, ``gzip``, ``deflate`` (zlib-wrapped) and
``identity``. Failures raise a :class:`RunnerError` subclass.
"""

from typing import Any

from ._version import __version__
from .content_decoding import ContentDecoder, content_encoding
from .errors import (
    CouldNotUncompressResponse,
    InvalidCharset,
    InvalidDecoding,
    RunnerError,
    UnsupportedContentEncoding,
)
from .types import Encoding, Header, Response, Version

_default_decoder = ContentDecoder()


def decode(response: Any) -> bytes:
    """Return the uncompressed body of ``response``.

    ``response`` needs ``headers`` (``Header`` objects or ``(name, value)``
    pairs, in receipt order) and ``body`` bytes.

    Raises:
        UnsupportedContentEncoding: Unknown ``Content-Encoding`` value.
        CouldNotUncompressResponse: The codec rejected the body.
    """
    return _default_decoder.decode(response)


def decode_text(response: Response) -> str:
    """Return the uncompressed body of ``response`` as text in its charset."""
    return _default_decoder.decode_text(response)


__all__ = [
    "__version__",
    "decode",
    "decode_text",
    "content_encoding",
    "ContentDecoder",
    "Encoding",
    "Header",
    "Response",
    "Version",
    "RunnerError",
    "UnsupportedContentEncoding",
    "CouldNotUncompressResponse",
    "InvalidCharset",
    "InvalidDecoding",
]
