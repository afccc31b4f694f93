# =============================================================================
# Body Decoder -- Content Decoding
# =============================================================================
#
# Uncompresses a response body according to its Content-Encoding header:
#
#   br        -> brotli (single bounded read, see decompress_brotli_single_chunk)
#   gzip      -> gzip, read to end of stream
#   deflate   -> zlib-wrapped deflate (RFC 1950), read to end of stream
#   identity  -> body returned as-is
#   (absent)  -> body returned as-is
# =============================================================================

from __future__ import annotations

import asyncio
import codecs
import zlib
from collections.abc import Iterable
from typing import Any

import brotli

from .constants import (
    ALGORITHM_BROTLI,
    ALGORITHM_GZIP,
    ALGORITHM_ZLIB,
    BROTLI_READ_CHUNK_SIZE,
    HEADER_CONTENT_ENCODING,
)
from .errors import (
    CouldNotUncompressResponse,
    InvalidCharset,
    InvalidDecoding,
    UnsupportedContentEncoding,
)
from .types import Encoding

_ENCODINGS = {encoding.value: encoding for encoding in Encoding}

_GZIP_WBITS = zlib.MAX_WBITS | 16
_ZLIB_WBITS = zlib.MAX_WBITS


def _header_pairs(headers: Iterable[Any]) -> Iterable[tuple[str, str]]:
    for header in headers:
        if isinstance(header, tuple):
            yield header
        else:
            yield header.name, header.value


def content_encoding(headers: Iterable[Any]) -> Encoding | None:
    """Classify the first ``Content-Encoding`` header.

    Header names match case-insensitively, values case-sensitively.
    Later ``Content-Encoding`` headers are ignored.

    Returns:
        The recognized encoding, or ``None`` when the header is absent.

    Raises:
        UnsupportedContentEncoding: The value is not one of
            ``br``, ``gzip``, ``deflate`` or ``identity``.
    """
    for name, value in _header_pairs(headers):
        if name.lower() == HEADER_CONTENT_ENCODING:
            try:
                return _ENCODINGS[value]
            except KeyError:
                raise UnsupportedContentEncoding(value) from None
    return None


def decompress_brotli_single_chunk(
    data: bytes, chunk_size: int = BROTLI_READ_CHUNK_SIZE
) -> bytes:
    """Decode at most ``chunk_size`` bytes from a brotli stream.

    Only one bounded read is taken: input is fed in slices and decoding
    stops as soon as ``chunk_size`` bytes are out or the stream ends, so
    corruption or trailing bytes past that point are never looked at.
    A stream that is cut short or broken still yields whatever it decoded,
    and fails only when nothing could be decoded from it.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    decompressor = brotli.Decompressor()
    out = bytearray()
    pos = 0
    step = BROTLI_READ_CHUNK_SIZE
    while pos < len(data) and len(out) < chunk_size and not decompressor.is_finished():
        piece = data[pos : pos + step]
        try:
            out += decompressor.process(piece)
        except brotli.error as exc:
            if out and step == 1:
                break
            if step == 1:
                raise CouldNotUncompressResponse(ALGORITHM_BROTLI) from exc
            # The failing slice's output is lost with the exception: replay the
            # accepted prefix, then walk the slice one byte at a time.
            decompressor = brotli.Decompressor()
            out = bytearray(decompressor.process(data[:pos]))
            step = 1
            continue
        pos += len(piece)

    if not out and not decompressor.is_finished():
        raise CouldNotUncompressResponse(ALGORITHM_BROTLI)
    return bytes(out[:chunk_size])


def _inflate(data: bytes, wbits: int, algorithm: str) -> bytes:
    decompressor = zlib.decompressobj(wbits)
    try:
        out = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as exc:
        raise CouldNotUncompressResponse(algorithm) from exc
    if not decompressor.eof:
        # Truncated: the stream ended before its trailer.
        raise CouldNotUncompressResponse(algorithm)
    return out


def decompress_gzip(data: bytes) -> bytes:
    """Decode a complete gzip member."""
    return _inflate(data, _GZIP_WBITS, ALGORITHM_GZIP)


def decompress_zlib(data: bytes) -> bytes:
    """Decode a complete zlib stream (``Content-Encoding: deflate``)."""
    return _inflate(data, _ZLIB_WBITS, ALGORITHM_ZLIB)


class ContentDecoder:
    """Uncompress response bodies using their ``Content-Encoding`` header.

    Holds no per-call state, so one instance can be shared between
    threads.

    Args:
        brotli_chunk_size: Size of the single brotli read (default 4096).
    """

    def __init__(self, brotli_chunk_size: int = BROTLI_READ_CHUNK_SIZE) -> None:
        if brotli_chunk_size < 1:
            raise ValueError(
                f"brotli_chunk_size must be >= 1, got {brotli_chunk_size}"
            )
        self.brotli_chunk_size = brotli_chunk_size

    def content_encoding(self, response: Any) -> Encoding | None:
        return content_encoding(response.headers)

    def decode(self, response: Any) -> bytes:
        """Return the uncompressed body of ``response``.

        Raises:
            UnsupportedContentEncoding: Unknown ``Content-Encoding`` value.
            CouldNotUncompressResponse: The codec rejected the body.
        """
        encoding = self.content_encoding(response)
        body = response.body
        match encoding:
            case None | Encoding.IDENTITY:
                return bytes(body)
            case Encoding.GZIP:
                return decompress_gzip(body)
            case Encoding.DEFLATE:
                return decompress_zlib(body)
            case Encoding.BROTLI:
                return decompress_brotli_single_chunk(body, self.brotli_chunk_size)

    async def decode_async(self, response: Any) -> bytes:
        """Decode in the default executor so the event loop is not blocked."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.decode, response)

    def decode_text(self, response: Any) -> str:
        """Decode the body, then read it as text in the response charset.

        Raises:
            InvalidCharset: No codec exists for the charset.
            InvalidDecoding: The bytes are not valid in that charset.
        """
        charset = response.charset
        try:
            codecs.lookup(charset)
        except LookupError:
            raise InvalidCharset(charset) from None
        data = self.decode(response)
        try:
            return data.decode(charset)
        except UnicodeDecodeError as exc:
            raise InvalidDecoding(charset) from exc
