"""Shared fixtures for body decoder tests."""

import pytest

from body_decoder import Header, Response

HELLO = b"Hello World!"

# Uncompressed meta-block without a final empty meta-block: a single read
# yields the payload, reading to end of stream would not.
HELLO_BROTLI = bytes(
    [
        0x21, 0x2C, 0x00, 0x04, 0x48, 0x65, 0x6C, 0x6C, 0x6F, 0x20, 0x57, 0x6F,
        0x72, 0x6C, 0x64, 0x21,
    ]
)

HELLO_GZIP = bytes(
    [
        0x1F, 0x8B, 0x08, 0x08, 0xA7, 0x52, 0x85, 0x5F, 0x00, 0x03, 0x64, 0x61,
        0x74, 0x61, 0x2E, 0x74, 0x78, 0x74, 0x00, 0xF3, 0x48, 0xCD, 0xC9, 0xC9,
        0x57, 0x08, 0xCF, 0x2F, 0xCA, 0x49, 0x51, 0x04, 0x00, 0xA3, 0x1C, 0x29,
        0x1C, 0x0C, 0x00, 0x00, 0x00,
    ]
)

HELLO_ZLIB = bytes(
    [
        0x78, 0x9C, 0xF3, 0x48, 0xCD, 0xC9, 0xC9, 0x57, 0x08, 0xCF, 0x2F, 0xCA,
        0x49, 0x51, 0x04, 0x00, 0x1C, 0x49, 0x04, 0x3E,
    ]
)


def make_response(body: bytes = b"", *headers: tuple[str, str]) -> Response:
    return Response(headers=tuple(Header(n, v) for n, v in headers), body=body)


@pytest.fixture()
def hello_vectors():
    """Body bytes for ``Hello World!`` keyed by Content-Encoding value."""
    return {
        "br": HELLO_BROTLI,
        "gzip": HELLO_GZIP,
        "deflate": HELLO_ZLIB,
        "identity": HELLO,
    }
