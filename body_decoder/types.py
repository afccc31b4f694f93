# =============================================================================
# Body Decoder -- Type Definitions
# =============================================================================

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from .constants import (
    DEFAULT_CHARSET,
    ENCODING_BROTLI,
    ENCODING_DEFLATE,
    ENCODING_GZIP,
    ENCODING_IDENTITY,
    HEADER_CONTENT_TYPE,
)


class Encoding(str, Enum):
    """Content codings the decoder understands.

    Values are the exact ``Content-Encoding`` header literals.
    """

    BROTLI = ENCODING_BROTLI
    GZIP = ENCODING_GZIP
    DEFLATE = ENCODING_DEFLATE
    IDENTITY = ENCODING_IDENTITY


class Version(str, Enum):
    """HTTP protocol version of a response."""

    HTTP_1_0 = "HTTP/1.0"
    HTTP_1_1 = "HTTP/1.1"
    HTTP_2 = "HTTP/2"


@dataclass(frozen=True, slots=True)
class Header:
    """A single response header, as received."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Response:
    """A fully-buffered HTTP response.

    Attributes:
        headers: Headers in receipt order. Duplicate names are kept.
        body: Raw body bytes, possibly compressed.
        status: HTTP status code.
        version: Protocol version the response arrived on.
    """

    headers: tuple[Header, ...] = ()
    body: bytes = b""
    status: int = 200
    version: Version = Version.HTTP_1_1

    @classmethod
    def from_mapping(
        cls,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        body: bytes = b"",
        status: int = 200,
        version: Version = Version.HTTP_1_1,
    ) -> Response:
        """Build a response from a header mapping or ``(name, value)`` pairs."""
        items = headers.items() if isinstance(headers, Mapping) else headers
        return cls(
            headers=tuple(Header(name, value) for name, value in items),
            body=bytes(body),
            status=status,
            version=version,
        )

    def header_values(self, name: str) -> list[str]:
        """All values of header ``name`` (case-insensitive), in order."""
        wanted = name.lower()
        return [h.value for h in self.headers if h.name.lower() == wanted]

    def header(self, name: str) -> str | None:
        """First value of header ``name`` (case-insensitive), or ``None``."""
        wanted = name.lower()
        for h in self.headers:
            if h.name.lower() == wanted:
                return h.value
        return None

    @property
    def charset(self) -> str:
        """Charset from the first ``Content-Type`` header, default utf-8."""
        content_type = self.header(HEADER_CONTENT_TYPE)
        if content_type is None:
            return DEFAULT_CHARSET
        for param in content_type.split(";")[1:]:
            key, sep, value = param.partition("=")
            if sep and key.strip().lower() == "charset":
                return value.strip().strip('"') or DEFAULT_CHARSET
        return DEFAULT_CHARSET
