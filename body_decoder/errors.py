# =============================================================================
# Body Decoder -- Error Types
# =============================================================================

from __future__ import annotations


class RunnerError(Exception):
    """Base exception for all body decoding errors.

    Two errors are equal when they have the same type and carry the same
    diagnostic value, so a failing decode can be asserted on directly.
    """

    def _key(self) -> tuple:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class UnsupportedContentEncoding(RunnerError):
    """``Content-Encoding`` header present with an unrecognized value."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unsupported content encoding: {value}")

    def _key(self) -> tuple:
        return (self.value,)


class CouldNotUncompressResponse(RunnerError):
    """Recognized encoding, but the codec rejected the body.

    ``algorithm`` is one of ``"brotli"``, ``"gzip"`` or ``"zlib"``.
    """

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Could not uncompress response with {algorithm}")

    def _key(self) -> tuple:
        return (self.algorithm,)


class InvalidCharset(RunnerError):
    """``Content-Type`` names a charset Python has no codec for."""

    def __init__(self, charset: str) -> None:
        self.charset = charset
        super().__init__(f"Invalid charset: {charset}")

    def _key(self) -> tuple:
        return (self.charset,)


class InvalidDecoding(RunnerError):
    """Body bytes are not valid text in the response charset."""

    def __init__(self, charset: str) -> None:
        self.charset = charset
        super().__init__(f"Could not decode response body with charset {charset}")

    def _key(self) -> tuple:
        return (self.charset,)
