# =============================================================================
# Body Decoder -- Constants
# =============================================================================
#
# Header literals follow RFC 9110 section 8.4.1 (content codings).
# =============================================================================

# -- Header names (compared lower-cased) --------------------------------------

HEADER_CONTENT_ENCODING = "content-encoding"
HEADER_CONTENT_TYPE = "content-type"

# -- Content-Encoding values (matched case-sensitively) -----------------------

ENCODING_BROTLI = "br"
ENCODING_GZIP = "gzip"
ENCODING_DEFLATE = "deflate"
ENCODING_IDENTITY = "identity"

ACCEPT_ENCODING = ", ".join((ENCODING_GZIP, ENCODING_DEFLATE, ENCODING_BROTLI))

# -- Codec tags reported by CouldNotUncompressResponse ------------------------

ALGORITHM_BROTLI = "brotli"
ALGORITHM_GZIP = "gzip"
ALGORITHM_ZLIB = "zlib"

# -- Brotli -------------------------------------------------------------------

# Only one bounded read of decompressed output is taken from a brotli stream.
BROTLI_READ_CHUNK_SIZE = 4096  # bytes

# -- Text ---------------------------------------------------------------------

DEFAULT_CHARSET = "utf-8"
