"""Tests for response model types."""

import pytest

from body_decoder.types import Encoding, Header, Response, Version

# =========================================================================
# Encoding
# =========================================================================


class TestEncoding:
    def test_values_are_header_literals(self):
        assert Encoding.BROTLI.value == "br"
        assert Encoding.GZIP.value == "gzip"
        assert Encoding.DEFLATE.value == "deflate"
        assert Encoding.IDENTITY.value == "identity"

    def test_closed_set(self):
        assert len(list(Encoding)) == 4

    def test_str_comparison(self):
        assert Encoding.GZIP == "gzip"


# =========================================================================
# Response
# =========================================================================


class TestResponse:
    def test_defaults(self):
        response = Response()
        assert response.headers == ()
        assert response.body == b""
        assert response.status == 200
        assert response.version is Version.HTTP_1_1

    def test_frozen(self):
        response = Response(body=b"x")
        with pytest.raises(AttributeError):
            response.body = b"y"

    def test_from_mapping_dict(self):
        response = Response.from_mapping({"Content-Encoding": "gzip"}, b"abc", status=404)
        assert response.headers == (Header("Content-Encoding", "gzip"),)
        assert response.body == b"abc"
        assert response.status == 404

    def test_from_mapping_pairs_keep_order_and_duplicates(self):
        response = Response.from_mapping(
            [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("X-Id", "7")]
        )
        assert [h.value for h in response.headers] == ["a=1", "b=2", "7"]

    def test_from_mapping_copies_body_to_bytes(self):
        response = Response.from_mapping(body=bytearray(b"abc"))
        assert isinstance(response.body, bytes)

    def test_header_case_insensitive_first_match(self):
        response = Response.from_mapping([("x-a", "1"), ("X-A", "2")])
        assert response.header("X-A") == "1"
        assert response.header("missing") is None

    def test_header_values(self):
        response = Response.from_mapping([("Vary", "a"), ("Other", "b"), ("VARY", "c")])
        assert response.header_values("vary") == ["a", "c"]
        assert response.header_values("nope") == []


class TestCharset:
    def test_default_without_content_type(self):
        assert Response().charset == "utf-8"

    def test_default_without_parameter(self):
        response = Response.from_mapping({"Content-Type": "text/html"})
        assert response.charset == "utf-8"

    def test_parameter(self):
        response = Response.from_mapping({"Content-Type": "text/html; charset=ISO-8859-1"})
        assert response.charset == "ISO-8859-1"

    def test_parameter_name_case_and_quotes(self):
        response = Response.from_mapping(
            {"content-type": 'text/plain; format=flowed; Charset="utf-16"'}
        )
        assert response.charset == "utf-16"

    def test_first_content_type_wins(self):
        response = Response.from_mapping(
            [
                ("Content-Type", "text/plain; charset=latin-1"),
                ("Content-Type", "text/plain; charset=utf-8"),
            ]
        )
        assert response.charset == "latin-1"
