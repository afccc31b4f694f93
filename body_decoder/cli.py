# =============================================================================
# Body Decoder -- Command Line
# =============================================================================
#
#   body-decoder -e gzip body.bin
#   body-decoder -H "Content-Encoding: br" -H "Content-Type: text/html" --text body.bin
#   curl -s --raw ... | body-decoder -e deflate --json -
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys

import orjson

from ._logging import logger
from ._version import __version__
from .constants import HEADER_CONTENT_ENCODING
from .content_decoding import ContentDecoder
from .errors import RunnerError
from .types import Header, Response


def _parse_header(raw: str) -> Header:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected 'Name: Value', got {raw!r}")
    return Header(name.strip(), value.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="body-decoder",
        description="Uncompress an HTTP response body using its Content-Encoding",
    )
    parser.add_argument("input", help="File holding the raw body, '-' for stdin")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        help="Response header 'Name: Value' (repeatable, order is kept)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        help="Shortcut for -H 'Content-Encoding: VALUE'",
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--text", action="store_true", help="Write the body decoded with its charset"
    )
    output.add_argument(
        "--json", action="store_true", help="Write a JSON summary instead of the body"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: str | None, data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def run(args: argparse.Namespace) -> int:
    headers = list(args.headers)
    if args.encoding is not None:
        # First Content-Encoding wins, so -e goes ahead of any -H.
        headers.insert(0, Header(HEADER_CONTENT_ENCODING, args.encoding))
    response = Response(headers=tuple(headers), body=_read_input(args.input))
    decoder = ContentDecoder()

    try:
        encoding = decoder.content_encoding(response)
        logger.debug("Content-Encoding resolved to %s", encoding)
        if args.text:
            output = decoder.decode_text(response).encode("utf-8")
        else:
            output = decoder.decode(response)
    except RunnerError as exc:
        logger.debug("Decoding failed: %r", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Decoded %d bytes into %d bytes", len(response.body), len(output))

    if args.json:
        output = orjson.dumps(
            {
                "encoding": encoding.value if encoding is not None else None,
                "input_bytes": len(response.body),
                "output_bytes": len(output),
            }
        )
    _write_output(args.output, output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args)
