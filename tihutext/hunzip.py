"""Reader for hzip files: Huffman-coded sorted word lists with an optional key.

The header holds a table of 16-bit symbols and their bit codes (encrypted with
a repeating key for ``hz1`` files).  The body is the Huffman-coded stream, in
which each line shares a prefix and optionally a suffix with the line before.
"""

from __future__ import annotations

import io
import itertools
import os
from collections.abc import Iterator
from functools import reduce
from operator import xor
from pathlib import Path

HZIP_EXTENSION = ".hz"
MAGIC = b"hz0"
MAGIC_ENCRYPT = b"hz1"

_ESCAPE = 31
_TAB_PREFIX = 30
_FIRST_PLAIN = 47
_SPACES = (9, 32)
_TEXT_ENCODING = "utf-8"


class HzipError(ValueError):
    """The data is not in hzip format or the key does not match."""


def _need(data: Iterator[int]) -> int:
    byte = next(data, None)
    if byte is None:
        raise HzipError("unexpected end of hzip data")
    return byte


def _split_lines(data: Iterator[int]) -> Iterator[bytes]:
    """Undo the prefix/suffix sharing between consecutive lines."""
    previous = b""
    while True:
        body = bytearray()
        marker = None
        for byte in data:
            if byte == _ESCAPE:
                body.append(_need(data))
            elif byte >= _FIRST_PLAIN or byte in _SPACES:
                body.append(byte)
            else:
                marker = byte
                break
        if marker is None:
            if body:
                yield bytes(body)
            return

        right = 0
        if marker > 32:
            right = marker - 31
            marker = _need(data)
        left = 9 if marker == _TAB_PREFIX else marker

        if right:
            tail = previous[max(0, len(previous) - right - 1):]
        else:
            tail = b"\n"
        previous = previous[:left] + bytes(body) + tail
        yield previous[:-1] if previous.endswith(b"\n") else previous


def _key_bytes(key: str | bytes | None) -> bytes:
    if key is None:
        return b""
    if isinstance(key, str):
        return key.encode(_TEXT_ENCODING)
    return bytes(key)


class Hunzip:
    """Lines of an hzip file, decoded as UTF-8 without line terminators."""

    def __init__(self, path: str | os.PathLike[str], key: str | bytes | None = None) -> None:
        self.path = os.fspath(path)
        data = Path(path).read_bytes()
        self._children: list[list[int]] = [[0, 0]]
        self._codes: list[tuple[int, int]] = [(0, 0)]
        self._last = 0
        self._body = b""
        self._parse(data, key)

    def _format_error(self) -> HzipError:
        return HzipError(f"{self.path}: not in hzip format")

    def _parse(self, data: bytes, key: str | bytes | None) -> None:
        stream = io.BytesIO(data)

        def read(size: int) -> bytes:
            chunk = stream.read(size)
            if len(chunk) < size:
                raise self._format_error()
            return chunk

        magic = read(len(MAGIC))
        if magic not in (MAGIC, MAGIC_ENCRYPT):
            raise self._format_error()

        keystream: Iterator[int] | None = None
        if magic == MAGIC_ENCRYPT:
            raw_key = _key_bytes(key)
            if not raw_key:
                raise HzipError(f"{self.path}: missing or bad key")
            checksum = read(1)[0]
            if reduce(xor, raw_key, 0) != checksum:
                raise HzipError(f"{self.path}: missing or bad key")
            keystream = itertools.cycle(raw_key)

        def decrypt(chunk: bytes) -> bytes:
            if keystream is None:
                return chunk
            return bytes(b ^ k for b, k in zip(chunk, keystream))

        count = int.from_bytes(decrypt(read(2)), "big")
        children = self._children
        codes = self._codes
        for _ in range(count):
            high, low = decrypt(read(2))
            (length,) = decrypt(read(1))
            bits = decrypt(read(length // 8 + 1))
            node = 0
            for position in range(length):
                bit = (bits[position // 8] >> (7 - position % 8)) & 1
                child = children[node][bit]
                if child == 0:
                    children.append([0, 0])
                    codes.append((0, 0))
                    child = self._last = len(children) - 1
                    children[node][bit] = child
                node = child
            codes[node] = (high, low)
        self._body = stream.read()

    def _decode(self) -> Iterator[int]:
        """Yield the Huffman-decoded bytes of the body."""
        children = self._children
        node = 0
        for byte in self._body:
            for shift in range(7, -1, -1):
                bit = (byte >> shift) & 1
                previous = node
                node = children[node][bit]
                if node:
                    continue
                if previous == self._last:
                    odd, last_byte = self._codes[self._last]
                    if odd:
                        yield last_byte
                    return
                if previous == 0:
                    raise self._format_error()
                yield from self._codes[previous]
                node = children[0][bit]
        raise self._format_error()

    def __iter__(self) -> Iterator[str]:
        for line in _split_lines(self._decode()):
            yield line.decode(_TEXT_ENCODING, errors="replace")