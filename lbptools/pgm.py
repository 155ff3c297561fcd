"""Reading and writing of PGM (portable graymap) images in P2 and P5 form."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

__all__ = ["PGMError", "PGMImage", "parse_pgm", "read_pgm", "write_pgm"]

PathLike = Union[str, "os.PathLike[str]"]

_SUPPORTED_FORMATS = ("P2", "P5")
_WHITESPACE = b" \t\n\r\x0b\x0c"
_DIGITS = b"0123456789"


class PGMError(Exception):
    """Raised when a PGM image cannot be read or written."""


@dataclass(frozen=True)
class PGMImage:
    """A grayscale image: ``pixels[row][column]`` holds values 0..255."""

    format: str
    width: int
    height: int
    max_value: int
    pixels: tuple[bytes, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width} x {self.height}")
        if len(self.pixels) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.pixels)}")
        if any(len(row) != self.width for row in self.pixels):
            raise ValueError(f"every row must hold {self.width} pixels")


class _Scanner:
    """Cursor over the raw bytes of a PGM file, reading the way scanf does."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _peek(self) -> int | None:
        if self._pos < len(self._data):
            return self._data[self._pos]
        return None

    def skip_space(self) -> None:
        while (ch := self._peek()) is not None and ch in _WHITESPACE:
            self._pos += 1

    def skip_comments(self) -> None:
        """Skip whitespace and whole '#' comment lines."""
        while (ch := self._peek()) is not None:
            if ch in _WHITESPACE:
                self._pos += 1
            elif ch == ord("#"):
                end = self._data.find(b"\n", self._pos)
                self._pos = len(self._data) if end == -1 else end + 1
            else:
                return

    def read_word(self, max_len: int) -> str | None:
        self.skip_space()
        start = self._pos
        while (
            self._pos - start < max_len
            and (ch := self._peek()) is not None
            and ch not in _WHITESPACE
        ):
            self._pos += 1
        if self._pos == start:
            return None
        return self._data[start:self._pos].decode("latin-1")

    def read_int(self) -> int | None:
        self.skip_space()
        start = self._pos
        if self._peek() in (ord("+"), ord("-")):
            self._pos += 1
        digits_start = self._pos
        while (ch := self._peek()) is not None and ch in _DIGITS:
            self._pos += 1
        if self._pos == digits_start:
            self._pos = start
            return None
        return int(self._data[start:self._pos])

    def skip_byte(self) -> None:
        if self._pos < len(self._data):
            self._pos += 1

    def read_bytes(self, count: int) -> bytes:
        chunk = self._data[self._pos:self._pos + count]
        self._pos += len(chunk)
        return chunk


def _ascii_pixel(scanner: _Scanner, max_value: int, row: int, col: int) -> int:
    value = scanner.read_int()
    if value is None:
        raise PGMError(f"cannot read pixel ({row}, {col})")
    if value < 0 or value > max_value:
        raise PGMError(f"invalid pixel value ({value}) at ({row}, {col})")
    return value & 0xFF


def _binary_row(scanner: _Scanner, width: int, row: int) -> bytes:
    chunk = scanner.read_bytes(width)
    if len(chunk) != width:
        raise PGMError(f"cannot read binary pixels of row {row}")
    return chunk


def parse_pgm(data: bytes) -> PGMImage:
    """Parse the bytes of a P2 or P5 PGM file."""
    scanner = _Scanner(bytes(data))

    magic = scanner.read_word(2)
    if magic is None:
        raise PGMError("cannot read the image format")
    if magic not in _SUPPORTED_FORMATS:
        raise PGMError(f"invalid image format ({magic}); only P2 and P5 are supported")

    scanner.skip_comments()
    width = scanner.read_int()
    height = scanner.read_int() if width is not None else None
    if width is None or height is None or width <= 0 or height <= 0:
        raise PGMError("cannot read the image width and height")

    scanner.skip_comments()
    max_value = scanner.read_int()
    if max_value is None:
        raise PGMError("cannot read the maximum gray value")

    # A single byte separates the header from the pixel data.
    scanner.skip_byte()

    if magic == "P2":
        pixels = tuple(
            bytes(_ascii_pixel(scanner, max_value, row, col) for col in range(width))
            for row in range(height)
        )
    else:
        pixels = tuple(_binary_row(scanner, width, row) for row in range(height))

    return PGMImage(
        format=magic,
        width=width,
        height=height,
        max_value=max_value,
        pixels=pixels,
    )


def read_pgm(path: PathLike) -> PGMImage:
    """Read a P2 or P5 PGM image from a file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise PGMError(f"cannot open file {os.fspath(path)}") from exc
    try:
        return parse_pgm(data)
    except PGMError as exc:
        raise PGMError(f"{os.fspath(path)}: {exc}") from exc


def write_pgm(path: PathLike, width: int, height: int, rows: Iterable[bytes]) -> None:
    """Write a binary (P5) PGM image with a maximum gray value of 255."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width} x {height}")
    data = [bytes(row) for row in rows]
    if len(data) != height:
        raise ValueError(f"expected {height} rows, got {len(data)}")
    if any(len(row) != width for row in data):
        raise ValueError(f"every row must hold {width} pixels")

    header = f"P5\n{width} {height}\n255\n".encode("ascii")
    try:
        with open(path, "wb") as handle:
            handle.write(header)
            handle.writelines(data)
    except OSError as exc:
        raise PGMError(f"cannot create output file {os.fspath(path)}") from exc