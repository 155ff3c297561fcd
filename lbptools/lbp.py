"""Local binary pattern (LBP) descriptors, median filtering and image matching."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Iterator, Sequence
from typing import Union

from lbptools.pgm import PGMError, PGMImage, read_pgm, write_pgm

__all__ = [
    "HISTOGRAM_SIZE",
    "lbp_codes",
    "median_filter",
    "histogram",
    "euclidean_distance",
    "compare_images",
    "best_match",
    "generate_lbp_image",
    "generate_median_image",
]

PathLike = Union[str, "os.PathLike[str]"]

HISTOGRAM_SIZE = 256

# Position in the sorted 3x3 window that the median filter keeps.
_MEDIAN_INDEX = 5

Window = tuple[int, int, int, int, int, int, int, int, int]


def _check_interior(image: PGMImage) -> None:
    width, height = image.width - 2, image.height - 2
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid size for the LBP image: {width} x {height}")


def _window_rows(image: PGMImage) -> Iterator[Iterator[Window]]:
    """Yield, for each interior row, the 3x3 windows around its pixels.

    Each window is (top-left, top, top-right, left, centre, right,
    bottom-left, bottom, bottom-right).
    """
    _check_interior(image)
    px = image.pixels
    for above, row, below in zip(px, px[1:], px[2:]):
        yield zip(
            above, above[1:], above[2:],
            row, row[1:], row[2:],
            below, below[1:], below[2:],
        )


def _lbp_value(window: Window) -> int:
    tl, t, tr, left, centre, right, bl, b, br = window
    # Clockwise from the top-left neighbour, most significant bit first.
    neighbours = (tl, t, tr, right, br, b, bl, left)
    value = 0
    for neighbour in neighbours:
        value = (value << 1) | (neighbour >= centre)
    return value


def lbp_codes(image: PGMImage) -> tuple[bytes, ...]:
    """Return the LBP code of every interior pixel, one bytes object per row.

    The result is (height - 2) rows of (width - 2) codes.
    Raises ValueError when the image has no interior pixels.
    """
    return tuple(
        bytes(_lbp_value(window) for window in windows)
        for windows in _window_rows(image)
    )


def median_filter(image: PGMImage) -> tuple[bytes, ...]:
    """Replace each interior pixel by a rank value of its 3x3 neighbourhood.

    The nine values are sorted and the one at index 5 is kept. The result is
    (height - 2) rows of (width - 2) values.
    Raises ValueError when the image has no interior pixels.
    """
    return tuple(
        bytes(sorted(window)[_MEDIAN_INDEX] for window in windows)
        for windows in _window_rows(image)
    )


def histogram(codes: Iterable[bytes]) -> list[float]:
    """Return the normalised 256-bin histogram of the given rows of codes."""
    counts = [0] * HISTOGRAM_SIZE
    total = 0
    for row in codes:
        for code in row:
            counts[code] += 1
        total += len(row)
    if total == 0:
        raise ValueError("cannot build a histogram of an empty image")
    return [count / total for count in counts]


def euclidean_distance(hist1: Sequence[float], hist2: Sequence[float]) -> float:
    """Return the Euclidean distance between two histograms of equal length."""
    if len(hist1) != len(hist2):
        raise ValueError(
            f"histograms differ in length: {len(hist1)} and {len(hist2)}"
        )
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(hist1, hist2)))


def compare_images(image1: PGMImage, image2: PGMImage) -> float:
    """Return the distance between the LBP histograms of two images.

    Raises ValueError when either image is too small to hold LBP codes.
    """
    hist1 = histogram(lbp_codes(image1))
    hist2 = histogram(lbp_codes(image2))
    return euclidean_distance(hist1, hist2)


def best_match(base_dir: PathLike, test_path: PathLike) -> tuple[str, float] | None:
    """Find the file in ``base_dir`` whose LBP histogram is closest to the test image.

    Returns the file name and its distance, or None when no file in the
    directory could be compared. Files that are not readable PGM images are
    skipped. On equal distances the first file found wins.
    Raises PGMError if the test image cannot be read and OSError if the
    directory cannot be opened.
    """
    test_image = read_pgm(test_path)

    best: tuple[str, float] | None = None
    with os.scandir(base_dir) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            try:
                candidate = read_pgm(entry.path)
                distance = compare_images(test_image, candidate)
            except (PGMError, ValueError):
                continue
            if best is None or distance < best[1]:
                best = (entry.name, distance)
    return best


def _write_filtered(
    input_path: PathLike,
    output_path: PathLike,
    rows: tuple[bytes, ...],
    image: PGMImage,
) -> None:
    write_pgm(output_path, image.width - 2, image.height - 2, rows)


def generate_lbp_image(input_path: PathLike, output_path: PathLike) -> None:
    """Write the LBP codes of an image as a binary PGM file."""
    image = read_pgm(input_path)
    _write_filtered(input_path, output_path, lbp_codes(image), image)


def generate_median_image(input_path: PathLike, output_path: PathLike) -> None:
    """Write the median-filtered interior of an image as a binary PGM file."""
    image = read_pgm(input_path)
    _write_filtered(input_path, output_path, median_filter(image), image)