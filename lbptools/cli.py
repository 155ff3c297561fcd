"""Command line entry point: LBP image matching and filtered image output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from lbptools.lbp import best_match, generate_lbp_image, generate_median_image
from lbptools.pgm import PGMError

__all__ = ["main"]

_PROG = "lbptools"
_USAGE = f"Usage: {_PROG} [-d <base_dir>] -i <test_image> [-o <output_image>] [-m]"
_VALUE_OPTIONS = {"-d": "base_dir", "-i": "test_image", "-o": "output_image"}


@dataclass
class _Options:
    base_dir: str | None = None
    test_image: str | None = None
    output_image: str | None = None
    median: bool = False


def _parse(args: Sequence[str]) -> _Options:
    """Collect the options; an option missing its value and unknown words are ignored."""
    options = _Options()
    words = iter(args)
    for word in words:
        if word in _VALUE_OPTIONS:
            value = next(words, None)
            if value is None:
                break
            setattr(options, _VALUE_OPTIONS[word], value)
        elif word == "-m":
            options.median = True
    return options


def _report_best_match(base_dir: str, test_image: str) -> None:
    try:
        match = best_match(base_dir, test_image)
    except PGMError as exc:
        print(f"Cannot read the test image: {exc}", file=sys.stderr)
        return
    except OSError as exc:
        print(f"Cannot open the image base directory: {exc}", file=sys.stderr)
        return
    if match is None:
        print("No similar image found.")
    else:
        name, distance = match
        print(f"Most similar image: {name} {distance:.2f}")


def _write_output(test_image: str, output_image: str, median: bool) -> None:
    generate = generate_median_image if median else generate_lbp_image
    try:
        generate(test_image, output_image)
    except (PGMError, ValueError) as exc:
        print(f"Cannot generate {output_image}: {exc}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE, file=sys.stderr)
        return 1

    options = _parse(args)
    if options.test_image is None:
        print("A test image is required.", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1

    if options.base_dir is not None:
        _report_best_match(options.base_dir, options.test_image)

    if options.output_image is not None:
        _write_output(options.test_image, options.output_image, options.median)

    return 0


if __name__ == "__main__":
    sys.exit(main())