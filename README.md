# lbptools

This package works with grayscale PGM images and Local Binary Pattern (LBP) descriptors. It is pure Python and has no third-party dependencies. It also has a few small data structures and an interactive menu for two of them.

## Images

### `lbptools.pgm`

- `parse_pgm(data)` parses the bytes of a `P2` (ASCII) or `P5` (binary) PGM file and returns a `PGMImage`. A `PGMImage` has the fields `format`, `width`, `height`, `max_value` and `pixels`. `pixels` is a tuple of one `bytes` object per row. Whitespace and `#` comment lines in the header are skipped. In `P2` files every pixel must lie between 0 and the declared maximum.
- `read_pgm(path)` reads and parses a file.
- `write_pgm(path, width, height, rows)` writes a binary `P5` image with a maximum gray value of 255.
- `PGMError` is raised for a file that cannot be opened, created or parsed.

### `lbptools.lbp`

- `lbp_codes(image)` returns the 8-neighbour LBP code of every interior pixel. The result has `height - 2` rows of `width - 2` codes. A neighbour sets its bit when it is greater than or equal to the centre pixel. The bits run clockwise from the top-left neighbour, and the top-left neighbour gives the most significant bit.
- `median_filter(image)` returns one value for each interior pixel. It sorts the pixel's 3×3 window and keeps the value at index 5 of the sorted list.
- `histogram(codes)` returns a normalised 256-bin histogram.
- `euclidean_distance(hist1, hist2)` returns the distance between two histograms of equal length.
- `compare_images(image1, image2)` returns the distance between the LBP histograms of two images.
- `best_match(base_dir, test_path)` returns `(file_name, distance)` for the file in `base_dir` that is closest to the test image. It returns `None` when no file can be compared. Files that are not readable PGM images are skipped.
- `generate_lbp_image(input_path, output_path)` writes the LBP image of an input image as a `P5` file.
- `generate_median_image(input_path, output_path)` writes the median-filtered image as a `P5` file.

An image that has no interior pixels (width or height below 3) raises `ValueError`.

```python
from lbptools.pgm import read_pgm
from lbptools.lbp import compare_images, best_match, generate_lbp_image

a = read_pgm("a.pgm")
b = read_pgm("b.pgm")
print(compare_images(a, b))

print(best_match("base_dir", "a.pgm"))
generate_lbp_image("a.pgm", "a_lbp.pgm")
```

## Command line

```
lbptools -i test.pgm -d base_dir
lbptools -i test.pgm -o out.pgm
lbptools -i test.pgm -o out.pgm -m
```

Options:

- `-i <test_image>` names the test image. It is required.
- `-d <base_dir>` searches the directory for the image closest to the test image. The result is printed in one of these forms:
  - `Most similar image: <name> <distance>`
  - `No similar image found.`
- `-o <output_image>` writes the LBP image of the test image.
- `-m` writes the median-filtered image instead of the LBP image when `-o` is given.

The exit status is 1 in two cases: no arguments are given, or `-i` is missing. In both cases a usage line is printed to standard error. In every other case the exit status is 0. If the test image or the directory cannot be read, a message goes to standard error.

## Data structures

- `lbptools.sortedset`:
  - `SortedIntSet` keeps integers unique and in ascending order. It supports `add`, `remove`, `in`, `len`, iteration, `is_empty`, `is_subset`, `union` and `intersection`.
  - `binary_search(items, x)` returns the index of `x` in an ascending sequence, or `None`.
- `lbptools.doublylist.DoublyLinkedList` is a list linked in both directions. It has:
  - `push_front`, `push_front_node`, `push_back` and `insert_sorted`
  - `pop_front`, `pop_front_node`, `pop_back` and `remove`
  - `front` and `back`, plus iteration in both directions

  Operations on an empty list raise `IndexError`. Removing a missing value raises `ValueError`.
- `lbptools.linkedstack.LinkedStack` is a linked stack. It has `push`, `push_node`, `pop`, `pop_node`, `peek`, `len` and iteration from the top down. An empty stack raises `IndexError`.
- `lbptools.bounded` has `BoundedQueue` and `BoundedStack`:
  - The capacity is fixed, from 0 to 255.
  - Adding to a full structure raises `OverflowError_`. Taking from an empty one raises `UnderflowError`.
  - `fill_random(rng)` fills the structure to capacity, with values 0–99 for the queue and 0–9 for the stack.

### Interactive menu

```
lbptools-menu
```

The menu reads numbers from standard input. You choose a stack or a queue and then enter a size. The structure is created with one slot fewer than that size and filled with random values. Each structure then has its own menu of operations: add, remove, empty and full checks, showing the contents, the size and the top or end position. A size above 256 or below 1 ends the program with status 1. In code, `lbptools.menu.run_menu(input_stream, output_stream, rng)` runs the same menu on any text streams.

## Limits

- Only `P2` and `P5` grayscale images are read, and only `P5` images are written.
- Images are not shown on screen.
- Descriptors and match results are not stored. Every search reads the whole directory again.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```