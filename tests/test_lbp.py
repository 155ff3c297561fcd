import math

import pytest

from lbptools.lbp import (
    HISTOGRAM_SIZE,
    best_match,
    compare_images,
    euclidean_distance,
    generate_lbp_image,
    generate_median_image,
    histogram,
    lbp_codes,
    median_filter,
)
from lbptools.pgm import PGMError, PGMImage, read_pgm, write_pgm


def make_image(rows):
    data = tuple(bytes(row) for row in rows)
    return PGMImage(format="P5", width=len(data[0]), height=len(data), max_value=255, pixels=data)


def gradient_image(width, height, step=7):
    return make_image(
        [[(x * step + y * 13) % 256 for x in range(width)] for y in range(height)]
    )


def save(path, image):
    write_pgm(path, image.width, image.height, image.pixels)
    return path


def test_uniform_image_has_all_bits_set():
    image = make_image([[50] * 5 for _ in range(4)])
    codes = lbp_codes(image)
    assert codes == (bytes([255] * 3),) * 2


def test_centre_above_all_neighbours_gives_zero():
    image = make_image([[0, 0, 0], [0, 10, 0], [0, 0, 0]])
    assert lbp_codes(image) == (bytes([0]),)


@pytest.mark.parametrize(
    "position, bit",
    [
        ((0, 0), 7),
        ((0, 1), 6),
        ((0, 2), 5),
        ((1, 2), 4),
        ((2, 2), 3),
        ((2, 1), 2),
        ((2, 0), 1),
        ((1, 0), 0),
    ],
)
def test_each_neighbour_sets_its_bit(position, bit):
    rows = [[0, 0, 0], [0, 5, 0], [0, 0, 0]]
    row, col = position
    rows[row][col] = 9
    assert lbp_codes(make_image(rows)) == (bytes([1 << bit]),)


def test_lbp_codes_shape():
    image = gradient_image(7, 5)
    codes = lbp_codes(image)
    assert len(codes) == image.height - 2
    assert all(len(row) == image.width - 2 for row in codes)


@pytest.mark.parametrize("size", [(2, 5), (5, 2), (1, 1)])
def test_lbp_codes_rejects_too_small_image(size):
    width, height = size
    with pytest.raises(ValueError):
        lbp_codes(make_image([[1] * width for _ in range(height)]))


def test_median_keeps_index_five_of_sorted_window():
    image = make_image([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert median_filter(image) == (bytes([6]),)


def test_median_of_uniform_image_is_unchanged():
    image = make_image([[42] * 6 for _ in range(5)])
    assert median_filter(image) == (bytes([42] * 4),) * 3


def test_median_values_lie_within_window_range():
    image = gradient_image(8, 6, step=31)
    filtered = median_filter(image)
    px = image.pixels
    for i, row in enumerate(filtered):
        for j, value in enumerate(row):
            window = [px[i + di][j + dj] for di in range(3) for dj in range(3)]
            assert min(window) <= value <= max(window)


def test_median_rejects_too_small_image():
    with pytest.raises(ValueError):
        median_filter(make_image([[1, 2], [3, 4]]))


def test_histogram_is_normalised():
    hist = histogram(lbp_codes(gradient_image(9, 7, step=37)))
    assert len(hist) == HISTOGRAM_SIZE
    assert math.isclose(sum(hist), 1.0)
    assert all(value >= 0 for value in hist)


def test_histogram_of_single_code():
    hist = histogram([bytes([255, 255]), bytes([255, 255])])
    assert hist[255] == 1.0
    assert sum(hist[:255]) == 0.0


def test_histogram_rejects_empty_input():
    with pytest.raises(ValueError):
        histogram([])


def test_euclidean_distance_identical_is_zero():
    hist = histogram([bytes([1, 2, 3, 3])])
    assert euclidean_distance(hist, hist) == 0.0


def test_euclidean_distance_is_symmetric():
    a = histogram([bytes([1, 2, 3, 3])])
    b = histogram([bytes([3, 4, 4, 4])])
    assert euclidean_distance(a, b) == euclidean_distance(b, a)
    assert euclidean_distance(a, b) > 0


def test_euclidean_distance_three_four_five():
    assert euclidean_distance([3.0, 0.0], [0.0, 4.0]) == 5.0


def test_euclidean_distance_rejects_length_mismatch():
    with pytest.raises(ValueError):
        euclidean_distance([0.0, 1.0], [0.0])


def test_compare_image_with_itself_is_zero():
    image = gradient_image(10, 8)
    assert compare_images(image, image) == 0.0


def test_compare_different_images_is_positive_and_symmetric():
    first = make_image([[50] * 5 for _ in range(5)])
    second = gradient_image(6, 6, step=41)
    distance = compare_images(first, second)
    assert distance > 0
    assert distance == compare_images(second, first)


def test_compare_rejects_too_small_image():
    with pytest.raises(ValueError):
        compare_images(gradient_image(5, 5), make_image([[1, 2]]))


def test_best_match_finds_identical_image(tmp_path):
    base = tmp_path / "base"
    base.mkdir()
    target = gradient_image(10, 9, step=11)
    save(base / "same.pgm", target)
    save(base / "flat.pgm", make_image([[80] * 10 for _ in range(9)]))
    save(base / "other.pgm", gradient_image(10, 9, step=53))
    (base / "notes.txt").write_text("not an image")
    (base / "subdir").mkdir()
    test_path = save(tmp_path / "query.pgm", target)

    assert best_match(base, test_path) == ("same.pgm", 0.0)


def test_best_match_empty_directory_returns_none(tmp_path):
    base = tmp_path / "base"
    base.mkdir()
    test_path = save(tmp_path / "query.pgm", gradient_image(5, 5))
    assert best_match(base, test_path) is None


def test_best_match_skips_images_too_small(tmp_path):
    base = tmp_path / "base"
    base.mkdir()
    save(base / "tiny.pgm", make_image([[1, 2], [3, 4]]))
    test_path = save(tmp_path / "query.pgm", gradient_image(5, 5))
    assert best_match(base, test_path) is None


def test_best_match_missing_directory_raises(tmp_path):
    test_path = save(tmp_path / "query.pgm", gradient_image(5, 5))
    with pytest.raises(OSError):
        best_match(tmp_path / "missing", test_path)


def test_best_match_unreadable_test_image_raises(tmp_path):
    base = tmp_path / "base"
    base.mkdir()
    with pytest.raises(PGMError):
        best_match(base, tmp_path / "missing.pgm")


def test_generate_lbp_image_round_trip(tmp_path):
    image = gradient_image(9, 6, step=23)
    source = save(tmp_path / "in.pgm", image)
    output = tmp_path / "out.pgm"
    generate_lbp_image(source, output)

    written = read_pgm(output)
    assert written.format == "P5"
    assert (written.width, written.height) == (7, 4)
    assert written.max_value == 255
    assert written.pixels == lbp_codes(image)


def test_generate_median_image_round_trip(tmp_path):
    image = gradient_image(8, 7, step=29)
    source = save(tmp_path / "in.pgm", image)
    output = tmp_path / "out.pgm"
    generate_median_image(source, output)

    written = read_pgm(output)
    assert (written.width, written.height) == (image.width - 2, image.height - 2)
    assert written.pixels == median_filter(image)


def test_generate_lbp_image_missing_input_raises(tmp_path):
    with pytest.raises(PGMError):
        generate_lbp_image(tmp_path / "missing.pgm", tmp_path / "out.pgm")
    assert not (tmp_path / "out.pgm").exists()


def test_generate_median_image_too_small_raises(tmp_path):
    source = save(tmp_path / "in.pgm", make_image([[1, 2], [3, 4]]))
    with pytest.raises(ValueError):
        generate_median_image(source, tmp_path / "out.pgm")
    assert not (tmp_path / "out.pgm").exists()