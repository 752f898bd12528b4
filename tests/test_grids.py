import pytest

from dsbasics.grids import average, format_grid, largest, min_max, paired_cells

GRID_3 = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
GRID_5 = [
    [0, 1, 2, 3, 4],
    [2, 3, 4, 5, 6],
    [4, 5, 6, 7, 8],
    [5, 4, 3, 2, 6],
    [2, 5, 4, 3, 1],
]


def test_average_of_example():
    assert average([1, 2, 3, 4, 5]) == 3


def test_average_single_value():
    assert average([7]) == 7


def test_average_constant():
    assert average([4, 4, 4, 4]) == 4


def test_average_of_range_lies_between_bounds():
    values = [3, 9, 1, 14, 6]
    low, high = min_max(values)
    assert low <= average(values) <= high


def test_average_accepts_generator():
    assert average(x for x in [2, 4]) == average([2, 4])


def test_average_empty():
    with pytest.raises(ValueError):
        average([])


def test_min_max_example():
    assert min_max([1, 4, 2, 3, 33, -1]) == (-1, 33)


def test_min_max_single_value():
    assert min_max([8]) == (8, 8)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_largest_example():
    assert largest([1, 4, 2, 145, 6]) == 145


def test_largest_agrees_with_min_max():
    values = [1, 4, 2, 3, 33, -1]
    assert largest(values) == min_max(values)[1]


def test_largest_empty():
    with pytest.raises(ValueError):
        largest([])


def test_format_grid_is_row_major():
    assert format_grid(GRID_3).split() == [str(cell) for row in GRID_3 for cell in row]


def test_format_grid_empty():
    assert format_grid([]) == ""


def test_paired_cells_shape():
    lines = paired_cells(GRID_5)
    assert len(lines) == len(GRID_5)
    assert all(line.count("arr1:") == 5 for line in lines)
    assert all(line.count("arr2:") == 5 for line in lines)


def test_paired_cells_first_entry():
    lines = paired_cells(GRID_5)
    assert lines[0].startswith("arr1: 0, arr2: 0")
    assert lines[4].endswith("arr1: 1, arr2: 1")


def test_paired_cells_views_match_cells():
    for line in paired_cells(GRID_5):
        for entry in line.split(" arr1: "):
            first, second = entry.removeprefix("arr1: ").split(", arr2: ")
            assert first == second