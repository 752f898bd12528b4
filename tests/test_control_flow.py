import string

import pytest

from dsbasics.control_flow import (
    alphabet_lines,
    factorial,
    is_leap_year,
    is_vowel,
    multiplication_table,
    sign_of,
    sum_natural,
    sum_natural_recursive,
    swap,
)


def test_sum_forms_agree():
    for n in range(1, 60):
        assert sum_natural(n) == sum_natural_recursive(n)


def test_sum_step_adds_n():
    for n in range(1, 60):
        assert sum_natural(n) - sum_natural(n - 1) == n


def test_sum_of_zero():
    assert sum_natural(0) == 0


def test_sum_recursive_base_case():
    assert sum_natural_recursive(1) == 1


def test_sum_recursive_rejects_zero():
    with pytest.raises(ValueError):
        sum_natural_recursive(0)


@pytest.mark.parametrize("char", list("aeiouAEIOU"))
def test_vowels(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", list("bZy1 ?"))
def test_non_vowels(char):
    assert is_vowel(char) is False


@pytest.mark.parametrize("text", ["", "ae"])
def test_is_vowel_needs_one_character(text):
    with pytest.raises(ValueError):
        is_vowel(text)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (1600, True), (2100, False)],
)
def test_leap_years(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "num, expected", [(5, "positive"), (0, "zero"), (-3, "negative")]
)
def test_sign_of(num, expected):
    assert sign_of(num) == expected


def test_factorial_base_case():
    assert factorial(1) == 1


def test_factorial_recurrence():
    for n in range(2, 30):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_twenty_fits_long_long():
    assert factorial(20) == 2432902008176640000


def test_factorial_rejects_zero():
    with pytest.raises(ValueError):
        factorial(0)


def test_multiplication_table():
    lines = multiplication_table(5, 10)
    assert len(lines) == 10
    assert lines[0] == "5 * 1 = 5"
    assert lines[-1] == "5 * 10 = 50"


def test_multiplication_table_empty():
    assert multiplication_table(5, 0) == []


def test_alphabet_lines():
    upper, lower = alphabet_lines()
    assert upper.split() == list(string.ascii_uppercase)
    assert lower == upper.lower()


def test_swap():
    assert swap(1, 354) == (354, 1)


def test_swap_twice_is_identity():
    assert swap(*swap(10, 5)) == (10, 5)