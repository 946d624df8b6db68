import pytest

from algokit.sorting import Book, binary_search, in_alphabet, parse_book, sort_books, sort_points


def test_sort_points_orders_by_x_then_y():
    points = [(3, 1), (1, 5), (3, 0), (1, 2), (-4, 9)]
    result = sort_points(points)
    assert sorted(result) == sorted(points)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert result[0] == (-4, 9)


def test_parse_book():
    assert parse_book("Dune by Frank Herbert\n") == Book("Dune", "Frank Herbert")


def test_parse_book_without_separator():
    with pytest.raises(ValueError):
        parse_book("No author here")


def test_sort_books_title_then_author():
    books = [Book("Zed", "Amy"), Book("Alpha", "Zoe"), Book("Alpha", "Bob")]
    assert sort_books(books) == [Book("Alpha", "Bob"), Book("Alpha", "Zoe"), Book("Zed", "Amy")]


@pytest.mark.parametrize("key", [1, 4, 9, 16, 25])
def test_binary_search_finds_present(key):
    items = [1, 4, 9, 16, 25]
    index = binary_search(items, key)
    assert items[index] == key


@pytest.mark.parametrize("key", [0, 5, 30])
def test_binary_search_missing(key):
    assert binary_search([1, 4, 9, 16, 25], key) is None


def test_binary_search_strings():
    words = sorted(["pear", "apple", "fig"])
    assert words[binary_search(words, "fig")] == "fig"


@pytest.mark.parametrize("ch", ["a", "Z", "m", "q"])
def test_letters_in_alphabet(ch):
    assert in_alphabet(ch) is True


@pytest.mark.parametrize("ch", ["1", "!", " "])
def test_non_letters(ch):
    assert in_alphabet(ch) is False


def test_in_alphabet_requires_one_char():
    with pytest.raises(ValueError):
        in_alphabet("ab")