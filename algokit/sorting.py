"""Sorting records and binary search over sorted sequences."""

from bisect import bisect_left
from dataclasses import dataclass

_ALPHABET = "abcdfghijklmnopqrstuvwxyz"


@dataclass(frozen=True, order=True)
class Book:
    """A book ordered by title, then author."""

    title: str
    author: str


def sort_points(points):
    """Sort (x, y) pairs by x, then y."""
    return sorted(points, key=lambda p: (p[0], p[1]))


def parse_book(line):
    """Parse a line of the form 'Title by Author'."""
    text = line.split("\n", 1)[0]
    title, sep, author = text.partition(" by ")
    if not sep:
        raise ValueError(f"expected 'title by author': {text!r}")
    return Book(title, author)


def sort_books(books):
    """Sort books by title, then author."""
    return sorted(books)


def binary_search(items, key):
    """Index of key in the sorted sequence items, or None if absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None


def in_alphabet(ch):
    """Whether a single character, folded to lower case, is in the alphabet table."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    return binary_search(_ALPHABET, ch.lower()) is not None