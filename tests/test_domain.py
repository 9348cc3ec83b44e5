import dataclasses

import pytest

from bookcatalog.domain import Book
from bookcatalog.filters import create_rating_filter, sort_by_rating_desc


def test_book_is_immutable():
    book = Book("Dune", "Frank Herbert", 4.3)

    with pytest.raises(dataclasses.FrozenInstanceError):
        book.rating = 5.0


def test_book_value_equality():
    assert Book("Dune", "Frank Herbert", 4.3) == Book("Dune", "Frank Herbert", 4.3)
    assert Book("Dune", "Frank Herbert", 4.3) != Book("Dune", "Frank Herbert", 4.0)


def test_book_rating_coerced_to_float():
    book = Book("Dune", "Frank Herbert", 4)

    assert isinstance(book.rating, float)


def test_book_rating_range_not_enforced():
    assert Book("Overrated", "", 7.5).rating == 7.5
    assert Book("Underrated", "", -1.0).rating == -1.0


@pytest.mark.parametrize("title, author, rating", [
    ("", "Frank Herbert", 4.3),
    ("Dune", None, 4.3),
    ("Dune", "Frank Herbert", "4.3"),
    ("Dune", "Frank Herbert", False),
])
def test_book_rejects_invalid_fields(title, author, rating):
    with pytest.raises(ValueError):
        Book(title, author, rating)


def test_book_dict_conversion():
    book = Book.from_dict({"title": "Dune", "author": "Frank Herbert", "rating": 4.3})

    assert book.to_dict() == {"title": "Dune", "author": "Frank Herbert", "rating": 4.3}
    assert Book.from_dict({"title": "Dune", "rating": 4.3}).author == ""


def test_rating_filter_is_inclusive():
    at_least_four = create_rating_filter(4.0)

    assert at_least_four(Book("A", "", 4.0)) == True
    assert at_least_four(Book("B", "", 3.99)) == False


def test_sort_by_rating_desc_is_stable(sample_books):
    result = sort_by_rating_desc(sample_books)

    assert [book.title for book in result] == [
        "Dune", "Hyperion", "Solaris", "Foundation", "Neuromancer"
    ]
    assert result is not sample_books


def test_book_rejects_rating_too_large_for_float():
    with pytest.raises(ValueError, match="too large"):
        Book("Big Number", "", 10 ** 400)
