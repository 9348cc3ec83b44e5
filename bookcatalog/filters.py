# bookcatalog/filters.py
from typing import Callable, Iterable, List
from bookcatalog.domain import Book


def create_rating_filter(threshold: float) -> Callable[[Book], bool]:
    """Create a closure for the minimum rating filter"""

    def rating_filter(book: Book) -> bool:
        return book.rating >= threshold

    return rating_filter


def sort_by_rating_desc(books: Iterable[Book]) -> List[Book]:
    """Sort books highest rated first, equal ratings keep their order"""
    # sorted() stays stable with reverse=True
    return sorted(books, key=lambda book: book.rating, reverse=True)
