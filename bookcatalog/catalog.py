"""
In-memory book catalog.

A ``BookCatalog`` is built once from an ordered sequence of books and
answers read-only queries over it. Construction is the only step that
can fail; once built, queries never raise.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Union

from . import settings
from .compose import pipe, log_size
from .domain import Book
from .exceptions import CatalogUnavailable
from .filters import create_rating_filter, sort_by_rating_desc
from .sources import load_seed
from .validators import validate_records

logger = logging.getLogger(__name__)


class BookCatalog:
    """
    Fixed, ordered collection of books.

    The books are held in a tuple and are never mutated. Every query
    returns a new list, so callers can modify results freely.
    """

    def __init__(self, books: Iterable[Book]):
        if books is None:
            raise CatalogUnavailable("Catalog data source supplied no books")

        try:
            books = tuple(books)
        except TypeError as e:
            raise CatalogUnavailable(f"Catalog data source is not iterable: {e}") from e

        for index, book in enumerate(books):
            if not isinstance(book, Book):
                logger.warning(f"Rejected catalog entry {index}: {book!r}")
                raise CatalogUnavailable(
                    f"record {index}: expected Book, got {type(book).__name__}"
                )

        self._books = books
        logger.info(f"Initialized book catalog with {len(books)} books")

    @classmethod
    def from_records(cls, records: Sequence[Any]) -> "BookCatalog":
        """Build a catalog from raw ``{"title", "author", "rating"}`` records."""
        def reject(error: str):
            logger.warning(f"Rejected catalog records: {error}")
            raise CatalogUnavailable(error)

        return validate_records(records).fold(reject, cls)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "BookCatalog":
        """Build a catalog from a JSON seed file."""
        return cls.from_records(load_seed(path))

    def get_all_books(self) -> List[Book]:
        """All books in insertion order."""
        return list(self._books)

    def get_books_by_rating(self, threshold: float) -> List[Book]:
        """Books rated at or above ``threshold``, highest rated first."""
        return pipe(
            self._books,
            lambda books: filter(create_rating_filter(threshold), books),
            sort_by_rating_desc,
            log_size(logger, f"Rating query >= {threshold} matched %d of {len(self._books)} books"),
        )

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)


def load_catalog(path: Optional[Union[str, Path]] = None) -> BookCatalog:
    """Load the catalog from ``path``, or from the configured seed file."""
    return BookCatalog.from_json(path if path is not None else settings.SEED_PATH)
