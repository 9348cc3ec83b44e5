import logging
from collections.abc import Mapping
from functools import reduce
from typing import Any, Sequence, Tuple
from .ftypes import Either, Right, Left, try_except
from .domain import Book
from .settings import RATING_MIN, RATING_MAX

logger = logging.getLogger(__name__)


def _warn_off_scale(book: Book) -> Book:
    if not RATING_MIN <= book.rating <= RATING_MAX:
        logger.warning(f"Rating {book.rating} of '{book.title}' is outside {RATING_MIN}-{RATING_MAX}")
    return book


def validate_record(record: Any) -> Either[str, Book]:
    """Validate a raw seed record: title, optional author, numeric rating"""

    if not isinstance(record, Mapping):
        return Left(f"Record must be an object, got {type(record).__name__}")

    title = record.get("title")
    if not isinstance(title, str) or not title.strip():
        return Left(f"Title must be a non-empty string, got {title!r}")

    author = record.get("author", "")
    if not isinstance(author, str):
        return Left(f"Author must be a string, got {author!r}")

    if "rating" not in record:
        return Left(f"Book '{title}' has no rating")
    rating = record["rating"]
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return Left(f"Rating of '{title}' must be a number, got {rating!r}")

    return try_except(lambda: Book.from_dict(record), f"Invalid book '{title}'").map(_warn_off_scale)


def validate_records(records: Sequence[Any]) -> Either[str, Tuple[Book, ...]]:
    """Validate every record, stopping at the first failure"""

    if not isinstance(records, (list, tuple)):
        return Left(f"Catalog records must be a list, got {type(records).__name__}")

    def step(acc: Either[str, Tuple[Book, ...]], indexed) -> Either[str, Tuple[Book, ...]]:
        index, record = indexed
        return acc.bind(
            lambda books: validate_record(record)
            .map_error(lambda error: f"record {index}: {error}")
            .map(lambda book: books + (book,))
        )

    return reduce(step, enumerate(records), Right(()))
