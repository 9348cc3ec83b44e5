"""
Result type for record validation.

A ``Right`` carries a validated value, a ``Left`` carries the message
explaining why a record was rejected. Validation steps chain with
``bind`` and stop at the first ``Left``.
"""

from typing import Generic, TypeVar, Callable
from dataclasses import dataclass

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Either(Generic[E, T]):

    def map(self, func: Callable[[T], U]) -> 'Either[E, U]':
        raise NotImplementedError

    def bind(self, func: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        raise NotImplementedError

    def map_error(self, func: Callable[[E], U]) -> 'Either[U, T]':
        raise NotImplementedError

    def fold(self, on_left: Callable[[E], U], on_right: Callable[[T], U]) -> U:
        """Collapse to a single value, one handler per side"""
        raise NotImplementedError

    def get_or_else(self, default: T) -> T:
        return self.fold(lambda _: default, lambda value: value)

    def is_right(self) -> bool:
        raise NotImplementedError

    def is_left(self) -> bool:
        return not self.is_right()


@dataclass(frozen=True)
class Right(Either[E, T]):
    value: T

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return Right(func(self.value))

    def bind(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return func(self.value)

    def map_error(self, func: Callable[[E], U]) -> Either[U, T]:
        return self

    def fold(self, on_left: Callable[[E], U], on_right: Callable[[T], U]) -> U:
        return on_right(self.value)

    def is_right(self) -> bool:
        return True


@dataclass(frozen=True)
class Left(Either[E, T]):
    error: E

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return self

    def bind(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return self

    def map_error(self, func: Callable[[E], U]) -> Either[U, T]:
        return Left(func(self.error))

    def fold(self, on_left: Callable[[E], U], on_right: Callable[[T], U]) -> U:
        return on_left(self.error)

    def is_right(self) -> bool:
        return False


def try_except(func: Callable[[], T], error_msg: str) -> Either[str, T]:
    """Run ``func``; a construction error becomes a ``Left`` prefixed with ``error_msg``"""
    try:
        return Right(func())
    except (ValueError, KeyError, TypeError, OverflowError) as e:
        return Left(f"{error_msg}: {e}")
