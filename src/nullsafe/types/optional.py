"""Optional type: Present[T] | Empty for null-safe values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from nullsafe._logging import get_logger
from nullsafe.errors import EmptyOptionalError

__all__ = ['EMPTY', 'Empty', 'Optional', 'Present', 'empty', 'is_absent', 'of']

log = get_logger(__name__)


def is_absent(value: object) -> bool:
    """Return True if value is an absent-sentinel (None or msgspec.UNSET).

    This is an identity check, not a truthiness check: 0, '', False and
    empty containers are ordinary values.
    """
    return value is None or value is msgspec.UNSET


class Present[T](msgspec.Struct, frozen=True):
    """Present variant of Optional holding exactly one value of type T.

    Use `of()` to build one; constructing Present around an absent-sentinel
    raises TypeError.

    Examples:
        >>> opt = of('Gandalf')
        >>> opt.get()
        'Gandalf'
        >>> opt.map(str.upper)
        Present(value='GANDALF')
        >>> str(opt)
        'Optional[value=Gandalf]'
    """

    value: T

    def __post_init__(self) -> None:
        if is_absent(self.value):
            msg = f'Present cannot wrap {self.value!r}; use of() to admit nullable values'
            raise TypeError(msg)

    def __str__(self) -> str:
        return f'Optional[value={self.value}]'

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_empty(self) -> TypeIs[Empty]:
        """Return False since this is Present."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def flat_map[M](self, mapper: Callable[[T], M]) -> M:
        """Apply mapper to the contained value and return its raw result.

        Unlike the usual monadic flat_map, the result is neither required to
        be an Optional nor flattened: whatever mapper returns, None included,
        comes back verbatim. Use `map` to get an Optional back.

        Args:
            mapper: Function applied once to the contained value.

        Returns:
            The unwrapped result of mapper(value).
        """
        return mapper(self.value)

    def map[M](self, mapper: Callable[[T], M | None]) -> Optional[M]:
        """Apply mapper to the contained value and re-admit it through of().

        Args:
            mapper: Function applied once to the contained value.

        Returns:
            Present(result), or Empty if mapper returned an absent-sentinel.
        """
        return of(self.flat_map(mapper))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return self if predicate(value) holds, else Empty."""
        if predicate(self.value):
            return self
        return EMPTY

    def or_else(self, other: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring other."""
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling supplier."""
        return self.value

    def or_(self, supplier: Callable[[], Optional[T]]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged since this is Present."""
        return self

    def or_else_throw(self, exception_factory: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the contained value without calling exception_factory."""
        return self.value

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        """Call consumer once with the contained value."""
        consumer(self.value)

    def if_present_or_else(self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:  # noqa: ARG002
        """Call consumer once with the contained value; empty_action is skipped."""
        consumer(self.value)


class Empty(msgspec.Struct, frozen=True, gc=False):
    """Empty variant of Optional representing the absence of a value.

    All Empty values compare equal. Use the `EMPTY` constant (or `empty()`)
    instead of instantiating directly so identity checks work too.

    Examples:
        >>> of(None) is EMPTY
        True
        >>> EMPTY.or_else(0)
        0
        >>> str(EMPTY)
        'Optional[empty]'
    """

    def __str__(self) -> str:
        return 'Optional[empty]'

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[Empty]:
        """Return True since this is Empty."""
        return True

    def get(self) -> None:
        """Return None since there is no value; never raises."""
        return None

    def flat_map[T, M](self, mapper: Callable[[T], M]) -> None:  # noqa: ARG002
        """Return None without calling mapper."""
        return None

    def map[T, M](self, mapper: Callable[[T], M]) -> Empty:  # noqa: ARG002
        """Return Empty without calling mapper."""
        return empty()

    def filter[T](self, predicate: Callable[[T], bool]) -> Empty:  # noqa: ARG002
        """Return Empty without calling predicate."""
        return empty()

    def or_else[T](self, other: T) -> T:
        """Return other since this is Empty."""
        return other

    def or_else_get[T](self, supplier: Callable[[], T]) -> T:
        """Call supplier once and return its result."""
        return supplier()

    def or_[T](self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Call supplier once and return the Optional it produces."""
        return supplier()

    def or_else_throw(self, exception_factory: Callable[[], BaseException] | None = None) -> NoReturn:
        """Raise since there is no value to return.

        Args:
            exception_factory: Builds the exception to raise. Defaults to
                EmptyOptionalError.

        Raises:
            EmptyOptionalError: If no exception_factory is given.
        """
        error = exception_factory() if exception_factory is not None else EmptyOptionalError()
        log.debug('optional.empty_unwrapped', error=type(error).__name__)
        raise error

    def if_present[T](self, consumer: Callable[[T], Any]) -> None:  # noqa: ARG002
        """Do nothing; consumer is never called on Empty."""
        return None

    def if_present_or_else[T](self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:  # noqa: ARG002
        """Call empty_action once; consumer is skipped."""
        empty_action()


EMPTY: Empty = Empty()
"""Canonical Empty instance shared by every Optional[T]."""


type Optional[T] = Present[T] | Empty


def empty() -> Empty:
    """Return the canonical Empty instance."""
    return EMPTY


def of[T](value: T | None = None) -> Optional[T]:
    """Admit a nullable value into an Optional.

    This is the only path from nullable code into the Optional world:
    None and msgspec.UNSET become Empty, everything else (falsy values
    included) becomes Present.

    Args:
        value: Value to wrap. Omitting it is the same as passing None.

    Returns:
        Present(value), or EMPTY for an absent-sentinel.
    """
    if is_absent(value):
        return EMPTY
    return Present(value)
