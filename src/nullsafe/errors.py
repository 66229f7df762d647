"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyOptional',
    'EmptyOptionalError',
]


class EmptyOptional(msgspec.Struct, frozen=True, gc=False):
    """No value present - struct variant for code that returns errors as values."""

    reason: str | None = None

    def to_exception(self) -> EmptyOptionalError:
        """Convert to exception for raise-based code."""
        return EmptyOptionalError(self.reason)


class EmptyOptionalError(LookupError):
    """No value present - exception variant, raised by Empty.or_else_throw()."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason or 'No value present')

    def to_struct(self) -> EmptyOptional:
        """Convert to struct for value-based code."""
        return EmptyOptional(self.reason)
