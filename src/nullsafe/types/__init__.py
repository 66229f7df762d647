"""Core types: Optional, Present, Empty and their constructors."""

from nullsafe.types.optional import EMPTY, Empty, Optional, Present, empty, is_absent, of

__all__ = [
    'EMPTY',
    'Empty',
    'Optional',
    'Present',
    'empty',
    'is_absent',
    'of',
]
