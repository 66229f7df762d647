"""nullsafe: a null-safe Optional container for Python 3.13+.

Flat imports (preferred):
    from nullsafe import Optional, Present, Empty, empty, of

Submodule imports (for organization):
    from nullsafe.types import Optional, of
    from nullsafe.errors import EmptyOptionalError
"""

# Types
from nullsafe.types import (
    EMPTY,
    Empty,
    Optional,
    Present,
    empty,
    is_absent,
    of,
)

# Errors
from nullsafe.errors import EmptyOptional, EmptyOptionalError

# Configuration
from nullsafe._config import NullsafeConfig, get_config, init

__all__ = [
    'EMPTY',
    'Empty',
    'EmptyOptional',
    'EmptyOptionalError',
    'NullsafeConfig',
    'Optional',
    'Present',
    'empty',
    'get_config',
    'init',
    'is_absent',
    'of',
]
