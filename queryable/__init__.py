r"""
  __ _ _   _  ___ _ __ _   _  __ _| |__ | | ___
 / _` | | | |/ _ \ '__| | | |/ _` | '_ \| |/ _ \
| (_| | |_| |  __/ |  | |_| | (_| | |_) | |  __/
 \__, |\__,_|\___|_|   \__, |\__,_|_.__/|_|\___|
    |_|                |___/
"""

# expose the main classes
from .queryable import Queryable, OrderedQueryable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    query,
    Q
)

# expose the sentinel and errors
from .types import MISSING
from .errors import QueryError, EmptySequenceError, UnsupportedKeyError

# define what `import *` does
__all__ = [
    "Queryable",
    "OrderedQueryable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "query",
    "Q",
    "MISSING",
    "QueryError",
    "EmptySequenceError",
    "UnsupportedKeyError"
]
