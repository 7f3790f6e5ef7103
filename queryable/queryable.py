from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- operator mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.stats import _StatsOperations
from .extensions.element import _ElementOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IQueryable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base queryable implementation ---

class _BaseQueryable(IQueryable[T]):
    def __init__(self, data: List[T]):
        """
        init with the list to wrap. the instance takes ownership of it: operators
        never mutate it, and callers must not either.
        """
        self._data = data if isinstance(data, list) else list(data)

    def _get_data(self) -> List[T]:
        return self._data

    def to_array(self) -> List[T]:
        """
        expose the live backing list. it is shared with this instance, so mutating
        it changes what later operators see. use to.list() for a copy.
        """
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        preview = self._data[:5]
        more = ", ..." if len(self._data) > 5 else ""
        return f"{type(self).__name__}([{', '.join(map(repr, preview))}{more}], count={len(self._data)})"

# --- main queryable class ---

class Queryable(
    _BaseQueryable[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _StatsOperations[T],
    _ElementOperations[T]
):
    """an eager, linq-inspired query wrapper over an in-memory sequence."""
    def __init__(self, data: List[T]):
        super().__init__(data)
        self.to = TerminalAccessor(self)

# --- ordered queryable class ---

class OrderedQueryable(Queryable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: List[T], sort_keys: List[Tuple[KeySelector[T, Any], bool]]):
        self._source = source
        self._sort_keys = sort_keys
        super().__init__(self._sort(source, sort_keys))

    @staticmethod
    def _sort(data: List[T], sort_keys: List[Tuple[KeySelector[T, Any], bool]]) -> List[T]:
        """apply all sort levels at once using stable sorts."""
        logger.debug(f"sorting {len(data)} elements by {len(sort_keys)} key(s)")
        # python's sort is stable, even with reverse=True, so sort from the last key to the first
        result = list(data)
        for key_selector, is_descending in reversed(sort_keys):
            result.sort(key=key_selector, reverse=is_descending)
        return result

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """secondary sort ascending"""
        return OrderedQueryable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """secondary sort descending"""
        return OrderedQueryable(self._source, self._sort_keys + [(key_selector, True)])
