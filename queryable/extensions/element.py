from __future__ import annotations
import typing
from ..types import *
from ..types import _Missing

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


class _ElementOperations(Generic[T]):
    # --- quantifiers ---

    def any(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition (or, without one, if there are elements at all)"""
        data = self._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self: 'Queryable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence"""
        return all(predicate(x) for x in self._get_data())

    # --- element access ---

    def first(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> Union[T, _Missing]:
        """get first (matching) element, or MISSING"""
        return self._find(self._get_data(), predicate)

    def first_or_default(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first (matching) element or default"""
        item = self.first(predicate)
        return default if item is MISSING else item

    def last(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> Union[T, _Missing]:
        """get last (matching) element, scanning from the end, or MISSING"""
        return self._find(reversed(self._get_data()), predicate)

    def last_or_default(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last (matching) element or default"""
        item = self.last(predicate)
        return default if item is MISSING else item

    @staticmethod
    def _find(items: Iterable[T], predicate: Optional[Predicate[T]]) -> Union[T, _Missing]:
        for item in items:
            if predicate is None or predicate(item): return item
        return MISSING
