from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable, OrderedQueryable

class _CoreOperations(Generic[T]):
    def where(self: 'Queryable[T]', predicate: Predicate[T]) -> 'Queryable[T]':
        """filter elements based on a predicate"""
        from ..queryable import Queryable
        return Queryable([x for x in self._get_data() if predicate(x)])

    def select(self: 'Queryable[T]', selector: Selector[T, U]) -> 'Queryable[U]':
        """project each element to a new form"""
        from ..queryable import Queryable
        return Queryable([selector(x) for x in self._get_data()])

    def order_by(self: 'Queryable[T]', key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """sort elements by a key (stable)"""
        from ..queryable import OrderedQueryable
        return OrderedQueryable(self._get_data(), [(key_selector, False)])

    def order_by_descending(self: 'Queryable[T]', key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """
        sort elements by a key in descending order.
        equal keys keep their original relative order, this is not a reversed ascending sort.
        """
        from ..queryable import OrderedQueryable
        return OrderedQueryable(self._get_data(), [(key_selector, True)])

    def take(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """take the first 'count' elements"""
        from ..queryable import Queryable
        # a negative slice bound would count from the end
        return Queryable(self._get_data()[:max(count, 0)])

    def skip(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """skip the first 'count' elements"""
        from ..queryable import Queryable
        return Queryable(self._get_data()[max(count, 0):])
