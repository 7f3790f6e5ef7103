from __future__ import annotations
import logging
import operator
import typing
from functools import reduce
from ..errors import EmptySequenceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

logger = logging.getLogger(__name__)


class _StatsOperations(Generic[T]):
    def _get_values(self: 'Queryable[T]', selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract the numeric values an aggregate folds over"""
        data = self._get_data()
        if selector is None: return data
        return [selector(x) for x in data]

    def sum(self: 'Queryable[T]', selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum as a left fold starting from 0"""
        values = self._get_values(selector)
        return reduce(operator.add, values, 0)

    def average(self: 'Queryable[T]', selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average, raising EmptySequenceError for an empty sequence"""
        count = len(self._get_data())
        if count == 0:
            logger.debug("average: empty sequence")
            raise EmptySequenceError("cannot calculate average of empty sequence")
        return self.sum(selector) / count

    def count(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._get_data())
        return sum(1 for x in self._get_data() if predicate(x))
