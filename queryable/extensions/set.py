from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

logger = logging.getLogger(__name__)


class _SetOperations(Generic[T]):
    def distinct(self: 'Queryable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'Queryable[T]':
        """
        return distinct elements, keeping the first occurrence of each key in original order.

        without a key selector the element itself is the key. hashable keys compare by
        value; unhashable ones (dicts, lists) compare by identity, so two equal dicts
        that are different objects are both kept.
        """
        from ..queryable import Queryable
        seen = set()
        # id -> key, holding a reference so ids cannot be recycled mid-scan
        seen_by_identity: Dict[int, Any] = {}
        result = []
        for item in self._get_data():
            key = key_selector(item) if key_selector is not None else item
            try:
                if key in seen: continue
                seen.add(key)
            except TypeError:
                if id(key) in seen_by_identity: continue
                if not seen_by_identity:
                    logger.debug(f"distinct: unhashable key of type {type(key).__name__}, comparing by identity")
                seen_by_identity[id(key)] = key
            result.append(item)
        return Queryable(result)
