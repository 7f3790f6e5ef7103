from __future__ import annotations
import logging
import numbers
import typing
from collections import defaultdict
from ..errors import UnsupportedKeyError
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

logger = logging.getLogger(__name__)

# key types group_by accepts; numbers.Real covers numpy scalars too
GROUP_KEY_TYPES = (str, numbers.Real)


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Queryable[T]', key_selector: KeySelector[T, GroupKey]) -> Dict[GroupKey, List[T]]:
        """
        group elements by a key.

        groups appear in order of first key occurrence and each group keeps the
        source order of its members. keys must be str or real numbers (numpy
        scalars included). bool is rejected so that True and 1 never share a group.
        """
        groups = defaultdict(list)
        for item in self._get_data():
            key = key_selector(item)
            if isinstance(key, bool) or not isinstance(key, GROUP_KEY_TYPES):
                logger.debug(f"group_by: rejecting key of type {type(key).__name__}")
                raise UnsupportedKeyError(key, GROUP_KEY_TYPES)
            groups[key].append(item)
        logger.debug(f"group_by: {len(self._get_data())} elements into {len(groups)} groups")
        return dict(groups)
