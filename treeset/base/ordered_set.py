from typing import Any, Callable, Iterable, Iterator, Optional

from ..logger import logger
from .slot import Slot


class OrderedSet:
    """
    A duplicate-free set kept ordered by an unbalanced binary search tree.

    Values only need ``<`` and ``>`` forming a total order, or a ``key``
    function producing such values. Values whose keys compare equal are the
    same member: the first one inserted is kept.

    The tree is never rebalanced, so inserting values in sorted order builds
    a chain as deep as the set is large.
    """

    def __init__(self, iterable: Optional[Iterable] = None, key: Optional[Callable[[Any], Any]] = None):
        self._root = Slot()
        self._key = key

        # Only incremented when the root slot reports a new node
        self._size = 0

        if iterable is not None:
            self.update(iterable)

    @property
    def key(self):
        return self._key

    def _key_of(self, value):
        if self._key is None:
            return value
        return self._key(value)

    def insert(self, value: Any) -> bool:
        """
        Insert ``value``. Returns False, leaving the set unchanged, if an equal value is already stored.
        """
        if not self._root.insert(value, self._key_of(value)):
            logger.debug(f"Ignoring duplicate value {value!r}")
            return False

        self._size += 1
        logger.debug(f"Inserted {value!r}, set now holds {self._size} values")
        return True

    add = insert

    def update(self, iterable: Iterable):
        for value in iterable:
            self.insert(value)

    def has(self, value: Any) -> bool:
        return self._root.has(self._key_of(value))

    def get(self, value: Any, default=None):
        """
        Return the stored member equal to ``value``, or ``default``.
        """
        node = self._root.find(self._key_of(value))
        if node is None:
            return default
        return node.value

    def depth(self) -> int:
        return self._root.depth()

    def irange(self, minimum=None, maximum=None, inclusive=(True, True), reverse=False) -> Iterator[Any]:
        """
        Iterate over values between ``minimum`` and ``maximum``.

        Bounds are values (passed through ``key``); ``None`` leaves a side open.
        ``inclusive`` is a pair of booleans for the lower and upper bound.
        """
        if not isinstance(inclusive, (tuple, list)) or len(inclusive) != 2:
            raise ValueError(f"inclusive must be a pair of booleans, got {inclusive!r}")

        low = None if minimum is None else self._key_of(minimum)
        high = None if maximum is None else self._key_of(maximum)

        nodes = self._root.walk_range(low, high, tuple(inclusive), reverse)
        return (node.value for node in nodes)

    def __contains__(self, value):
        return self.has(value)

    def __iter__(self):
        for node in self._root.walk():
            yield node.value

    def __reversed__(self):
        for node in self._root.walk(reverse=True):
            yield node.value

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __repr__(self):
        content = ", ".join(repr(value) for value in self)
        if self._key is None:
            return f"OrderedSet([{content}])"
        return f"OrderedSet([{content}], key={self._key!r})"
