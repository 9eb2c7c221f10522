import abc
import enum as e
import json
import typing as t
import itertools as it

import attr as a

from . import comparators as cmp
from .lib import utils


logger = utils.get_logger(__name__)

Element = t.Union[int, str]


class BaseSortedListException(Exception, metaclass=abc.ABCMeta):
    pass


class KindMismatch(BaseSortedListException, TypeError):
    pass


class UnsupportedKind(BaseSortedListException, TypeError):
    pass


class ListUnderflow(BaseSortedListException, IndexError):
    pass


class ElementKind(e.Enum):
    INT = 'int'
    STRING = 'string'

    @classmethod
    def of(cls, value: t.Any, /) -> 'ElementKind':
        # bool is an int subclass but not an accepted element
        if isinstance(value, bool):
            raise UnsupportedKind(
                'Unsupported value type: expected int or str, got bool.'
            )
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, str):
            return cls.STRING
        raise UnsupportedKind(
            'Unsupported value type: expected int or str, got %s.'
            % type(value).__name__
        )

    def __str__(self):
        return self.value


@a.define(eq=False)
class Node:
    value: Element
    prev: 't.Optional[Node]' = a.field(default=None, repr=False)
    next: 't.Optional[Node]' = a.field(default=None, repr=False)


@a.define(eq=False)
class SortedLinkedList:
    """A doubly linked list that keeps its elements sorted on every insertion.

    Holds either integers or strings, never both: the kind is locked by the
    first insertion and released only when the list becomes empty again.
    Inserting at either end is O(1); any other insertion, removal or lookup
    is a linear scan that stops as soon as sortedness rules out a match.
    """

    comparator: t.Optional[cmp.Comparator[t.Any]] = a.field(default=None)
    _head: t.Optional[Node] = a.field(init=False, default=None, repr=False)
    _tail: t.Optional[Node] = a.field(init=False, default=None, repr=False)
    _size: int = a.field(init=False, default=0, repr=False)
    _locked_kind: t.Optional[ElementKind] = a.field(
        init=False, default=None, repr=False
    )

    def _compare(self, x: Element, y: Element, /) -> int:
        if self.comparator is not None:
            return self.comparator(x, y)
        return cmp.default_order(x, y)

    def _lock_or_check(self, value: Element, /):
        kind = ElementKind.of(value)
        if self._locked_kind is None:
            self._locked_kind = kind
            logger.debug('%s locked to %s values' % (self, kind))
            return
        self._check_kind(value)

    def _check_kind(self, value: Element, /):
        kind = ElementKind.of(value)
        if self._locked_kind is not None and kind is not self._locked_kind:
            logger.warning(
                '%s rejected %r: list holds %s, got %s'
                % (self, value, self._locked_kind, kind)
            )
            raise KindMismatch(
                'Mismatched value type: list holds %s, got %s.'
                % (self._locked_kind, kind)
            )

    def _unlink(self, node: Node, /):
        prev, next_ = node.prev, node.next
        if prev is None:
            self._head = next_
        else:
            prev.next = next_
        if next_ is None:
            self._tail = prev
        else:
            next_.prev = prev
        node.prev = node.next = None
        self._size -= 1
        logger.debug('%s unlinked %r' % (self, node.value))

        if self._size == 0:
            self._locked_kind = None
            logger.debug('%s emptied, type lock released' % self)

    def _underflow(self, operation: str, /) -> ListUnderflow:
        logger.warning('%s called %s on an empty list' % (self, operation))
        return ListUnderflow('List is empty.')

    def add(self, value: Element, /):
        """Insert a value at its sorted position.

        Args:
            value (`int | str`): The value to insert

        Raises:
            `KindMismatch`: If the list already holds values of the other kind
            `UnsupportedKind`: If the value is neither an int nor a str
        """
        self._lock_or_check(value)
        node = Node(value)

        if self._head is None or self._tail is None:
            self._head = self._tail = node
            self._size = 1
            logger.debug('%s inserted %r into an empty list' % (self, value))
            return

        if self._compare(value, self._head.value) <= 0:
            node.next = self._head
            self._head.prev = node
            self._head = node
            self._size += 1
            logger.debug('%s prepended %r' % (self, value))
            return

        if self._compare(value, self._tail.value) >= 0:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
            self._size += 1
            logger.debug('%s appended %r' % (self, value))
            return

        curr = self._head
        while curr is not None and self._compare(value, curr.value) > 0:
            curr = curr.next
        # the tail check above guarantees a stopping node
        assert curr is not None
        prev = curr.prev
        node.next, node.prev = curr, prev
        if prev is not None:
            prev.next = node
        curr.prev = node
        self._size += 1
        logger.debug('%s inserted %r before %r' % (self, value, curr.value))

    def add_all(self, values: t.Iterable[Element], /):
        """Add each value in iteration order.

        Stops at the first rejected value; values added before it stay.
        """
        for value in values:
            self.add(value)

    def remove(self, value: Element, /) -> bool:
        """Remove the first node equal to ``value``.

        Returns:
            `bool`: Whether a node was removed

        Raises:
            `KindMismatch`: If the list is non-empty and holds the other kind
        """
        if self._head is None:
            return False
        self._check_kind(value)

        curr = self._head
        while curr is not None:
            c = self._compare(value, curr.value)
            if c == 0:
                self._unlink(curr)
                return True
            if c < 0:
                return False
            curr = curr.next
        return False

    def remove_all(self, value: Element, /) -> int:
        """Remove every node equal to ``value`` and return how many went."""
        if self._head is None:
            return 0
        self._check_kind(value)

        removed = 0
        curr = self._head
        while curr is not None:
            c = self._compare(value, curr.value)
            if c == 0:
                next_ = curr.next
                self._unlink(curr)
                removed += 1
                curr = next_
            elif c < 0:
                break
            else:
                curr = curr.next
        if removed:
            logger.debug('%s removed %i occurrence(s) of %r' % (self, removed, value))
        return removed

    def contains(self, value: Element, /) -> bool:
        return self.index_of(value) != -1

    def index_of(self, value: Element, /) -> int:
        if self._head is None:
            return -1
        self._check_kind(value)

        for i, node in enumerate(self._nodes()):
            c = self._compare(value, node.value)
            if c == 0:
                return i
            if c < 0:
                break
        return -1

    def first(self) -> Element:
        if self._head is None:
            raise self._underflow('first')
        return self._head.value

    def last(self) -> Element:
        if self._tail is None:
            raise self._underflow('last')
        return self._tail.value

    def pop_first(self) -> Element:
        if self._head is None:
            raise self._underflow('pop_first')
        value = self._head.value
        self._unlink(self._head)
        return value

    def pop_last(self) -> Element:
        if self._tail is None:
            raise self._underflow('pop_last')
        value = self._tail.value
        self._unlink(self._tail)
        return value

    def clear(self):
        """Drop every element and release the type lock.

        The comparator is kept.
        """
        self._head = self._tail = None
        self._size = 0
        self._locked_kind = None
        logger.debug('%s cleared' % self)

    def to_array(self) -> list[Element]:
        return list(self)

    def count(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def locked_kind(self) -> t.Optional[ElementKind]:
        return self._locked_kind

    def get_locked_kind(self) -> t.Optional[ElementKind]:
        return self._locked_kind

    def copy(self) -> 'SortedLinkedList':
        """Build an independent list with the same comparator and values."""
        copy_ = self.__class__(self.comparator)
        copy_.add_all(self.to_array())
        return copy_

    def slice(
        self, start: int, length: t.Optional[int] = None
    ) -> 'SortedLinkedList':
        """Build a new list from a sub-range of this one.

        Args:
            start (`int`): Zero-based index of the first element taken
            length (`int`, optional): Number of elements. Defaults to the remainder.
                Zero or negative yields an empty list; it never counts from the end.

        Returns:
            `SortedLinkedList`: A list with the same comparator, empty when
            ``start`` is negative or past the end
        """
        values = self.to_array()
        result = self.__class__(self.comparator)
        if start < 0 or start >= len(values):
            return result
        stop = len(values) if length is None else start + max(length, 0)
        result.add_all(values[start:stop])
        return result

    def _slice_by(self, index) -> 'SortedLinkedList':
        result = self.__class__(self.comparator)
        result.add_all(self.to_array()[index])
        return result

    def with_(self, value: Element, /):
        self.add(value)
        return self

    def with_all(self, values: t.Iterable[Element], /):
        self.add_all(values)
        return self

    def without(self, value: Element, /):
        self.remove(value)
        return self

    def without_all(self, value: Element, /):
        self.remove_all(value)
        return self

    def cleared(self):
        self.clear()
        return self

    def json_serialize(self) -> list[Element]:
        return self.to_array()

    def to_json(self, **kwargs: t.Any) -> str:
        return json.dumps(self.json_serialize(), **kwargs)

    def _nodes(self) -> t.Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> t.Iterator[Element]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> t.Iterator[Element]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size != 0

    def __contains__(self, value: object):
        try:
            return self.contains(value)  # type: ignore[arg-type]
        except UnsupportedKind:
            return False

    def __getitem__(self, index: 'int | slice'):
        if isinstance(index, slice):
            return self._slice_by(index)
        if not isinstance(index, int):
            raise TypeError(
                '%s indices must be integers or slices, not %s'
                % (self.__class__.__name__, type(index).__name__)
            )
        i = index + self._size if index < 0 else index
        if not 0 <= i < self._size:
            raise IndexError('%s index out of range' % self.__class__.__name__)
        # walk from whichever end is closer
        if i < self._size // 2:
            return next(it.islice(self, i, None))
        return next(it.islice(reversed(self), self._size - 1 - i, None))

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo: dict[int, t.Any]):
        return self.copy()

    def __repr__(self):
        return '%s([%s])' % (
            self.__class__.__name__,
            ' ⮂ '.join(map(repr, self)),
        )

    def __str__(self):
        return '%s@%i' % (self.__class__.__name__, id(self))

    def __bytes__(self):
        return self.__repr__().encode('utf-8')
