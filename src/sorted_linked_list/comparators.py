"""Stateless ordering functions usable as a `SortedLinkedList` comparator.

Every comparator takes two elements of the same kind and returns a negative
number, zero or a positive number when the first sorts before, together with
or after the second.

Example:

>>> lst = SortedLinkedList(comparators.ascending_text_ci)
>>> lst.add_all(['banana', 'Apple', 'cherry'])
>>> lst.to_array()
['Apple', 'banana', 'cherry']
"""
import re
import typing as t
import functools as ft

from .lib import utils


_T = t.TypeVar('_T')

Comparator = t.Callable[[_T, _T], int]
"""A type alias for a three-way comparison function"""

_DIGITS: t.Final = re.compile(r'[0-9]+')
_LEADING_SPACE: t.Final = re.compile(r'\s*')


class UnknownComparator(KeyError):
    pass


def default_order(a: 'int | str', b: 'int | str', /) -> int:
    # decided per call on the runtime kind of the operands
    if isinstance(a, int) and isinstance(b, int):
        return utils.three_way(a, b)
    return utils.three_way(str(a), str(b))


def ascending_integer(a: int, b: int, /) -> int:
    return utils.three_way(a, b)


def descending_integer(a: int, b: int, /) -> int:
    return utils.three_way(b, a)


def ascending_text(a: str, b: str, /) -> int:
    """Case-sensitive code point order, the implicit default for text."""
    return utils.three_way(a, b)


def ascending_text_ci(a: str, b: str, /) -> int:
    """Case-insensitive ascending order, folding ASCII letters only."""
    return utils.three_way(utils.ascii_lower(a), utils.ascii_lower(b))


def descending_text_ci(a: str, b: str, /) -> int:
    return ascending_text_ci(b, a)


def _natural_compare(a: str, b: str, /) -> int:
    i = _LEADING_SPACE.match(a).end()  # type: ignore[union-attr]
    j = _LEADING_SPACE.match(b).end()  # type: ignore[union-attr]
    zeros_tiebreak = 0

    while i < len(a) and j < len(b):
        run_a, run_b = _DIGITS.match(a, i), _DIGITS.match(b, j)
        if run_a and run_b:
            digits_a, digits_b = run_a.group(), run_b.group()
            stripped_a, stripped_b = digits_a.lstrip('0'), digits_b.lstrip('0')
            if len(stripped_a) != len(stripped_b):
                return utils.sign(len(stripped_a) - len(stripped_b))
            if stripped_a != stripped_b:
                return utils.three_way(stripped_a, stripped_b)
            if not zeros_tiebreak:
                # more leading zeros sorts first
                zeros_tiebreak = utils.sign(len(digits_b) - len(digits_a))
            i, j = run_a.end(), run_b.end()
            continue
        if a[i] != b[j]:
            return utils.three_way(a[i], b[j])
        i += 1
        j += 1

    if i < len(a):
        return 1
    if j < len(b):
        return -1
    return zeros_tiebreak


def natural_order(a: str, b: str, /) -> int:
    """Order embedded digit runs by numeric value.

    ``'file2.txt'`` sorts before ``'file10.txt'`` and ``'v1.2'`` before
    ``'v1.10'``. Leading whitespace is ignored.
    """
    return _natural_compare(a, b)


def natural_order_ci(a: str, b: str, /) -> int:
    return _natural_compare(utils.ascii_lower(a), utils.ascii_lower(b))


def by_length(a: str, b: str, /) -> int:
    """Shorter strings first; strings of equal length compare equal."""
    return utils.three_way(len(a), len(b))


def reverse(comparator: Comparator[_T], /) -> Comparator[_T]:
    """Invert any comparator by swapping its arguments.

    Args:
        comparator (`Comparator`): The comparator to invert

    Returns:
        `Comparator`: A new comparator computing ``comparator(b, a)``
    """

    @ft.wraps(comparator)
    def reversed_(a: _T, b: _T, /) -> int:
        return comparator(b, a)

    reversed_.__name__ = 'reverse(%s)' % getattr(
        comparator, '__name__', repr(comparator)
    )
    return reversed_


def as_key(comparator: Comparator[_T], /) -> t.Callable[[_T], t.Any]:
    return ft.cmp_to_key(comparator)


REGISTRY: t.Final[dict[str, Comparator[t.Any]]] = {
    'default': default_order,
    'int_asc': ascending_integer,
    'int_desc': descending_integer,
    'asc': ascending_text,
    'ci_asc': ascending_text_ci,
    'ci_desc': descending_text_ci,
    'natural': natural_order,
    'natural_ci': natural_order_ci,
    'by_length': by_length,
}


def get_comparator(name: str, /) -> Comparator[t.Any]:
    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownComparator(
            'Unknown comparator %r, expected one of: %s'
            % (name, ', '.join(REGISTRY))
        ) from None
