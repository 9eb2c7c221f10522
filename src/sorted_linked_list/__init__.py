"""A doubly linked list that keeps int or str elements sorted."""
from . import comparators
from .comparators import Comparator, UnknownComparator, get_comparator, reverse
from .sorted_list import (
    BaseSortedListException,
    ElementKind,
    KindMismatch,
    ListUnderflow,
    SortedLinkedList,
    UnsupportedKind,
)

__all__ = [
    'BaseSortedListException',
    'Comparator',
    'ElementKind',
    'KindMismatch',
    'ListUnderflow',
    'SortedLinkedList',
    'UnknownComparator',
    'UnsupportedKind',
    'comparators',
    'get_comparator',
    'reverse',
]
