import pytest

from sorted_linked_list import sorted_list as sl


@pytest.fixture
def empty_list():
    return sl.SortedLinkedList()


@pytest.fixture
def int_list():
    lst = sl.SortedLinkedList()
    lst.add_all([5, 1, 4, 2, 3])
    return lst


@pytest.fixture
def dup_list():
    lst = sl.SortedLinkedList()
    lst.add_all([1, 2, 2, 3, 2, 4, 2, 5])
    return lst
