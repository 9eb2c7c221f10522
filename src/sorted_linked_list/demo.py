import time
import random

import dotenv

from sorted_linked_list import comparators as cmp, sorted_list as sl
from sorted_linked_list.lib import utils


def _show(values: 'sl.SortedLinkedList | list[sl.Element]') -> str:
    return ', '.join(map(str, values))


def main():
    dotenv.load_dotenv()  # pyright: reportUnknownMemberType=false
    utils.configure_logging()

    print('1. Integers:')
    numbers = sl.SortedLinkedList()
    numbers.add_all([5, 1, 9, 3, 7, 2])
    print('Added [5, 1, 9, 3, 7, 2], result: %s' % _show(numbers))
    print('Count: %i' % len(numbers))
    print('First: %s, Last: %s' % (numbers.first(), numbers.last()))
    print('Contains 3: %s' % ('yes' if 3 in numbers else 'no'))
    print('Contains 6: %s' % ('yes' if 6 in numbers else 'no'))

    print('\n2. Strings with comparators:')
    for name in ('asc', 'ci_asc', 'natural', 'by_length'):
        strings = sl.SortedLinkedList(cmp.get_comparator(name))
        strings.add_all(['banana', 'Apple', 'cherry', 'date', 'v1.10', 'v1.2'])
        print('%s: %s' % (name, _show(strings)))

    print('\n3. Fluent chaining:')
    fluent = (
        sl.SortedLinkedList()
        .with_(5)
        .with_(1)
        .with_all([3, 9, 2])
        .without(9)
        .with_(7)
    )
    print('Fluent result: %s' % _show(fluent))

    print('\n4. Removal:')
    advanced = sl.SortedLinkedList().with_all([1, 2, 2, 3, 2, 4, 2, 5])
    print('Original: %s' % _show(advanced))
    print('Index of 2: %i' % advanced.index_of(2))
    print('Remove first 2: %s' % ('success' if advanced.remove(2) else 'not found'))
    print('Removed %i more 2s: %s' % (advanced.remove_all(2), _show(advanced)))
    min_, max_ = advanced.pop_first(), advanced.pop_last()
    print('Popped min (%s) and max (%s), remaining: %s' % (min_, max_, _show(advanced)))

    print('\n5. Type lock:')
    locked = sl.SortedLinkedList().with_(42)
    print('Type locked to: %s' % locked.get_locked_kind())
    try:
        locked.add('string')
    except sl.KindMismatch as exc:
        print('Type error caught: %s' % exc)
    locked.clear()
    print('After clear, type lock: %s' % locked.get_locked_kind())
    locked.add('now a string')
    print('New type lock: %s' % locked.get_locked_kind())

    print('\n6. Iteration:')
    iterable = sl.SortedLinkedList().with_all([3, 1, 4, 1, 5])
    print('Forward: %s' % _show(iterable))
    print('Backward: %s' % _show(list(reversed(iterable))))
    drained = iterable.copy()
    popped: 'list[sl.Element]' = []
    while not drained.is_empty():
        popped.append(drained.pop_first())
    print('Popped from copy: %s (copy now empty)' % _show(popped))

    print('\n7. JSON: %s' % sl.SortedLinkedList().with_all([3, 1, 4]).to_json())

    print('\n8. Copying and slicing:')
    original = sl.SortedLinkedList().with_all(range(1, 10))
    print('Original: %s' % _show(original))
    print('Copy: %s' % _show(original.copy()))
    print('Slice (index 2, length 3): %s' % _show(original.slice(2, 3)))

    print('\n9. Custom comparators:')
    descending = sl.SortedLinkedList(cmp.descending_integer).with_all([1, 5, 3, 9, 2])
    print('Descending integers: %s' % _show(descending))
    reverse_natural = sl.SortedLinkedList(cmp.reverse(cmp.natural_order))
    reverse_natural.add_all(['file1.txt', 'file10.txt', 'file2.txt'])
    print('Reverse natural: %s' % _show(reverse_natural))
    by_last_char = sl.SortedLinkedList(lambda x, y: utils.three_way(x[-1], y[-1]))
    by_last_char.add_all(['banana', 'apple', 'cherry', 'date'])
    print('By last character: %s' % _show(by_last_char))

    print('\n10. Timing:')
    data = list(range(1, 1001))
    random.shuffle(data)
    large = sl.SortedLinkedList()

    start = time.perf_counter()
    large.add_all(data)
    add_time = time.perf_counter() - start

    start = time.perf_counter()
    found = 500 in large
    search_time = time.perf_counter() - start

    start = time.perf_counter()
    large.remove(750)
    remove_time = time.perf_counter() - start

    print('Added 1,000 shuffled items in %.2fms' % (add_time * 1000))
    print('Search: %.4fms (found: %s)' % (search_time * 1000, 'yes' if found else 'no'))
    print('Remove: %.4fms' % (remove_time * 1000))
    print('Final count: %i' % large.count())


if __name__ == '__main__':
    main()
