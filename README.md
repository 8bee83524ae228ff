# tplib

A small library with two modules:

- `tplib.operations` does arithmetic on two operands. It checks its input for division and factorial.
- `tplib.linked_list` is a singly linked list. It has index-based access, insertion, removal, sub-lists and a stable bubble sort that uses a comparison function.

It is a library only. It has no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Operations

```python
from tplib.operations import add, subtract, multiply, divide, factorial

add(2, 3)        # 5
subtract(2, 3)   # -1
multiply(2, 3)   # 6
divide(6, 3)     # 2.0
factorial(5)     # 120.0
factorial(3.5)   # 6.0, because a fractional operand stops at its whole part
```

- `divide` raises `ZeroDivisionError` when the divisor is zero.
- `factorial` always returns a float.
- `factorial` raises `ValueError` for an operand below 0.
- `factorial` raises `OverflowError` for an operand above 20 (`MAX_FACTORIAL_OPERAND`).

## Linked list

```python
from tplib.linked_list import LinkedList

items = LinkedList([3, 1, 2])
items.add(4)               # append at the end
items.push(0, 10)          # insert at position 0
items.get(1)               # 3
items.set(1, 3)            # replace the element at position 1
items.pop(0)               # 10
items.remove(0)            # unlink the element at position 0
len(items)                 # 3
list(items)                # [1, 2, 4]

def by_value(a, b):
    return (a > b) - (a < b)

items.sort(by_value, ascending=False)
list(items)                # [4, 2, 1]
```

### Membership

Membership checks compare elements by identity, not by equality. `index_of`, `contains` and `contains_all` look for the same object:

```python
marker = object()
items = LinkedList([marker])
items.contains(marker)     # True
items.index_of(object())   # -1
```

`contains_all(other)` is true when every element of `other` is in the list. It skips `None` elements in `other`. It raises `TypeError` if `other` is `None`.

### Sub-lists and copies

`sub_list(start, stop)` returns a new list with the elements from `start` up to `stop`, not including `stop`. Both bounds must lie in `0..len(list)`, otherwise it raises `IndexError`. `start` must be lower than `stop`, otherwise it raises `ValueError`.

`clone()` returns a new list with the same elements. An empty list clones to an empty list.

Neither `sub_list` nor `clone` copies `None` elements.

### Sorting

`sort(compare, ascending=True)` sorts the list in place. `compare(a, b)` returns:

- a positive number when `a` goes after `b` in ascending order,
- a negative number when `a` goes before `b`,
- 0 when they are equal.

The sort is stable. It raises `TypeError` when `compare` is not callable. It raises `ValueError` when `ascending` is not `True` or `False`.

### Other methods

- An index outside the list raises `IndexError`. This applies to `get`, `set`, `remove` and `pop`. For `push` and `insert_node`, the index may run from 0 to `len`.
- `clear()` empties the list, and `is_empty()` tells whether it holds nothing.
- `node_at(index)` returns the underlying `Node` object, which has the fields `element` and `next`.
- `insert_node(index, element)` links a new node at `index`.