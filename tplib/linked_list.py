"""A singly linked list that holds arbitrary elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    element: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with index-based access.

    Membership tests (:meth:`index_of`, :meth:`contains`, :meth:`contains_all`)
    compare elements by identity, not by equality.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")

    def node_at(self, index: int) -> Node:
        """Return the node at ``index``; raises IndexError when out of range."""
        self._check_index(index)
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_node(self, index: int, element: Any) -> None:
        """Link a new node holding ``element`` at ``index`` (0 to ``len``)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for insertion into list of length {self._size}")
        if index == 0:
            self._head = Node(element, self._head)
        else:
            previous = self.node_at(index - 1)
            previous.next = Node(element, previous.next)
        self._size += 1

    def add(self, element: Any) -> None:
        """Append ``element`` at the end of the list."""
        self.insert_node(self._size, element)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self.node_at(index).element

    def set(self, index: int, element: Any) -> None:
        """Replace the element at ``index``."""
        self.node_at(index).element = element

    def remove(self, index: int) -> None:
        """Unlink the node at ``index``."""
        self._check_index(index)
        if index == 0:
            self._head = self._head.next
        else:
            previous = self.node_at(index - 1)
            previous.next = previous.next.next
        self._size -= 1

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element``, or -1."""
        for index, item in enumerate(self):
            if item is element:
                return index
        return -1

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def push(self, index: int, element: Any) -> None:
        """Insert ``element`` at ``index`` (0 to ``len``)."""
        self.insert_node(index, element)

    def pop(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        element = self.get(index)
        self.remove(index)
        return element

    def contains(self, element: Any) -> bool:
        """Return True when ``element`` is in the list."""
        return self.index_of(element) >= 0

    def contains_all(self, other: "LinkedList") -> bool:
        """Return True when every element of ``other`` is in this list.

        ``None`` elements of ``other`` are ignored.
        """
        if other is None:
            raise TypeError("other must be a LinkedList, not None")
        return all(item is None or self.contains(item) for item in other)

    def sub_list(self, start: int, stop: int) -> "LinkedList":
        """Return a new list with the elements from ``start`` up to ``stop``.

        ``None`` elements are not copied. Raises IndexError when either bound
        lies outside ``0..len`` and ValueError when ``start`` is not below
        ``stop``.
        """
        if not (0 <= start <= self._size and 0 <= stop <= self._size):
            raise IndexError(f"range {start}:{stop} out of bounds for list of length {self._size}")
        if start >= stop:
            raise ValueError(f"start {start} must be lower than stop {stop}")
        result = LinkedList()
        for index, item in enumerate(self):
            if index >= stop:
                break
            if index >= start and item is not None:
                result.add(item)
        return result

    def clone(self) -> "LinkedList":
        """Return a new list with the same non-``None`` elements."""
        if self.is_empty():
            return LinkedList()
        return self.sub_list(0, self._size)

    def sort(self, compare: Comparator, ascending: bool = True) -> None:
        """Sort the list in place with a three-way ``compare`` function.

        ``compare(a, b)`` returns a positive number when ``a`` goes after
        ``b`` in ascending order, a negative one when it goes before, and 0
        when they are equal. The sort is stable.
        """
        if compare is None or not callable(compare):
            raise TypeError("compare must be a callable")
        if ascending not in (True, False):
            raise ValueError(f"ascending must be True or False, not {ascending!r}")
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node is not None and node.next is not None:
                criterion = compare(node.element, node.next.element)
                if (ascending and criterion > 0) or (not ascending and criterion < 0):
                    node.element, node.next.element = node.next.element, node.element
                    swapped = True
                node = node.next