"""
Doubly linked sequence used as the storage primitive of the graph.

The same container holds the vertex sequence of a graph and the outgoing
edge list of every vertex. Insertion order is stable and never changes.
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


class _pynode(Generic[T]):
    """Single link of a pylinkedlist."""

    __slots__ = ('data', 'next', 'prev')

    def __init__(self, data: T):
        self.data = data
        self.next: Optional['_pynode[T]'] = None
        self.prev: Optional['_pynode[T]'] = None


class pylinkedlist(Generic[T]):
    """
    Ordered container with append, equality-based removal and forward iteration.

    Iteration walks the live links. Removing elements while iterating is not
    supported: collect the matches into a separate list first, then remove
    them in a second pass.
    """

    def __init__(self, values=None):
        self._head: Optional[_pynode[T]] = None
        self._tail: Optional[_pynode[T]] = None
        self._count = 0
        if values is not None:
            for value in values:
                self.push_back(value)

    def push_back(self, value: T) -> None:
        """Append a value at the tail."""
        node = _pynode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._count += 1

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front() on empty list")
        return self._head.data

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back() on empty list")
        return self._tail.data

    def pop_back(self) -> None:
        """Drop the tail element; no-op on an empty list."""
        if self._tail is None:
            return
        node = self._tail
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            self._tail = node.prev
            self._tail.next = None
        node.prev = None
        self._count -= 1

    def remove(self, value: T) -> bool:
        """
        Remove the first element equal to value.

        Args:
            value: Element to remove (compared with ==)

        Returns:
            True if an element was removed, False otherwise
        """
        current = self._head
        while current is not None:
            if current.data == value:
                self._unlink(current)
                return True
            current = current.next
        return False

    def _unlink(self, node: _pynode[T]) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next

        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev

        node.next = node.prev = None
        self._count -= 1

    def clear(self) -> None:
        current = self._head
        while current is not None:
            following = current.next
            current.next = current.prev = None
            current = following
        self._head = self._tail = None
        self._count = 0

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def copy(self) -> 'pylinkedlist[T]':
        """Shallow copy preserving order."""
        return pylinkedlist(self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __contains__(self, value) -> bool:
        for item in self:
            if item == value:
                return True
        return False

    def __repr__(self) -> str:
        return f"pylinkedlist({list(self)!r})"
