"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    val: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


def merge_sorted(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted node chains into one sorted chain and return its head.

    On equal values the node from ``l1`` comes first.
    """
    dummy = ListNode(None)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


class SinglyLinkedList:
    """A singly linked list; ``head`` is its first node or ``None``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._size = 0
        for item in items:
            self.insert_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = ListNode(value, self.head)
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def insert_at(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``pos``."""
        if not 0 <= pos <= self._size:
            raise IndexError("invalid position")
        if pos == 0:
            self.insert_front(value)
            return
        prev = self.head
        for _ in range(pos - 1):
            prev = prev.next
        prev.next = ListNode(value, prev.next)
        self._size += 1

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("list is empty")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.val

    def delete_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("list is empty")
        if self.head.next is None:
            return self.delete_front()
        prev = self.head
        while prev.next.next is not None:
            prev = prev.next
        value = prev.next.val
        prev.next = None
        self._size -= 1
        return value

    def delete_value(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        if self.head is None:
            return False
        if self.head.val == value:
            self.delete_front()
            return True
        prev = self.head
        while prev.next is not None and prev.next.val != value:
            prev = prev.next
        if prev.next is None:
            return False
        prev.next = prev.next.next
        self._size -= 1
        return True

    def search(self, value: Any) -> ListNode | None:
        """Return the first node holding ``value``, or ``None``."""
        return next((node for node in self._nodes() if node.val == value), None)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev = None
        node = self.head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self.head = prev

    def has_cycle(self) -> bool:
        """Detect a cycle among the nodes with Floyd's tortoise and hare."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def find_middle(self) -> ListNode | None:
        """Return the middle node (the first of two for even lengths)."""
        if self.head is None:
            return None
        slow = fast = self.head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def remove_nth_from_end(self, n: int) -> Any:
        """Remove and return the ``n``-th value counted from the end, starting at 1."""
        if not 1 <= n <= self._size:
            raise IndexError("invalid position")
        dummy = ListNode(None, self.head)
        fast = slow = dummy
        for _ in range(n + 1):
            fast = fast.next
        while fast is not None:
            fast = fast.next
            slow = slow.next
        removed = slow.next
        slow.next = removed.next
        self.head = dummy.next
        self._size -= 1
        return removed.val

    def clear(self) -> None:
        """Remove every value."""
        self.head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list with constant-time access to both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: DoublyNode | None = None
        self._tail: DoublyNode | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> DoublyNode:
        """Add ``value`` at the front and return its node."""
        node = DoublyNode(value, None, self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> DoublyNode:
        """Add ``value`` at the back and return its node."""
        node = DoublyNode(value, self._tail, None)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1
        return node

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty")
        value = self._head.val
        self.delete_node(self._head)
        return value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("list is empty")
        value = self._tail.val
        self.delete_node(self._tail)
        return value

    def insert_after(self, node: DoublyNode | None, value: Any) -> DoublyNode | None:
        """Insert ``value`` after ``node`` and return the new node; no-op for ``None``."""
        if node is None:
            return None
        new = DoublyNode(value, node, node.next)
        if node.next is not None:
            node.next.prev = new
        else:
            self._tail = new
        node.next = new
        self._size += 1
        return new

    def delete_node(self, node: DoublyNode | None) -> None:
        """Unlink ``node`` from the list; no-op for ``None``."""
        if node is None:
            return
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def search(self, value: Any) -> DoublyNode | None:
        """Return the first node holding ``value``, or ``None``."""
        return next((node for node in self._nodes() if node.val == value), None)

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        self._head, self._tail = self._tail, self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev

    def clear(self) -> None:
        """Remove every value."""
        self._head = self._tail = None
        self._size = 0

    def front(self) -> DoublyNode | None:
        """Return the first node, or ``None`` when empty."""
        return self._head

    def back(self) -> DoublyNode | None:
        """Return the last node, or ``None`` when empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.val
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class CircularLinkedList:
    """A circular singly linked list that keeps a pointer to its tail."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tail: ListNode | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def head(self) -> ListNode | None:
        """Return the first node, or ``None`` when empty."""
        return self._tail.next if self._tail is not None else None

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        node = ListNode(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self.push_front(value)
        self._tail = self._tail.next

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("list is empty")
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
        self._size -= 1
        return first.val

    def clear(self) -> None:
        """Remove every value."""
        self._tail = None
        self._size = 0

    def __contains__(self, value: Any) -> bool:
        return any(v == value for v in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.val
            if node is self._tail:
                return
            node = node.next

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"


def josephus(n: int, k: int) -> int:
    """Position (from 1) of the survivor when every ``k``-th of ``n`` people leaves."""
    if n < 1:
        raise ValueError("need at least one person")
    pos = 0
    for i in range(2, n + 1):
        pos = (pos + k) % i
    return pos + 1