"""Singly linked lists and the classic algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import gcd

__all__ = [
    "ListNode",
    "add_two_numbers",
    "sort_list",
    "sort_list_by_values",
    "reorder_list",
    "reverse_list",
    "insert_greatest_common_divisors",
    "middle_node",
    "merge_two_lists",
    "has_cycle",
    "get_intersection_node",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare and hash by identity."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding ``values`` in order; return its head, or None if empty."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in _iter_nodes(self)]

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists; return a new digit list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def _split_half(head: ListNode) -> ListNode | None:
    """Cut the list after its first half and return the head of the second half."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return second


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, taking from ``l2`` on ties."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by relinking its nodes (merge sort); return the new head."""
    if head is None or head.next is None:
        return head
    second = _split_half(head)
    return merge_two_lists(sort_list(head), sort_list(second))


def sort_list_by_values(head: ListNode | None) -> ListNode | None:
    """Sort the list by rewriting node values in place; return the same head."""
    nodes = list(_iter_nodes(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln in place into L0, Ln, L1, Ln-1, ..."""
    if head is None or head.next is None:
        return
    back = reverse_list(_split_half(head))
    front: ListNode | None = head
    while back is not None and front is not None:
        front_next, back_next = front.next, back.next
        front.next = back
        back.next = front_next
        front, back = front_next, back_next


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between each pair of adjacent nodes a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node, the second of the two middles for even lengths."""
    turtle = hare = head
    while hare is not None and hare.next is not None:
        turtle = turtle.next  # type: ignore[union-attr]
        hare = hare.next.next
    return turtle


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` ever revisits a node."""
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None if they never meet."""
    seen = set(_iter_nodes(head_a))
    node = head_b
    while node is not None:
        if node in seen:
            return node
        seen.add(node)
        node = node.next
    return None