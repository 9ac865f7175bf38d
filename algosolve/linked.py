"""Singly linked lists: construction, merging and gcd insertion."""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes.

    On equal values the node from ``list2`` comes first.
    """
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert, between every pair of adjacent nodes, a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head