"""
Merge sort over the catalog's linked list.

The sort relinks existing nodes and never allocates or copies one.
Only the split recurses (O(log n) depth); the merge is iterative so long
menus stay clear of the interpreter's recursion limit.
"""
from typing import Optional

from .node import CatalogNode


def split_list(source: Optional[CatalogNode]) -> tuple[Optional[CatalogNode], Optional[CatalogNode]]:
    """
    Split a list into front and back halves.

    ``fast`` starts one node ahead of ``slow``, so when the length is odd
    ``slow`` stops on the last node of the front half and the front half
    gets the extra element.

    Returns:
        (front, back); back is None for lists shorter than two nodes
    """
    if source is None or source.next is None:
        return source, None

    slow = source
    fast = source.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next

    back = slow.next
    slow.next = None
    return source, back


def merge_sorted(left: Optional[CatalogNode], right: Optional[CatalogNode]) -> Optional[CatalogNode]:
    """
    Merge two price-sorted lists into one.

    Takes from ``left`` when prices are equal, which keeps the sort stable.
    """
    dummy = CatalogNode(None)  # type: ignore[arg-type]
    tail = dummy

    while left is not None and right is not None:
        if left.item.price <= right.item.price:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next

    tail.next = left if left is not None else right
    return dummy.next


def merge_sort(head: Optional[CatalogNode]) -> Optional[CatalogNode]:
    """Sort the list starting at ``head`` by ascending price; return the new head."""
    if head is None or head.next is None:
        return head

    front, back = split_list(head)
    return merge_sorted(merge_sort(front), merge_sort(back))
