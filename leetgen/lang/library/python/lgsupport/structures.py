"""Linked list and binary tree types used by LeetCode signatures."""

from __future__ import annotations

from collections import deque
from typing import Optional


class ListNode:
    def __init__(self, val=0, next=None):
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({nodes_to_list(self)})"


class TreeNode:
    def __init__(self, val=0, left=None, right=None):
        self.val = val
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({tree_to_list(self)})"


def list_to_nodes(values: list) -> Optional[ListNode]:
    head = None
    for val in reversed(values):
        head = ListNode(val, head)
    return head


def nodes_to_list(head: Optional[ListNode]) -> list:
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def list_to_tree(values: list) -> Optional[TreeNode]:
    """Build a tree from LeetCode's level-order list (None marks a gap)."""
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue = deque([root])
    i = 1
    while queue and i < len(values):
        node = queue.popleft()
        if i < len(values) and values[i] is not None:
            node.left = TreeNode(values[i])
            queue.append(node.left)
        i += 1
        if i < len(values) and values[i] is not None:
            node.right = TreeNode(values[i])
            queue.append(node.right)
        i += 1
    return root


def tree_to_list(root: Optional[TreeNode]) -> list:
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values
