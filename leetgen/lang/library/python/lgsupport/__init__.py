"""Support library for leetgen Python3 solutions."""

from lgsupport.runner import run
from lgsupport.structures import ListNode, TreeNode, list_to_nodes, list_to_tree, nodes_to_list, tree_to_list

__all__ = [
    "ListNode",
    "TreeNode",
    "list_to_nodes",
    "list_to_tree",
    "nodes_to_list",
    "run",
    "tree_to_list",
]
