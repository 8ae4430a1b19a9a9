"""Feed example test cases to a Solution and print one JSON result per case."""

from __future__ import annotations

import inspect
import json
import sys
from pathlib import Path

from lgsupport.structures import ListNode, TreeNode, list_to_nodes, list_to_tree, nodes_to_list, tree_to_list

TESTCASES_SUFFIX = ".testcases.txt"


def _convert_arg(raw, annotation):
    hint = str(annotation)
    if "ListNode" in hint:
        return list_to_nodes(raw or [])
    if "TreeNode" in hint:
        return list_to_tree(raw or [])
    return raw


def _convert_result(value):
    if isinstance(value, ListNode):
        return nodes_to_list(value)
    if isinstance(value, TreeNode):
        return tree_to_list(value)
    return value


def _entry_method(solution):
    for name, member in inspect.getmembers(solution, inspect.ismethod):
        if not name.startswith("_"):
            return member
    return None


def run(namespace: dict, solution_file: str) -> None:
    solution_cls = namespace.get("Solution")
    if solution_cls is None:
        print("No Solution class found, nothing to run")
        return

    solution_path = Path(solution_file)
    testcases = solution_path.with_name(solution_path.stem + TESTCASES_SUFFIX)
    if not testcases.is_file():
        print(f"No test cases at {testcases.name}, nothing to run")
        return

    method = _entry_method(solution_cls())
    if method is None:
        print("Solution has no public method, nothing to run")
        return

    params = list(inspect.signature(method).parameters.values())
    lines = [line for line in testcases.read_text().splitlines() if line.strip()]
    if not params or len(lines) % len(params):
        sys.exit(f"{testcases.name}: {len(lines)} lines do not match {len(params)} parameters")

    for start in range(0, len(lines), len(params)):
        args = [
            _convert_arg(json.loads(line), param.annotation)
            for line, param in zip(lines[start:start + len(params)], params)
        ]
        print(json.dumps(_convert_result(method(*args))))
