"""Command that exercises the red-black tree and reports every step."""

from __future__ import annotations

import getopt
import re
import sys
from typing import Optional, Sequence

from treelab.bstcli import usage
from treelab.libc_random import LibcRandom
from treelab.rbt import RBT, RBTNode

PROG = "rbt"
_RULE = "----------"
_INSERT_RULE = "========================"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _keys_line(keys: Sequence[int]) -> str:
    return "".join(f"{key} " for key in keys) + "\n"


def rbt_report(n: int, seed: int, remain: int = 5) -> str:
    """Build a red-black tree from ``n`` random keys and report on it.

    The tree is shown after every insertion; at the end the first
    ``n - remain`` keys are deleted again, showing the tree each time.
    """
    if n < 1:
        raise ValueError("the test needs at least one key")
    rng = LibcRandom(seed)
    keys = [rng.rand() % 100 for _ in range(n)]
    out: list[str] = ["Unit Test for baseline RBT implementation\n"]

    out.append("Input: \n")
    out.append(_keys_line(keys))
    out.append("Sorted input: \n")
    out.append(_keys_line(sorted(keys)))

    tree = RBT()
    nodes = [RBTNode(key) for key in keys]
    out.append("\nInsert test: \n")
    for node in nodes:
        tree.insert(node)
        out.append(f"===== inserting {node.key} =====\n")
        out.append(tree.walk())
        out.append(f"{_INSERT_RULE}\n")
    out.append("\n")

    out.append("Min/max test: \n")
    out.append(f"{_RULE}\n")
    out.append(f"RBT min: {tree.minimum().describe()}\n")
    out.append(f"RBT max: {tree.maximum().describe()}\n")
    out.append(f"{_RULE}\n\n")

    out.append("BST walk test: \n")
    out.append(f"{_RULE}\n")
    out.append(tree.walk())
    out.append(f"{_RULE}\n\n")

    out.append(f"{_RULE}\nPredecessor/Successor test: \n")
    for node in nodes:
        pred = tree.predecessor(node)
        succ = tree.successor(node)
        pred_text = "none" if pred is None else str(pred.key)
        succ_text = "none" if succ is None else str(succ.key)
        out.append(f"{node.describe()} pred: {pred_text} succ: {succ_text}\n")
    out.append(f"{_RULE}\n\n")

    out.append(f"{_RULE}\ntree_search() with fake keys: \n")
    for key in keys:
        found = tree.search(key + 1)
        if found is not None:
            out.append(f"Found {found.key}\n")
        else:
            out.append(f"{key + 1} was not found\n")
    out.append(f"{_RULE}\n\n")

    out.append("tree_search() and delete_node()\n")
    for key in keys[: max(n - remain, 0)]:
        out.append(f"---- deleting {key} -----\n")
        found = tree.search(key)
        if found is not None:
            tree.delete(found)
            out.append(tree.walk())
        else:
            out.append(f"{key} was not found\n")
    out.append(f"{_RULE}\n")
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the red-black tree test."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(usage(PROG), end="")
        return 0
    try:
        options, _ = getopt.gnu_getopt(
            args, "ht:s:i:o:", ["help", "test=", "seed=", "input=", "output="]
        )
    except getopt.GetoptError:
        print(usage(PROG), end="")
        return 1

    test = "0"
    seed_text = "0"
    for option, value in options:
        if option in ("-h", "--help"):
            print(usage(PROG), end="")
            return 0
        if option in ("-t", "--test"):
            test = value
        elif option in ("-s", "--seed"):
            seed_text = value

    try:
        num_test = _leading_int(test)
        if num_test > 0:
            print(rbt_report(num_test, _leading_int(seed_text), 5), end="")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())