"""Command that exercises the binary search tree and the student database."""

from __future__ import annotations

import getopt
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from treelab.bst import BST, Node
from treelab.libc_random import LibcRandom
from treelab.students import StudentIds

PROG = "bst"
STUDENT_TO_REMOVE = 36
_SEPARATOR = "-------------------------------------------------"
_RULE = "----------"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class StudentRecord:
    """One line of the student input file."""

    first: str
    last: str
    age: int


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def usage(prog: str = PROG) -> str:
    """Return the help text for the command."""
    return (
        f"Usage: {prog}\n"
        "Options:\n"
        "\t-h or --help            Display this information\n"
        "\t-t or --test n          BST Unit Test with n elements\n"
        "\t-s or --seed s          Rand # seed value\n"
        "\t-i or --input ifname    Input file\n"
        "\t-o or --output ofname   Output file\n"
    )


def bst_report(n: int, seed: int, remain: int = 5) -> str:
    """Build a tree from ``n`` random keys and report on every operation.

    The first ``n - remain`` keys are deleted again at the end.
    """
    if n < 1:
        raise ValueError("the test needs at least one key")
    rng = LibcRandom(seed)
    keys = [rng.rand() % 100 for _ in range(n)]
    out: list[str] = ["Unit Test for baseline BST implementation\n"]

    out.append("Input: \n")
    out.append("".join(f"{key} " for key in keys) + "\n")
    out.append("Sorted input: \n")
    out.append("".join(f"{key} " for key in sorted(keys)) + "\n")

    tree = BST()
    nodes = [Node(key) for key in keys]
    for node in nodes:
        tree.insert(node)

    out.append(f"{_RULE}\n")
    out.append(f"BST min: {tree.minimum().key}\n")
    out.append(f"BST max: {tree.maximum().key}\n")
    out.append(f"{_RULE}\n")

    out.append(f"{_RULE}\nBST walk\n")
    out.append(tree.walk())
    out.append(f"{_RULE}\n")

    out.append(f"{_RULE}\nPredecessor/Successor\n")
    for node in nodes:
        pred = tree.predecessor(node)
        succ = tree.successor(node)
        pred_text = "none" if pred is None else str(pred.key)
        succ_text = "none" if succ is None else str(succ.key)
        out.append(f"{node.key} pred: {pred_text} succ: {succ_text}\n")
    out.append(f"{_RULE}\n")

    out.append(f"{_RULE}\ntree_search() with fake keys\n")
    for key in keys:
        found = tree.search(key + 1)
        if found is not None:
            out.append(f"Found {found.key}\n")
        else:
            out.append(f"{key + 1} was not found\n")
    out.append(f"{_RULE}\n")

    out.append(f"{_RULE}\ntree_search() and delete_node()\n")
    for key in keys[: max(n - remain, 0)]:
        out.append(f"---- deleting {key}-----\n")
        found = tree.search(key)
        if found is not None:
            tree.delete(found)
            out.append(tree.walk())
        else:
            out.append(f"{key} was not found\n")
    out.append(f"{_RULE}\n")
    return "".join(out)


def read_db(path: str | Path) -> list[StudentRecord]:
    """Read "first last age" lines, fields separated by single spaces."""
    records = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\n").split(" ")
            first = fields[0]
            last = fields[1] if len(fields) > 1 else ""
            age_text = fields[2] if len(fields) > 2 else ""
            age = _leading_int(age_text)
            if age < 0:
                raise ValueError(f"age must not be negative: {age}")
            records.append(StudentRecord(first, last, age))
    return records


def create_db(
    db: BST,
    records: Iterable[StudentRecord],
    ids: Optional[StudentIds] = None,
) -> None:
    """Insert a student for every record, numbering them in order."""
    ids = StudentIds() if ids is None else ids
    for record in records:
        db.insert(ids.create(record.first, record.last, record.age))


def db_report(input_path: str | Path, output_path: str | Path) -> None:
    """Load students, remove the one with id 36 and write a report."""
    db = BST()
    create_db(db, read_db(input_path))
    first = db.minimum()
    last = db.maximum()
    if first is None or last is None:
        raise ValueError("the student database is empty")
    target = db.search(STUDENT_TO_REMOVE)
    if target is None:
        raise LookupError(f"no student with id {STUDENT_TO_REMOVE}")

    out = [f"{_SEPARATOR}\n", db.walk(), f"{_SEPARATOR}\n"]
    out.append("First student ever: \n")
    out.append(f"{first.describe()}\n")
    out.append("Last student to join: \n")
    out.append(f"{last.describe()}\n")
    out.append(f"Information on student: {STUDENT_TO_REMOVE}\n")
    out.append(f"{target.describe()}\n")
    out.append("Removing student...")
    db.delete(target)
    if db.search(STUDENT_TO_REMOVE) is None:
        out.append("student successfully removed\n")
    else:
        out.append("error removing student\n")
    out.extend([f"{_SEPARATOR}\n", db.walk(), f"{_SEPARATOR}\n"])
    Path(output_path).write_text("".join(out), encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tree test and the student database report."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(usage(), end="")
        return 0
    try:
        options, _ = getopt.gnu_getopt(
            args, "ht:s:i:o:", ["help", "test=", "seed=", "input=", "output="]
        )
    except getopt.GetoptError:
        print(usage(), end="")
        return 1

    test = "0"
    seed_text = "0"
    input_path = ""
    output_path = ""
    for option, value in options:
        if option in ("-h", "--help"):
            print(usage(), end="")
            return 0
        if option in ("-t", "--test"):
            test = value
        elif option in ("-s", "--seed"):
            seed_text = value
        elif option in ("-i", "--input"):
            input_path = value
        elif option in ("-o", "--output"):
            output_path = value

    num_test = _leading_int(test)
    if num_test > 0:
        print(bst_report(num_test, _leading_int(seed_text), 5), end="")

    if not input_path or not output_path:
        print(usage(), end="")
        return -1
    try:
        db_report(input_path, output_path)
    except (OSError, ValueError, LookupError) as error:
        print(error, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())