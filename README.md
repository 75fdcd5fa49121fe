# treelab

`treelab` is a set of small data structures and utilities that are each
complete in themselves. It uses only the standard library.

- `treelab.bst`: `BST`, an unbalanced binary search tree of `Node` objects
  with parent links. It supports `insert`, `delete`, `minimum`, `maximum`,
  `successor`, `predecessor`, `search`, iteration in key order and `walk`,
  which returns one line per node. Equal keys go to the right. The tree can
  use `None` or a shared sentinel node as its nil marker.
- `treelab.rbt`: `RBT`, a red-black tree of `RBTNode` objects coloured with
  `Color.RED` / `Color.BLACK`. It is built on `BST` and uses one black
  sentinel. It adds `left_rotate`, `right_rotate`, `insert_fixup` and
  `delete_fixup`. A walk shows each node as `key Colour`, for example `7 Black`.
- `treelab.students`: `Student`, a tree node keyed by student id, and
  `StudentIds`, which hands out consecutive ids from 1 by default. It raises
  `ValueError` for a negative age.
- `treelab.libc_random`: `LibcRandom`, a seeded generator of 31-bit
  non-negative integers. It produces the same sequence as the standard C
  library's default `srand`/`rand`.
- `treelab.intqueue`: `IntQueue`, a linked-list queue of integers built from
  `Elem` objects. `queue << 1 << 2` enqueues values in order. `dequeue` raises
  `IndexError` when the queue is empty. Iteration, `len()` and `str()` are
  supported.
- `treelab.filters`: the letter filters `Filter`, `ToUpper`, `ToLower` and
  `Encrypt`, plus `shift_cypher`. `Encrypt` turns each letter to upper case
  and shifts it.
- `treelab.ohno` and `treelab.stats`: `Reporter` writes numbered reports of a
  given `Severity` to a stream. `mean` and `stdev` (the population standard
  deviation) report an empty list or a single value through an optional
  `Reporter`.
- `treelab.validate`: `validate(value, CheckOp)`, and `read_positive` /
  `read_negative`, which parse text and raise `ValueError` when the number
  has the wrong sign or does not parse.
- `treelab.grid` and `treelab.athletes`: a grid of words visited by row or
  by column, and a small example of class inheritance.

## Installing

```
pip install .
```

To run the test suite with pytest, install with the `test` extra:

```
pip install ".[test]"
pytest
```

## Using the trees

```python
from treelab.bst import BST, Node

tree = BST(None)
for key in (15, 10, 20, 8, 12):
    tree.insert(Node(key))

print(tree.minimum().key, tree.maximum().key)   # 8 20
node = tree.search(12)
print(tree.successor(node).key)                 # 15
tree.delete(node)
print([n.key for n in tree])                    # [8, 10, 15, 20]
```

`RBT()` answers the same queries. It rebalances on `insert` and `delete`.
Queries that find nothing return `None`.

## Commands

| Command | What it does |
| --- | --- |
| `treelab-bst -t N -s SEED -i INPUT -o OUTPUT` | Prints a report on a binary search tree built from `N` pseudo-random keys (0–99). Then it loads the student file `INPUT`, removes the student with id 36 and writes a report to `OUTPUT` |
| `treelab-rbt -t N -s SEED` | Prints the same kind of report for a red-black tree, showing the tree after every insertion and deletion |
| `treelab-grid` | Prints a 4×3 grid of words by row and by column |
| `treelab-filter` | Reads lines from standard input and writes them through a shift cipher with offset 13 |
| `treelab-athletes` | Prints the athlete class example |
| `treelab-validate` | Asks for numbers on standard input and checks their sign |
| `treelab-queue` | Prints `-1` for a dequeue from an empty queue, then `10 20 30` |
| `treelab-stats 1 2 3 4` | Prints the mean and standard deviation of the numbers given |

`treelab-bst` and `treelab-rbt` take `-h`/`--help`, `-t`/`--test`,
`-s`/`--seed`, `-i`/`--input` and `-o`/`--output`. They print their usage when
started with no arguments or with `-h`. `treelab-rbt` accepts `-i` and `-o` but
does not use them.

`treelab-bst` needs both `-i` and `-o`. Without them it prints its usage and
exits with a failure status. Student ids are given in file order starting at
1, so the input file must have at least 36 students. Otherwise the command
reports the missing id and fails.

A student file holds one student per line. Each line gives first name, last
name and age, separated by single spaces:

```
Jane Doe 20
John Roe 22
```

For a given `-t` and `-s`, the key sequence is always the same, so runs with
the same options repeat exactly.

`treelab-stats` writes a report to standard error when it gets no arguments
or when the standard deviation is zero. An argument that does not start with
a number counts as 0.

## What it does not do

The trees, queue and student records live in memory only. Nothing is stored
between runs. The student report is the only output written to a file. The
red-black tree command has no student database report.