# dsakit

Compact, readable implementations of classic data structures and algorithms,
meant for learning and experimenting:

- **Expression notation**: convert between infix, prefix and postfix forms
  (`dsakit.notation`).
- **Bounded containers**: a circular queue, a linear queue and a fixed-size
  stack (`dsakit.containers`).
- **Hash tables**: separate chaining and linear probing over integer keys
  (`dsakit.hashing`).
- **Graphs**: Prim's minimum spanning tree on an adjacency matrix
  (`dsakit.graph`).
- **Command line**: a `dsakit` command that runs the converters and demos
  (`dsakit.cli`).

It needs Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

## Expression notation

Operands are single ASCII letters or digits; every other character is treated
as an operator. `precedence` ranks `^` highest (3), then `*` and `/` (2), then
`+` and `-` (1); anything else ranks 0. Operators of equal precedence are
grouped left to right, `^` included.

```python
from dsakit.notation import (
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
    NotationError,
)

infix_to_postfix("a+b*c")    # 'abc*+'
infix_to_prefix("a+b*c")     # '+a*bc'
postfix_to_infix("abc*+")    # '(a+(b*c))'
```

`postfix_to_prefix`, `prefix_to_infix` and `prefix_to_postfix` complete the
set. Conversions to infix are fully parenthesised. Unbalanced parentheses, an
operator without two operands, or leftover operands raise `NotationError`
(a subclass of `ValueError`).

## Queues and stacks

```python
from dsakit.containers import CircularQueue, QueueFullError

queue = CircularQueue(5)
for value in (10, 20, 30, 40, 50):
    queue.enqueue(value)

queue.is_full()        # True
queue.dequeue()        # 10
queue.enqueue(60)      # reuses the freed slot
list(queue)            # [20, 30, 40, 50, 60]
```

- `CircularQueue(capacity=5)` is a ring buffer that reuses freed slots.
- `LinearQueue(capacity=5, reset_when_empty=False)` never reuses a freed slot:
  it reports full once `capacity` values have been enqueued. With
  `reset_when_empty=True` it starts over from the first slot each time it is
  emptied.
- `BoundedStack(capacity=100)` offers `push`, `pop` and `peek`; iterating it
  yields values from the top down.

All three support `len()`, iteration, `is_full()`, `is_empty()` and a
`capacity` property. Adding to a full container raises `QueueFullError` or
`StackOverflowError` (both subclasses of `OverflowError_`, itself an
`OverflowError`); taking from an empty one raises `QueueEmptyError` or
`StackUnderflowError` (both `IndexError`). A capacity below 1 raises
`ValueError`.

## Hash tables

Both tables hash an integer key to `key % size`.

```python
from dsakit.hashing import ChainedHashTable, LinearProbingHashTable

chained = ChainedHashTable(10)
for key in (98, 55, 38, 69, 58, 78, 95, 49, 70):
    chained.insert(key)    # returns the slot used

chained.search(69)     # 9, the slot holding the key
69 in chained          # True
print(chained.render())

probing = LinearProbingHashTable(10)
probing.insert(12)     # 2
probing.insert(22)     # collides at index 2, lands in slot 3
probing.search(22)     # 3
```

`ChainedHashTable` puts each new key at the head of its chain; `buckets()`
returns a copy of every chain. `LinearProbingHashTable.slots()` returns a copy
of the slots with `None` for empty ones. `search` returns `None` for a missing
key. When every slot of a `LinearProbingHashTable` is taken, `insert` raises
`TableFullError`. Neither table supports deleting keys.

## Minimum spanning tree

```python
from dsakit.graph import prim_mst, format_mst

graph = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

edges = prim_mst(graph)    # list of Edge(u, v, weight)
print(format_mst(edges))
```

prints

```
Edge 	Weight
0 - 1	2
1 - 2	3
1 - 4	5
0 - 3	6
```

A zero in the matrix means "no edge". The tree grows from vertex 0, and on
equal weights the edge found first (scanning rows, then columns) wins. A
non-square matrix or a disconnected graph raises `ValueError`.

## Command line

The package installs a `dsakit` command:

```
dsakit --help
```

Subcommands:

- `infix-to-postfix`, `infix-to-prefix`, `postfix-to-infix`,
  `postfix-to-prefix`, `prefix-to-infix`, `prefix-to-postfix` take an
  expression argument, or prompt for one if it is omitted:

  ```
  dsakit infix-to-postfix "a+b*c"
  Postfix Expression: abc*+
  ```

  A malformed expression prints an error and exits with status 1.
- `circular-queue [--capacity N]` enqueues 10 to 50, dequeues twice, enqueues
  60 and 70, and shows the queue after each stage.
- `chained-hashing [KEY ...] [--size N] [--search KEY]` inserts the given keys
  (or 98 55 38 69 58 78 95 49 70), prints the table and searches for a key
  (69 by default).
- `linear-hashing [KEY ...] [--size N]` inserts the given keys, or prompts for
  a count and then each key, and prints the table.
- `prim [--row ROW ...]` prints the minimum spanning tree of the matrix given
  as repeated `--row` options (for example `--row 0,2 --row 2,0`), or of the
  five-vertex graph above.

## What it does not do

The command line has no interactive menus: there is no command for driving a
`LinearQueue` or a `BoundedStack` by hand; use them from Python. Hash tables
hold integer keys only and cannot remove them.

## Running the tests

```
pip install ".[test]"
pytest
```