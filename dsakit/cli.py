"""Command-line front end for the notation converters and demos."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from dsakit.containers import CircularQueue, QueueEmptyError, QueueFullError
from dsakit.graph import format_mst, prim_mst
from dsakit.hashing import ChainedHashTable, LinearProbingHashTable, TableFullError
from dsakit.notation import (
    NotationError,
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
)

__all__ = ["main"]

_CONVERSIONS: dict[str, tuple[Callable[[str], str], str, str]] = {
    "infix-to-postfix": (infix_to_postfix, "Infix", "Postfix"),
    "infix-to-prefix": (infix_to_prefix, "Infix", "Prefix"),
    "postfix-to-infix": (postfix_to_infix, "Postfix", "Infix"),
    "postfix-to-prefix": (postfix_to_prefix, "Postfix", "Prefix"),
    "prefix-to-infix": (prefix_to_infix, "Prefix", "Infix"),
    "prefix-to-postfix": (prefix_to_postfix, "Prefix", "Postfix"),
}

_DEMO_KEYS = [98, 55, 38, 69, 58, 78, 95, 49, 70]

_DEMO_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _convert(args: argparse.Namespace) -> int:
    convert, source, target = _CONVERSIONS[args.command]
    expression = args.expression
    if expression is None:
        expression = input(f"Enter {source} Expression: ")
    try:
        result = convert(expression.strip())
    except NotationError as error:
        print(f"Error: {error}")
        return 1
    print(f"{target} Expression: {result}")
    return 0


def _show_queue(queue: CircularQueue) -> None:
    if queue.is_empty():
        print("Queue is EMPTY!")
    else:
        print("Queue items: " + " ".join(str(item) for item in queue))


def _circular_queue(args: argparse.Namespace) -> int:
    queue = CircularQueue(args.capacity)

    def add(value: int) -> None:
        try:
            queue.enqueue(value)
        except QueueFullError as error:
            print(error)
        else:
            print(f"Added: {value}")

    def remove() -> None:
        try:
            print(f"Removed: {queue.dequeue()}")
        except QueueEmptyError as error:
            print(error)

    for value in (10, 20, 30, 40, 50):
        add(value)
    _show_queue(queue)
    remove()
    remove()
    _show_queue(queue)
    add(60)
    add(70)
    _show_queue(queue)
    return 0


def _chained(args: argparse.Namespace) -> int:
    table = ChainedHashTable(args.size)
    for key in args.keys or _DEMO_KEYS:
        print(f"Inserted {key} at index {table.insert(key)}")
    print("\nHash Table Contents:")
    print(table.render())
    index = table.search(args.search)
    if index is None:
        print(f"\nKey {args.search} not found")
    else:
        print(f"\nKey {args.search} found at index {index}")
    return 0


def _prompt_keys() -> list[int]:
    count = int(input("Enter number of keys to insert: "))
    return [int(input(f"Enter key {number}: ")) for number in range(1, count + 1)]


def _linear(args: argparse.Namespace) -> int:
    table = LinearProbingHashTable(args.size)
    keys = args.keys if args.keys else _prompt_keys()
    for key in keys:
        try:
            print(f"Inserted {key} at index {table.insert(key)}")
        except TableFullError as error:
            print(error)
    print("\nHash Table:")
    print(table.render())
    return 0


def _parse_row(text: str) -> list[int]:
    try:
        return [int(cell) for cell in text.replace(",", " ").split()]
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid matrix row: {text!r}") from error


def _prim(args: argparse.Namespace) -> int:
    graph = args.rows or _DEMO_GRAPH
    try:
        edges = prim_mst(graph)
    except ValueError as error:
        print(f"Error: {error}")
        return 1
    print(format_mst(edges))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Data-structure exercises and demos."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, (_, source, target) in _CONVERSIONS.items():
        sub = commands.add_parser(name, help=f"convert {source.lower()} to {target.lower()}")
        sub.add_argument("expression", nargs="?", help="expression; prompted if omitted")
        sub.set_defaults(handler=_convert)

    sub = commands.add_parser("circular-queue", help="run the circular queue demo")
    sub.add_argument("--capacity", type=int, default=5)
    sub.set_defaults(handler=_circular_queue)

    sub = commands.add_parser("chained-hashing", help="insert keys with chaining")
    sub.add_argument("keys", nargs="*", type=int)
    sub.add_argument("--size", type=int, default=10)
    sub.add_argument("--search", type=int, default=69)
    sub.set_defaults(handler=_chained)

    sub = commands.add_parser("linear-hashing", help="insert keys with linear probing")
    sub.add_argument("keys", nargs="*", type=int)
    sub.add_argument("--size", type=int, default=10)
    sub.set_defaults(handler=_linear)

    sub = commands.add_parser("prim", help="minimum spanning tree by Prim's algorithm")
    sub.add_argument(
        "--row", dest="rows", action="append", type=_parse_row,
        help="one adjacency-matrix row, e.g. '0,2,0'; repeat for each row",
    )
    sub.set_defaults(handler=_prim)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return an exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())