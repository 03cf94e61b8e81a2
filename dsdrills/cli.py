"""Command-line drills: list traversal, stack push and pop, postfix evaluation."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from dsdrills.linked_list import LinkedList
from dsdrills.postfix import PostfixError, evaluate_postfix
from dsdrills.stack import (
    DEFAULT_CAPACITY,
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
)

DEFAULT_EXPRESSION = "53+82-*"
DEFAULT_POP_ITEMS = (10, 20, 30)
DEFAULT_POP_COUNT = 4


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the drill commands."""
    parser = argparse.ArgumentParser(prog="dsdrills", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    traverse = commands.add_parser("traverse", help="build a linked list and traverse it")
    traverse.add_argument("values", nargs="*", type=int)

    push = commands.add_parser("push", help="push items onto a bounded stack")
    push.add_argument("items", nargs="*", type=int)
    push.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)

    pop = commands.add_parser("pop", help="pop repeatedly from a pre-filled stack")
    pop.add_argument("items", nargs="*", type=int, default=list(DEFAULT_POP_ITEMS))
    pop.add_argument("--count", type=int, default=DEFAULT_POP_COUNT)
    pop.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)

    postfix = commands.add_parser("postfix", help="evaluate a postfix expression")
    postfix.add_argument("expression", nargs="?", default=DEFAULT_EXPRESSION)

    return parser


def _traverse(args: argparse.Namespace) -> int:
    print("Traversing the linked list...")
    LinkedList(args.values).traverse()
    return 0


def _push(args: argparse.Namespace) -> int:
    stack = BoundedStack(args.capacity)
    for item in args.items:
        try:
            stack.push(item)
        except StackOverflowError:
            print("OVERFLOW! Stack is full.")
            break
        print(f"Pushed {item} to stack.")
    print("Final stack (top to bottom):")
    for item in stack:
        print(item)
    return 0


def _pop(args: argparse.Namespace) -> int:
    try:
        stack = BoundedStack(args.capacity, args.items)
    except StackOverflowError:
        print("Stack Overflow", file=sys.stderr)
        return 1
    for _ in range(args.count):
        try:
            print(f"Popped: {stack.pop()}")
        except StackUnderflowError:
            print("Stack Underflow")
    return 0


def _postfix(args: argparse.Namespace) -> int:
    try:
        value = evaluate_postfix(args.expression)
    except PostfixError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Value = {value}")
    return 0


_HANDLERS = {
    "traverse": _traverse,
    "push": _push,
    "pop": _pop,
    "postfix": _postfix,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a drill command and return its exit status."""
    args = build_parser().parse_args(argv)
    return _HANDLERS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())