# dsdrills

A small collection of classic data-structure and algorithm drills with
plain implementations. It has no runtime dependencies and supports
Python 3.10 and later.

## Modules

- `dsdrills.linked_list`: `Node` and `LinkedList`, a singly linked list
  with `append`, `prepend`, iteration, `len()`, `in`, `find` (returns the
  first matching node or `None`), `traverse(process)` (calls `process` on
  each value; by default prints `Processing value: <value>`) and
  `apply_increase(target, percent=5.0)`, which raises the first matching
  value by the given percentage and raises `LookupError` if there is none.
  `describe_value(value)` returns the line printed during traversal.
- `dsdrills.stack`: `BoundedStack(capacity=5, items=())`, a fixed-capacity
  stack with `push`, `pop`, `peek`, `is_full`, `is_empty`, `len()` and
  iteration from top to bottom. Pushing onto a full stack raises
  `StackOverflowError`; popping or peeking an empty one raises
  `StackUnderflowError` (both are `IndexError` subclasses).
  `push_all(stack, items)` pushes in order and returns the count pushed.
- `dsdrills.postfix`: `evaluate_postfix(expression)` evaluates postfix
  expressions of single digits with `+`, `-`, `*` and `/`. Evaluation stops
  at the first `)`, other characters are ignored, and division truncates
  toward zero. Malformed input (too few operands, division by zero, more
  than 100 stacked operands) raises `PostfixError`.
- `dsdrills.searching`: `linear_search(items, target)` and
  `binary_search(items, target)` (for ascending sequences); both return an
  index or `None`.
- `dsdrills.sorting`: `bubble_sort(values)` and `quick_sort(values)`; both
  return a new ascending list.
- `dsdrills.sequences`: `fibonacci(count)` returns the first `count`
  Fibonacci numbers starting from 0.
- `dsdrills.text`: `delete_char`, `insert_char`, `replace_char`,
  `find_pattern` (index or `None`) and `substring(text, start, length=None)`.
  Out-of-range positions raise `IndexError`; character arguments that are
  not exactly one character raise `ValueError`.

## Installation

```
pip install dsdrills
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "dsdrills[test]"
pytest
```

## Using the library

```python
from dsdrills.linked_list import LinkedList
from dsdrills.postfix import evaluate_postfix
from dsdrills.sequences import fibonacci
from dsdrills.sorting import quick_sort
from dsdrills.stack import BoundedStack, StackOverflowError

numbers = LinkedList([20, 30, 40])
numbers.prepend(10)
print(list(numbers))                 # [10, 20, 30, 40]
print(30 in numbers)                 # True

print(evaluate_postfix("53+82-*"))   # 48

print(quick_sort([5, 2, 9, 1]))      # [1, 2, 5, 9]
print(fibonacci(7))                  # [0, 1, 1, 2, 3, 5, 8]

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("stack is full")
```

## Command line

Installing the package provides a `dsdrills` command with four
subcommands:

```
dsdrills traverse 10 20 30
dsdrills push 1 2 3 --capacity 5
dsdrills pop 10 20 30 --count 4 --capacity 5
dsdrills postfix "53+82-*"
```

- `traverse VALUES...` builds a linked list and prints
  `Processing value: <value>` for each value.
- `push ITEMS... [--capacity N]` pushes items onto a stack of capacity `N`
  (default 5), printing `Pushed <item> to stack.` for each, stopping with
  `OVERFLOW! Stack is full.` when full, then prints the stack top to bottom.
- `pop [ITEMS...] [--count N] [--capacity N]` fills a stack with the items
  (default `10 20 30`) and pops `N` times (default 4), printing
  `Popped: <item>` or `Stack Underflow`. It exits with status 1 if the items
  do not fit the capacity.
- `postfix [EXPRESSION]` evaluates the expression (default `53+82-*`) and
  prints `Value = <result>`; an invalid expression prints an error to
  standard error and exits with status 1.

Run `dsdrills --help` or `dsdrills <subcommand> --help` for details.

## What it does not do

The command takes all its input from command-line arguments; it never
prompts for input. Searching, sorting, Fibonacci numbers and the string
edits are available only as library functions, not as subcommands.