# dsakit

Classic data-structure routines built around stacks, queues and simple
sorting algorithms, with a small command-line front end. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort` and `quick_sort`. Each
takes any iterable of mutually comparable items and returns a new list in
ascending order; the input is left untouched.

```python
from dsakit.sorting import quick_sort

quick_sort([2, 7, 5, 9, 3, 4])   # [2, 3, 4, 5, 7, 9]
```

### `dsakit.queues`

- `ArrayQueue(capacity=10001)`: a FIFO queue with `push`, `pop`, `front`,
  `is_empty`, `is_full` and `len()`. Every push uses up a slot, and slots are
  only reclaimed once the queue has been emptied completely, so it can report
  full while holding fewer than `capacity` items.
- `CyclicQueue(capacity)`: a FIFO ring buffer holding at most `capacity`
  items, with `push`, `pop`, `is_empty`, `len()` and iteration from front to
  rear.
- `DoubleEndedQueue(capacity)`: a bounded queue with `push_front`,
  `push_rear`, `pop_front`, `pop_rear`, `is_empty` and `len()`.
- `first_negative_in_windows(values, k)`: the first negative number of every
  window of size `k`, or `0` for a window without one. `k` must lie between 1
  and the number of values, otherwise `ValueError` is raised.
- `reverse_queue(queue)`: a new `collections.deque` with the items reversed.
- `reverse_first_k(queue, k)`: a new `collections.deque` with the first `k`
  items reversed and the rest in their original order; `k` outside
  `0..len(queue)` raises `ValueError`.

Pushing onto a full queue raises `QueueFullError`; popping from, or reading
the front of, an empty one raises `QueueEmptyError`. A capacity below 1
raises `ValueError`.

### `dsakit.stacks`

- `BoundedStack(capacity)`: a LIFO stack with `push`, `pop`, `peek`,
  `is_empty`, `is_full`, `insert_at_bottom`, `len()` and iteration from
  bottom to top.
- `TwoStacks(capacity)`: two stacks sharing `capacity` slots, with `push1`,
  `pop1`, `push2` and `pop2`. Either push fails once the two together fill
  every slot.
- `delete_middle(stack)`, `reverse_stack(stack)` and `sort_stack(stack)`
  take any iterable ordered from bottom to top and return a new list in the
  same orientation. `delete_middle` removes the item `len // 2` places below
  the top; `sort_stack` leaves the smallest item on top.
- `reverse_string(text)`: the characters of `text` in reverse order.
- `prime_factors_descending(number)`: the prime factors of a positive
  integer, repeats included, largest first (`60` gives `[5, 3, 2, 2]`).

Overflow raises `StackOverflowError`; popping or peeking at an empty stack
raises `StackUnderflowError`.

### `dsakit.brackets`

- `is_balanced(text)`: whether a string made only of `()[]{}` is properly
  nested. Any other character makes it unbalanced.
- `check_balance(text)`: a `Balance` member describing the brackets of an
  expression, ignoring every other character: `BALANCED`, `EXTRA_RIGHT`,
  `MISMATCHED` or `EXTRA_LEFT`. `Balance.ok` is true only for `BALANCED`.
- `minimum_cost(text)`: the fewest brace flips that balance a string of `{`
  and `}`, or `-1` when its length is odd. Any character other than `{`
  counts as `}`.
- `has_redundant_parentheses(text)`: whether some pair of parentheses
  encloses no `+ - * /` operator. An unmatched `)` raises `ValueError`.

### `dsakit.expressions`

Conversion and evaluation of infix expressions whose operands are single
characters, with `+ - * / ^` and parentheses. All operators are
left-associative and `^` binds tightest; spaces and tabs are ignored.

```python
from dsakit.expressions import evaluate_postfix, infix_to_postfix, infix_to_prefix

infix_to_postfix("a+b*c")   # "abc*+"
infix_to_prefix("a+b*c")    # "+a*bc"
evaluate_postfix("23*4+")   # 10
```

`evaluate_postfix` and `evaluate_infix` work on single-digit operands and
return an integer: division truncates toward zero, and a power with a
negative exponent is truncated to an integer. `precedence(symbol)` gives 3
for `^`, 2 for `*` and `/`, 1 for `+` and `-`, and 0 otherwise. Unmatched
parentheses, missing operands, division by zero and unknown symbols raise
`ExpressionError`, a subclass of `ValueError`.

## Command line

Installing the package provides a `dsakit` command:

```
dsakit postfix "a+b*c"          # abc*+
dsakit prefix "a+b*c"           # +a*bc
dsakit eval "2+3*4"             # 14
dsakit factors 60               # 5 3 2 2
dsakit reverse hello            # olleh
dsakit windows 2 -8 2 3 -6 10   # -8 0 -6 -6
```

`windows` takes the window size first, then the values. The result is
printed on standard output and the exit status is 0; an invalid expression
or argument prints `error: ...` on standard error and exits with status 1.
Run `dsakit --help` or `dsakit <command> --help` for details.

## Limits

The command takes everything from its arguments; there is no interactive
mode that prompts for input. Expressions handle single-character operands
only, so multi-digit numbers cannot be evaluated.