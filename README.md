# pushswap

`pushswap` sorts a list of distinct integers using two stacks, **a** and
**b**, and a small fixed set of operations. It prints each operation it
uses, one per line, so the output is a program that sorts the input.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, of b, or of both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up by one, so the top goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down by one, so the bottom goes to the top |

An operation on a stack that is too short for it does nothing and is not
printed. Some details of the combined and reverse moves are worth knowing:

- `rrb` is reported under the name `rra`.
- `ss` does nothing if a has fewer than two elements; if only b is too
  short, a is still swapped but no move is reported. `rr` and `rrr` behave
  the same way with the roles of a and b reversed: they do nothing if b is
  too short, and rotate b without reporting a move if only a is too short.

## Strategy

- Three or fewer numbers are sorted directly with swaps and rotations.
- Four or five numbers: elements are moved from a to b (the two smallest
  ones) until three remain, those three are sorted, and b is pushed back.
  With four numbers only one element goes to b, so the result is not
  always fully sorted.
- Larger inputs: everything except three numbers is pushed to b. After
  that, the element of b that costs the fewest rotations to place is moved
  back into its place in a, one at a time. At the end a is rotated the
  shorter way until its minimum is on top.

## Installation

```
pip install .
```

## Command line

Numbers may be given as separate arguments, as one space-separated
argument, or as a mix of both:

```
pushswap 3 2 1
pushswap "5 4 3 2 1"
pushswap 4 "1 3" 2
```

With no arguments the command prints nothing and exits with status 0.
It prints `Error` to standard error and exits with status 1 if an argument
is not a whole integer (an optional leading `+` or `-` is allowed), is
outside the 32-bit signed range, appears more than once, or if the
arguments hold no number at all.

## Library use

```python
from pushswap.cli import solve
from pushswap.stacks import Stacks
from pushswap.sort import sort_stack

ops = solve(["3", "2", "1"])          # the operations, in order

moves = []
stacks = Stacks([2, 1, 3], emit=moves.append)
sort_stack(stacks)
print(stacks.format_stack("a"))       # "1 -> 2 -> 3 -> NULL"
```

- `pushswap.parse.parse_args` checks and reads the arguments and raises
  `pushswap.parse.ParseError` (a `ValueError`) when the input is not valid.
- `pushswap.stacks.Stacks` holds the two stacks as deques (top at index 0)
  and has one method per operation. Each move that takes effect is passed
  to `emit`, which by default writes it to standard output.
- `pushswap.sort` provides `sort_three`, `sort_five`, `big_sort` and
  `sort_stack`.
- `pushswap.cost.calc_costs` gives, as `Cost` records, the rotation cost
  of moving each element of b back into place in a.

The `pushswap.libft` sub-package contains the helpers the solver is built
on: character classification (`chars`), C-style string routines
(`strings`, `transform`), a singly linked list (`lists`), stream output
(`output`, `printf`) and a line reader (`gnl`).