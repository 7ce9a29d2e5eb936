# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. Each operation is printed on its own line as it is
performed, so the output is the sequence of moves that sorts the input.

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up (top goes to the bottom)         |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | reverse-rotate `a` (bottom goes to the top)    |
| `rrb` | reverse-rotate `b`                             |
| `rrr` | `rra` and `rrb` together                       |

## Command line

```
push-swap 3 2 5 1 4
```

The first argument is the top of stack `a`. Each argument must be a whole
number in the 32-bit signed range, written as an optional `-` followed by
digits (a lone `-` reads as zero). If any argument is malformed, out of
range or repeated, the program prints `Error` on standard output and sorts
nothing. Input that is already sorted produces no output. Run with no
arguments, it prints nothing and exits with status 255.

## Library use

```python
from pushswap.sorter import solve

moves = solve([3, 2, 5, 1, 4])
print(moves)   # list of operation names, starting ["pb", "pb", ...]
```

Lower-level pieces are available too:

- `pushswap.stack.Stack(name, values, emit)` holds one stack, top first, and
  performs `push_from`, `swap`, `rotate`, `reverse_rotate` and `is_sorted`.
  Each operation passes its name to `emit`, which prints it by default.
  `swap_both`, `rotate_both` and `reverse_rotate_both` act on two stacks at
  once.
- `pushswap.sorter.sort(a, b)` sorts stack `a` in place using `b` as
  scratch space; `sort_three`, `find_min` and `closest_index` are the
  steps it is built from.
- `pushswap.cli.parse_arguments(args)` turns command-line strings into
  integers, raising `InputError` on bad input; `pushswap.cli.main(argv)`
  is the command itself.

The package also carries small helpers for strings, characters, byte
buffers and printf-style formatting (`pushswap.strings`, `pushswap.chars`,
`pushswap.memory`, `pushswap.textops`, `pushswap.formatting`,
`pushswap.output`).

## What it does not do

Each number must be given as its own argument; a single argument holding
several space-separated numbers is rejected as malformed. There is no
command that reads a list of operations back and checks that it sorts the
input.

## Tests

```
pip install -e .[test]
pytest
```