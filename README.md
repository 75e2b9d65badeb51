# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It prints the operations it performs,
one per line. Applied in order to stack `a`, they leave it sorted in
ascending order, with the smallest value on top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |
| `pa` | move the top of `b` onto `a` |
| `pb` | move the top of `a` onto `b` |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one argument with the numbers
separated by spaces:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

The same command is available as `python -m pushswap.cli`.

If no arguments are given, nothing is printed. If the input is already
sorted, nothing is printed either. The exit status is 0 in both cases and
after a successful sort.

The input is rejected, with `Error` written to standard error and exit
status 1, in these cases:

- a token that is not an integer, or that has a sign in the wrong place
  (`+`, `-5-`, `--5` and `1a` are all rejected);
- a token longer than 11 characters, or a number outside the 32-bit signed
  range;
- duplicate values (`3` and `003` count as the same value);
- an empty first argument, a single argument holding only spaces, or more
  than 1024 numbers.

Lists of two to five numbers are sorted with short fixed sequences. Longer
lists are sorted by moving, at each step, the element of `a` that is
cheapest to place into `b`, then inserting everything back into `a`.

## Library use

```python
from pushswap.sorting import solve

operations = solve([3, 2, 1])
print([str(op) for op in operations])   # ['ra', 'sa']
```

`solve` returns a list of `pushswap.stack.Operation` members, whose string
form is the operation name. It raises `pushswap.parsing.InputError` when a
value appears more than once.

`pushswap.stack.Machine` holds the two stacks (`machine.a`, `machine.b`) and
has one method for each operation (`sa`, `pb`, `rra`, and so on); every call
is appended to `machine.operations`. It can be used to replay a sequence of
operations and check the result:

```python
from pushswap.stack import Machine

machine = Machine([3, 2, 1])
for op in operations:
    getattr(machine, op.value)()
assert machine.a.values() == [1, 2, 3]
```

`pushswap.parsing.parse_arguments` checks and converts command-line tokens
as the command does, except that it does not look for duplicates; use
`pushswap.parsing.has_duplicates` for that. It raises `InputError` when the
input is invalid. `pushswap.cli.run` does the whole job of the command and
returns the operations instead of printing them.

## Helper modules

The package also carries small general-purpose helpers:

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper` / `to_lower`, and the
  integer conversions `atoi` (32-bit, wrapping), `atol` (saturating at the
  64-bit limits) and `itoa`.
- `pushswap.strings`: `split` (drops empty pieces), `strchr`, `strrchr`,
  `strncmp` and `strnstr`, returning indexes or `None`.
- `pushswap.substrings`: `substr`, `strjoin`, `strtrim`, `strlcpy` and
  `strlcat` (returning the text and the length the full copy would have),
  `strmapi` and `striteri`.
- `pushswap.memory`: `memset`, `bzero`, `memcpy`, `memmove` (between
  offsets of one buffer), `memchr`, `memcmp` and `calloc` on byte buffers.
- `pushswap.lists`: `LinkedList`, a singly linked list with `push_front`,
  `push_back`, `last`, `clear`, `for_each` and `map`.
- `pushswap.output`: `render` and `printf` for the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `hex_digits`, `address`, `put_char`,
  `put_str`, `put_endl` and `put_nbr`.
- `pushswap.linereader`: `LineReader`, which reads lines from a file
  descriptor a few bytes at a time, and `get_next_line`, which keeps a
  separate reader per descriptor.

## Running the tests

```
pip install .[test]
pytest
```