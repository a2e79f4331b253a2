# pushswap

Building blocks for the two-stack sorting puzzle: stacks `a` and `b`,
the named operations on them, and checking of the integers a puzzle
starts from. Small helper modules with the conventions of C library
routines come with it.

## Installation

```
pip install .
```

## The puzzle operations

```python
from pushswap.stack import Stacks

stacks = Stacks([2, 1, 3])   # the first value is the top of stack a
stacks.sa()                  # a is now 1 2 3
stacks.pb()                  # move the top of a onto b
print(stacks.history)        # ['sa', 'pb']
print(stacks.a.describe("a"))  # a: 2 3
```

| Method | Effect |
|--------|--------|
| `sa` / `sb` / `ss` | swap the two top elements of a, of b, or of both |
| `pa` / `pb` | move the top of b onto a, or the top of a onto b |
| `ra` / `rb` / `rr` | rotate a, b, or both up by one (top goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate a, b, or both down by one (bottom goes to the top) |

Every operation that changes a stack is appended to `Stacks.history`
under its single-stack name (`ss` records `sa` and `sb`, and so on). A
swap or rotation of a stack with fewer than two elements changes nothing
and records nothing. If `Stacks.stream` is set to a text stream, each
recorded name is also written to it on its own line. `pa` and `pb` on an
empty source stack raise `pushswap.stack.EmptyStackError`.

`pushswap.stack.Stack` is a single stack, iterated from the top down, with
`swap`, `rotate`, `reverse_rotate`, `push`, `pop`, `top`, `is_sorted`,
`min`, `max`, `index_of` and `describe`.

## Checking input

```python
from pushswap.parsing import parse_arguments, InputError

parse_arguments([" 3", "+2", "-5"])   # [3, 2, -5]
parse_arguments(["1", "1"])           # raises InputError
```

`parse_int` accepts leading whitespace, one `+` or `-` sign and at least
one digit, with nothing after the digits, and the value must fit in a
signed 32-bit integer. `parse_arguments` applies it to each argument and
also refuses repeated values. `InputError` is a `ValueError` whose message
is `Error`; its `detail` attribute says what was wrong.

## Helper modules

- `pushswap.ctype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`, `to_lower`, `to_upper` on ASCII characters or codes.
- `pushswap.numbers`: `abs_int`, `atoi` (lenient leading-integer read,
  wrapped to 32 bits) and `itoa`.
- `pushswap.strings`: `split`, `strchr`, `strrchr`, `strdup`, `strlen`,
  `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strncmp`,
  `strnstr`, `strtrim`, `substr`; positions are indexes or `None`.
- `pushswap.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` on bytes-like buffers.
- `pushswap.linkedlist`: `LinkedList` and `Node`, with `add_front`,
  `add_back`, `last`, `clear`, `for_each` and `map`.
- `pushswap.printf`: `sprintf` and `printf` for `%c %s %p %d %i %u %x %X %%`,
  plus `format_hex`, `format_pointer` and `format_unsigned`.
- `pushswap.linereader`: `LineReader` and `lines`, reading a file
  descriptor line by line in fixed-size chunks.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  to a text stream (standard output by default).

## What the package does not do

The package has no sorting strategy: it does not work out a sequence of
operations that sorts stack `a`, and it installs no command-line program.
It provides the stacks, their operations and the input checks that such a
solver would be built on.

## Tests

```
pip install .[test]
pytest
```