# algokit

Classic algorithms and data structures in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.primes` | `PrimeSieve` with `is_prime`, `prime_factors`, `num_div`, `sum_div`, `euler_phi`, `num_diff_pf`, `num_pf`, `sum_pf`; `count_distinct_prime_factors` |
| `algokit.bignum` | Decimal-string arithmetic: `add_big`, `big_div`, `big_mod`; base conversion (2 to 16) with `to_base` |
| `algokit.roman` | `to_roman`, `from_roman`, and the `algokit-roman` command |
| `algokit.recursion` | `power`, `factorial`, `fibonacci`, `gcd`, `hanoi_moves` |
| `algokit.sorting` | `sort_points`, `Book`, `parse_book`, `sort_books`, `binary_search`, `in_alphabet` |
| `algokit.polynomial` | `Term`, `add_poly`, `sub_poly`, `format_poly` |
| `algokit.fenwick` | `FenwickTree` (prefix and range sums with point adjustments) |
| `algokit.union_find` | `UnionFind` (disjoint sets with union by rank and path compression) |
| `algokit.graph` | `build_graph`, `bfs`, `dfs`, `describe_graph` |
| `algokit.chess` | `king_in_check`, `read_boards`, `check_reports`, and the `algokit-chess` command |
| `algokit.expressions` | `evaluate_postfix`, `evaluate_prefix`, `infix_to_postfix`, `infix_to_prefix`, `is_balanced`, `ExpressionError` |
| `algokit.stacks` | `BoundedStack`, `LinkedStack`, `reverse_with_stack`, `StackOverflow`, `StackUnderflow` |
| `algokit.queues` | `LinearQueue`, `CircularQueue`, `LinkedQueue`, `QueueOverflow`, `QueueUnderflow` |
| `algokit.array_list` | `ArrayList` with `add`, `remove`, `get`, `sort` and `binary_search` |
| `algokit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `HeaderLinkedList` |
| `algokit.bst` | `BinarySearchTree` with traversals, deletion, node counts, height and mirroring |
| `algokit.cards` | `rank_card`, `card_suit`, `card_value` |
| `algokit.kmp` | `kmp_table`, `kmp_search` |
| `algokit.bits` | `is_bit_on`, `set_bit`, `clear_bit`, `flip_bit`, `lowest_set_bit`, `all_bits_on`, `multiply_pow2`, `divide_pow2` |

Errors are raised as exceptions: `ValueError` for bad input, `IndexError`
for positions out of range, and the module's own exceptions (for example
`StackUnderflow`, `QueueOverflow`, `ExpressionError`) where a structure is
empty or full.

## Examples

```python
from algokit.roman import to_roman, from_roman
from algokit.recursion import gcd, factorial, hanoi_moves
from algokit.union_find import UnionFind
from algokit.primes import PrimeSieve

to_roman(1994)              # 'MCMXCIV'
from_roman("MCMXCIV")       # 1994

gcd(48, 18)                 # 6
factorial(5)                # 120
list(hanoi_moves(2))        # [('A', 'B'), ('A', 'C'), ('B', 'C')]

uf = UnionFind(5)
uf.union_set(0, 1)
uf.union_set(2, 3)
uf.union_set(4, 3)
uf.num_disjoint_sets()      # 2
uf.is_same_set(0, 3)        # False

sieve = PrimeSieve(1000)
sieve.prime_factors(84)     # [2, 2, 3, 7]
```

Digit strings and bases:

```python
from algokit.bignum import add_big, big_div, big_mod, to_base

add_big("999", "1")         # '1000'
big_div("100", 7)           # '14'
big_mod("100", 7)           # 2
to_base(255, 16)            # 'FF'
```

Range sums with a Fenwick tree (positions are 1-based):

```python
from algokit.fenwick import FenwickTree

values = [2, 4, 5, 5, 6, 6, 6, 7, 7, 8, 9]
tree = FenwickTree(len(values))
for position, value in enumerate(values, start=1):
    tree.adjust(position, value)

tree.rsq_range(1, 4)        # 16
tree.adjust(2, -4)
tree.rsq_range(1, 4)        # 12
```

Expressions and string search:

```python
from algokit.expressions import infix_to_postfix, evaluate_postfix, is_balanced
from algokit.kmp import kmp_search

infix_to_postfix("a+b*c")   # 'abc*+'
evaluate_postfix("23*4+")   # 10.0
is_balanced("{[()]}")       # True
kmp_search("abababa", "aba")  # [0, 2, 4]
```

## Command-line tools

`algokit-roman` reads whitespace-separated tokens from standard input.
A token that starts with a digit has its leading digits converted to a
Roman numeral; any other token is read as a Roman numeral and converted to
a number. Invalid tokens are reported on standard error and the command
exits with status 1.

```
echo "1994 MCMXCIV" | algokit-roman
```

`algokit-chess` reads 8x8 boards from a file given as its argument, or from
standard input. Each board is eight lines of squares (`KQRBNP` for white,
`kqrbnp` for black, `.` for empty), boards are separated by blank lines,
and an all-empty board ends the input. For each board it prints one line
such as `Game #1: black king is in check.` or
`Game #2: no king is in check.`

```
algokit-chess boards.txt
algokit-chess < boards.txt
```

## What is not included

- There are no segment trees; range minimum, maximum and sum queries over a
  fixed array are not provided apart from `FenwickTree` sums.
- There are no circular linked lists; `algokit.linked_lists` has only
  singly, doubly and header linked lists.
- There are no 2D geometry helpers (points, lines, rotation, intersection).
- The data structures are library classes only; apart from the two
  commands above there are no interactive programs.