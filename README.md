# leetkit

leetkit reads test cases written in the JSON-like notation LeetCode uses. It also provides the linked-list and binary-tree types those problems expect, and a handful of problem solutions.

It needs Python 3.10 or later. It has no runtime dependencies.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Parsing values

`leetkit.parser.parse_str` reads the first value from a string. `leetkit.parser.parse` reads one value from any iterable of characters. If you pass it an iterator, it consumes only the characters of the value and at most one character after it, so repeated calls read successive values.

```python
from leetkit.parser import parse_str

parse_str("[1, 2, 3]").as_vec_int()                 # [1, 2, 3]
parse_str('"Hello, \\"World!\\""').as_string()      # 'Hello, "World!"'
parse_str("3.14").as_double()                       # 3.14
```

The notation supports the following:

- strings in double quotes, with the escapes `\n`, `\\` and `\"`
- integers, which must fit in a signed 128-bit range
- decimals, meaning any number containing a `.`
- `true`, `false` and `null`, in any letter case
- nested lists; stray commas are ignored, so `[,]` is an empty list
- `//` line comments and `/* ... */` block comments

If a list is never closed, the value returned is the last element read.

Bad input raises a subclass of `leetkit.errors.ProcessInputError`:

| Exception | Raised when |
|---|---|
| `InvalidInputError` | a character cannot start a value |
| `EmptyInputError` | the input ends before any value |
| `UnexpectedError` | a number cannot be read, or a list bracket is unbalanced |
| `InvalidEscapeCharacterError` | a string contains an unknown backslash escape |
| `InvalidKeyWordError` | a bare word is not `true`, `false` or `null` |

Two errors compare equal when they have the same type and the same detail.

## Reading a file of test cases

`leetkit.reader.ValReader` is an iterator that yields one `Val` after another from a stream of characters. It skips comments and the space between values. It stops when the input runs out, and it raises the matching `ProcessInputError` on a malformed value.

`leetkit.reader.read_input` reads a whole file and returns an iterator over its characters. Invalid UTF-8 bytes are replaced.

```python
from leetkit.reader import ValReader, read_input

values = list(ValReader(read_input("input.txt")))
for nums, expected in zip(values[::2], values[1::2]):
    ...
```

## Values

`leetkit.value.Val` is a frozen dataclass that pairs a `ValKind` with its data. The kinds are `INT`, `DOUBLE`, `BOOL`, `STR`, `VEC` and `NONE`.

It has these conversions:

- `as_int()` returns a 32-bit integer. Integers wrap, and decimals are truncated and saturated, the way a machine cast works.
- `as_long()` does the same for 64 bits.
- `as_double()` converts an integer or a decimal to `float`.
- `as_string()` and `as_bool()` return the string or boolean.
- `as_vec()` returns the elements of a list as `Val`s.
- `as_vec_int()` converts every element of a list with `as_int()`.
- `as_list_node()` builds a `ListNode` from `as_vec_int()`. An empty list raises `ValueError`.

A failed conversion raises a subclass of `ValError`:

- `WrongKindError` means the value is not of a kind that converts.
- `NotAVectorError` comes from `as_vec_int` and `as_list_node` when the value is not a list.
- `NonIntegerElementsError` means some elements are not numbers. Its `payload` lists those elements.

## Data structures

`leetkit.list_node.ListNode` is a singly linked list of integers.

```python
from leetkit.list_node import ListNode

head = ListNode.from_iterable([1, 2, 3])
str(head)        # '[1,2,3]'
list(head)       # [1, 2, 3]
str(head.next)   # '[2,3]'
```

`ListNode.from_iterable` raises `ValueError` when given no values. Two lists are equal when they hold the same values in the same order.

`leetkit.tree_node.build_tree` builds a `TreeNode` (with `val`, `left` and `right`) from `Val`s given in level order:

- a `null` value marks a missing child
- each level is given in full, so a missing parent still takes two slots in the next level, and values under it are dropped
- no values give a single node holding `0`
- values that are neither integers nor `null` raise `ValueError`

```python
from leetkit.parser import parse_str
from leetkit.tree_node import build_tree

root = build_tree(parse_str("[1, 2, 3, null, 4]").as_vec())
root.left.right.val   # 4
```

## Solutions

- `leetkit.roman.int_to_roman(num)` writes a number as a Roman numeral. Values from 1 to 3999 give the usual numerals. Zero or below gives `""`. For thousands digits 4 to 8, `_` stands in for the missing five-thousand symbol. A thousands digit of 9, or a value of 10000 or more, raises `ValueError`. `leetkit.roman.digits(value)` yields the decimal digits, least significant first.
- `leetkit.longest_word.find_longest_word(s, dictionary)` returns the longest dictionary word that is a subsequence of `s`. Ties go to the lexicographically smallest word, and it returns `""` if nothing matches.
- `leetkit.ascending_sum.max_ascending_sum(nums)` returns the largest sum of a contiguous, strictly ascending run. An empty input gives 0.
- `leetkit.frequent_prime.most_frequent_prime(mat)` returns the prime above 10 that is formed most often when reading digits in a straight line, in any of eight directions, from any cell. Ties go to the larger prime, and it returns -1 if there is none.
- `leetkit.triplets.num_triplets(nums1, nums2)` counts the triplets where a square in one list equals the product of a pair in the other.
- `leetkit.sort_array.sort_array(nums)` returns a new list, sorted with merge sort.
- `leetkit.sum_two.sum_two_numbers(a, b)` returns `a + b`.

## What it does not do

leetkit is a library only. It has no command-line program, and it does not find or run test-case files by itself. You read the values with `ValReader` and pass them to the solutions in your own tests.

## Tests

```
pytest
```