# dailyalgos

A small collection of classic algorithms for searching sorted data,
manipulating bits, analysing arrays and working with singly linked lists.
It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dailyalgos.searching`

- `median_of_sorted_arrays(nums1, nums2)` merges the two sequences and returns their median as a float. It raises `ValueError` when both are empty.
- `search_insert(nums, target)` returns the index of `target` in a sorted sequence. If `target` is absent, it returns the index where it would be inserted.
- `binary_search(nums, target)` returns the index of `target` in a sorted sequence, or `-1` if it is absent.
- `guess_number(n, guess)` finds the number picked from `1..n` by binary search. The `guess(num)` callable returns `-1` if `num` is higher than the pick, `1` if it is lower and `0` if it is equal. If no number matches, the function raises `ValueError`.
- `next_greatest_letter(letters, target)` returns the smallest letter in a sorted sequence that is strictly greater than `target`. When no letter is greater, it wraps around to the first letter. It raises `ValueError` for an empty sequence.

### `dailyalgos.numbers`

- `power(x, n)` computes `x` to the integer power `n` by repeated squaring. A negative `n` is allowed.
- `hamming_weight(n)` counts the set bits of a non-negative integer. It raises `ValueError` for a negative `n`.
- `reverse_bits(n)` reverses the bits of a 32-bit unsigned integer. It raises `ValueError` when `n` is outside `0..0xFFFFFFFF`.
- `is_power_of_two(n)` reports whether `n` is a positive power of two.
- `is_power_of_two_recursive(n, ones=0)` reports whether `n` has exactly one set bit. It examines one bit at a time. `ones` is the number of set bits already counted.
- `is_power_of_three(n)` reports whether `n` is a positive power of three.
- `is_power_of_four(n)` reports whether `n` is a power of four. Only powers of four whose set bit lies within the low 32 bits are recognised.

### `dailyalgos.arrays`

- `sort_colors(nums)` sorts a list in place.
- `contains_duplicate(nums)` returns `True` if any value occurs more than once.
- `majority_element(nums)` counts occurrences and returns the value that occurs more than `n // 2` times. It returns `0` if there is no such value.
- `majority_element_boyer_moore(nums)` finds the same value by Boyer–Moore voting. It returns `0` for an empty sequence and `-1` when no value has a majority.
- `majority_elements(nums)` returns a list of every value that occurs more than `n // 3` times, found by two-candidate voting.

### `dailyalgos.linked`

`ListNode` is a node of a singly linked list, with the attributes `val` and `next`. Nodes compare and hash by identity.

- `ListNode.from_values(values)` builds a list and returns its head, or `None` when `values` is empty.
- `node.values()` returns the values from that node to the end of the list.

The module provides these operations on lists:

- `add_two_numbers(l1, l2)` adds two numbers stored as little-endian digit lists and returns a new digit list.
- `sort_list(head)` performs a merge sort by relinking the nodes. It returns the new head.
- `sort_list_by_values(head)` sorts by rewriting the node values in place. It returns the same head.
- `reverse_list(head)` reverses the list in place and returns the new head.
- `reorder_list(head)` rearranges `L0, L1, ..., Ln` into `L0, Ln, L1, Ln-1, ...` in place.
- `insert_greatest_common_divisors(head)` inserts, between each pair of adjacent nodes, a new node holding their greatest common divisor.
- `middle_node(head)` returns the middle node. For an even length, it returns the second of the two middle nodes.
- `merge_two_lists(l1, l2)` splices two sorted lists into one sorted list. On ties, it takes the node from `l2` first.
- `has_cycle(head)` reports whether following `next` ever revisits a node.
- `get_intersection_node(head_a, head_b)` returns the first node that the two lists share, or `None` if they never meet.

## Example

```python
from dailyalgos.searching import search_insert
from dailyalgos.linked import ListNode, reverse_list

search_insert([1, 3, 5, 6], 2)                          # 1
reverse_list(ListNode.from_values([1, 2, 3])).values()  # [3, 2, 1]
```

## Scope

This is a library only. It has no command-line interface. Nothing is read from or written to files.