# dsakit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.bst` | `Node`, `BinarySearchTree` (insertion, in-order iteration, `len`) |
| `dsakit.searching` | `linear_search`, `binary_search`, `interpolation_search`, `is_sorted`, `SearchResult` |
| `dsakit.sorting` | `improved_bubble_sort`, `insertion_sort`, `heap_sort`, `heapify`, `SortResult` |
| `dsakit.postfix` | `evaluate_postfix` for single-digit postfix expressions, `PostfixError` |
| `dsakit.polynomial` | `Term`, `add_polynomials`, `format_polynomial` |
| `dsakit.stacks` | `ArrayStack` (bounded, capacity 10 by default), `LinkedStack`, `StackOverflow`, `StackUnderflow` |
| `dsakit.linked_list` | `LinkedList` with 1-based positional insertion and deletion, deletion by value, reversal |
| `dsakit.matrices` | dense `multiply`, `format_matrix`, `DimensionError` |
| `dsakit.sparse` | `Triplet`, `to_triplets`, `transpose_triplets`, `triplets_to_matrix`, `multiply_sparse`, `is_beneficial`, `format_triplets` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Searching reports where the key was found (1-based, or `None`) and how many
probes it took:

```python
from dsakit.searching import binary_search

result = binary_search([10, 20, 30, 40, 50], 40)
print(result.found, result.position, result.comparisons)   # True 4 2
```

Sorting works on a copy and returns the sorted list with a work count.
For `improved_bubble_sort` this is the number of comparisons, for
`insertion_sort` the number of elements shifted, and for `heap_sort` the
number of extractions from the heap:

```python
from dsakit.sorting import heap_sort

result = heap_sort([10, 34, 5, 96, 67])
print(result.values, result.comparisons)   # [5, 10, 34, 67, 96] 4
```

Stacks raise instead of returning sentinel values:

```python
from dsakit.stacks import ArrayStack, StackUnderflow

stack = ArrayStack()
stack.push(3)
stack.push(7)
print(stack.peek())   # 7
print(list(stack))    # top first: [7, 3]
stack.pop()
stack.pop()
try:
    stack.pop()
except StackUnderflow:
    print("empty")
```

Pushing onto a full `ArrayStack` raises `StackOverflow`.

A linked list prints its nodes in order:

```python
from dsakit.linked_list import LinkedList

items = LinkedList([20, 30, 40])
items.insert_at_beginning(90)
items.insert_at_position(70, 2)
print(items)   # 90 -> 70 -> 20 -> 30 -> 40 -> NULL
```

Binary search trees put values equal to a node into its right subtree:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([5, 3, 8, 3])
print(tree.inorder())   # [3, 3, 5, 8]
```

Postfix evaluation uses single-digit operands and `+ - * / ^`; division
truncates toward zero and whitespace is ignored:

```python
from dsakit.postfix import evaluate_postfix

print(evaluate_postfix("23*54*+9-"))   # 17
```

Polynomials are lists of `Term` in descending exponent order:

```python
from dsakit.polynomial import Term, add_polynomials, format_polynomial

total = add_polynomials([Term(3, 2), Term(1, 0)], [Term(2, 2), Term(4, 1)])
print(format_polynomial(total))   # 5X^2 + 4X^1 + 1X^0
```

Sparse matrices use triplets of row, column and value:

```python
from dsakit.sparse import to_triplets, transpose_triplets, triplets_to_matrix

triplets = to_triplets([[0, 5], [7, 0]])
print(triplets_to_matrix(transpose_triplets(triplets), 2, 2))   # [[0, 7], [5, 0]]
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for entering values; callers pass data in and get results back.