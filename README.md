# avlkit

A self-balancing AVL tree for Python. It keeps unique values in order and
takes an optional "less than" function when the natural ordering is not the
one you want. Helpers build, filter, compare and serialise trees, and a small
interactive menu works with a tree of integers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The tree

```python
from avlkit.tree import AVLTree

tree = AVLTree()
for value in (5, 3, 7, 2):
    tree.insert(value)

3 in tree                      # True
list(tree)                     # [2, 3, 5, 7]
list(tree.in_order())          # the same, ascending
list(tree.reverse_in_order())  # descending
list(tree.pre_order())         # each node before its subtrees
list(tree.post_order())        # each node after its subtrees
list(tree.level_order())       # breadth first, left to right
list(tree.morris_in_order())   # ascending, without a stack
tree.find_min().value          # 2; find_min() returns None on an empty tree
tree.height()                  # height of the root; 0 when empty

tree.remove(3)                 # removing an absent value does nothing
tree.is_empty()                # False
```

Two values are equal when neither is less than the other. Inserting a value
equal to one already stored does nothing. All traversals are generators.

### Custom ordering

Pass a `less(a, b)` function to order by anything:

```python
def by_magnitude(a, b):
    return abs(a) < abs(b)

tree = AVLTree(by_magnitude)
tree.insert(1 + 2j)
tree.insert(3 + 4j)
tree.contains(3 + 4j)                 # searches with the tree's ordering
tree.contains(3 + 4j, by_magnitude)   # searches with a one-off ordering
```

`avlkit.person` has the `PersonID`, `Person`, `Student` and `Teacher` records.
`Person.full_name()` joins the first, middle and last names.
`by_person_id` orders people by ID series, then by ID number:

```python
from datetime import date
from avlkit.person import PersonID, Student, by_person_id
from avlkit.tree import AVLTree

students = AVLTree(by_person_id)
students.insert(Student(PersonID(1000, 1), "Ann", "B", "Smith", date(2000, 1, 1)))
```

## Helpers

`avlkit.extensions`:

- `map_tree(tree, func)` returns a new tree of `func(value)` for every value.
- `where(tree, predicate)` returns a new tree of the values that pass.
- `reduce_tree(tree, func, initial)` folds the values in ascending order.
- `extract_subtree(tree, key)` returns a tree of `key` and every value that comes after it in pre-order. The tree is empty if `key` is absent.
- `equals(a, b)` is true when both trees hold the same values in sorted order.

The new trees use the natural ordering.

`avlkit.templates`:

- `TraversalOrder` has `IN_ORDER` (`"LKP"`), `PRE_ORDER` (`"KLP"`) and `POST_ORDER` (`"LPK"`). `traverse(tree, order)` yields values in that order.
- `to_string_template(tree, pattern)` writes the values in the pattern's order, each followed by a space.
- `from_order_template(values, pattern)` builds a tree from a sequence. `"KLP"` inserts the values as given. `"LKP"` treats them as sorted and inserts middles first. `"LPK"` inserts them in reverse.
- `parse_values(text, convert=int)` converts whitespace-separated tokens and stops at the first token that fails to convert.
- `is_same_tree(a, b)` compares the two trees' pre-order sequences.
- `has_subtree(tree, sub)` is true when `extract_subtree` at some value of `tree` gives the same pre-order sequence as `sub`.

An unknown pattern raises `ValueError("Unsupported pattern")`.

## Interactive menu

```
avlkit
```

This starts a numbered menu on standard input and output. The menu has these
entries:

1. insert
2. remove
3. search
4. print in-order
5. print pre-order
6. map (×2)
7. filter (x > n)
8. extract a subtree
9. compare with a tree typed on one line
10. serialise by pattern
11. build from values and a pattern
12. traverse in a chosen order
13. exit

The menu also ends when input runs out. `avlkit.cli.run(stdin, stdout)`
runs the same loop on any pair of text streams.

## What it does not do

The menu works only with integers. It keeps its tree in memory, and nothing is
saved between runs.