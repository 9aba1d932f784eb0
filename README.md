# dsakit

A collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

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
| `dsakit.bits` | `add`, `add_one` (32-bit wrapping arithmetic using only bit operations), `get_single`, `change_to_zero` |
| `dsakit.search` | `binary_search`, `linear_search` (index or `None`), `has_pair_with_sum` |
| `dsakit.dynamic` | `binomial_coefficient`, `count_change`, `egg_drop`, `knapsack` |
| `dsakit.strings` | `bad_character_table`, `boyer_moore_search`, `next_state`, `transition_table`, `transition_table_fast`, `automaton_search` |
| `dsakit.backtracking` | `hamiltonian_cycle` (closed cycle from vertex 0, or `None`), `knights_tour` (board of move numbers, or `None`) |
| `dsakit.binary_tree` | `Node`, `ThreadedNode`, `preorder`, `inorder`, `postorder`, `inorder_iterative`, `height`, `nodes_at_level`, `level_order`, `max_width`, `nodes_at_distance`, `diameter`, `are_identical`, `is_subtree`, `connect_level`, `leftmost`, `threaded_inorder` |
| `dsakit.bst` | `ParentNode`, `is_bst`, `insert`, `insert_allow_duplicates`, `insert_with_parent`, `min_value_node`, `min_value`, `delete`, `ceil`, `inorder_successor`, `lowest_common_ancestor`, `has_pair_with_sum`, `binary_tree_to_bst` |
| `dsakit.bst_merge` | `merge_sorted`, `sorted_array_to_bst`, `merge_balanced`, `merged_inorder` |
| `dsakit.linked_list` | `ListNode`, `CircularList`, `from_iterable`, `to_list`, `add_two_lists`, `delete_at`, `delete_key`, `detect_and_remove_loop` |
| `dsakit.doubly_linked` | `DNode`, `DoublyLinkedList` (`push`, `insert_before`, `remove`, `sort`, `nodes`, iteration, `reversed`, `len`), `merge_sort` |
| `dsakit.tree_build` | `build_tree` from inorder and preorder traversals, `sorted_list_to_bst` |
| `dsakit.graph` | `Graph` (adjacency lists), `Edge`, `DisjointSet`, `kruskal_mst`, `mst_cost` |
| `dsakit.huffman` | `HuffmanNode`, `build_huffman_tree`, `build_huffman_tree_sorted`, `codes`, `huffman_codes`, `huffman_codes_sorted` |

Tree and list functions work on plain node objects (`Node`, `ListNode`,
`DNode`, ...) that you link together yourself; functions that change a
structure's head or root return the new one.

## Examples

```python
from dsakit.search import binary_search
from dsakit.dynamic import knapsack
from dsakit.strings import boyer_moore_search
from dsakit.huffman import huffman_codes

binary_search([2, 3, 4, 10, 40], 10)                # 3
knapsack(50, [10, 20, 30], [60, 100, 120])           # 220
boyer_moore_search("ABAAABCD", "ABC")                # [4]
huffman_codes("abcdef", [5, 9, 12, 13, 16, 45])
# {'f': '0', 'c': '100', 'd': '101', 'a': '1100', 'b': '1101', 'e': '111'}
```

```python
from dsakit.binary_tree import Node, inorder, level_order, diameter

root = Node(1, Node(2, Node(4), Node(5)), Node(3))
inorder(root)       # [4, 2, 5, 1, 3]
level_order(root)   # [1, 2, 3, 4, 5]
diameter(root)      # 4
```

```python
from dsakit.graph import Edge, kruskal_mst, mst_cost

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
tree = kruskal_mst(4, edges)
mst_cost(tree)      # 19
```

## What it does not do

dsakit is a library only. It has no command-line program and prints
nothing: every function returns its result as a value.