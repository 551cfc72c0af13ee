# structkit

A small collection of classic data structures written in plain Python:

| Module | What it holds |
| --- | --- |
| `structkit.dynamic_array` | `DynamicArray`, a growable array that doubles its capacity when full |
| `structkit.singly_linked_list` | `SinglyLinkedList` |
| `structkit.doubly_linked_list` | `DoublyLinkedList`, iterable forwards and with `reversed()` |
| `structkit.circular_linked_list` | `CircularLinkedList` |
| `structkit.graph` | `Graph`, a directed graph stored as adjacency lists |
| `structkit.hash_table` | `HashTable`, integer keys hashed by `key % size` with separate chaining |
| `structkit.min_heap` | `MinHeap` and `HeapEmptyError` |
| `structkit.disjoint_set` | `DisjointSet`, union by rank with path compression |
| `structkit.trie` | `Trie` over words of the letters `a` to `z` |

## Installing

```
pip install .
```

## Using it

```python
from structkit.dynamic_array import DynamicArray
from structkit.doubly_linked_list import DoublyLinkedList
from structkit.hash_table import HashTable
from structkit.min_heap import MinHeap
from structkit.disjoint_set import DisjointSet
from structkit.trie import Trie

arr = DynamicArray()
for value in (10, 20, 30):
    arr.append(value)
arr[1] = 25
print(list(arr), len(arr), arr.capacity)      # [10, 25, 30] 3 4

dll = DoublyLinkedList()
dll.insert_at_beginning(5)
dll.insert_at_end(15)
dll.insert_at_beginning(1)
print(dll.format_forward())                   # 1 5 15
print(dll.format_backward())                  # 15 5 1

table = HashTable(10)
table.insert(11)
table.insert(21)
print(21 in table, table.bucket(1))           # True [11, 21]

heap = MinHeap()
for value in (3, 2, 15, 5, 4, 45):
    heap.insert(value)
print(heap.extract_min())                     # 2

ds = DisjointSet(4)
ds.union(0, 1)
print(ds.connected(0, 1), ds.connected(0, 3)) # True False

trie = Trie()
trie.insert("apple")
print(trie.search("app"), trie.starts_with("ap"))  # False True
```

Operations that cannot be carried out raise an exception rather than
returning a sentinel:

- indexing a `DynamicArray` out of range raises `IndexError`;
- `extract_min()` and `peek_min()` on an empty `MinHeap` raise
  `HeapEmptyError` (a subclass of `IndexError`);
- `delete()` on a `DoublyLinkedList` or `CircularLinkedList` raises
  `ValueError` when the list is empty or the value is absent, while
  `SinglyLinkedList.delete()` returns whether a node was removed;
- `Graph` and `DisjointSet` raise `IndexError` for vertices or elements out
  of range, and `HashTable.bucket()` does so for a bad bucket index;
- `Trie` raises `ValueError` for any character outside `a` to `z`.

## Demonstrations

Each of these prints a short walk through one structure:

```
structkit-graph
structkit-hash-table
structkit-min-heap
structkit-disjoint-set
structkit-trie
```

## What it does not include

structkit has no stack or queue types; Python's `list` and
`collections.deque` serve those roles. There is also no demonstration
command for the dynamic array or the linked lists.

## Running the tests

```
pip install ".[test]"
pytest
```