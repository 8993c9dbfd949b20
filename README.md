# algolab

This package collects classic algorithms and data structures. Each one comes
with a command-line tool. No third-party libraries are needed.

- **Record sorting** (`algolab.sorting`): in-place merge sort and quick sort.
  Quick sort uses Hoare partitioning with a median-of-three pivot. Both are
  applied to CSV records of the form `id,name,integer,float`.
- **Edit distance** (`algolab.editdistance`): a distance that counts only
  insertions and deletions. `edit_distance` is plain recursion and takes
  exponential time. `edit_distance_dyn` computes the same value with a table.
- **Spell correction** (`algolab.spellcheck`): each word of a text is matched
  to the closest word in a dictionary.
- **Hash table** (`algolab.hashtable`): a separately chained table with 10007
  buckets. Compare and hash functions are pluggable.
- **Word frequency** (`algolab.wordfreq`): finds the most frequent word that is
  at least a given length.
- **Graphs and BFS** (`algolab.graph`, `algolab.bfs`): a graph stored as
  adjacency lists. It can be directed or undirected. Nodes are visited
  breadth-first from a start node.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool returns exit status 1 when its arguments are wrong.

### Sorting records

```
algolab-sort INPUT.csv OUTPUT.csv FIELD ALGORITHM
```

`FIELD` selects the sort key:

- `1`: name
- `2`: integer field
- `3`: float field

`ALGORITHM` selects the method:

- `1`: merge sort
- `2`: quick sort

Blank input lines are skipped. Empty fields between commas are ignored. The
sorted records are written to `OUTPUT.csv`, with the float printed to two
decimals (for example `1,Alice,30,2.10`). The time taken to sort and the time
taken to write are printed on standard output.

### Correcting a text against a dictionary

```
algolab-spellcheck DICTIONARY.txt TEXT.txt
```

The dictionary holds one word per line and is lower-cased. In the text,
everything except ASCII letters, digits and spaces is removed, and then each
word is lower-cased. For every word, the tool prints that word, the first
dictionary word at the smallest edit distance, and the distance. If the
dictionary or the text is empty, the tool prints a message and exits with
status 1.

### Most frequent word

```
algolab-wordfreq TEXT.txt MIN_LENGTH
```

Each word is lower-cased and cut at its first character that is not an ASCII
letter. Among the words of at least `MIN_LENGTH` bytes, the tool prints the one
that occurs most often and its count. `MIN_LENGTH` must be a positive integer.

### Breadth-first search over a graph

```
algolab-bfs GRAPH.csv CITY OUTPUT.txt
```

Each line of `GRAPH.csv` is `node1,node2,label` and adds an undirected labelled
edge. Lines that do not have three non-empty fields are skipped. Node names are
compared without regard to ASCII case. The nodes reached from `CITY` are
written to `OUTPUT.txt` in breadth-first order, one per line. If `CITY` is not
a node, nothing is written. Loading time and visit time are printed.

## Library use

```python
from algolab.sorting import merge_sort, quick_sort, Record, SortField

items = [9, 3, 7, 6, 2, 8]
quick_sort(items)                # items == [2, 3, 6, 7, 8, 9]

records = [Record.from_line("3,John,25,3.5"), Record.from_line("1,Alice,30,2.1")]
merge_sort(records, SortField.NAME.key)
records[0].to_line()             # "1,Alice,30,2.10"
```

```python
from algolab.editdistance import edit_distance, edit_distance_dyn

edit_distance("flaw", "lawn")        # 2
edit_distance_dyn("Sasso", "Masso")  # 2
```

```python
from algolab.hashtable import HashTable, compare_ints, hash_int

table = HashTable(compare_ints, hash_int)
table.put(7, 77)
table.get(7)       # 77
7 in table         # True
len(table)         # 1
```

The default table compares and hashes strings (`key_compare`, `hash_string`).
`sorted_counts()` orders entries by descending value and then by key.
`format_sorted()` renders the entries as a word/count listing.

```python
from algolab.graph import Graph
from algolab.bfs import breadth_first_visit

g = Graph(True, False)   # labelled, undirected
g.add_node("A")
g.add_node("B")
g.add_edge("A", "B", "label1")
g.get_label("A", "B")    # "label1"
g.num_edges()            # 1
breadth_first_visit(g, "A")  # ["A", "B"]
```

Errors in graph use:

- `add_edge` raises `KeyError` if either endpoint is missing.
- `neighbours` raises `KeyError` for an unknown node.
- Passing `None` as a node or label raises `ValueError`.

## Limitations

- `Graph.contains_edge` checks only that both endpoints are nodes of the
  graph. It does not look for the edge itself.
- `HashTable` never grows beyond its fixed bucket count.
- A key stored with the value `None` counts as absent.