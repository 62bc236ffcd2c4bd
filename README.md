# edakit

Classic data structures, universal hashing with open-addressing probing
rules, and IPv4 address helpers.

## Contents

- `edakit.dnode.DNode` is a doubly linked node. It has `prev` and `next`
  links and an `item`. A dummy node, made with `DNode.dummy()`, holds no item.
- `edakit.linked_list.LinkedList` and `ListIterator` form a doubly linked list
  with a dummy end node. The list supports `begin()`, `end()`, `find`,
  `insert`, `remove`, `push_front`, `push_back`, `pop_front` and `pop_back`.
  It also has `splice`, `splice_all`, `splice_one`, `merge` and a merge
  `sort`. Each of these takes an optional `less` comparison.
- `edakit.stack.Stack` is a LIFO stack backed by a `LinkedList`.
- `edakit.uhash` provides universal hash functions
  `UHash(m, p, a, b)`, computing `((a*k + b) % p) % m`. It also provides the
  seedable `MinstdRand` generator and its shared instance `GENERATOR`, with
  `uniform()` and `pick_at_random(a, b)`.
- `edakit.probing` provides open-addressing collision resolution rules over a
  `UHash`:
  - linear probing (`LPHash`)
  - quadratic probing (`QPHash`)
  - random probing (`RPHash`)
  - rehashing followed by linear probing (`RHash`)
- `edakit.ip_utils` provides the `IP` address type, with `IP.parse` and
  `str()`, and `ip_to_int`.

## Lists and stacks

Lists fold to and parse from `[ item1 item2 ... ]`. The empty list is written
`[ ]` or `[]`. `parse` reads integer items and raises
`ValueError("Wrong input format.")` on malformed text.

```python
from edakit.linked_list import LinkedList
from edakit.stack import Stack

lst = LinkedList.parse("[ 5 3 4 ]")
lst.sort(lambda a, b: a <= b)
print(lst)  # [ 3 4 5 ]

s = Stack()
s.push(1)
s.push(2)
print(s.top())  # 2
print(s)        # [ 2 1 ]
```

## Hashing and probing

```python
from edakit.probing import LPHash
from edakit.uhash import UHash, GENERATOR

h = UHash(8, 4294967311, 3, 5)
print(h(10))                                  # 3
probe = LPHash(h)
print([probe(10, i) for i in range(4)])       # [3, 4, 5, 6]

GENERATOR.seed(0)                             # reproducible random picks
fresh = probe.pick_at_new(16)                 # same rule, new random function
```

## IP addresses

```python
from edakit.ip_utils import IP, ip_to_int

ip = IP.parse("150.214.110.3")
print(ip)             # 150.214.110.3
print(ip_to_int(ip))  # 2530635267
```

## What this package does not do

The probing rules compute sequences of slot indices. The package has no
hash table container that stores keys and values with them. It provides no
circular array or queue, and it installs no command-line program.

## Tests

```
pip install -e .[test]
pytest
```