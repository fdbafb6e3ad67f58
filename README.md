# concmap

A hash map that many threads can read and write at the same time. Readers take
no locks. A writer that changes a chain locks only the head node of the bin it
changes, so writers to different bins do not block each other. The table is
created, and empty bins are claimed, under one map-wide lock.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from concmap.cmap import Cmap

m = Cmap()

m.put("alpha", 1)              # PutResult(previous=None, stored=True)
m.put("alpha", 2)              # PutResult(previous=1, stored=True)
m.put_if_absent("alpha", 3)    # PutResult(previous=2, stored=False)

m.get("alpha")                 # 2
m["alpha"]                     # 2
"alpha" in m                   # True
m.get("missing")               # raises KeyError

m.get_and_then("alpha", lambda v: v * 2)  # 4

print(m.size(), len(m))        # 1 1
m.clear()
```

`put` and `put_if_absent` return a `PutResult` named tuple of `previous` (the
value that was stored before, or `None` for a new key) and `stored` (whether
the new value was written). It unpacks like a plain pair:

```python
previous, stored = m.put("beta", 10)
```

`get`, `get_and_then` and `m[key]` raise `KeyError` when the key is not in the
map. A key stored with the value `None` is present, and `get` returns `None`
for it.

If you know roughly how many entries the map will hold, create it with a
matching number of bins up front:

```python
m = Cmap.with_capacity(1000)   # 2048 bins
```

The bin count is the next power of two above `n / 0.75`, capped at `2**30`. A
capacity of zero or less raises `ValueError`.

### Keys and hashing

By default keys are hashed with 64-bit FNV-1a (`concmap.hasher.default_hasher`).
It takes `str`, `bytes`, `bytearray`, `memoryview` and `int` keys; integers are
hashed as their little-endian 64-bit two's-complement bytes. A key of any other
type (including `bool`) raises `TypeError`.

To use other key types, pass your own hasher: any callable that takes a key and
returns an integer (only its low 64 bits are used), or an instance of a
`concmap.hasher.Hasher` subclass that implements `hash(key)`.
`concmap.hasher.FNVHasher` applies FNV-1 to a plain text form of any key:

```python
from concmap.cmap import Cmap
from concmap.hasher import FNVHasher

m = Cmap(FNVHasher())
m.put((1, 2), "tuple key")
m.get((1, 2))                  # "tuple key"
```

Keys are compared with `==` once their hashes match.

### Internals

`concmap.table` holds the bin storage (`Table`, `BinEntry`, `BinKind`, `Node`).
`concmap.helpers` holds the sizing constants and the helpers
`next_power_of_two`, `number_of_leading_zeros` and `resize_stamp`. None of them
is needed for normal use.

## What it does not do

- The table does not grow. It keeps the number of bins it was created with
  (16 by default, or the size chosen by `with_capacity`); as more keys are
  added, the chains in each bin get longer and lookups slower.
- Single keys cannot be removed; only `clear()` empties the map, leaving a
  fresh table of 16 bins.
- The map cannot be iterated over: there is no way to list its keys, values or
  items.