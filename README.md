# jsoncore

Low-level pieces for building a JSON library. The package has no runtime
dependencies beyond the standard library.

## Modules

- `jsoncore.linkhash`: `LinkHash`, an open-addressing hash table with linear
  probing that remembers insertion order, and its `Entry` records.
  `string_table(size, free_fn=None)` makes a table keyed by strings (hashed
  with the currently selected string hash, compared up to the first NUL byte);
  `identity_table(size, free_fn=None)` makes one keyed by object identity.
  The table doubles in size once it is 66% full.
- `jsoncore.hashing`: `hashlittle(data, initval=0)` (the lookup3 32-bit hash),
  `perllike_str_hash`, `char_hash` (hashlittle with a per-process random
  seed), `ptr_hash` (identity hash), and `set_string_hash` /
  `current_string_hash` with the `StringHash` enum (`DEFAULT`, `PERLLIKE`) to
  choose which hash new string tables use.
- `jsoncore.printbuf`: `PrintBuffer`, a growable byte buffer with `append`,
  `memset`, printf-style `sprintf`, `reset`, `getvalue`, `len()` and a
  `capacity` property that starts at 32 bytes.
- `jsoncore.util`: `parse_int64` (clamping to the signed 64-bit range),
  `parse_double`, and `type_to_name` for `JsonType` values.
- `jsoncore.seed`: `get_random_seed`, a signed 32-bit seed from the operating
  system's random source, falling back to one derived from the current time.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

An ordered table with string keys:

```python
from jsoncore.linkhash import string_table

table = string_table(16)
table.insert("abc", 12)
table.insert("foo", "bar")
table.delete("abc")
print(list(table.items()))   # [('foo', 'bar')]
print("foo" in table, len(table))   # True 1
print(table.lookup("foo"))   # bar
```

`insert` always appends a new record, even when an equal key is already
present; `lookup_entry` and `lookup` find the first one. `lookup`, `delete`
and `delete_entry` raise `KeyError` for a missing key or entry. Iterating over
a table yields its keys in insertion order, and entries may be deleted while
iterating. A `free_fn`, if given, is called with each entry that `delete`,
`delete_entry` or `clear` removes.

Choosing the string hash:

```python
from jsoncore.hashing import StringHash, set_string_hash, perllike_str_hash

set_string_hash(StringHash.PERLLIKE)   # new string tables use perllike_str_hash
perllike_str_hash("")                  # 1
```

`set_string_hash` raises `ValueError` for an unknown kind.

Building output in a buffer:

```python
from jsoncore.printbuf import PrintBuffer

pb = PrintBuffer()
pb.sprintf("blue:%d", 1)
pb.memset(-1, ord("x"), 3)    # offset -1 means "at the end"
print(pb.getvalue())          # b'blue:1xxx'
```

Parsing numbers and naming types:

```python
from jsoncore.util import parse_int64, parse_double, type_to_name, JsonType

parse_int64("   -00001234")          # -1234
parse_int64("9223372036854775808")   # 9223372036854775807 (clamped)
parse_double("2.5e3xyz")             # 2500.0
type_to_name(JsonType.STRING)        # 'string'
```

`parse_int64` and `parse_double` skip leading whitespace, ignore trailing
characters, and raise `ValueError` when the text does not start with a
number. `type_to_name` raises `ValueError` for a value outside `JsonType`.

## What this package does not do

It provides no JSON value model, no JSON parser or tokenizer, and no
serializer; consequently it has no functions for reading JSON from or
writing JSON to files. It offers no command-line tool.