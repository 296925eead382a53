# compactstore

A small binary format for storing sequences of fixed-layout records. Each
record is made up of strings, signed 32-bit integers and unsigned 32-bit
integers.

## Record layout

A descriptor string gives the layout of a record, one field after another:

- `i` is a signed 32-bit integer
- `u` is an unsigned 32-bit integer
- `sNN` is a character array with capacity `NN`, given as exactly two digits
  (at least `01`)

For example, `"is03u"` describes a record holding a signed integer, then a
string of up to two characters, then an unsigned integer.

`compactstore.descriptor.parse_descriptor` turns a descriptor into a
`Layout`. An empty or malformed descriptor, a zero capacity, or more than
128 fields raises `ValueError`. The layout's `fields` are `Field` objects
with a `FieldType` (`STR`, `UINT`, `INT`), an `offset`, a `capacity` and an
`is_last` flag. `size` is the padded record size: integers are 4-byte
aligned and strings are 1-byte aligned. `Layout.unpack(data, count)` decodes
`count` records from raw little-endian bytes laid out that way.

```python
from compactstore.descriptor import parse_descriptor

layout = parse_descriptor("is02")
layout.size                                              # 8
layout.unpack(b"\x01\x00\x00\x00a\x00\x00\x00", 1)       # [(1, 'a')]
```

## File format

- The first byte holds the number of records (0 to 255).
- Each field is written as a one-byte header followed by its payload.
- Bit 7 of the header is set on the last field of a record.
- For a string, bit 6 is set and bits 5 to 0 hold the length. The raw
  characters follow. A string is cut at its first NUL character and stored
  with at most `capacity - 1` characters, and never more than 63.
- For an integer, bit 6 is clear and bit 5 marks a signed value. Bits 4 to 0
  hold the number of bytes (1 to 4).
- An integer payload is big-endian and keeps only the bytes it needs. For an
  unsigned value, leading zero bytes are dropped. For a signed value, bytes
  that only repeat the sign are dropped. `min_bytes(value, signed)` gives
  that byte count.

Strings are encoded and decoded as Latin-1.

## Usage

```python
import io
from compactstore.encoding import write_records, read_records, format_records

buf = io.BytesIO()
write_records([(-1, 258)], "iu", buf)

buf.seek(0)
print(format_records(buf), end="")
```

This prints:

```
Estruturas: 1

(int) -1 (ffffffff)
(uns) 258 (00000102)
```

Records are given as sequences of values, one per field, and the descriptor
may be a string or a `Layout`. `write_records` raises `ValueError` for more
than 255 records, for a record whose number of values does not match the
descriptor, or for an integer that does not fit in 32 bits.

`read_records(stream)` returns each record as a list of `Value` objects,
each with a `type` and a `value`. `show_records(stream, out)` writes the
listing above to a text stream, with a blank line between records.
`format_records(stream)` returns it as a string. An empty, truncated or
malformed file raises `FormatError`, a subclass of `ValueError`.

## Demo

The package includes a short run over a set of edge cases: extreme
integers, a 63-character string, and several records in one file. Each case
is written to a temporary file and listed back on standard output.

```
compactstore-demo
```

`compactstore.demo.run_case(title, records, descriptor, out)` runs one such
case and writes its listing to `out`.

## Tests

```
pip install -e .[test]
pytest
```