"""Writing and reading records in the compact binary format."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterator, TextIO

from .descriptor import Field, FieldType, Layout, parse_descriptor

MAX_RECORDS = 255
MAX_STRING = 63

_WORD_MASK = 0xFFFFFFFF
_LAST_BIT = 0x80
_STRING_BIT = 0x40
_SIGNED_BIT = 0x20


class FormatError(ValueError):
    """Raised when compact data cannot be decoded."""


@dataclass(frozen=True)
class Value:
    """A decoded field value together with its type."""

    type: FieldType
    value: int | str

    def __str__(self) -> str:
        if self.type is FieldType.STR:
            return f"(str) {str(self.value).split(chr(0), 1)[0]}"
        if self.type is FieldType.INT:
            return f"(int) {self.value} ({self.value & _WORD_MASK:08x})"
        return f"(uns) {self.value} ({self.value:08x})"


def _to_word(value: int) -> int:
    if not -(1 << 31) <= value <= _WORD_MASK:
        raise ValueError(f"{value} does not fit in 32 bits")
    return value & _WORD_MASK


def min_bytes(value, signed):
    """Number of bytes (1 to 4) needed to store a 32-bit value compactly."""
    word = _to_word(value)
    if not signed:
        return max(1, (word.bit_length() + 7) // 8)
    number = word - (1 << 32) if word & 0x80000000 else word
    return next(
        n for n in range(1, 5) if -(1 << (8 * n - 1)) <= number < 1 << (8 * n - 1)
    )


def _encode_field(field: Field, value) -> bytes:
    header = _LAST_BIT if field.is_last else 0
    if field.type is FieldType.STR:
        raw = value.encode("latin-1") if isinstance(value, str) else bytes(value)
        raw = raw.split(b"\0", 1)[0][: min(field.capacity - 1, MAX_STRING)]
        return bytes([header | _STRING_BIT | len(raw)]) + raw
    word = _to_word(value)
    signed = field.type is FieldType.INT
    length = min_bytes(word, signed)
    header |= (_SIGNED_BIT if signed else 0) | length
    return bytes([header]) + word.to_bytes(4, "big")[4 - length:]


def write_records(records, descriptor, stream):
    """Write records (sequences of field values) to a binary stream."""
    layout = descriptor if isinstance(descriptor, Layout) else parse_descriptor(descriptor)
    records = list(records)
    if len(records) > MAX_RECORDS:
        raise ValueError(f"at most {MAX_RECORDS} records can be stored")
    out = bytearray([len(records)])
    for record in records:
        values = tuple(record)
        if len(values) != len(layout.fields):
            raise ValueError(
                f"record has {len(values)} values, descriptor has {len(layout.fields)} fields"
            )
        for field, value in zip(layout.fields, values):
            out += _encode_field(field, value)
    stream.write(bytes(out))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise FormatError("truncated data")
    return data


def _read_count(stream: BinaryIO) -> int:
    data = stream.read(1)
    if not data:
        raise FormatError("empty file")
    return data[0]


def _iter_fields(stream: BinaryIO) -> Iterator[Value]:
    last = False
    while not last:
        data = stream.read(1)
        if not data:
            raise FormatError("malformed data: missing field header")
        header = data[0]
        last = bool(header & _LAST_BIT)
        if header & _STRING_BIT:
            text = _read_exact(stream, header & 0x3F).decode("latin-1")
            yield Value(FieldType.STR, text)
            continue
        length = header & 0x1F
        if not 1 <= length <= 4:
            raise FormatError(f"invalid integer length {length}")
        signed = (header & 0x60) == _SIGNED_BIT
        number = int.from_bytes(_read_exact(stream, length), "big", signed=signed)
        yield Value(FieldType.INT if signed else FieldType.UINT, number)


def read_records(stream):
    """Read every record from a binary stream as lists of :class:`Value`."""
    count = _read_count(stream)
    return [list(_iter_fields(stream)) for _ in range(count)]


def show_records(stream, out: TextIO):
    """Write a readable listing of the stored records to ``out``."""
    count = _read_count(stream)
    out.write(f"Estruturas: {count}\n\n")
    for index in range(count):
        for value in _iter_fields(stream):
            out.write(f"{value}\n")
        if index < count - 1:
            out.write("\n")


def format_records(stream):
    """Return the listing that :func:`show_records` would write."""
    buffer = io.StringIO()
    show_records(stream, buffer)
    return buffer.getvalue()