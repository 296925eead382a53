"""Field descriptors and the in-memory record layout they describe."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, replace

MAX_FIELDS = 128
INT_SIZE = 4

_DESCRIPTOR_RE = re.compile(r"(?:s[0-9]{2}|[iu])+")
_TOKEN_RE = re.compile(r"s([0-9]{2})|([iu])")


class FieldType(enum.Enum):
    """Logical type of a record field, keyed by its descriptor code."""

    STR = "s"
    UINT = "u"
    INT = "i"


@dataclass(frozen=True)
class Field:
    """One field of a record: its type, byte capacity and offset."""

    type: FieldType
    offset: int
    capacity: int = INT_SIZE
    is_last: bool = False

    @property
    def alignment(self) -> int:
        return 1 if self.type is FieldType.STR else INT_SIZE


def _align(offset: int, alignment: int) -> int:
    return -(-offset // alignment) * alignment


@dataclass(frozen=True)
class Layout:
    """The fields of a record and the padded size of the whole record."""

    fields: tuple[Field, ...]
    size: int

    def unpack(self, data, count):
        """Decode ``count`` consecutive records from raw little-endian memory."""
        view = memoryview(bytes(data))
        if count < 0:
            raise ValueError("record count must not be negative")
        if len(view) < count * self.size:
            raise ValueError(
                f"need {count * self.size} bytes for {count} records, got {len(view)}"
            )
        return [
            self._unpack_one(view[start:start + self.size])
            for start in range(0, count * self.size, self.size)
        ]

    def _unpack_one(self, chunk: memoryview) -> tuple:
        values = []
        for field in self.fields:
            raw = bytes(chunk[field.offset:field.offset + field.capacity])
            if field.type is FieldType.STR:
                values.append(raw.split(b"\0", 1)[0].decode("latin-1"))
            else:
                values.append(
                    int.from_bytes(raw, "little", signed=field.type is FieldType.INT)
                )
        return tuple(values)


def parse_descriptor(descriptor):
    """Turn a descriptor such as ``"iis03us10"`` into a :class:`Layout`."""
    if not descriptor:
        raise ValueError("descriptor is empty")
    if not _DESCRIPTOR_RE.fullmatch(descriptor):
        raise ValueError(f"malformed descriptor {descriptor!r}")

    fields: list[Field] = []
    offset = 0
    max_align = 1
    for match in _TOKEN_RE.finditer(descriptor):
        digits, code = match.groups()
        if digits is not None:
            capacity = int(digits)
            if capacity == 0:
                raise ValueError("string capacity must be at least 1")
            field_type = FieldType.STR
        else:
            capacity = INT_SIZE
            field_type = FieldType(code)
        field = Field(field_type, 0, capacity)
        offset = _align(offset, field.alignment)
        fields.append(replace(field, offset=offset))
        offset += capacity
        max_align = max(max_align, field.alignment)

    if len(fields) > MAX_FIELDS:
        raise ValueError(f"at most {MAX_FIELDS} fields are supported")
    fields[-1] = replace(fields[-1], is_last=True)
    return Layout(tuple(fields), _align(offset, max_align))