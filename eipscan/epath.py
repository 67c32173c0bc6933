"""Logical EPATH addressing a class, instance and attribute."""

from __future__ import annotations

import enum
import struct

from eipscan.types import ByteReader


class _SegmentType(enum.IntEnum):
    CLASS_8_BITS = 0x20
    CLASS_16_BITS = 0x21
    INSTANCE_8_BITS = 0x24
    INSTANCE_16_BITS = 0x25
    ATTRIBUTE_8_BITS = 0x30
    ATTRIBUTE_16_BITS = 0x31


_WIDE = {
    _SegmentType.CLASS_16_BITS,
    _SegmentType.INSTANCE_16_BITS,
    _SegmentType.ATTRIBUTE_16_BITS,
}

_TARGET = {
    _SegmentType.CLASS_8_BITS: 0,
    _SegmentType.CLASS_16_BITS: 0,
    _SegmentType.INSTANCE_8_BITS: 1,
    _SegmentType.INSTANCE_16_BITS: 1,
    _SegmentType.ATTRIBUTE_8_BITS: 2,
    _SegmentType.ATTRIBUTE_16_BITS: 2,
}


class EPath:
    """A path of up to three logical segments: class, instance, attribute."""

    __slots__ = ("_class_id", "_object_id", "_attribute_id", "_size")

    def __init__(
        self,
        class_id: int | None = None,
        object_id: int | None = None,
        attribute_id: int | None = None,
    ) -> None:
        if (object_id is not None and class_id is None) or (
            attribute_id is not None and object_id is None
        ):
            raise ValueError("path segments must be given in order: class, object, attribute")
        given = [v for v in (class_id, object_id, attribute_id) if v is not None]
        for value in given:
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"path segment value must fit in 16 bits, got {value}")
        self._class_id = class_id or 0
        self._object_id = object_id or 0
        self._attribute_id = attribute_id or 0
        self._size = len(given)

    @property
    def class_id(self) -> int:
        return self._class_id

    @property
    def object_id(self) -> int:
        return self._object_id

    @property
    def attribute_id(self) -> int:
        return self._attribute_id

    @property
    def size(self) -> int:
        """Number of segments in the path."""
        return self._size

    def _values(self) -> list[int]:
        return [self._class_id, self._object_id, self._attribute_id][: max(self._size, 1)]

    def pack_padded_path(self, use_8_bit_path_segments: bool = False) -> bytes:
        """Encode the path; the class segment is always present."""
        if use_8_bit_path_segments:
            segments = (
                _SegmentType.CLASS_8_BITS,
                _SegmentType.INSTANCE_8_BITS,
                _SegmentType.ATTRIBUTE_8_BITS,
            )
            return b"".join(
                bytes((segment, value & 0xFF))
                for segment, value in zip(segments, self._values())
            )
        segments = (
            _SegmentType.CLASS_16_BITS,
            _SegmentType.INSTANCE_16_BITS,
            _SegmentType.ATTRIBUTE_16_BITS,
        )
        return b"".join(
            struct.pack("<HH", segment, value)
            for segment, value in zip(segments, self._values())
        )

    def size_in_words(self, use_8_bit_path_segments: bool = False) -> int:
        """Length of the encoded path in 16-bit words."""
        return self._size if use_8_bit_path_segments else self._size * 2

    @classmethod
    def from_padded_path(cls, data: bytes) -> EPath:
        """Decode a padded path of 8- or 16-bit logical segments."""
        reader = ByteReader(data)
        ids = [0, 0, 0]
        while reader.remaining():
            code = reader.read_usint()
            try:
                segment = _SegmentType(code)
            except ValueError:
                raise ValueError(f"Unknown EPATH segment ={code}") from None
            try:
                if segment in _WIDE:
                    reader.read_usint()
                    value = reader.read_uint()
                else:
                    value = reader.read_usint()
            except ValueError:
                raise ValueError("Wrong EPATH format") from None
            ids[_TARGET[segment]] = value

        size = 0
        if ids[0] > 0:
            size = 1
            if ids[1] > 0:
                size = 2
                if ids[2] > 0:
                    size = 3

        path = cls()
        path._class_id, path._object_id, path._attribute_id = ids
        path._size = size
        return path

    def __str__(self) -> str:
        text = f"[classId={self._class_id}"
        if self._size > 1:
            text += f" objectId={self._object_id}"
            if self._size > 2:
                text += f" attributeId={self._attribute_id}"
        return text + "]"

    def __repr__(self) -> str:
        return (
            f"EPath(class_id={self._class_id}, object_id={self._object_id}, "
            f"attribute_id={self._attribute_id}, size={self._size})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EPath):
            return NotImplemented
        return (self._size, self._class_id, self._object_id, self._attribute_id) == (
            other._size,
            other._class_id,
            other._object_id,
            other._attribute_id,
        )

    def __hash__(self) -> int:
        return hash((self._size, self._class_id, self._object_id, self._attribute_id))