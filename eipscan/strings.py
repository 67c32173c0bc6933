"""CIP string types and the revision structure."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from eipscan.types import ByteReader


def _to_bytes(data: str | bytes | bytearray) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


def _pack_with_length(kind: str, length_format: str, data: bytes) -> bytes:
    try:
        prefix = struct.pack(length_format, len(data))
    except struct.error as exc:
        raise ValueError(f"{kind} cannot hold {len(data)} characters") from exc
    return prefix + data


class _CipBaseString:
    """Behaviour shared by the length-prefixed CIP strings."""

    __slots__ = ("_data",)

    _data: bytes

    @property
    def data(self) -> bytes:
        """The raw characters."""
        return self._data

    @property
    def length(self) -> int:
        """The number of characters."""
        return len(self._data)

    def __str__(self) -> str:
        return self._data.decode("utf-8", "surrogateescape")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class CipShortString(_CipBaseString):
    """SHORT_STRING: one length byte followed by the characters."""

    __slots__ = ()

    def __init__(self, data: str | bytes | bytearray = b"") -> None:
        self._data = _to_bytes(data)

    def to_str(self) -> str:
        """The characters as a Python string."""
        return self._data.decode("utf-8", "surrogateescape")

    def pack(self) -> bytes:
        """Encode as the length byte followed by the characters."""
        return _pack_with_length(type(self).__name__, "<B", self._data)

    @classmethod
    def read(cls, reader: ByteReader) -> CipShortString:
        """Read a short string from ``reader``."""
        length = reader.read_usint()
        return cls(reader.read_bytes(length))


class CipString(_CipBaseString):
    """STRING: a 16-bit length followed by the characters."""

    __slots__ = ()

    def __init__(self, data: str | bytes | bytearray = b"") -> None:
        self._data = _to_bytes(data)

    def to_str(self) -> str:
        """The characters as a Python string."""
        return self._data.decode("utf-8", "surrogateescape")

    def pack(self) -> bytes:
        """Encode as the 16-bit length followed by the characters."""
        return _pack_with_length(type(self).__name__, "<H", self._data)

    @classmethod
    def read(cls, reader: ByteReader) -> CipString:
        """Read a string from ``reader``."""
        length = reader.read_uint()
        return cls(reader.read_bytes(length))


@dataclass(frozen=True)
class CipRevision:
    """Major and minor revision of a device."""

    major_revision: int = 0
    minor_revision: int = 0

    def __post_init__(self) -> None:
        for name in ("major_revision", "minor_revision"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must fit in one byte, got {value}")

    def __str__(self) -> str:
        return f"{self.major_revision}.{self.minor_revision}"

    def pack(self) -> bytes:
        """Encode as two bytes, major first."""
        return bytes((self.major_revision, self.minor_revision))

    @classmethod
    def read(cls, reader: ByteReader) -> CipRevision:
        """Read a revision from ``reader``."""
        major = reader.read_usint()
        minor = reader.read_usint()
        return cls(major, minor)