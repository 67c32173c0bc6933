"""CIP elementary data types, service and status codes, and little-endian decoding."""

from __future__ import annotations

import enum
import struct


class CipDataTypes(enum.IntEnum):
    """Type codes of the CIP elementary and structured data types."""

    ANY = 0x00
    BOOL = 0xC1
    SINT = 0xC2
    INT = 0xC3
    DINT = 0xC4
    LINT = 0xC5
    USINT = 0xC6
    UINT = 0xC7
    UDINT = 0xC8
    ULINT = 0xC9
    REAL = 0xCA
    LREAL = 0xCB
    STIME = 0xCC
    DATE = 0xCD
    DATE_OF_DAY = 0xCE
    DATE_AND_TIME = 0xCF
    STRING = 0xD0
    BYTE = 0xD1
    WORD = 0xD2
    DWORD = 0xD3
    LWORD = 0xD4
    STRING2 = 0xD5
    FTIME = 0xD6
    LTIME = 0xD7
    ITIME = 0xD8
    STRINGN = 0xD9
    SHORT_STRING = 0xDA
    TIME = 0xDB
    EPATH = 0xDC
    ENG_UNIT = 0xDD
    USINT_USINT = 0xA0
    USINT6 = 0xA2
    MEMBER_LIST = 0xA3
    BYTE_ARRAY = 0xA4


class ServiceCodes(enum.IntEnum):
    """Common CIP service codes."""

    NONE = 0x00
    GET_ATTRIBUTE_ALL = 0x01
    SET_ATTRIBUTE_ALL = 0x02
    GET_ATTRIBUTE_LIST = 0x03
    SET_ATTRIBUTE_LIST = 0x04
    RESET = 0x05
    START = 0x06
    STOP = 0x07
    CREATE_OBJECT_INSTANCE = 0x08
    DELETE_OBJECT_INSTANCE = 0x09
    MULTIPLE_SERVICE_PACKET = 0x0A
    APPLY_ATTRIBUTES = 0x0D
    GET_ATTRIBUTE_SINGLE = 0x0E
    SET_ATTRIBUTE_SINGLE = 0x10
    FIND_NEXT_OBJECT_INSTANCE = 0x11
    ERROR_RESPONSE = 0x14
    RESTORE = 0x15
    SAVE = 0x16
    NO_OPERATION = 0x17
    GET_MEMBER = 0x18
    SET_MEMBER = 0x19
    INSERT_MEMBER = 0x1A
    REMOVE_MEMBER = 0x1B
    GROUP_SYNC = 0x1C


class GeneralStatusCodes(enum.IntEnum):
    """General status codes of a Message Router response."""

    SUCCESS = 0x00
    CONNECTION_FAILURE = 0x01
    RESOURCE_UNAVAILABLE = 0x02
    INVALID_PARAMETER_VALUE = 0x03
    PATH_SEGMENT_ERROR = 0x04
    PATH_DESTINATION_UNKNOWN = 0x05
    PARTIAL_TRANSFER = 0x06
    CONNECTION_LOST = 0x07
    SERVICE_NOT_SUPPORTED = 0x08
    INVALID_ATTRIBUTE_VALUE = 0x09
    ATTRIBUTE_LIST_ERROR = 0x0A
    ALREADY_IN_REQUESTED_MODE_OR_STATE = 0x0B
    OBJECT_STATE_CONFLICT = 0x0C
    OBJECT_ALREADY_EXISTS = 0x0D
    ATTRIBUTE_NOT_SETTABLE = 0x0E
    PRIVILEGE_VIOLATION = 0x0F
    DEVICE_STATE_CONFLICT = 0x10
    REPLY_DATA_TOO_LARGE = 0x11
    FRAGMENTATION_OF_PRIMITIVE_VALUE = 0x12
    NOT_ENOUGH_DATA = 0x13
    ATTRIBUTE_NOT_SUPPORTED = 0x14
    TOO_MUCH_DATA = 0x15
    OBJECT_DOES_NOT_EXIST = 0x16
    SVCFRAG_SEQNC_NOT_IN_PROGRESS = 0x17
    NO_STORED_ATTRIBUTE_DATA = 0x18
    STORE_OPERATION_FAILURE = 0x19
    ROUTING_FAILURE_REQUEST_SIZE = 0x1A
    ROUTING_FAILURE_RESPONSE_SIZE = 0x1B
    MISSING_ATTRIBUTE_LIST_ENTRY = 0x1C
    INVALID_ATTRIBUTE_LIST = 0x1D
    EMBEDDED_SERVICE_ERROR = 0x1E
    VENDOR_SPECIFIC = 0x1F
    INVALID_PARAMETER = 0x20
    WRITE_ONCE_WRITTEN = 0x21
    INVALID_REPLY_RECEIVED = 0x22
    KEY_FAILURE_IN_PATH = 0x25
    PATH_SIZE_INVALID = 0x26
    UNEXPECTED_ATTRIBUTE = 0x27
    INVALID_MEMBER_ID = 0x28
    MEMBER_NOT_SETTABLE = 0x29


_FORMATS: dict[CipDataTypes, str] = {
    CipDataTypes.BOOL: "<B",
    CipDataTypes.SINT: "<b",
    CipDataTypes.INT: "<h",
    CipDataTypes.DINT: "<i",
    CipDataTypes.LINT: "<q",
    CipDataTypes.USINT: "<B",
    CipDataTypes.UINT: "<H",
    CipDataTypes.UDINT: "<I",
    CipDataTypes.ULINT: "<Q",
    CipDataTypes.REAL: "<f",
    CipDataTypes.LREAL: "<d",
    CipDataTypes.STIME: "<i",
    CipDataTypes.DATE: "<H",
    CipDataTypes.DATE_OF_DAY: "<I",
    CipDataTypes.BYTE: "<B",
    CipDataTypes.WORD: "<H",
    CipDataTypes.DWORD: "<I",
    CipDataTypes.LWORD: "<Q",
    CipDataTypes.FTIME: "<i",
    CipDataTypes.LTIME: "<q",
    CipDataTypes.ITIME: "<h",
    CipDataTypes.TIME: "<i",
}


def _format_for(data_type: CipDataTypes | int) -> str:
    try:
        return _FORMATS[CipDataTypes(data_type)]
    except (KeyError, ValueError):
        raise ValueError(f"data type {data_type!r} has no fixed binary form") from None


class ByteReader:
    """Sequential little-endian reader over a byte string."""

    def __init__(self, data: bytes | bytearray | list[int] = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes: {size}")
        end = self._pos + size
        if end > len(self._data):
            raise ValueError(
                f"not enough data: need {size} bytes, {self.remaining()} left"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _unpack(self, fmt: str) -> int:
        layout = struct.Struct(fmt)
        return layout.unpack(self._take(layout.size))[0]

    def read_usint(self) -> int:
        """Read an unsigned 8-bit integer."""
        return self._unpack("<B")

    def read_uint(self) -> int:
        """Read an unsigned 16-bit integer."""
        return self._unpack("<H")

    def read_int(self) -> int:
        """Read a signed 16-bit integer."""
        return self._unpack("<h")

    def read_udint(self) -> int:
        """Read an unsigned 32-bit integer."""
        return self._unpack("<I")

    def read_bytes(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        return self._take(size)

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos


def decode_value(data: bytes, data_type: CipDataTypes | int) -> int | float:
    """Decode a value of ``data_type`` from the start of ``data``."""
    fmt = _format_for(data_type)
    size = struct.calcsize(fmt)
    raw = bytes(data)
    if len(raw) < size:
        raise ValueError(f"{CipDataTypes(data_type).name} needs {size} bytes, got {len(raw)}")
    return struct.unpack_from(fmt, raw)[0]


def encode_value(value: int | float, data_type: CipDataTypes | int) -> bytes:
    """Encode ``value`` as ``data_type``; floats given for integer types are truncated."""
    fmt = _format_for(data_type)
    if fmt[-1] not in "fd":
        try:
            value = int(value)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"cannot convert {value!r} to an integer") from exc
    try:
        return struct.pack(fmt, value)
    except (struct.error, OverflowError) as exc:
        raise ValueError(
            f"{value!r} does not fit in {CipDataTypes(data_type).name}"
        ) from exc