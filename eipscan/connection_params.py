"""Network connection parameters of a Forward Open request."""

from __future__ import annotations

import enum


class NetworkConnectionParams(enum.IntEnum):
    """Bit values of the 16-bit network connection parameters and transport trigger."""

    REDUNDANT = 1 << 15
    OWNED = 0
    TYPE0 = 0

    MULTICAST = 1 << 13
    P2P = 2 << 13

    LOW_PRIORITY = 0
    HIGH_PRIORITY = 1 << 10
    SCHEDULED_PRIORITY = 2 << 10
    URGENT = 3 << 10

    FIXED = 0
    VARIABLE = 1 << 9

    TRIG_CYCLIC = 0
    TRIG_CHANGE = 1 << 4
    TRIG_APP = 2 << 4

    CLASS0 = 0
    CLASS1 = 1
    CLASS2 = 2
    CLASS3 = 3
    TRANSP_SERVER = 0x80


class RedundantOwner(enum.IntEnum):
    EXCLUSIVE = 0
    REDUNDANT = 1


class ConnectionType(enum.IntEnum):
    NULL_TYPE = 0
    MULTICAST = 1
    P2P = 2
    RESERVED = 3


class Priority(enum.IntEnum):
    LOW_PRIORITY = 0
    HIGH_PRIORITY = 1
    SCHEDULED = 2
    URGENT = 3


class SizeType(enum.IntEnum):
    FIXED = 0
    VARIABLE = 1


_MASK_32 = 0xFFFFFFFF


class NetworkConnectionParametersBuilder:
    """Composes and inspects network connection parameters.

    With ``lfo`` set the 32-bit layout of Large Forward Open is used,
    otherwise the 16-bit layout of the ordinary Forward Open.
    """

    def __init__(self, value: int = 0, lfo: bool = False) -> None:
        self._value = int(value) & _MASK_32
        self._lfo = bool(lfo)

    @property
    def lfo(self) -> bool:
        return self._lfo

    def _shift(self, short: int) -> int:
        return short + 16 if self._lfo else short

    def _set(self, field_value: int, short_shift: int) -> NetworkConnectionParametersBuilder:
        self._value = (self._value | (int(field_value) << self._shift(short_shift))) & _MASK_32
        return self

    def _get(self, bits: int, short_shift: int) -> int:
        shift = self._shift(short_shift)
        return (self._value >> shift) & ((1 << bits) - 1)

    @property
    def _size_mask(self) -> int:
        return 0xFFFF if self._lfo else 0x1FF

    def set_redundant_owner(self, value: RedundantOwner) -> NetworkConnectionParametersBuilder:
        return self._set(value, 15)

    def set_connection_type(self, value: ConnectionType) -> NetworkConnectionParametersBuilder:
        return self._set(value, 13)

    def set_priority(self, value: Priority) -> NetworkConnectionParametersBuilder:
        return self._set(value, 10)

    def set_type(self, value: SizeType) -> NetworkConnectionParametersBuilder:
        return self._set(value, 9)

    def set_connection_size(self, value: int) -> NetworkConnectionParametersBuilder:
        self._value |= (int(value) & 0xFFFF) & self._size_mask
        return self

    def build(self) -> int:
        """The composed parameter value."""
        return self._value

    @property
    def redundant_owner(self) -> RedundantOwner:
        return RedundantOwner(self._get(1, 15))

    @property
    def connection_type(self) -> ConnectionType:
        return ConnectionType(self._get(2, 13))

    @property
    def priority(self) -> Priority:
        return Priority(self._get(2, 10))

    @property
    def type(self) -> SizeType:
        return SizeType(self._get(1, 9))

    @property
    def connection_size(self) -> int:
        return self._value & self._size_mask