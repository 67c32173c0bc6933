"""Forward Open / Forward Close requests and the Forward Open response."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from eipscan.types import ByteReader

_OPEN_LAYOUT = struct.Struct("<BBIIHHIB3xIHIHBB")
_LARGE_OPEN_LAYOUT = struct.Struct("<BBIIHHIB3xIIIIBB")
_CLOSE_LAYOUT = struct.Struct("<BBHHIBB")


@dataclass
class ConnectionParameters:
    """Parameters of an IO connection to be opened."""

    priority_time_tick: int = 0
    timeout_ticks: int = 0
    o2t_network_connection_id: int = 0
    t2o_network_connection_id: int = 0
    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    connection_timeout_multiplier: int = 0
    o2t_rpi: int = 0
    o2t_network_connection_params: int = 0
    t2o_rpi: int = 0
    t2o_network_connection_params: int = 0
    transport_type_trigger: int = 0
    connection_path_size: int = 0
    o2t_real_time_format: bool = False
    t2o_real_time_format: bool = False
    connection_path: bytes = b""

    def __post_init__(self) -> None:
        self.connection_path = bytes(self.connection_path)


def _pack_open(layout: struct.Struct, params: ConnectionParameters, o2t: int, t2o: int) -> bytes:
    try:
        header = layout.pack(
            params.priority_time_tick,
            params.timeout_ticks,
            params.o2t_network_connection_id,
            params.t2o_network_connection_id,
            params.connection_serial_number,
            params.originator_vendor_id,
            params.originator_serial_number,
            params.connection_timeout_multiplier,
            params.o2t_rpi,
            o2t,
            params.t2o_rpi,
            t2o,
            params.transport_type_trigger,
            params.connection_path_size,
        )
    except struct.error as exc:
        raise ValueError(f"connection parameter out of range: {exc}") from exc
    return header + params.connection_path


@dataclass
class ForwardOpenRequest:
    """Forward Open with 16-bit network connection parameters."""

    connection_parameters: ConnectionParameters

    def pack(self) -> bytes:
        params = self.connection_parameters
        return _pack_open(
            _OPEN_LAYOUT,
            params,
            params.o2t_network_connection_params & 0xFFFF,
            params.t2o_network_connection_params & 0xFFFF,
        )


@dataclass
class LargeForwardOpenRequest:
    """Large Forward Open with 32-bit network connection parameters."""

    connection_parameters: ConnectionParameters

    def pack(self) -> bytes:
        params = self.connection_parameters
        return _pack_open(
            _LARGE_OPEN_LAYOUT,
            params,
            params.o2t_network_connection_params,
            params.t2o_network_connection_params,
        )


@dataclass
class ForwardCloseRequest:
    """Forward Close of a connection identified by its serial numbers and path."""

    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    connection_path: bytes = b""

    def __post_init__(self) -> None:
        self.connection_path = bytes(self.connection_path)

    def pack(self) -> bytes:
        try:
            header = _CLOSE_LAYOUT.pack(
                0,
                0,
                self.connection_serial_number,
                self.originator_vendor_id,
                self.originator_serial_number,
                (len(self.connection_path) // 2) & 0xFF,
                0,
            )
        except struct.error as exc:
            raise ValueError(f"forward close field out of range: {exc}") from exc
        return header + self.connection_path


@dataclass
class ForwardOpenResponse:
    """Successful reply to a Forward Open."""

    o2t_network_connection_id: int = 0
    t2o_network_connection_id: int = 0
    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    o2t_api: int = 0
    t2o_api: int = 0
    application_reply_size: int = 0
    application_reply: bytes = field(default=b"")

    @classmethod
    def expand(cls, data: bytes) -> ForwardOpenResponse:
        """Decode a response; the reply size counts 16-bit words."""
        reader = ByteReader(data)
        o2t_id = reader.read_udint()
        t2o_id = reader.read_udint()
        serial = reader.read_uint()
        vendor = reader.read_uint()
        originator_serial = reader.read_udint()
        o2t_api = reader.read_udint()
        t2o_api = reader.read_udint()
        reply_size = reader.read_usint()
        reader.read_usint()
        reply = reader.read_bytes(reply_size * 2)
        return cls(
            o2t_network_connection_id=o2t_id,
            t2o_network_connection_id=t2o_id,
            connection_serial_number=serial,
            originator_vendor_id=vendor,
            originator_serial_number=originator_serial,
            o2t_api=o2t_api,
            t2o_api=t2o_api,
            application_reply_size=reply_size,
            application_reply=reply,
        )