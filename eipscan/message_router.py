"""Message Router request and response of explicit CIP messaging."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Any

from eipscan.epath import EPath
from eipscan.types import ByteReader, GeneralStatusCodes, ServiceCodes

_log = logging.getLogger(__name__)


def _as_status(code: int) -> GeneralStatusCodes | int:
    try:
        return GeneralStatusCodes(code)
    except ValueError:
        return code


def _as_service(code: int) -> ServiceCodes | int:
    try:
        return ServiceCodes(code)
    except ValueError:
        return code


@dataclass
class MessageRouterRequest:
    """A service call on the object addressed by ``path``."""

    service_code: int
    path: EPath
    data: bytes = b""
    use_8_bit_path_segments: bool = False

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def pack(self) -> bytes:
        """Encode as service code, path size in words, path and data."""
        try:
            header = struct.pack(
                "<BB",
                int(self.service_code),
                self.path.size_in_words(self.use_8_bit_path_segments),
            )
        except struct.error as exc:
            raise ValueError(f"service code {self.service_code!r} must fit in one byte") from exc
        return header + self.path.pack_padded_path(self.use_8_bit_path_segments) + self.data


@dataclass
class MessageRouterResponse:
    """The reply of the Message Router to a service call."""

    service_code: ServiceCodes | int = ServiceCodes.GET_ATTRIBUTE_ALL
    general_status_code: GeneralStatusCodes | int = GeneralStatusCodes.SUCCESS
    additional_status: list[int] = field(default_factory=list)
    data: bytes = b""
    additional_packet_items: list[Any] = field(default_factory=list)

    @classmethod
    def expand(cls, data: bytes) -> MessageRouterResponse:
        """Decode a response from its wire form."""
        raw = bytes(data)
        if len(raw) < 4:
            raise ValueError("Message Router response must have at least 4 bytes")

        reader = ByteReader(raw)
        service = reader.read_usint()
        reader.read_usint()
        status = reader.read_usint()
        additional_size = reader.read_usint()

        if additional_size * 2 > len(raw) - 4:
            raise ValueError("Additional status has wrong size")

        additional = [reader.read_uint() for _ in range(additional_size)]
        payload = reader.read_bytes(reader.remaining())
        return cls(
            service_code=_as_service(service),
            general_status_code=_as_status(status),
            additional_status=additional,
            data=payload,
        )


def log_general_and_additional_status(response: MessageRouterResponse) -> None:
    """Log the error status of ``response`` with its additional statuses."""
    additional = "".join(f"[0x{status:x}]" for status in response.additional_status)
    _log.error(
        "Message Router error=0x%x additional statuses %s",
        int(response.general_status_code),
        additional,
    )