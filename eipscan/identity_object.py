"""Interface to the Identity Object (class 0x01)."""

from __future__ import annotations

from typing import Any, Protocol

from eipscan.base_object import BaseObject
from eipscan.epath import EPath
from eipscan.message_router import (
    MessageRouterResponse,
    log_general_and_additional_status,
)
from eipscan.strings import CipRevision, CipShortString
from eipscan.types import ByteReader, GeneralStatusCodes, ServiceCodes


class RequestSender(Protocol):
    """Anything that can send an explicit request and return the response."""

    def send_request(
        self, si: Any, service: int, path: EPath, data: bytes = b""
    ) -> MessageRouterResponse: ...


class IdentityObject(BaseObject):
    """Identity of a device: vendor, type, product, revision, status, serial and name."""

    CLASS_ID = 0x01

    __slots__ = (
        "vendor_id",
        "device_type",
        "product_code",
        "revision",
        "status",
        "serial_number",
        "product_name",
    )

    def __init__(
        self,
        instance_id: int,
        *,
        vendor_id: int = 0,
        device_type: int = 0,
        product_code: int = 0,
        revision: CipRevision | None = None,
        status: int = 0,
        serial_number: int = 0,
        product_name: str = "",
    ) -> None:
        super().__init__(self.CLASS_ID, instance_id)
        self.vendor_id = vendor_id
        self.device_type = device_type
        self.product_code = product_code
        self.revision = revision if revision is not None else CipRevision(0, 0)
        self.status = status
        self.serial_number = serial_number
        self.product_name = product_name

    @classmethod
    def read(
        cls, instance_id: int, si: Any, message_router: RequestSender
    ) -> IdentityObject:
        """Read all attributes of the device's identity through ``message_router``.

        Raises RuntimeError if the request fails or the reply is too short.
        """
        response = message_router.send_request(
            si, ServiceCodes.GET_ATTRIBUTE_ALL, EPath(cls.CLASS_ID, 1), b""
        )
        if response.general_status_code != GeneralStatusCodes.SUCCESS:
            log_general_and_additional_status(response)
            raise RuntimeError("Failed to read all attributes")

        reader = ByteReader(response.data)
        try:
            vendor_id = reader.read_uint()
            device_type = reader.read_uint()
            product_code = reader.read_uint()
            revision = CipRevision.read(reader)
            status = reader.read_uint()
            serial_number = reader.read_udint()
            product_name = CipShortString.read(reader).to_str()
        except ValueError as exc:
            raise RuntimeError("Not enough data in the response") from exc

        return cls(
            instance_id,
            vendor_id=vendor_id,
            device_type=device_type,
            product_code=product_code,
            revision=revision,
            status=status,
            serial_number=serial_number,
            product_name=product_name,
        )

    def __repr__(self) -> str:
        return (
            f"IdentityObject(instance_id={self.instance_id}, vendor_id={self.vendor_id}, "
            f"device_type={self.device_type}, product_code={self.product_code}, "
            f"revision={self.revision}, status={self.status}, "
            f"serial_number={self.serial_number}, product_name={self.product_name!r})"
        )