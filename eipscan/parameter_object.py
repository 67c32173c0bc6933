"""Interface to the Parameter Object (class 0x0F)."""

from __future__ import annotations

import enum
import logging
from typing import Any, Protocol

from eipscan.base_object import BaseObject
from eipscan.epath import EPath
from eipscan.message_router import (
    MessageRouterResponse,
    log_general_and_additional_status,
)
from eipscan.strings import CipShortString
from eipscan.types import (
    ByteReader,
    CipDataTypes,
    GeneralStatusCodes,
    ServiceCodes,
    decode_value,
    encode_value,
)

_log = logging.getLogger(__name__)


class _Attribute(enum.IntEnum):
    VALUE = 1
    LINK_PATH_SIZE = 2
    DESCRIPTOR = 4
    DATA_TYPE = 5
    DATA_SIZE = 6
    NAME_STRING = 7
    UNIT_STRING = 8
    HELP_STRING = 9
    MIN_VALUE = 10
    MAX_VALUE = 11
    DEFAULT_VALUE = 12
    SCALING_MULTIPLIER = 13
    SCALING_DIVISOR = 14
    SCALING_BASE = 15
    SCALING_OFFSET = 16


_SUPPORTS_SCALING = 1 << 2
_READ_ONLY = 1 << 4
_SCALING_LINKS_SIZE = 16


class RequestSender(Protocol):
    """Anything that can send an explicit request and return the response."""

    def send_request(
        self, si: Any, service: int, path: EPath, data: bytes = b""
    ) -> MessageRouterResponse: ...


def _as_data_type(code: int) -> CipDataTypes | int:
    try:
        return CipDataTypes(code)
    except ValueError:
        return code


class ParameterObject(BaseObject):
    """A device parameter: its value, limits, descriptions and scaling."""

    CLASS_ID = 0x0F

    __slots__ = (
        "_has_full_attributes",
        "is_scalable",
        "is_read_only",
        "parameter",
        "value",
        "type",
        "name",
        "units",
        "help",
        "min_value",
        "max_value",
        "default_value",
        "scaling_multiplier",
        "scaling_divisor",
        "scaling_base",
        "scaling_offset",
        "precision",
        "_message_router",
    )

    def __init__(
        self,
        instance_id: int,
        full_attributes: bool = False,
        type_size: int = 0,
        *,
        message_router: RequestSender | None = None,
    ) -> None:
        super().__init__(self.CLASS_ID, instance_id)
        if type_size < 0:
            raise ValueError(f"type_size must not be negative, got {type_size}")
        self._has_full_attributes = bool(full_attributes)
        self.is_scalable = False
        self.is_read_only = False
        self.parameter = 0
        self.value = bytes(type_size)
        self.type: CipDataTypes | int = CipDataTypes.ANY
        self.name = ""
        self.units = ""
        self.help = ""
        self.min_value = bytes(type_size)
        self.max_value = bytes(type_size)
        self.default_value = bytes(type_size)
        self.scaling_multiplier = 1
        self.scaling_divisor = 1
        self.scaling_base = 1
        self.scaling_offset = 0
        self.precision = 0
        self._message_router = message_router

    @property
    def has_full_attributes(self) -> bool:
        """True if descriptions, limits and scaling attributes are supported."""
        return self._has_full_attributes

    @classmethod
    def read(
        cls,
        instance_id: int,
        full_attributes: bool,
        si: Any,
        message_router: RequestSender,
    ) -> ParameterObject:
        """Read the parameter from the device through ``message_router``.

        Raises RuntimeError if a request fails or a reply is too short.
        """
        _log.debug("Read data from parameter ID=%d", instance_id)

        response = message_router.send_request(
            si,
            ServiceCodes.GET_ATTRIBUTE_SINGLE,
            EPath(cls.CLASS_ID, instance_id, _Attribute.DATA_SIZE),
            b"",
        )
        if response.general_status_code != GeneralStatusCodes.SUCCESS:
            log_general_and_additional_status(response)
            raise RuntimeError("Failed to read data size of the parameter")
        try:
            data_size = ByteReader(response.data).read_usint()
        except ValueError as exc:
            raise RuntimeError("Not enough data in the response") from exc

        obj = cls(
            instance_id,
            full_attributes,
            data_size,
            message_router=message_router,
        )

        response = message_router.send_request(
            si, ServiceCodes.GET_ATTRIBUTE_ALL, EPath(cls.CLASS_ID, instance_id), b""
        )
        if response.general_status_code != GeneralStatusCodes.SUCCESS:
            log_general_and_additional_status(response)
            raise RuntimeError("Failed to read all attributes")

        reader = ByteReader(response.data)
        try:
            obj.value = reader.read_bytes(data_size)
            link_path_size = reader.read_usint()
            reader.read_bytes(link_path_size)
            descriptor = reader.read_uint()
            obj.type = _as_data_type(reader.read_usint())

            obj.parameter = instance_id
            obj.is_scalable = bool(descriptor & _SUPPORTS_SCALING)
            obj.is_read_only = bool(descriptor & _READ_ONLY)
            _log.debug(
                "Parameter object ID=%d has descriptor=0x%x scalable=%s readonly=%s",
                instance_id,
                descriptor,
                obj.is_scalable,
                obj.is_read_only,
            )

            if obj._has_full_attributes:
                reader.read_bytes(1)
                obj.name = CipShortString.read(reader).to_str()
                obj.units = CipShortString.read(reader).to_str()
                obj.help = CipShortString.read(reader).to_str()
                obj.min_value = reader.read_bytes(data_size)
                obj.max_value = reader.read_bytes(data_size)
                obj.default_value = reader.read_bytes(data_size)

                if obj.is_scalable:
                    # The scaling attributes are read one by one below.
                    reader.read_bytes(_SCALING_LINKS_SIZE)
                    obj.precision = reader.read_usint()
        except ValueError as exc:
            raise RuntimeError("Not enough data in the response") from exc

        if obj._has_full_attributes and obj.is_scalable:
            obj._read_scaling(si, message_router)

        _log.debug(
            "Read Parameter Object ID=%d ValueSize=%d ValueType=0x%x Name=%s",
            instance_id,
            len(obj.value),
            int(obj.type),
            obj.name,
        )
        return obj

    def _read_scaling(self, si: Any, message_router: RequestSender) -> None:
        data = bytearray()
        for attribute in (
            _Attribute.SCALING_MULTIPLIER,
            _Attribute.SCALING_DIVISOR,
            _Attribute.SCALING_BASE,
            _Attribute.SCALING_OFFSET,
        ):
            response = message_router.send_request(
                si,
                ServiceCodes.GET_ATTRIBUTE_SINGLE,
                EPath(self.CLASS_ID, self.instance_id, attribute),
                b"",
            )
            if response.general_status_code != GeneralStatusCodes.SUCCESS:
                log_general_and_additional_status(response)
                raise RuntimeError(f"Failed to read value of attribute={int(attribute)}")
            data += response.data

        reader = ByteReader(data)
        try:
            self.scaling_multiplier = reader.read_uint()
            self.scaling_divisor = reader.read_uint()
            self.scaling_base = reader.read_uint()
            self.scaling_offset = reader.read_int()
        except ValueError as exc:
            raise RuntimeError("Not enough data in the response") from exc

    def update_value(self, si: Any) -> None:
        """Read the current value of the parameter from the device."""
        if self._message_router is None:
            raise RuntimeError("Parameter object has no message router to read through")
        response = self._message_router.send_request(
            si,
            ServiceCodes.GET_ATTRIBUTE_SINGLE,
            EPath(self.CLASS_ID, self.instance_id, _Attribute.VALUE),
            b"",
        )
        if response.general_status_code != GeneralStatusCodes.SUCCESS:
            log_general_and_additional_status(response)
            raise RuntimeError("Failed to read value")
        try:
            self.value = ByteReader(response.data).read_bytes(len(self.value))
        except ValueError as exc:
            raise RuntimeError("Not enough data in the response") from exc

    def actual_to_eng_value(self, actual_value: float) -> float:
        """Scale an actual value to engineering units if scaling is supported."""
        if not self.is_scalable:
            return actual_value
        return (
            (actual_value + self.scaling_offset) * self.scaling_multiplier * self.scaling_base
        ) / (self.scaling_divisor * 10.0 ** self.precision)

    def eng_to_actual_value(self, eng_value: float) -> float:
        """Convert a value in engineering units back to an actual value."""
        if not self.is_scalable:
            return eng_value
        return (
            eng_value * self.scaling_divisor * 10.0 ** self.precision
        ) / (self.scaling_multiplier * self.scaling_base) - self.scaling_offset

    def get_actual_value(self, data_type: CipDataTypes | int) -> int | float:
        """The value [AttrID=1] decoded as ``data_type``."""
        return decode_value(self.value, data_type)

    def get_eng_value(self, data_type: CipDataTypes | int) -> float:
        """The value in engineering units."""
        return self.actual_to_eng_value(float(decode_value(self.value, data_type)))

    def get_min_value(self, data_type: CipDataTypes | int) -> int | float:
        """The minimal value [AttrID=10] decoded as ``data_type``."""
        return decode_value(self.min_value, data_type)

    def get_eng_min_value(self, data_type: CipDataTypes | int) -> float:
        """The minimal value in engineering units."""
        return self.actual_to_eng_value(float(decode_value(self.min_value, data_type)))

    def set_eng_min_value(self, value: float, data_type: CipDataTypes | int) -> None:
        """Set the minimal value from engineering units."""
        self.min_value = encode_value(self.eng_to_actual_value(value), data_type)

    def get_max_value(self, data_type: CipDataTypes | int) -> int | float:
        """The maximal value [AttrID=11] decoded as ``data_type``."""
        return decode_value(self.max_value, data_type)

    def get_eng_max_value(self, data_type: CipDataTypes | int) -> float:
        """The maximal value in engineering units."""
        return self.actual_to_eng_value(float(decode_value(self.max_value, data_type)))

    def set_eng_max_value(self, value: float, data_type: CipDataTypes | int) -> None:
        """Set the maximal value from engineering units."""
        self.max_value = encode_value(self.eng_to_actual_value(value), data_type)

    def get_default_value(self, data_type: CipDataTypes | int) -> int | float:
        """The default value [AttrID=12] decoded as ``data_type``."""
        return decode_value(self.default_value, data_type)

    def get_eng_default_value(self, data_type: CipDataTypes | int) -> float:
        """The default value in engineering units."""
        return self.actual_to_eng_value(float(decode_value(self.default_value, data_type)))

    def set_eng_default_value(self, value: float, data_type: CipDataTypes | int) -> None:
        """Set the default value from engineering units."""
        self.default_value = encode_value(self.eng_to_actual_value(value), data_type)

    def __repr__(self) -> str:
        return (
            f"ParameterObject(instance_id={self.instance_id}, name={self.name!r}, "
            f"type={self.type!r}, value={self.value!r})"
        )