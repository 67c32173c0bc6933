import struct

import pytest

from eipscan.epath import EPath
from eipscan.message_router import MessageRouterResponse
from eipscan.parameter_object import ParameterObject
from eipscan.strings import CipShortString
from eipscan.types import CipDataTypes, GeneralStatusCodes, ServiceCodes

GET_ALL = ServiceCodes.GET_ATTRIBUTE_ALL
GET_SINGLE = ServiceCodes.GET_ATTRIBUTE_SINGLE
SI = object()


class FakeRouter:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def send_request(self, si, service, path, data=b""):
        self.calls.append((int(service), path))
        return self.responses[(int(service), path)]


def ok(data):
    return MessageRouterResponse(data=bytes(data))


def fail():
    return MessageRouterResponse(general_status_code=GeneralStatusCodes.PATH_DESTINATION_UNKNOWN)


def get_all_payload(value, descriptor, full=False, scalable_tail=False, precision=0):
    payload = struct.pack("<H", value)
    payload += b"\x00"  # link path size
    payload += struct.pack("<HB", descriptor, CipDataTypes.UINT)
    if full:
        payload += b"\x02"
        payload += CipShortString("Freq").pack()
        payload += CipShortString("Hz").pack()
        payload += CipShortString("").pack()
        payload += struct.pack("<HHH", 0, 5000, 1000)
        if scalable_tail:
            payload += bytes(16) + bytes([precision])
    return payload


def basic_router(descriptor=0, full=False, scalable_tail=False, precision=0, instance=1):
    return FakeRouter(
        {
            (GET_SINGLE, EPath(0x0F, instance, 6)): ok(b"\x02"),
            (GET_ALL, EPath(0x0F, instance)): ok(
                get_all_payload(2040, descriptor, full, scalable_tail, precision)
            ),
            (GET_SINGLE, EPath(0x0F, instance, 13)): ok(struct.pack("<H", 1)),
            (GET_SINGLE, EPath(0x0F, instance, 14)): ok(struct.pack("<H", 1)),
            (GET_SINGLE, EPath(0x0F, instance, 15)): ok(struct.pack("<H", 1)),
            (GET_SINGLE, EPath(0x0F, instance, 16)): ok(struct.pack("<h", 0)),
            (GET_SINGLE, EPath(0x0F, instance, 1)): ok(struct.pack("<H", 777)),
        }
    )


def test_read_basic_attributes():
    router = basic_router(descriptor=0x10)
    param = ParameterObject.read(1, False, SI, router)
    assert param.class_id == ParameterObject.CLASS_ID
    assert param.parameter == 1
    assert param.get_actual_value(CipDataTypes.UINT) == 2040
    assert param.type == CipDataTypes.UINT
    assert param.is_read_only is True
    assert param.is_scalable is False
    assert param.name == ""
    assert param.has_full_attributes is False


def test_read_requests_data_size_then_all():
    router = basic_router()
    ParameterObject.read(1, False, SI, router)
    assert router.calls == [(GET_SINGLE, EPath(0x0F, 1, 6)), (GET_ALL, EPath(0x0F, 1))]


def test_read_full_scalable_parameter():
    router = basic_router(descriptor=0x04, full=True, scalable_tail=True, precision=2)
    param = ParameterObject.read(1, True, SI, router)
    assert param.name == "Freq"
    assert param.units == "Hz"
    assert param.help == ""
    assert param.precision == 2
    assert param.is_scalable is True
    assert param.get_actual_value(CipDataTypes.UINT) == 2040
    assert param.get_eng_value(CipDataTypes.UINT) == pytest.approx(20.4)
    assert param.get_max_value(CipDataTypes.UINT) == 5000
    assert param.get_default_value(CipDataTypes.UINT) == 1000
    assert (GET_SINGLE, EPath(0x0F, 1, 16)) in router.calls


def test_read_full_not_scalable_reads_no_scaling_attributes():
    router = basic_router(descriptor=0, full=True)
    param = ParameterObject.read(1, True, SI, router)
    assert param.get_min_value(CipDataTypes.UINT) == 0
    assert param.get_eng_max_value(CipDataTypes.UINT) == 5000
    assert all(path.attribute_id not in (13, 14, 15, 16) for _, path in router.calls)


def test_data_size_failure_raises():
    router = basic_router()
    router.responses[(GET_SINGLE, EPath(0x0F, 1, 6))] = fail()
    with pytest.raises(RuntimeError, match="data size"):
        ParameterObject.read(1, False, SI, router)


def test_get_all_failure_raises():
    router = basic_router()
    router.responses[(GET_ALL, EPath(0x0F, 1))] = fail()
    with pytest.raises(RuntimeError, match="Failed to read all attributes"):
        ParameterObject.read(1, False, SI, router)


def test_scaling_attribute_failure_raises():
    router = basic_router(descriptor=0x04, full=True, scalable_tail=True)
    router.responses[(GET_SINGLE, EPath(0x0F, 1, 14))] = fail()
    with pytest.raises(RuntimeError, match="attribute=14"):
        ParameterObject.read(1, True, SI, router)


def test_short_response_raises():
    router = basic_router()
    router.responses[(GET_ALL, EPath(0x0F, 1))] = ok(b"\x01")
    with pytest.raises(RuntimeError, match="Not enough data"):
        ParameterObject.read(1, False, SI, router)


def test_update_value():
    router = basic_router()
    param = ParameterObject.read(1, False, SI, router)
    param.update_value(SI)
    assert param.get_actual_value(CipDataTypes.UINT) == 777
    assert router.calls[-1] == (GET_SINGLE, EPath(0x0F, 1, 1))


def test_update_value_failure_raises():
    router = basic_router()
    param = ParameterObject.read(1, False, SI, router)
    router.responses[(GET_SINGLE, EPath(0x0F, 1, 1))] = fail()
    with pytest.raises(RuntimeError, match="Failed to read value"):
        param.update_value(SI)


def test_update_value_without_router_raises():
    param = ParameterObject(3, False, 2)
    with pytest.raises(RuntimeError):
        param.update_value(SI)


def test_empty_instance_defaults():
    param = ParameterObject(3, True, 4)
    assert param.instance_id == 3
    assert param.value == bytes(4)
    assert param.get_actual_value(CipDataTypes.UDINT) == 0
    assert param.type == CipDataTypes.ANY


def test_not_scalable_conversion_is_identity():
    param = ParameterObject(1, False, 2)
    assert param.actual_to_eng_value(123.0) == 123.0
    assert param.eng_to_actual_value(123.0) == 123.0


@pytest.mark.parametrize("actual", [0.0, 15.0, 2040.0, -300.0])
def test_scaling_round_trip(actual):
    param = ParameterObject(1, True, 2)
    param.is_scalable = True
    param.scaling_multiplier = 3
    param.scaling_divisor = 7
    param.scaling_base = 2
    param.scaling_offset = -5
    param.precision = 1
    eng = param.actual_to_eng_value(actual)
    assert param.eng_to_actual_value(eng) == pytest.approx(actual)


def test_set_eng_limits_round_trip():
    param = ParameterObject(1, True, 2)
    param.is_scalable = True
    param.precision = 1
    param.set_eng_min_value(12.5, CipDataTypes.UINT)
    param.set_eng_max_value(50.0, CipDataTypes.UINT)
    param.set_eng_default_value(20.0, CipDataTypes.UINT)
    assert param.get_eng_min_value(CipDataTypes.UINT) == pytest.approx(12.5)
    assert param.get_eng_max_value(CipDataTypes.UINT) == pytest.approx(50.0)
    assert param.get_eng_default_value(CipDataTypes.UINT) == pytest.approx(20.0)
    assert param.get_min_value(CipDataTypes.UINT) == 125


def test_set_eng_value_out_of_range_raises():
    param = ParameterObject(1, True, 2)
    with pytest.raises(ValueError):
        param.set_eng_min_value(-1.0, CipDataTypes.UINT)


def test_decoding_too_short_value_raises():
    param = ParameterObject(1, False, 1)
    with pytest.raises(ValueError):
        param.get_actual_value(CipDataTypes.UDINT)