# eipscan

Building blocks for talking to EtherNet/IP devices over CIP: the wire
encoding of logical paths, Message Router requests and responses, Forward
Open / Large Forward Open / Forward Close requests, network connection
parameters, and client-side models of the Identity (0x01) and Parameter
(0x0F) objects.

The package has no runtime dependencies.

## Installation

```
pip install .
```

The test suite uses pytest, available through the `test` extra
(`pip install .[test]`).

## Overview

| Module | Contents |
| --- | --- |
| `eipscan.types` | `CipDataTypes`, `ServiceCodes`, `GeneralStatusCodes`, `ByteReader`, `decode_value`, `encode_value` |
| `eipscan.strings` | `CipShortString`, `CipString`, `CipRevision` |
| `eipscan.epath` | `EPath`: class/instance/attribute logical paths |
| `eipscan.message_router` | `MessageRouterRequest`, `MessageRouterResponse`, `log_general_and_additional_status` |
| `eipscan.connection_params` | `NetworkConnectionParams`, `NetworkConnectionParametersBuilder` and the enums `RedundantOwner`, `ConnectionType`, `Priority`, `SizeType` |
| `eipscan.forward_open` | `ConnectionParameters`, `ForwardOpenRequest`, `LargeForwardOpenRequest`, `ForwardCloseRequest`, `ForwardOpenResponse` |
| `eipscan.base_object` | `BaseObject` |
| `eipscan.identity_object` | `IdentityObject` |
| `eipscan.parameter_object` | `ParameterObject` |

All multi-byte values are little-endian. Malformed or short input raises
`ValueError` from the decoders; `IdentityObject.read` and
`ParameterObject.read` raise `RuntimeError` when a request fails or a reply
is too short.

## Examples

Encode a Get_Attribute_Single request for the vendor ID of the Identity
object:

```python
from eipscan.epath import EPath
from eipscan.message_router import MessageRouterRequest
from eipscan.types import ServiceCodes

request = MessageRouterRequest(ServiceCodes.GET_ATTRIBUTE_SINGLE, EPath(0x01, 1, 1), b"")
payload = request.pack()
```

`EPath.pack_padded_path` and `MessageRouterRequest` use 16-bit segments by
default; pass `use_8_bit_path_segments=True` for 8-bit segments.
`EPath.from_padded_path` decodes either form.

Decode a Message Router reply (`reply_bytes` being the bytes received from the
device) and check its status:

```python
from eipscan.message_router import MessageRouterResponse
from eipscan.types import ByteReader, GeneralStatusCodes

response = MessageRouterResponse.expand(reply_bytes)
if response.general_status_code == GeneralStatusCodes.SUCCESS:
    vendor_id = ByteReader(response.data).read_uint()
```

Describe the network parameters of a connection (pass `lfo=True` for the
32-bit Large Forward Open layout):

```python
from eipscan.connection_params import (
    ConnectionType,
    NetworkConnectionParametersBuilder,
    Priority,
)

value = (
    NetworkConnectionParametersBuilder(0, False)
    .set_connection_type(ConnectionType.P2P)
    .set_priority(Priority.SCHEDULED)
    .set_connection_size(32)
    .build()
)
```

Build a Forward Open request:

```python
from eipscan.forward_open import ConnectionParameters, ForwardOpenRequest

params = ConnectionParameters(
    connection_path=bytes([0x20, 0x04, 0x24, 151, 0x2C, 150, 0x2C, 100]),
    o2t_rpi=1_000_000,
    t2o_rpi=1_000_000,
)
payload = ForwardOpenRequest(params).pack()
```

Decode and encode typed values, for example of a parameter:

```python
from eipscan.types import CipDataTypes, decode_value, encode_value

raw = encode_value(2040, CipDataTypes.UINT)
assert decode_value(raw, CipDataTypes.UINT) == 2040
```

## Reading objects from a device

`IdentityObject.read(instance_id, si, message_router)` and
`ParameterObject.read(instance_id, full_attributes, si, message_router)` fill
themselves in from the device's replies. `message_router` is any object with a
method `send_request(si, service, path, data)` that returns a
`MessageRouterResponse`; `si` is handed to it unchanged. A `ParameterObject`
keeps that router for `update_value(si)`, and offers `get_actual_value`,
`get_eng_value`, the min/max/default getters and the `set_eng_*_value` setters,
each taking a `CipDataTypes` member, with scaling through
`actual_to_eng_value` and `eng_to_actual_value`.

## What the package does not do

It has no network transport. It does not open TCP sessions, register or
unregister EtherNet/IP sessions, wrap requests in encapsulation or common
packet format frames, run implicit (UDP) IO connections, discover devices by
broadcast, or transfer files. The caller supplies the object that sends
requests and returns responses.