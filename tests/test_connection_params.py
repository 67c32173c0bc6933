import pytest

from eipscan.connection_params import (
    ConnectionType,
    NetworkConnectionParametersBuilder,
    NetworkConnectionParams,
    Priority,
    RedundantOwner,
    SizeType,
)


@pytest.mark.parametrize("lfo", [False, True])
@pytest.mark.parametrize("kind", list(ConnectionType))
def test_connection_type_round_trip(lfo, kind):
    builder = NetworkConnectionParametersBuilder(0, lfo).set_connection_type(kind)
    assert builder.connection_type is kind


@pytest.mark.parametrize("lfo", [False, True])
@pytest.mark.parametrize("priority", list(Priority))
def test_priority_round_trip(lfo, priority):
    builder = NetworkConnectionParametersBuilder(0, lfo).set_priority(priority)
    assert builder.priority is priority


@pytest.mark.parametrize("lfo", [False, True])
def test_full_round_trip(lfo):
    builder = (
        NetworkConnectionParametersBuilder(0, lfo)
        .set_redundant_owner(RedundantOwner.REDUNDANT)
        .set_connection_type(ConnectionType.MULTICAST)
        .set_priority(Priority.URGENT)
        .set_type(SizeType.VARIABLE)
        .set_connection_size(300)
    )
    assert builder.redundant_owner is RedundantOwner.REDUNDANT
    assert builder.connection_type is ConnectionType.MULTICAST
    assert builder.priority is Priority.URGENT
    assert builder.type is SizeType.VARIABLE
    assert builder.connection_size == 300
    again = NetworkConnectionParametersBuilder(builder.build(), lfo)
    assert again.build() == builder.build()
    assert again.connection_type is ConnectionType.MULTICAST


def test_short_layout_matches_documented_bits():
    builder = (
        NetworkConnectionParametersBuilder()
        .set_connection_type(ConnectionType.P2P)
        .set_priority(Priority.SCHEDULED)
        .set_type(SizeType.VARIABLE)
        .set_redundant_owner(RedundantOwner.REDUNDANT)
    )
    assert builder.build() == (
        NetworkConnectionParams.P2P
        | NetworkConnectionParams.SCHEDULED_PRIORITY
        | NetworkConnectionParams.VARIABLE
        | NetworkConnectionParams.REDUNDANT
    )


def test_large_layout_is_short_layout_shifted():
    short = NetworkConnectionParametersBuilder(0, False).set_connection_type(ConnectionType.P2P)
    large = NetworkConnectionParametersBuilder(0, True).set_connection_type(ConnectionType.P2P)
    assert large.build() == short.build() << 16


def test_decode_value_from_constants():
    value = NetworkConnectionParams.P2P | NetworkConnectionParams.SCHEDULED_PRIORITY | 32
    builder = NetworkConnectionParametersBuilder(value)
    assert builder.connection_type is ConnectionType.P2P
    assert builder.priority is Priority.SCHEDULED
    assert builder.type is SizeType.FIXED
    assert builder.redundant_owner is RedundantOwner.EXCLUSIVE
    assert builder.connection_size == 32


def test_connection_size_mask_short():
    builder = NetworkConnectionParametersBuilder().set_connection_size(0xFFFF)
    assert builder.connection_size == 0x1FF
    assert builder.build() == 0x1FF


def test_connection_size_mask_large():
    builder = NetworkConnectionParametersBuilder(lfo=True).set_connection_size(0xFFFF)
    assert builder.connection_size == 0xFFFF
    assert builder.connection_type is ConnectionType.NULL_TYPE


def test_redundant_bit_in_large_layout():
    builder = NetworkConnectionParametersBuilder(lfo=True).set_redundant_owner(
        RedundantOwner.REDUNDANT
    )
    assert builder.build() == 1 << 31
    assert builder.redundant_owner is RedundantOwner.REDUNDANT