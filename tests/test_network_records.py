import pytest

from polymath.network_records import (
    BleDevice,
    DataBlock,
    DeviceInformation,
    FtpSession,
    IPv4Address,
    IPv6Address,
    SftpSession,
    SslState,
    TcpSegment,
)


def test_ipv4_dotted_form():
    assert str(IPv4Address(192, 0, 2, 1)) == "192.0.2.1"


def test_ipv6_compressed_form():
    assert str(IPv6Address(0x2001, 0xDB8, 0, 0, 0, 0, 0, 1)) == "2001:db8::1"


def test_ipv4_octet_out_of_range():
    with pytest.raises(ValueError):
        IPv4Address(256, 0, 0, 1)


def test_ipv6_group_out_of_range():
    with pytest.raises(ValueError):
        IPv6Address(0x10000, 0, 0, 0, 0, 0, 0, 0)


def test_data_block_length():
    words = [7, 8, 9, 10]
    assert DataBlock(words).length == len(words)


def test_device_message_fills_range():
    device = DeviceInformation(
        starting_memory_address=100, ending_memory_address=108, message_block=bytes(8)
    )
    assert device.message_block == bytes(8)
    assert device.capacity == len(device.message_block)


def test_device_message_overflow():
    with pytest.raises(ValueError):
        DeviceInformation(
            starting_memory_address=100, ending_memory_address=108, message_block=bytes(9)
        )


def test_device_reversed_range():
    with pytest.raises(ValueError):
        DeviceInformation(starting_memory_address=10, ending_memory_address=5)


def test_ftp_port_validation_inherited():
    with pytest.raises(ValueError):
        FtpSession(port=70000)
    with pytest.raises(ValueError):
        SftpSession(port=-1, server_private_key="secret")


def test_sftp_keeps_fields():
    session = SftpSession(port=22, client_public_key="placeholder", server_private_key="secret")
    assert session.port == 22
    assert session.server_private_key == "secret"


def test_tcp_negative_port():
    with pytest.raises(ValueError):
        TcpSegment(port_address=-5)


def test_ssl_negative_sequence():
    with pytest.raises(ValueError):
        SslState(sequence_number=-1)


def test_ble_device_count():
    ids = [11, 12, 13]
    assert BleDevice("beacon", 1, ids).number_of_devices == len(ids)