"""Records describing network addresses, devices, packets and protocol state."""

from __future__ import annotations

import ipaddress
from dataclasses import astuple, dataclass, field


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative.")


@dataclass
class DataBlock:
    """A run of words read from a device."""

    block: list[int] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.block)


@dataclass(frozen=True)
class IPv4Address:
    """Four octets of an IPv4 address."""

    byte1: int
    byte2: int
    byte3: int
    byte4: int

    def __post_init__(self) -> None:
        if not all(0 <= octet <= 0xFF for octet in astuple(self)):
            raise ValueError("IPv4 octets must lie in 0..255.")

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in astuple(self))


@dataclass(frozen=True)
class IPv6Address:
    """Eight 16-bit groups of an IPv6 address."""

    group1: int
    group2: int
    group3: int
    group4: int
    group5: int
    group6: int
    group7: int
    group8: int

    def __post_init__(self) -> None:
        if not all(0 <= group <= 0xFFFF for group in astuple(self)):
            raise ValueError("IPv6 groups must lie in 0..0xFFFF.")

    def __str__(self) -> str:
        value = 0
        for group in astuple(self):
            value = (value << 16) | group
        return str(ipaddress.IPv6Address(value))


@dataclass
class DeviceInformation:
    """A networked device with a message buffer in a memory range."""

    socket_name: str = ""
    socket: int | None = None
    starting_memory_address: int = 0
    ending_memory_address: int = 0
    message_block: bytes = b""
    ack: int = 0
    ipv4_address: str = ""
    ipv6_address: str = ""
    packet: bytes = b""
    socket_pcie_address: str = ""
    socket_pcie_id: str = ""

    def __post_init__(self) -> None:
        if self.ending_memory_address < self.starting_memory_address:
            raise ValueError("ending_memory_address precedes starting_memory_address.")
        if len(self.message_block) > self.capacity:
            raise ValueError("message_block does not fit in the memory range.")

    @property
    def capacity(self) -> int:
        """Size of the memory range holding the message block."""
        return self.ending_memory_address - self.starting_memory_address


@dataclass
class Packet:
    start_preamble: bytes = b""
    control_header: bytes = b""
    data_header: bytes = b""
    payload: bytes = b""
    end_preamble: bytes = b""


@dataclass
class TcpSegment:
    ip_address: str = ""
    tcp_header: bytes = b""
    tcp_data: bytes = b""
    port_address: int = 0
    ack: int = 0
    return_code: int = 0
    timer: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(port_address=self.port_address, timer=self.timer)


@dataclass
class UdpDatagram:
    ip_address: str = ""
    udp_header: bytes = b""
    udp_data: bytes = b""
    port_address: int = 0
    ack: int = 0
    return_code: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(port_address=self.port_address)


@dataclass
class HttpMessage:
    header: dict[str, str] = field(default_factory=dict)
    request: str = ""
    data: bytes = b""
    response: str = ""


@dataclass
class FtpSession:
    data: bytes = b""
    ipv4_address: str = ""
    ipv6_address: str = ""
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError("port must lie in 0..65535.")


@dataclass
class SftpSession(FtpSession):
    client_public_key: str = ""
    server_private_key: str = ""


@dataclass
class SshSession:
    data: bytes = b""
    public_key: str = ""
    private_key: str = ""
    encrypted_text: bytes = b""
    plaintext: bytes = b""


@dataclass
class WebDavResource:
    locked: bool = False
    file_properties: dict[str, str] = field(default_factory=dict)
    response_ok: bool = False
    filestream: bytes = b""
    storage_block: list[list[int]] = field(default_factory=list)


@dataclass
class SslState:
    hash: bytes = b""
    md5: bytes = b""
    sha: bytes = b""
    x509_certificate: bytes = b""
    pad1: bytes = b""
    pad2: bytes = b""
    pre_master_secret: bytes = b""
    master_secret: bytes = b""
    random_number: bytes = b""
    handshake_message: bytes = b""
    sender_ip_address: str = ""
    server_parameters: bytes = b""
    compressed_message: bytes = b""
    sequence_number: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(sequence_number=self.sequence_number)


@dataclass
class TlsState:
    seed: int = 0
    hmac: bytes = b""
    hmac_hash: bytes = b""
    mac_write_secret: bytes = b""
    sequence_number: int = 0
    compression_type: str = ""
    compression_version: int = 0
    compressed_message_length: int = 0
    compressed_message_fragment: bytes = b""
    message_secret: bytes = b""
    finished_label: str = ""
    handshake_messages: bytes = b""
    pre_master_secret: bytes = b""
    random_number: int = 0

    def __post_init__(self) -> None:
        _check_non_negative(
            sequence_number=self.sequence_number,
            compressed_message_length=self.compressed_message_length,
        )


@dataclass
class DrmCredentials:
    network_id: str = ""
    network_key: str = ""
    drm_key: str = ""


@dataclass
class BleDevice:
    device_name: str = ""
    device_id: int = 0
    devices: list[int] = field(default_factory=list)

    @property
    def number_of_devices(self) -> int:
        return len(self.devices)