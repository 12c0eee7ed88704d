"""HTTP-style reads and persistence, and TCP message assembly."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import takewhile
from typing import Any

from polymath.clock import Ticks
from polymath.network_records import DataBlock

TcpMessage = tuple[int, bytes, bytes, bytes]


def http_get(read_word: Callable[[int], int], start_address: int, end_address: int) -> DataBlock:
    """Read every word in ``[start_address, end_address)`` into a data block."""
    if end_address < start_address:
        raise ValueError("end_address precedes start_address.")
    return DataBlock([read_word(address) for address in range(start_address, end_address)])


def http_persist(read_message: Callable[[], Any], write_message: Callable[[Any], None]) -> Any:
    """Move one message from the network side to storage; return the message."""
    message = read_message()
    write_message(message)
    return message


def build_tcp_message(
    ipv4_address: int,
    ipv6_address: int,
    tcp_header: bytes,
    data_header: bytes,
    data_frame: bytes,
) -> TcpMessage:
    """Assemble a message addressed by whichever of the two addresses is non-zero."""
    if ipv4_address == 0 and ipv6_address != 0:
        address = ipv6_address
    elif ipv6_address == 0 and ipv4_address != 0:
        address = ipv4_address
    else:
        raise ValueError("Exactly one of ipv4_address and ipv6_address must be non-zero.")
    return address, tcp_header, data_header, data_frame


def send_tcp_message(
    ipv4_address: int,
    ipv6_address: int,
    tcp_header: bytes,
    data_header: bytes,
    data_frame: bytes,
    send: Callable[[TcpMessage], None],
) -> TcpMessage:
    """Assemble a message, pass it to ``send`` and return it."""
    message = build_tcp_message(ipv4_address, ipv6_address, tcp_header, data_header, data_frame)
    send(message)
    return message


def count_ticks(signals: Iterable[int]) -> Ticks:
    """Count signal readings until the first negative one."""
    return sum(1 for _ in takewhile(lambda signal: signal >= 0, signals))