import pytest

from polymath.protocols import (
    build_tcp_message,
    count_ticks,
    http_get,
    http_persist,
    send_tcp_message,
)


def test_http_get_reads_range():
    words = [5, 6, 7, 8, 9]
    block = http_get(words.__getitem__, 1, 4)
    assert block.block == words[1:4]
    assert block.length == len(words[1:4])


def test_http_get_empty_range():
    assert http_get(lambda address: address, 3, 3).block == []


def test_http_get_reversed_range():
    with pytest.raises(ValueError):
        http_get(lambda address: address, 4, 1)


def test_http_persist_moves_message():
    stored = []
    result = http_persist(lambda: "payload", stored.append)
    assert result == "payload"
    assert stored == ["payload"]


def test_build_uses_ipv6_when_ipv4_zero():
    assert build_tcp_message(0, 0x20010DB8, b"h", b"d", b"f") == (0x20010DB8, b"h", b"d", b"f")


def test_build_uses_ipv4_when_ipv6_zero():
    assert build_tcp_message(0xC0000201, 0, b"h", b"d", b"f")[0] == 0xC0000201


@pytest.mark.parametrize("ipv4, ipv6", [(0, 0), (1, 2)])
def test_build_needs_exactly_one_address(ipv4, ipv6):
    with pytest.raises(ValueError):
        build_tcp_message(ipv4, ipv6, b"", b"", b"")


def test_send_passes_message_to_sender():
    sent = []
    message = send_tcp_message(0xC0000201, 0, b"h", b"d", b"f", sent.append)
    assert sent == [message]


def test_count_ticks_stops_at_negative():
    signals = iter([3, 2, 0, -1, 5])
    assert count_ticks(signals) == 3
    assert list(signals) == [5]


def test_count_ticks_all_non_negative():
    readings = [1, 2, 4]
    assert count_ticks(readings) == len(readings)