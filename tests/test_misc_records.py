import pytest

from polymath.misc_records import (
    DataFlow,
    FileBlock,
    GridMap,
    MotionVector,
    PayerInformation,
    SimCard,
)


def test_payer_requires_single_at_sign():
    payer = PayerInformation(upi_id="payer@example.com", bank_account_number="0000")
    assert payer.upi_id == "payer@example.com"
    with pytest.raises(ValueError):
        PayerInformation(upi_id="payer")


def test_sim_card_rejects_non_digit_number():
    assert SimCard(phone_number="12345").phone_number == "12345"
    with pytest.raises(ValueError):
        SimCard(phone_number="12ab")


def test_sim_card_rejects_negative_hash():
    with pytest.raises(ValueError):
        SimCard(a2_hash=-1)


def test_motion_vector_range():
    assert MotionVector(0).direction_in_degrees == 0
    with pytest.raises(ValueError):
        MotionVector(360)
    with pytest.raises(ValueError):
        MotionVector(-1)


def test_grid_map_dimensions():
    grid = GridMap([[1, 2, 3], [4, 5, 6]])
    assert (grid.length, grid.breadth) == (2, 3)
    assert (GridMap().length, GridMap().breadth) == (0, 0)


def test_grid_map_rejects_ragged_rows():
    with pytest.raises(ValueError):
        GridMap([[1, 2], [3]])


def test_data_flow_converts_to_bytes():
    flow = DataFlow(bytearray(b"ab"))
    assert flow.flow == b"ab"
    assert type(flow.flow) is bytes


def test_file_block_length():
    assert FileBlock([b"a", b"b", b"c"]).length_of_block == 3