import pytest

from polymath.integer_types import IntegerType, integer_type

NAMES = ["uint4_t", "uint8_t", "uint64_t", "uint2048_t", "uint8192_t", "int512_t", "int8192_t"]


def test_uint8_maximum():
    assert integer_type("uint8_t").maximum == 255


def test_width_from_name():
    assert integer_type("uint2048_t").bits == 2048
    assert integer_type("int4096_t").signed


@pytest.mark.parametrize("name", NAMES)
def test_wrap_past_maximum_gives_minimum(name):
    t = integer_type(name)
    assert t.wrap(t.maximum + 1) == t.minimum
    assert t.wrap(t.minimum - 1) == t.maximum


@pytest.mark.parametrize("name", NAMES)
def test_wrap_is_identity_in_range(name):
    t = integer_type(name)
    for value in (t.minimum, t.maximum, t.maximum // 2):
        assert t.wrap(value) == value


@pytest.mark.parametrize("name", NAMES)
def test_fits_bounds(name):
    t = integer_type(name)
    assert t.fits(t.maximum)
    assert t.fits(t.minimum)
    assert not t.fits(t.maximum + 1)
    assert not t.fits(t.minimum - 1)


@pytest.mark.parametrize("value", [-(10**700), -1, 3, 10**700])
def test_wrapped_value_always_fits(value):
    for name in NAMES:
        t = integer_type(name)
        assert t.fits(t.wrap(value))


def test_signed_range_is_two_complement():
    t = integer_type("int1024_t")
    assert t.minimum == -(t.maximum + 1)


def test_unsigned_wrap_of_minus_one():
    t = integer_type("uint32_t")
    assert t.wrap(-1) == t.maximum


def test_unknown_type_raises():
    with pytest.raises(KeyError):
        integer_type("float512_t")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        integer_type("uint8_t").wrap(1.5)


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        IntegerType("empty", 0)