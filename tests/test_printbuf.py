import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsoncore.printbuf import PrintBuffer


def _before_resize() -> int:
    pb = PrintBuffer()
    initial = pb.capacity
    while pb.capacity == initial:
        pb.append(b"x")
    return len(pb) - 1


def test_basic_memset():
    pb = PrintBuffer()
    pb.sprintf("blue:%d", 1)
    pb.memset(-1, ord("x"), 52)
    assert pb.getvalue() == b"blue:1" + b"x" * 52


def test_memset_length():
    pb = PrintBuffer()
    for _ in range(5):
        pb.memset(-1, " ", 0)
    assert len(pb) == 0
    pb.memset(-1, " ", 2)
    pb.memset(-1, " ", 4)
    pb.memset(-1, " ", 6)
    assert len(pb) == 12
    pb.memset(-1, " ", 6)
    assert len(pb) == 18
    for n in (8, 10, 10, 10, 20):
        pb.memset(-1, " ", n)
    assert len(pb) == 76

    pb.memset(0, "x", 30)
    assert len(pb) == 76
    assert pb.getvalue() == b"x" * 30 + b" " * 46

    pb.memset(0, "x", len(pb) + 1)
    assert len(pb) == 77


def test_append_until_resize():
    pb = PrintBuffer()
    assert len(pb) == 0
    initial = pb.capacity
    while pb.capacity == initial:
        pb.append(b"x")
    assert len(pb) == 32
    assert pb.getvalue() == b"x" * 32


def test_partial_append_and_embedded_nul():
    pb = PrintBuffer()
    pb.append(b"bluexyz123"[:3])
    assert len(pb) == 3
    assert pb.getvalue() == b"blu"

    pb.reset()
    assert pb.append(b"ab\0c") == 4
    assert len(pb) == 4
    assert pb.getvalue() == b"ab\0c"


def test_append_around_resize_boundary():
    before = _before_resize()
    assert before == 31

    pb = PrintBuffer()
    pb.append(b"X" * before)
    assert len(pb) == 31
    assert pb.capacity == 32

    pb = PrintBuffer()
    pb.append(b"X" * (before + 1))
    assert len(pb) == 32
    assert pb.getvalue() == b"X" * 32
    assert pb.capacity > 32


def test_sprintf_sequence():
    before = _before_resize()
    pb = PrintBuffer()
    assert len(pb) == 0
    data = "X" * (before + 1)
    pb.sprintf("%s", data)
    assert len(pb) == 32
    assert pb.getvalue() == data.encode()

    pb.reset()
    pb.sprintf("plain")
    assert (len(pb), pb.getvalue()) == (5, b"plain")
    pb.sprintf("%d", 1)
    assert (len(pb), pb.getvalue()) == (6, b"plain1")
    pb.sprintf("%d", 2147483647)
    assert (len(pb), pb.getvalue()) == (16, b"plain12147483647")
    pb.sprintf("%d", -2147483648)
    assert (len(pb), pb.getvalue()) == (27, b"plain12147483647-2147483648")
    pb.sprintf("%s", "%s")
    assert (len(pb), pb.getvalue()) == (29, b"plain12147483647-2147483648%s")


def test_sprintf_returns_size():
    pb = PrintBuffer()
    assert pb.sprintf("abc%d", 42) == 5


def test_reset_keeps_capacity():
    pb = PrintBuffer()
    pb.append(b"y" * 100)
    cap = pb.capacity
    pb.reset()
    assert len(pb) == 0
    assert pb.getvalue() == b""
    assert pb.capacity == cap


def test_capacity_growth_rule():
    pb = PrintBuffer()
    pb.append(b"z" * 100)
    # min size 101 exceeds 64, so grows to 101 + 8
    assert pb.capacity == 109


def test_memset_past_end_pads_with_zeros():
    pb = PrintBuffer()
    pb.append(b"ab")
    pb.memset(4, "c", 2)
    assert pb.getvalue() == b"ab\0\0cc"


def test_memset_rejects_bad_arguments():
    pb = PrintBuffer()
    with pytest.raises(ValueError):
        pb.memset(-2, "x", 1)
    with pytest.raises(ValueError):
        pb.memset(0, 300, 1)
    with pytest.raises(ValueError):
        pb.memset(0, "xy", 1)
    with pytest.raises(ValueError):
        pb.memset(0, "x", -1)


@given(st.lists(st.binary(max_size=50), max_size=20))
def test_appends_concatenate(chunks):
    pb = PrintBuffer()
    for chunk in chunks:
        pb.append(chunk)
    expected = b"".join(chunks)
    assert pb.getvalue() == expected
    assert len(pb) == len(expected)
    assert pb.capacity > len(pb)