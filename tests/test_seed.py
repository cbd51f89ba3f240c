from unittest import mock

from jsoncore.seed import get_random_seed


def test_seed_is_signed_32_bit():
    for _ in range(50):
        seed = get_random_seed()
        assert -(1 << 31) <= seed < (1 << 31)


def test_seed_uses_urandom_bytes():
    with mock.patch("jsoncore.seed.os.urandom", return_value=b"\x07\x00\x00\x00"):
        assert get_random_seed() == 7


def test_seed_from_urandom_is_signed():
    with mock.patch("jsoncore.seed.os.urandom", return_value=b"\xff\xff\xff\xff"):
        assert get_random_seed() == -1


def test_seed_falls_back_to_time():
    with mock.patch("jsoncore.seed.os.urandom", side_effect=NotImplementedError), \
            mock.patch("jsoncore.seed.time.time", return_value=1.5):
        assert get_random_seed() == 433494437


def test_time_seed_wraps_to_32_bits():
    with mock.patch("jsoncore.seed.os.urandom", side_effect=OSError), \
            mock.patch("jsoncore.seed.time.time", return_value=1_700_000_000):
        seed = get_random_seed()
    assert -(1 << 31) <= seed < (1 << 31)