import pytest

from algobox.crc import check, crc_bits, encode, mod2_remainder


def test_classic_example_check_bits():
    assert crc_bits("1101011011", "10011") == [1, 1, 1, 0]


def test_short_generator_check_bits():
    assert crc_bits([1, 0, 0, 1, 0, 0], [1, 1, 0, 1]) == [0, 0, 1]


@pytest.mark.parametrize(
    "frame, generator",
    [("1101011011", "10011"), ("100100", "1101"), ("1", "11"), ("111111", "1011")],
)
def test_encode_starts_with_frame_and_checks(frame, generator):
    sent = encode(frame, generator)
    assert sent[: len(frame)] == [int(c) for c in frame]
    assert len(sent) == len(frame) + len(generator) - 1
    assert check(sent, generator) is True
    assert mod2_remainder(sent, generator) == [0] * (len(generator) - 1)


@pytest.mark.parametrize("position", range(14))
def test_single_bit_error_is_detected(position):
    sent = encode("1101011011", "10011")
    sent[position] ^= 1
    assert check(sent, "10011") is False


def test_string_and_list_inputs_agree():
    assert crc_bits("100100", "1101") == crc_bits([1, 0, 0, 1, 0, 0], [1, 1, 0, 1])


def test_invalid_bit_rejected():
    with pytest.raises(ValueError):
        crc_bits("10201", "1101")


def test_empty_generator_rejected():
    with pytest.raises(ValueError):
        crc_bits("1010", "")


def test_generator_with_leading_zero_rejected():
    with pytest.raises(ValueError):
        encode("1010", "0101")


def test_too_short_dividend_rejected():
    with pytest.raises(ValueError):
        mod2_remainder("1", "10011")