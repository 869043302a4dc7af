import pytest

from base122 import decode, encode
from utils.exceptions import Base122Error, DecodeError, InvalidSequenceError


@pytest.mark.parametrize("text", [
    "\u0800",
    "\u65e5\u672c",
    "ok\uffff",
    "\U0001f600",
])
def test_longer_sequences_rejected(text):
    with pytest.raises(InvalidSequenceError):
        decode(text)


@pytest.mark.parametrize("code_point", [0x100, 0x17f, 0x27f, 0x77f])
def test_non_canonical_escape_rejected(code_point):
    with pytest.raises(InvalidSequenceError):
        decode(chr(code_point))


@pytest.mark.parametrize("code_point", [0x781, 0x7c1, 0x7ff])
def test_shortened_escape_with_safe_payload_rejected(code_point):
    with pytest.raises(InvalidSequenceError):
        decode(chr(code_point))


@pytest.mark.parametrize("encoded", [
    "\u078aAAAA",
    "A\u0780A",
    "\u0780\u0780",
    b"\xde\x8aA",
])
def test_shortened_escape_must_be_last(encoded):
    with pytest.raises(InvalidSequenceError) as info:
        decode(encoded)
    assert info.value.position > 0


@pytest.mark.parametrize("value", [0, 10, 13, 34, 38, 92])
def test_shortened_escape_with_dangerous_payload_accepted(value):
    data = decode("A" * 7 + chr(0x780 | value))
    assert len(data) == 7


@pytest.mark.parametrize("code_point", [0x680, 0x6ff])
def test_unknown_illegal_index_rejected(code_point):
    with pytest.raises(InvalidSequenceError):
        decode(chr(code_point))


@pytest.mark.parametrize("raw", [
    b"\x80",
    b"\xbf",
    b"\xc2",
    b"\xc2\x41",
    b"\xc1\x81",
    b"\xe6\x97\xa5",
    b"\xf0\x9f\x98\x80",
    b"\xff",
])
def test_malformed_raw_bytes_rejected(raw):
    with pytest.raises(InvalidSequenceError):
        decode(raw)


def test_error_reports_position():
    with pytest.raises(InvalidSequenceError) as info:
        decode("ab\u0800cd")
    assert info.value.position == 2
    assert info.value.value == 0x800
    assert "position 2" in str(info.value)


def test_raw_error_reports_byte_offset():
    with pytest.raises(InvalidSequenceError) as info:
        decode(b"ab\xc2\x80\xe6\x97\xa5")
    assert info.value.position == 4
    assert info.value.value == 0xe6


def test_error_hierarchy():
    assert issubclass(InvalidSequenceError, DecodeError)
    assert issubclass(DecodeError, Base122Error)


def test_valid_prefix_does_not_leak_output():
    text = encode(b"perfectly fine data") + "\u0800"
    with pytest.raises(DecodeError):
        decode(text)


def test_accepts_any_well_formed_text():
    assert decode("valid ascii") == decode(b"valid ascii")
