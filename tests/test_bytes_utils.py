import pytest
from dlt_reader.utils.bytes_utils import strip_null, decode_identifier, as_view


@pytest.mark.parametrize(
    "field,expected",
    [
        (bytes([0x41, 0x42, 0x43, 0x44, 0, 0]), bytes([0x41, 0x42, 0x43, 0x44])),
        (bytes([0, 0, 0, 0]), bytes([0, 0, 0, 0])),  # all zeros stay untouched
        (bytes([0x41, 0, 0x42, 0]), bytes([0x41, 0, 0x42])),  # embedded zero kept
        (b"ABCD", b"ABCD"),
        (b"", b""),
    ]
)
def test_strip_null(field: bytes, expected: bytes):
    assert bytes(strip_null(field)) == expected


def test_strip_null_returns_view_into_buffer():
    data = bytearray(b"AB\x00\x00")
    trimmed = strip_null(as_view(data))

    assert isinstance(trimmed, memoryview)
    data[0] = ord("Z")
    assert bytes(trimmed) == b"ZB"


def test_decode_identifier_trims_and_keeps_embedded_zero():
    assert decode_identifier(b"ECU\x00") == "ECU"
    assert decode_identifier(b"A\x00B\x00") == "A\x00B"
    assert decode_identifier(b"\x00\x00\x00\x00") == "\x00\x00\x00\x00"


def test_decode_identifier_is_lossy():
    """Invalid UTF-8 is replaced instead of failing"""
    assert decode_identifier(b"\xffAB\x00") == "�AB"


def test_as_view_casts_to_bytes():
    import array
    view = as_view(array.array("H", [1, 2]))
    assert view.format == "B"
    assert len(view) == 4
