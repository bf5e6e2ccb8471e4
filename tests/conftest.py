import struct
import pytest

MAGIC = b"DLT\x01"


def build_record(payload: bytes = b"hello\x00",
                 seconds: int = 1_700_000_000,
                 microseconds: int = 250_000,
                 ecu: bytes = b"ECU1",
                 counter: int = 0,
                 extended: bool = True,
                 msin: int = 0x41,  # verbose LOG INFO
                 noar: int = 1,
                 apid: bytes = b"APP1",
                 ctid: bytes = b"CTX1",
                 ecu_ext: bool = False,
                 session_ext: bool = False,
                 timestamp_ext: bool = False,
                 msb_first: bool = False,
                 reserved: bytes = b"\x00" * 6,
                 length_delta: int = 0,
                 pattern: bytes = MAGIC) -> bytes:
    """Assemble one stored DLT message byte by byte."""
    flags = 0
    body = b""
    if extended:
        flags |= 0x01
    if msb_first:
        flags |= 0x02
    if ecu_ext:
        flags |= 0x04
        body += b"EXT1"
    if session_ext:
        flags |= 0x08
        body += b"\x00\x00\x00\x2A"
    if timestamp_ext:
        flags |= 0x10
        body += b"\x00\x01\x86\xA0"
    if extended:
        body += bytes([msin, noar]) + apid.ljust(4, b"\x00") + ctid.ljust(4, b"\x00")
    body += reserved + payload

    total_length = 4 + len(body) + length_delta
    standard = struct.pack(">BBH", flags, counter, total_length)
    storage = pattern + struct.pack("<Ii", seconds, microseconds) + ecu.ljust(4, b"\x00")
    return storage + standard + body


@pytest.fixture
def make_record():
    return build_record
