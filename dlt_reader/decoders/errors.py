from typing import Optional


class DecodeError(ValueError):
    """
    Base class for every failure of the DLT record decoder.

    ``offset`` is the byte position (in the decoded buffer) where the problem
    was found. ``record_index`` and ``record_offset`` are filled in by
    RecordStream when the error happens while walking a whole buffer.
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.record_index: Optional[int] = None
        self.record_offset: Optional[int] = None

    def __str__(self) -> str:
        parts = [self.message]
        if self.record_index is not None:
            parts.append(f"record #{self.record_index} at offset {self.record_offset}")
        elif self.offset is not None:
            parts.append(f"offset {self.offset}")
        return " | ".join(parts)


class TruncatedInput(DecodeError):
    """Fewer bytes left than a fixed-size field needs."""

    def __init__(self, field: str, needed: int, available: int, offset: int):
        super().__init__(
            f"Truncated {field}: need {needed} bytes, {max(available, 0)} available",
            offset,
        )
        self.field = field
        self.needed = needed
        self.available = max(available, 0)


class InvalidMagic(DecodeError):
    """Storage header pattern is not 'DLT\\x01'."""

    def __init__(self, pattern: bytes, offset: int):
        super().__init__(f"Invalid storage header pattern {pattern!r}", offset)
        self.pattern = pattern


class UnsupportedByteOrder(DecodeError):
    """Standard header announces a big-endian (MSB first) payload."""

    def __init__(self, flags: int, offset: int):
        super().__init__(f"MSB-first payloads are not supported (flags=0x{flags:02X})", offset)
        self.flags = flags


class PayloadLengthOutOfRange(DecodeError):
    """Length field gives a negative payload or one past the end of the buffer."""

    def __init__(self, payload_length: int, available: int, offset: int):
        super().__init__(
            f"Payload length {payload_length} out of range ({available} bytes available)",
            offset,
        )
        self.payload_length = payload_length
        self.available = available
