from dataclasses import dataclass
from dlt_reader.types.enums import HeaderFlag


@dataclass(frozen=True)
class StandardHeader:
    """Core DLT header (4 bytes)."""
    flags: int
    counter: int
    total_length: int  # From the start of this header to the end of the payload

    @property
    def header_flags(self) -> HeaderFlag:
        return HeaderFlag(self.flags & 0x1F)

    @property
    def has_extended_header(self) -> bool:
        return bool(self.flags & HeaderFlag.USE_EXTENDED_HEADER)

    @property
    def msb_first(self) -> bool:
        return bool(self.flags & HeaderFlag.MSB_FIRST)

    @property
    def with_ecu_id(self) -> bool:
        return bool(self.flags & HeaderFlag.WITH_ECU_ID)

    @property
    def with_session_id(self) -> bool:
        return bool(self.flags & HeaderFlag.WITH_SESSION_ID)

    @property
    def with_timestamp(self) -> bool:
        return bool(self.flags & HeaderFlag.WITH_TIMESTAMP)
