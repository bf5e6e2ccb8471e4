from dataclasses import dataclass
from typing import Optional
from .storage_header import StorageHeader
from .standard_header import StandardHeader
from .extended_header import ExtendedHeader
from .message_info import MessageInfo
from dlt_reader.types.enums import MessageType, LogLevel


@dataclass(frozen=True)
class Record:
    """
    One decoded DLT message.

    ``payload`` is a memoryview into the buffer the record was decoded from,
    so that buffer has to stay alive (and unmodified) while the record is used.
    """
    storage_header: StorageHeader
    standard_header: StandardHeader
    extended_header: Optional[ExtendedHeader]
    payload: memoryview
    block_offset: int  # Start of the storage header in the source buffer
    payload_offset: int

    @property
    def length(self) -> int:
        """Bytes taken by the record in the buffer, storage header included."""
        return self.payload_offset + len(self.payload) - self.block_offset

    @property
    def message_info(self) -> Optional[MessageInfo]:
        if self.extended_header is None:
            return None
        return self.extended_header.message_info

    @property
    def is_log(self) -> bool:
        info = self.message_info
        return info is not None and info.message_type == MessageType.LOG

    @property
    def log_level(self) -> Optional[LogLevel]:
        info = self.message_info
        return info.log_level if info is not None else None
