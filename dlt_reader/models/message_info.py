from dataclasses import dataclass
from typing import Optional
from dlt_reader.types.enums import MessageType, LogLevel


@dataclass(frozen=True)
class MessageInfo:
    """Decoded view of the extended header's message info byte."""
    verbose: bool
    message_type: MessageType
    type_info: int  # Raw MTIN nibble
    log_level: Optional[LogLevel] = None  # Only set for MessageType.LOG
