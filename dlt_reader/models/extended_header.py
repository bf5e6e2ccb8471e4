from dataclasses import dataclass
from dlt_reader.models.message_info import MessageInfo


@dataclass(frozen=True)
class ExtendedHeader:
    """Optional DLT extended header (10 bytes)."""
    message_info_byte: int
    argument_count: int  # NOAR, kept raw
    application_id: str
    context_id: str
    message_info: MessageInfo  # Classified from message_info_byte
