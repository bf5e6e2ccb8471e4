from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StorageHeader:
    """Container prefix written in front of every stored DLT message (16 bytes)."""
    pattern: bytes  # Raw, checked by the record decoder
    timestamp: datetime
    ecu_id: str
