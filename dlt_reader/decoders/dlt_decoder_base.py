from abc import ABC, abstractmethod
import logging
from typing import Any, Tuple
from dlt_reader.decoders.errors import TruncatedInput


def require_bytes(data: memoryview, pos: int, size: int, field: str) -> None:
    """Raise TruncatedInput unless ``size`` bytes are available at ``pos``."""
    if pos + size > len(data):
        raise TruncatedInput(field, size, len(data) - pos, pos)


class DltDecoderBase(ABC):
    # Fixed wire size of the decoded structure
    SIZE: int = 0

    def __init__(self) -> None:
        # Initialize a per-instance logger; subclasses should call super().__init__()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def decode(self, data: memoryview, pos: int) -> Tuple[Any, int]:
        """Decode the structure starting at ``pos``; return it and the next position."""
        pass
