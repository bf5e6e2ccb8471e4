from typing import Tuple
from dlt_reader.decoders.dlt_decoder_base import DltDecoderBase, require_bytes
from dlt_reader.models.standard_header import StandardHeader


class StandardHeaderDecoder(DltDecoderBase):
    """HTYP (1) + MCNT (1) + LEN (2, big-endian). Flags are left uninterpreted."""
    SIZE = 4

    def decode(self, data: memoryview, pos: int) -> Tuple[StandardHeader, int]:
        require_bytes(data, pos, self.SIZE, "standard header")

        header = StandardHeader(
            flags=data[pos],
            counter=data[pos + 1],
            total_length=int.from_bytes(data[pos + 2:pos + 4], byteorder='big'),
        )
        self.logger.debug("Standard header at %d: flags=0x%02X, counter=%d, len=%d",
                          pos, header.flags, header.counter, header.total_length)
        return header, pos + self.SIZE


class ExtensionSkipper:
    """Steps over the optional ECU id, session id and timestamp fields."""
    FIELD_SIZE = 4

    def extension_size(self, with_ecu_id: bool, with_session_id: bool, with_timestamp: bool) -> int:
        return self.FIELD_SIZE * (int(with_ecu_id) + int(with_session_id) + int(with_timestamp))

    def skip(self, data: memoryview, pos: int,
             with_ecu_id: bool, with_session_id: bool, with_timestamp: bool) -> int:
        size = self.extension_size(with_ecu_id, with_session_id, with_timestamp)
        require_bytes(data, pos, size, "standard header extensions")
        return pos + size
