from datetime import datetime, timedelta, timezone
from typing import Tuple
from dlt_reader.decoders.dlt_decoder_base import DltDecoderBase, require_bytes
from dlt_reader.models.storage_header import StorageHeader
from dlt_reader.utils.bytes_utils import decode_identifier

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def compose_timestamp(seconds: int, microseconds: int) -> datetime:
    """
    Combine the storage header time fields into a UTC datetime.

    Whole seconds contained in ``microseconds`` carry into ``seconds``.
    """
    carry, remainder = divmod(microseconds, 1_000_000)
    return EPOCH + timedelta(seconds=seconds + carry, microseconds=remainder)


class StorageHeaderDecoder(DltDecoderBase):
    """
    Storage header layout (16 bytes):
        pattern      4 bytes  'DLT' 0x01
        seconds      4 bytes  unsigned, little-endian
        microseconds 4 bytes  signed, little-endian
        ecu id       4 bytes  zero padded text
    """
    SIZE = 16

    def decode(self, data: memoryview, pos: int) -> Tuple[StorageHeader, int]:
        require_bytes(data, pos, self.SIZE, "storage header")

        pattern = bytes(data[pos:pos + 4])
        seconds = int.from_bytes(data[pos + 4:pos + 8], byteorder='little', signed=False)
        microseconds = int.from_bytes(data[pos + 8:pos + 12], byteorder='little', signed=True)

        if microseconds < 0:
            # Read back as the unsigned 32-bit value before the carry
            self.logger.warning("Negative microseconds %d at offset %d, reading as unsigned",
                                microseconds, pos)
            microseconds &= 0xFFFFFFFF

        header = StorageHeader(
            pattern=pattern,
            timestamp=compose_timestamp(seconds, microseconds),
            ecu_id=decode_identifier(data[pos + 12:pos + 16]),
        )
        self.logger.debug("Storage header at %d: ecu=%r, time=%s", pos, header.ecu_id, header.timestamp)
        return header, pos + self.SIZE
