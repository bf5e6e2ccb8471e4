import logging
from typing import Tuple
from dlt_reader.decoders.dlt_decoder_base import require_bytes
from dlt_reader.decoders.errors import InvalidMagic, UnsupportedByteOrder, PayloadLengthOutOfRange
from dlt_reader.decoders.storage_header_decoder import StorageHeaderDecoder
from dlt_reader.decoders.standard_header_decoder import StandardHeaderDecoder, ExtensionSkipper
from dlt_reader.decoders.extended_header_decoder import ExtendedHeaderDecoder
from dlt_reader.models.record import Record
from dlt_reader.utils.bytes_utils import BufferLike, as_view


class RecordDecoder:
    """
    Decodes one stored DLT message:

        storage header | standard header | [extensions] | [extended header] | reserved | payload

    The standard header length counts from the standard header to the end of
    the payload, so the 16 storage header bytes are outside of it.
    """

    MAGIC = b"DLT\x01"
    RESERVED_SIZE = 6  # Opaque bytes between the headers and the payload

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.storage_decoder = StorageHeaderDecoder()
        self.standard_decoder = StandardHeaderDecoder()
        self.extension_skipper = ExtensionSkipper()
        self.extended_decoder = ExtendedHeaderDecoder()

    def decode_at(self, data: BufferLike, offset: int = 0) -> Tuple[Record, int]:
        """Decode the record starting at ``offset``; return it and the offset right after it."""
        data = as_view(data)
        start = offset

        # Pattern first, nothing else of a foreign record is read
        require_bytes(data, start, len(self.MAGIC), "storage header pattern")
        pattern = bytes(data[start:start + len(self.MAGIC)])
        if pattern != self.MAGIC:
            raise InvalidMagic(pattern, start)

        storage_header, pos = self.storage_decoder.decode(data, start)

        standard_header, pos = self.standard_decoder.decode(data, pos)
        if standard_header.msb_first:
            raise UnsupportedByteOrder(standard_header.flags, start)

        pos = self.extension_skipper.skip(
            data, pos,
            standard_header.with_ecu_id,
            standard_header.with_session_id,
            standard_header.with_timestamp,
        )

        extended_header = None
        if standard_header.has_extended_header:
            extended_header, pos = self.extended_decoder.decode(data, pos)

        require_bytes(data, pos, self.RESERVED_SIZE, "reserved field")
        pos += self.RESERVED_SIZE

        # Consumed bytes include the storage header, total_length does not
        consumed = pos - start
        payload_length = standard_header.total_length - consumed + StorageHeaderDecoder.SIZE

        available = len(data) - pos
        if payload_length < 0 or payload_length > available:
            raise PayloadLengthOutOfRange(payload_length, available, start)

        record = Record(
            storage_header=storage_header,
            standard_header=standard_header,
            extended_header=extended_header,
            payload=data[pos:pos + payload_length],
            block_offset=start,
            payload_offset=pos,
        )
        self.logger.debug("Record at %d: header bytes=%d, payload=%d", start, consumed, payload_length)
        return record, pos + payload_length

    def decode_next(self, data: BufferLike) -> Tuple[Record, memoryview]:
        """Decode the first record of ``data``; return it and a view of the rest."""
        data = as_view(data)
        record, end = self.decode_at(data, 0)
        return record, data[end:]
