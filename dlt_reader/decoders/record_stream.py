import logging
from typing import Iterator, List, Optional
from dlt_reader.decoders.errors import DecodeError
from dlt_reader.decoders.record_decoder import RecordDecoder
from dlt_reader.models.record import Record
from dlt_reader.utils.bytes_utils import BufferLike, as_view


class RecordStream:
    """
    Lazy sequence of the records stored back to back in a buffer.

    Every iteration starts again from the beginning of the buffer. Decoding
    stops at the first bad record: the DecodeError is re-raised with the index
    and offset of that record filled in.
    """

    def __init__(self, data: BufferLike, decoder: Optional[RecordDecoder] = None):
        self.data = as_view(data)
        self.decoder = decoder or RecordDecoder()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __iter__(self) -> Iterator[Record]:
        position = 0
        index = 0
        size = len(self.data)

        while position < size:
            try:
                record, position = self.decoder.decode_at(self.data, position)
            except DecodeError as err:
                err.record_index = index
                err.record_offset = position
                self.logger.error("Decoding stopped at record %d (offset %d): %s",
                                  index, position, err.message)
                raise
            index += 1
            yield record

        self.logger.debug("Decoded %d records from %d bytes", index, size)


def decode_all(data: BufferLike) -> List[Record]:
    """Decode every record of ``data`` into a list."""
    return list(RecordStream(data))
