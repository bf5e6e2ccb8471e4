from typing import Iterator
from dlt_reader.decoders.record_decoder import RecordDecoder
from dlt_reader.decoders.record_stream import RecordStream
from dlt_reader.models.record import Record


class DltFileReader:
    def __init__(self, file_path: str):
        self.file_path = file_path

    def load(self) -> bytes:
        """Read the whole file; decoded records keep views into these bytes."""
        with open(self.file_path, 'rb') as file:
            return file.read()

    def read_records(self) -> Iterator[Record]:
        """Yield the records of the file in order, stopping at the first bad one."""
        yield from RecordStream(self.load())

    def read_record_at_position(self, start_position: int) -> Record:
        """Read a specific record at given byte position in file."""
        data = self.load()
        if start_position >= len(data):
            raise ValueError("Position beyond file size")

        record, _ = RecordDecoder().decode_at(data, start_position)
        return record
