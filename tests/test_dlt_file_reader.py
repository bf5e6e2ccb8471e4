import pytest
from dlt_reader.decoders.dlt_file_reader import DltFileReader
from dlt_reader.decoders.errors import InvalidMagic


@pytest.fixture
def dlt_file(tmp_path, make_record):
    path = tmp_path / "sample.dlt"
    path.write_bytes(
        make_record(payload=b"one", counter=0)
        + make_record(payload=b"two", counter=1, extended=False)
        + make_record(payload=b"three", counter=2)
    )
    return path


def test_read_records(dlt_file):
    reader = DltFileReader(str(dlt_file))

    records = list(reader.read_records())

    assert [r.standard_header.counter for r in records] == [0, 1, 2]
    assert [bytes(r.payload) for r in records] == [b"one", b"two", b"three"]


def test_read_record_at_position(dlt_file, make_record):
    reader = DltFileReader(str(dlt_file))
    offset = len(make_record(payload=b"one"))

    record = reader.read_record_at_position(offset)

    assert record.block_offset == offset
    assert record.extended_header is None
    assert bytes(record.payload) == b"two"


def test_read_record_beyond_file(dlt_file):
    with pytest.raises(ValueError):
        DltFileReader(str(dlt_file)).read_record_at_position(10_000)


def test_corrupt_file_stops_at_first_bad_record(tmp_path, make_record):
    path = tmp_path / "corrupt.dlt"
    good = make_record(payload=b"ok")
    path.write_bytes(good + make_record(pattern=b"DLT\x02"))

    with pytest.raises(InvalidMagic) as exc_info:
        list(DltFileReader(str(path)).read_records())

    assert exc_info.value.record_index == 1
    assert exc_info.value.record_offset == len(good)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(DltFileReader(str(tmp_path / "missing.dlt")).read_records())
