import pandas as pd
import pytest
from dlt_reader.decoders.record_stream import decode_all
from dlt_reader.exporters.dlt_exporter import DltExporter


class TestDltExporter:
    @pytest.fixture
    def records(self, make_record):
        data = (make_record(payload=b"boot\x00", counter=0, msin=0x41)
                + make_record(payload=b"raw", counter=1, extended=False, ecu=b"ECU2")
                + make_record(payload=b"crash\x00", counter=2, msin=0x10, apid=b"SYS", ctid=b"KRN"))
        return decode_all(data)

    def test_records_to_dataframe(self, records):
        df = DltExporter.records_to_dataframe(records)

        assert list(df.columns) == DltExporter.ALL_COLUMNS
        assert len(df) == 3
        assert df['Index'].tolist() == [0, 1, 2]
        assert df['Counter'].tolist() == [0, 1, 2]
        assert df['ECU'].tolist() == ['ECU1', 'ECU2', 'ECU1']
        assert df.loc[0, 'Level'] == 'INFO'
        assert df.loc[2, 'Level'] == 'FATAL'
        assert df.loc[2, 'APID'] == 'SYS'
        assert df.loc[2, 'Payload'] == 'crash'
        assert df.loc[0, 'Payload_len'] == 5

    def test_missing_extended_header_is_na(self, records):
        df = DltExporter.records_to_dataframe(records)

        assert pd.isna(df.loc[1, 'APID'])
        assert pd.isna(df.loc[1, 'Level'])
        assert pd.isna(df.loc[1, 'Args'])

    def test_dtypes(self, records):
        df = DltExporter.records_to_dataframe(records)

        assert str(df['Counter'].dtype) == 'Int64'
        assert str(df['APID'].dtype) == 'category'
        assert str(df['Time'].dtype).startswith('datetime64')
        assert df['Time'].dt.tz is not None

    def test_offsets(self, records):
        df = DltExporter.records_to_dataframe(records)
        assert df['Offset'].tolist() == [r.block_offset for r in records]

    def test_empty(self):
        df = DltExporter.records_to_dataframe([])
        assert df.empty
        assert list(df.columns) == DltExporter.ALL_COLUMNS
        assert str(df['Counter'].dtype) == 'Int64'
        assert df['Time'].dt.tz is not None

    def test_export_to_csv(self, records, tmp_path):
        df = DltExporter.records_to_dataframe(records)
        output = tmp_path / "out.csv"

        DltExporter.export_to_csv(df, str(output))

        loaded = pd.read_csv(output, keep_default_na=False)
        assert len(loaded) == 3
        assert loaded.loc[1, 'APID'] == 'N/A'

    def test_column_info_covers_columns(self):
        assert set(DltExporter.get_column_info()) == set(DltExporter.ALL_COLUMNS)
