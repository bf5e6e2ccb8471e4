import pandas as pd
from typing import Iterable
from dlt_reader.models.record import Record
from dlt_reader.exporters.text_formatter import payload_text


class DltExporter:
    """
    Flattens decoded DLT records into a pandas DataFrame, one row per record.

    Memory optimizations:
    - Builds the frame column by column instead of from a list of dicts
    - Downcasts integer columns to nullable Int64 and identifiers to category
    """

    ALL_COLUMNS = [
        # Position in the source buffer
        'Index',  # Record number in the file
        'Offset',  # Byte offset of the storage header

        # Storage header
        'Time',  # UTC timestamp
        'ECU',  # ECU id

        # Standard header
        'Flags',  # HTYP bitfield
        'Counter',  # Message counter
        'Length',  # Standard header length field

        # Extended header (empty when absent)
        'APID',  # Application id
        'CTID',  # Context id
        'Type',  # Message type
        'Level',  # Log level (LOG messages only)
        'Verbose',  # Verbose flag
        'Args',  # Number of arguments

        # Payload
        'Payload_len',  # Payload bytes
        'Payload',  # Payload text (lossy)
    ]

    @staticmethod
    def records_to_dataframe(records: Iterable[Record]) -> pd.DataFrame:
        columns = DltExporter.ALL_COLUMNS
        data_cols = {col: [] for col in columns}

        for index, record in enumerate(records):
            row = {col: None for col in columns}
            row['Index'] = index
            DltExporter._process_record(record, row)

            for col in columns:
                data_cols[col].append(row[col])

        df = pd.DataFrame(data_cols, columns=columns)
        return DltExporter._downcast_dtypes(df)

    @staticmethod
    def _process_record(record: Record, row: dict) -> None:
        storage = record.storage_header
        standard = record.standard_header

        row['Offset'] = record.block_offset
        row['Time'] = storage.timestamp
        row['ECU'] = storage.ecu_id
        row['Flags'] = standard.flags
        row['Counter'] = standard.counter
        row['Length'] = standard.total_length
        row['Payload_len'] = len(record.payload)
        row['Payload'] = payload_text(record)

        extended = record.extended_header
        if extended is not None:
            info = extended.message_info
            row['APID'] = extended.application_id
            row['CTID'] = extended.context_id
            row['Type'] = info.message_type.name
            row['Level'] = info.log_level.name if info.log_level is not None else None
            row['Verbose'] = info.verbose
            row['Args'] = extended.argument_count

    @staticmethod
    def _downcast_dtypes(df: pd.DataFrame) -> pd.DataFrame:
        if df is None:
            return df

        # Applied to empty frames too, filters compare against these dtypes
        int_cols = ['Index', 'Offset', 'Flags', 'Counter', 'Length', 'Args', 'Payload_len']
        for col in int_cols:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col], errors='coerce').astype('Int64')

        if 'Verbose' in df.columns:
            df['Verbose'] = df['Verbose'].astype('boolean')

        if 'Time' in df.columns:
            df['Time'] = pd.to_datetime(df['Time'], utc=True)

        for col in ['ECU', 'APID', 'CTID', 'Type', 'Level']:
            if col in df.columns and df[col].notna().any():
                df[col] = df[col].astype('category')

        return df

    @staticmethod
    def export_to_csv(df: pd.DataFrame, output_path: str, na_rep: str = 'N/A') -> None:
        df.to_csv(output_path, index=False, na_rep=na_rep)
        print(f"✅ Exported {len(df):,} records to {output_path}")

    @staticmethod
    def get_column_info() -> dict:
        return {
            'Index': 'Record number in the file (0-based)',
            'Offset': 'Byte offset of the record in the file',
            'Time': 'Storage header timestamp (UTC)',
            'ECU': 'ECU id from the storage header',
            'Flags': 'Standard header type bits (HTYP)',
            'Counter': 'Message counter (MCNT)',
            'Length': 'Standard header length field (LEN)',
            'APID': 'Application id',
            'CTID': 'Context id',
            'Type': 'Message type (LOG/APP_TRACE/NW_TRACE/CONTROL/RESERVED)',
            'Level': 'Log level (LOG messages only)',
            'Verbose': 'Verbose mode flag',
            'Args': 'Number of arguments (NOAR)',
            'Payload_len': 'Payload size in bytes',
            'Payload': 'Payload text, trailing zeros removed',
        }
