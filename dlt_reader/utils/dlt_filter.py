import numpy as np
import pandas as pd
from datetime import datetime
from typing import Iterable, Optional
from dlt_reader.models.record import Record
from dlt_reader.types.enums import LogLevel, MessageType


class DltFilter:
    """
    Filtering for decoded DLT data.

    The DataFrame filters work on the output of DltExporter and return the
    input unchanged when a needed column is missing. ``matches`` applies the
    same criteria to a single Record while streaming.
    """

    # Default severity threshold: everything up to and including this level
    DEFAULT_MIN_LEVEL = LogLevel.VERBOSE

    @staticmethod
    def filter_log_messages(df: pd.DataFrame) -> pd.DataFrame:
        """Keep LOG messages only"""
        if 'Type' not in df.columns:
            return df
        return df[df['Type'] == MessageType.LOG.name].reset_index(drop=True)

    @staticmethod
    def filter_by_min_level(df: pd.DataFrame, level: LogLevel = DEFAULT_MIN_LEVEL) -> pd.DataFrame:
        """
        Keep log messages at least as severe as ``level`` (FATAL is the most severe).
        Rows without a valid level are dropped.
        """
        if 'Level' not in df.columns:
            return df

        allowed = [lvl.name for lvl in LogLevel if lvl != LogLevel.RESERVED and lvl <= level]
        return df[df['Level'].isin(allowed)].reset_index(drop=True)

    @staticmethod
    def filter_by_application_ids(df: pd.DataFrame, app_ids: Iterable[str]) -> pd.DataFrame:
        if 'APID' not in df.columns:
            return df
        return df[df['APID'].isin(list(app_ids))].reset_index(drop=True)

    @staticmethod
    def filter_by_context_ids(df: pd.DataFrame, context_ids: Iterable[str]) -> pd.DataFrame:
        if 'CTID' not in df.columns:
            return df
        return df[df['CTID'].isin(list(context_ids))].reset_index(drop=True)

    @staticmethod
    def filter_by_ecu_ids(df: pd.DataFrame, ecu_ids: Iterable[str]) -> pd.DataFrame:
        if 'ECU' not in df.columns:
            return df
        return df[df['ECU'].isin(list(ecu_ids))].reset_index(drop=True)

    @staticmethod
    def filter_by_time_range(df: pd.DataFrame,
                             start: Optional[datetime] = None,
                             end: Optional[datetime] = None) -> pd.DataFrame:
        """Filter by storage header timestamp, both bounds inclusive"""
        if 'Time' not in df.columns:
            return df

        result = df
        if start is not None:
            result = result[result['Time'] >= DltFilter._utc(start)]
        if end is not None:
            result = result[result['Time'] <= DltFilter._utc(end)]

        return result.reset_index(drop=True)

    @staticmethod
    def _utc(moment: datetime) -> pd.Timestamp:
        # Naive datetimes are taken as UTC, like the storage header timestamps
        ts = pd.Timestamp(moment)
        return ts.tz_localize('UTC') if ts.tzinfo is None else ts.tz_convert('UTC')

    @staticmethod
    def matches(record: Record,
                min_level: Optional[LogLevel] = None,
                app_ids: Optional[Iterable[str]] = None,
                context_ids: Optional[Iterable[str]] = None) -> bool:
        """Streaming counterpart of the DataFrame filters. ``None`` disables a criterion."""
        extended = record.extended_header

        if min_level is not None:
            level = record.log_level
            if level is None or level == LogLevel.RESERVED or level > min_level:
                return False

        if app_ids is not None:
            if extended is None or extended.application_id not in set(app_ids):
                return False

        if context_ids is not None:
            if extended is None or extended.context_id not in set(context_ids):
                return False

        return True

    @staticmethod
    def get_statistics(df: pd.DataFrame) -> dict:
        """Get basic statistics for the dataset"""
        stats = {
            'total_records': len(df),
            'unique_ecus': df['ECU'].nunique() if 'ECU' in df.columns else 0,
            'unique_applications': df['APID'].nunique() if 'APID' in df.columns else 0,
            'unique_contexts': df['CTID'].nunique() if 'CTID' in df.columns else 0,
        }

        if 'Type' in df.columns:
            stats['type_counts'] = {k: int(v) for k, v in df['Type'].value_counts().items() if v}

        if 'Level' in df.columns:
            stats['level_counts'] = {k: int(v) for k, v in df['Level'].value_counts().items() if v}

        if 'Payload_len' in df.columns and len(df) > 0:
            lengths = df['Payload_len'].to_numpy(dtype=np.float64, na_value=np.nan)
            stats['payload_bytes_total'] = int(np.nansum(lengths))
            stats['payload_len_median'] = float(np.nanpercentile(lengths, 50))
            stats['payload_len_p95'] = float(np.nanpercentile(lengths, 95))

        if 'Time' in df.columns and len(df) > 0:
            stats['time_range'] = (df['Time'].min(), df['Time'].max())

        return stats
