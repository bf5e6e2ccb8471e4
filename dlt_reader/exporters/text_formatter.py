"""Text projections of decoded records - structural dump and log line."""

from typing import Callable
from dlt_reader.models.record import Record
from dlt_reader.utils.bytes_utils import strip_null

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def payload_text(record: Record) -> str:
    """Payload without trailing zero bytes, decoded as lossy UTF-8."""
    return bytes(strip_null(record.payload)).decode("utf-8", errors="replace")


def format_raw(record: Record) -> str:
    """Every decoded header field, one header per line, followed by the payload text."""
    storage = record.storage_header
    standard = record.standard_header
    lines = [
        f"StorageHeader(pattern={storage.pattern!r}, timestamp={storage.timestamp.isoformat()}, "
        f"ecu_id={storage.ecu_id!r})",
        f"StandardHeader(flags=0x{standard.flags:02X}, counter={standard.counter}, "
        f"total_length={standard.total_length})",
    ]

    extended = record.extended_header
    if extended is None:
        lines.append("ExtendedHeader(None)")
    else:
        info = extended.message_info
        level = info.log_level.name if info.log_level is not None else None
        lines.append(
            f"ExtendedHeader(message_info=0x{extended.message_info_byte:02X}, "
            f"argument_count={extended.argument_count}, application_id={extended.application_id!r}, "
            f"context_id={extended.context_id!r}, type={info.message_type.name}, level={level}, "
            f"verbose={info.verbose})"
        )

    lines.append(repr(payload_text(record)))
    return "\n".join(lines)


def format_log_line(record: Record) -> str:
    """timestamp, context id, application id, ecu id, level and payload text on one line."""
    extended = record.extended_header
    ctid = extended.context_id if extended is not None else "-"
    apid = extended.application_id if extended is not None else "-"

    level = record.log_level
    if level is not None:
        level_name = level.name
    elif record.message_info is not None:
        level_name = record.message_info.message_type.name
    else:
        level_name = "-"

    ts = record.storage_header.timestamp.strftime(TIMESTAMP_FORMAT)
    return (f"{ts} {ctid:<4} {apid:<4} {record.storage_header.ecu_id:<4} "
            f"{level_name:<7} {payload_text(record)}")


def get_formatter(mode: str = "log") -> Callable[[Record], str]:
    """Factory that returns the formatter for an output mode."""
    if mode == "raw":
        return format_raw
    if mode == "log":
        return format_log_line
    raise ValueError(f"Unknown output mode: {mode}")
