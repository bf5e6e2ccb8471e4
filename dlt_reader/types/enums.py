from enum import IntEnum, IntFlag


class HeaderFlag(IntFlag):
    """DLT standard header type bits (HTYP)"""

    USE_EXTENDED_HEADER = 0x01  # UEH - 10 byte extended header follows
    MSB_FIRST = 0x02  # MSBF - big-endian payload (not supported)
    WITH_ECU_ID = 0x04  # WEID - 4 byte extension
    WITH_SESSION_ID = 0x08  # WSID - 4 byte extension
    WITH_TIMESTAMP = 0x10  # WTMS - 4 byte extension


class MessageType(IntEnum):
    """MSTP - bits 1-3 of the message info byte"""

    LOG = 0
    APP_TRACE = 1
    NW_TRACE = 2
    CONTROL = 3

    # Codes 4-7 are not assigned
    RESERVED = -1


class LogLevel(IntEnum):
    """MTIN for LOG messages - bits 4-7 of the message info byte"""

    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    VERBOSE = 6

    # 0 and 7-15
    RESERVED = -1
