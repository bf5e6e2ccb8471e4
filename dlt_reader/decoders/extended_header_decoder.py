from typing import Tuple
from dlt_reader.decoders.dlt_decoder_base import DltDecoderBase, require_bytes
from dlt_reader.models.extended_header import ExtendedHeader
from dlt_reader.models.message_info import MessageInfo
from dlt_reader.types.enums import MessageType, LogLevel
from dlt_reader.utils.bytes_utils import decode_identifier


def classify_message_info(msin: int) -> MessageInfo:
    """
    Split the MSIN byte:
        bit 0     VERB - verbose mode
        bits 1-3  MSTP - message type
        bits 4-7  MTIN - message type info (log level for LOG messages)
    """
    verbose = bool(msin & 0x01)
    type_code = (msin >> 1) & 0x07
    type_info = (msin >> 4) & 0x0F

    try:
        message_type = MessageType(type_code)
    except ValueError:
        message_type = MessageType.RESERVED

    log_level = None
    if message_type == MessageType.LOG:
        try:
            log_level = LogLevel(type_info)
        except ValueError:
            log_level = LogLevel.RESERVED

    return MessageInfo(
        verbose=verbose,
        message_type=message_type,
        type_info=type_info,
        log_level=log_level,
    )


class ExtendedHeaderDecoder(DltDecoderBase):
    """MSIN (1) + NOAR (1) + APID (4) + CTID (4)"""
    SIZE = 10

    def decode(self, data: memoryview, pos: int) -> Tuple[ExtendedHeader, int]:
        require_bytes(data, pos, self.SIZE, "extended header")

        msin = data[pos]
        header = ExtendedHeader(
            message_info_byte=msin,
            argument_count=data[pos + 1],
            application_id=decode_identifier(data[pos + 2:pos + 6]),
            context_id=decode_identifier(data[pos + 6:pos + 10]),
            message_info=classify_message_info(msin),
        )
        self.logger.debug("Extended header at %d: apid=%r, ctid=%r, type=%s",
                          pos, header.application_id, header.context_id,
                          header.message_info.message_type.name)
        return header, pos + self.SIZE
