from typing import Union

BufferLike = Union[bytes, bytearray, memoryview]


def as_view(data: BufferLike) -> memoryview:
    """Byte-wise memoryview over ``data`` without copying it."""
    view = memoryview(data)
    if view.format != "B":
        view = view.cast("B")
    return view


def strip_null(field: BufferLike) -> BufferLike:
    """
    Drop the trailing zero bytes of a fixed-size field.

    Zero bytes before the last non-zero byte are kept. A field made only of
    zeros is returned unchanged.
    """
    for i in range(len(field) - 1, -1, -1):
        if field[i] != 0x00:
            return field[:i + 1]
    return field


def decode_identifier(field: BufferLike) -> str:
    """Null-trimmed, lossy UTF-8 text of an identifier slot (ECU/APID/CTID)."""
    return bytes(strip_null(field)).decode("utf-8", errors="replace")
