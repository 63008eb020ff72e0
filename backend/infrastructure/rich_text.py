"""
Rich text decoding for game-data strings.

Game strings interleave plain text with embedded payloads (icons, colors,
line breaks, ...). A payload is laid out as:

    0x02 <type byte> <length integer> <body: length bytes> 0x03

The length uses the game's packed integer encoding: a marker byte below
0xF0 encodes ``marker - 1`` directly, otherwise the low nibble of
``marker + 1`` says which of the following big-endian bytes are present.
"""

import logging
from typing import List, Tuple, Union

logger = logging.getLogger("RichText")

START_BYTE = 0x02
END_BYTE = 0x03
PACKED_INT_MARKER = 0xF0


class RichTextError(ValueError):
    """Raised when a payload is truncated or not terminated, or text is not UTF-8."""


def _read_packed_int(data: bytes, pos: int) -> Tuple[int, int]:
    """Read a packed integer at pos. Returns (value, new position)."""
    if pos >= len(data):
        raise RichTextError(f"Truncated integer at offset {pos}")

    marker = data[pos]
    pos += 1
    if marker < PACKED_INT_MARKER:
        return marker - 1, pos

    flags = (marker + 1) & 0x0F
    value = 0
    for bit, shift in ((8, 24), (4, 16), (2, 8), (1, 0)):
        if flags & bit:
            if pos >= len(data):
                raise RichTextError(f"Truncated integer at offset {pos}")
            value |= data[pos] << shift
            pos += 1
    return value, pos


def _to_bytes(raw: Union[bytes, str]) -> bytes:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return bytes(raw)


def _decode_segment(data: bytes, start: int, end: int) -> str:
    try:
        return data[start:end].decode("utf-8")
    except UnicodeDecodeError as e:
        raise RichTextError(f"Invalid UTF-8 text at offset {start + e.start}") from e


def decode_rich_text(raw: Union[bytes, str]) -> List[str]:
    """
    Split a raw game string into its plain text segments.

    Payloads are dropped. Text on either side of a payload becomes a
    separate segment, so a payload acts as a delimiter.

    Args:
        raw: Raw string bytes (str input is UTF-8 encoded first)

    Returns:
        List of non-empty plain text segments in order

    Raises:
        RichTextError: If a payload is truncated or missing its end byte, or the
            text is not valid UTF-8
    """
    data = _to_bytes(raw)
    segments: List[str] = []
    text_start = 0
    pos = 0

    while pos < len(data):
        if data[pos] != START_BYTE:
            pos += 1
            continue

        if pos > text_start:
            segments.append(_decode_segment(data, text_start, pos))

        # Skip start byte and payload type
        pos += 2
        length, pos = _read_packed_int(data, pos)
        pos += length
        if pos >= len(data) or data[pos] != END_BYTE:
            raise RichTextError(f"Payload not terminated at offset {pos}")
        pos += 1
        text_start = pos

    if text_start < len(data):
        segments.append(_decode_segment(data, text_start, len(data)))

    return [segment for segment in segments if segment]


def decode_plain_text(raw: Union[bytes, str]) -> str:
    """Decode a raw game string into one plain string with payloads removed."""
    return "".join(decode_rich_text(raw))
