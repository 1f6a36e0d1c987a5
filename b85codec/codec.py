import logging
import struct

from typing import Union

from .encoding import DEFAULT_ENCODING, SYMBOL_BASE, UNUSED, Encoding
from .error import DecodeError, DescriptorError

LOG = logging.getLogger(__name__)

ZERO_DIGITS = bytes(5)
# digits of b"    ", so btoa "y" decodes to spaces where some
# implementations expand it to b"2222"
SPACE_DIGITS = bytes((10, 27, 53, 67, 43))

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError("expected bytes, use b85codec.util for text")
    return bytes(data)


def encode(data: BytesLike, encoding: Encoding = DEFAULT_ENCODING) -> bytes:
    data = _as_bytes(data)
    padding = -len(data) % 4
    data += bytes(padding)

    digits = bytearray(len(data) * 5 // 4)
    idx = 4
    for (val,) in struct.iter_unpack(">L", data):
        for _ in range(4):
            digits[idx] = val % 85
            idx -= 1
            val //= 85
        digits[idx] = val
        idx += 9
    if padding:
        # a partial group keeps one digit more than its byte count
        del digits[-padding:]

    forward = encoding.forward
    zeros = encoding.zero_marker
    spaces = encoding.space_marker
    result = bytearray()
    if encoding.start_delimiter:
        result.extend(encoding.start_delimiter)
    body = len(result)
    for start in range(0, len(digits), 5):
        group = digits[start : start + 5]
        if zeros is not None and group == ZERO_DIGITS:
            result.append(zeros)
        elif spaces is not None and group == SPACE_DIGITS:
            result.append(spaces)
        else:
            result.extend(forward[digit] for digit in group)

    # a zero marker may not close the stream
    if zeros is not None and len(result) > body and result[-1] == zeros:
        result[-1:] = forward[:1] * 5

    if encoding.end_delimiter:
        result.extend(encoding.end_delimiter)
    return bytes(result)


def _prepare(data: bytes, encoding: Encoding) -> bytes:
    start, end = encoding.start_delimiter, encoding.end_delimiter
    if start and data.startswith(start):
        data = data[len(start) :]
    if end and data.endswith(end):
        data = data[: -len(end)]

    forward = encoding.forward
    if encoding.zero_marker is not None:
        if not forward:
            raise DescriptorError("zero marker needs a non-empty alphabet")
        data = data.replace(bytes((encoding.zero_marker,)), forward[:1] * 5)
    if encoding.space_marker is not None:
        if len(forward) < 68:
            raise DescriptorError("space marker needs at least 68 symbols")
        data = data.replace(
            bytes((encoding.space_marker,)),
            bytes(forward[digit] for digit in SPACE_DIGITS),
        )
    return data


def decode(data: BytesLike, encoding: Encoding = DEFAULT_ENCODING) -> bytes:
    data = _prepare(_as_bytes(data), encoding)
    padding = -len(data) % 5
    if padding:
        if len(encoding.forward) < 85:
            raise DescriptorError("alphabet needs 85 symbols")
        data += encoding.forward[84:85] * padding

    inverse = encoding.inverse
    buf = bytearray(len(data) * 4 // 5)
    copy_to = 0
    idx = 0
    val = 0
    for (pos, char) in enumerate(data):
        offset = char - SYMBOL_BASE
        digit = inverse[offset] if 0 <= offset < len(inverse) else UNUSED
        if digit > 84:
            LOG.debug("rejecting symbol %d at %d for %s", char, pos, encoding.name)
            raise DecodeError(
                f"invalid symbol {chr(char)!r} at {pos}", position=pos, symbol=char
            )
        val = val * 85 + digit
        idx += 1
        if idx == 5:
            if val > 0xFFFFFFFF:
                LOG.debug("rejecting group at %d for %s", pos - 4, encoding.name)
                raise DecodeError(f"group overflow at {pos - 4}", position=pos - 4)
            copy_next = copy_to + 4
            buf[copy_to:copy_next] = val.to_bytes(4, "big")
            copy_to = copy_next
            idx = 0
            val = 0
    if padding:
        del buf[-padding:]
    return bytes(buf)
