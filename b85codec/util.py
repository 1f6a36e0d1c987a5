from typing import Union

from .codec import BytesLike, decode, encode
from .encoding import DEFAULT_ENCODING, Encoding

LINE_64 = 64
LINE_76 = 76

CR = b"\r"
LF = b"\n"
CRLF = b"\r\n"


def _line_ending(ending: Union[str, bytes]) -> bytes:
    if isinstance(ending, str):
        ending = ending.encode("ascii")
    if ending not in (CR, LF, CRLF):
        raise ValueError(f"unsupported line ending: {ending!r}")
    return ending


def wrap_lines(data: bytes, line_length: int, line_ending: bytes = CRLF) -> bytes:
    if line_length <= 0:
        raise ValueError("line_length must be positive")
    return line_ending.join(
        data[start : start + line_length] for start in range(0, len(data), line_length)
    )


def encode_lines(
    data: BytesLike,
    encoding: Encoding = DEFAULT_ENCODING,
    *,
    line_length: int = None,
    line_ending: Union[str, bytes] = CRLF,
) -> bytes:
    encoded = encode(data, encoding)
    if line_length is None:
        return encoded
    return wrap_lines(encoded, line_length, _line_ending(line_ending))


def encode_str(
    data: BytesLike,
    encoding: Encoding = DEFAULT_ENCODING,
    *,
    line_length: int = None,
    line_ending: Union[str, bytes] = CRLF,
) -> str:
    return encode_lines(
        data, encoding, line_length=line_length, line_ending=line_ending
    ).decode("ascii")


def strip_unknown(data: bytes, encoding: Encoding) -> bytes:
    # whitespace may split the framing when the text was wrapped
    data = bytes(char for char in data if char > 32)
    start, end = encoding.start_delimiter, encoding.end_delimiter
    if start and data.startswith(start):
        data = data[len(start) :]
    if end and data.endswith(end):
        data = data[: -len(end)]
    markers = {encoding.zero_marker, encoding.space_marker}
    return bytes(
        char for char in data if encoding.is_symbol(char) or char in markers
    )


def decode_str(
    text: Union[str, BytesLike],
    encoding: Encoding = DEFAULT_ENCODING,
    *,
    ignore_unknown: bool = False,
) -> bytes:
    if isinstance(text, str):
        text = text.encode("utf-8")
    else:
        text = bytes(text)
    if ignore_unknown:
        text = strip_unknown(text, encoding)
    return decode(text, encoding)
