import logging

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .error import DescriptorError

LOG = logging.getLogger(__name__)

# first printable symbol, inverse tables are indexed from here
SYMBOL_BASE = 33
# inverse slot not used by the alphabet
UNUSED = 0xFF

MAP_ASCII = bytes(range(SYMBOL_BASE, SYMBOL_BASE + 85))
MAP_RFC1924 = (
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~"
)
MAP_Z85 = (
    b"0123456789abcdefghijklmnopqrstuvwxyzABCDEFG"
    b"HIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
)

Delimiter = Union[str, bytes, None]
Marker = Union[str, int, None]


def invert_symbols(forward: bytes) -> bytes:
    inverse = bytearray([UNUSED]) * (max(forward) - SYMBOL_BASE + 1)
    for (digit, symbol) in enumerate(forward):
        inverse[symbol - SYMBOL_BASE] = digit
    return bytes(inverse)


@dataclass(frozen=True)
class Encoding:
    """
    One Base-85 variant: the symbol alphabet with its inverse table,
    optional framing and optional run markers for four zero bytes or
    four ASCII spaces.
    """

    forward: bytes
    inverse: bytes
    start_delimiter: Optional[bytes] = None
    end_delimiter: Optional[bytes] = None
    zero_marker: Optional[int] = None
    space_marker: Optional[int] = None
    name: str = field(default="custom", compare=False)

    @classmethod
    def from_symbols(cls, forward: bytes, **kwargs) -> "Encoding":
        return cls(forward, invert_symbols(forward), **kwargs)

    def is_symbol(self, char: int) -> bool:
        index = char - SYMBOL_BASE
        return 0 <= index < len(self.inverse) and self.inverse[index] != UNUSED

    def __repr__(self) -> str:
        return f"<Encoding {self.name}>"


def _delimiter(value: Delimiter) -> Optional[bytes]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.encode("utf-8")
    return bytes(value) or None


def _ascii_value(char: Marker) -> Optional[int]:
    if char is None:
        return None
    if isinstance(char, str):
        if len(char) != 1:
            raise DescriptorError(f"expected a single character, got {char!r}")
        char = ord(char)
    if 0 <= char < 128:
        return char
    return None


def _marker(char: Marker) -> Optional[int]:
    value = _ascii_value(char)
    if value is None and char is not None:
        LOG.debug("ignoring non-ASCII run marker %r", char)
    return value


def customized(
    base: Encoding,
    start_delimiter: Delimiter = None,
    end_delimiter: Delimiter = None,
    zeros: Marker = None,
    spaces: Marker = None,
    *,
    name: str = None,
) -> Encoding:
    return Encoding(
        base.forward,
        base.inverse,
        start_delimiter=_delimiter(start_delimiter),
        end_delimiter=_delimiter(end_delimiter),
        zero_marker=_marker(zeros),
        space_marker=_marker(spaces),
        name=name or f"{base.name}+custom",
    )


def custom(
    characters: Union[str, bytes, Iterable[Union[str, int]]],
    start_delimiter: Delimiter = None,
    end_delimiter: Delimiter = None,
    zeros: Marker = None,
    spaces: Marker = None,
    *,
    name: str = "custom",
) -> Encoding:
    """
    Build a new alphabet from `characters`. Characters without an ASCII
    value are dropped; at least 85 must remain, none below "!". Only the
    first 85 become digit symbols.
    """
    symbols = bytes(
        value
        for value in (_ascii_value(char) for char in characters)
        if value is not None
    )
    if len(symbols) < 85:
        LOG.debug("rejecting alphabet of %d symbols", len(symbols))
        raise DescriptorError(f"alphabet needs 85 symbols, got {len(symbols)}")
    if min(symbols) < SYMBOL_BASE:
        LOG.debug("rejecting alphabet with symbol %d", min(symbols))
        raise DescriptorError("alphabet symbols must not be below '!'")
    forward = symbols[:85]
    if len(set(forward)) != 85:
        raise DescriptorError("alphabet symbols must be distinct")
    return Encoding.from_symbols(
        forward,
        start_delimiter=_delimiter(start_delimiter),
        end_delimiter=_delimiter(end_delimiter),
        zero_marker=_marker(zeros),
        space_marker=_marker(spaces),
        name=name,
    )


ASCII = Encoding.from_symbols(MAP_ASCII, name="ascii")
RFC1924 = Encoding.from_symbols(MAP_RFC1924, name="rfc1924")
BTOA = customized(ASCII, end_delimiter="x", zeros="z", spaces="y", name="btoa")
ADOBE = customized(ASCII, "<~", "~>", zeros="z", name="adobe")
Z85 = Encoding.from_symbols(MAP_Z85, name="z85")

DEFAULT_ENCODING = RFC1924

ENCODINGS = {enc.name: enc for enc in (ASCII, RFC1924, BTOA, ADOBE, Z85)}


def get_encoding(name: str) -> Encoding:
    try:
        return ENCODINGS[name.lower()]
    except KeyError:
        raise DescriptorError(f"unknown encoding: {name}") from None
