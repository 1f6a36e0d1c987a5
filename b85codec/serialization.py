import json

from typing import Any, Iterable

from .codec import decode, encode
from .encoding import DEFAULT_ENCODING, Encoding
from .error import DecodeError


class Base85JSONEncoder(json.JSONEncoder):
    """JSON encoder writing byte values as Base-85 strings."""

    def __init__(self, *args, encoding: Encoding = DEFAULT_ENCODING, **kwargs):
        super().__init__(*args, **kwargs)
        self.encoding = encoding

    def default(self, o: Any) -> Any:
        if isinstance(o, (bytes, bytearray, memoryview)):
            return encode(o, self.encoding).decode("ascii")
        return super().default(o)


def dumps(obj: Any, *, encoding: Encoding = DEFAULT_ENCODING, **kwargs) -> str:
    return json.dumps(obj, cls=Base85JSONEncoder, encoding=encoding, **kwargs)


def loads(
    text: str,
    *,
    fields: Iterable[str],
    encoding: Encoding = DEFAULT_ENCODING,
    **kwargs,
) -> Any:
    """
    Parse `text` and decode the values of the keys named in `fields`,
    in any JSON object, back into bytes.
    """
    fields = frozenset(fields)

    def object_hook(obj: dict) -> dict:
        for key in fields.intersection(obj):
            value = obj[key]
            if not isinstance(value, str):
                raise DecodeError(f"field {key!r} is not a Base-85 string")
            try:
                obj[key] = decode(value.encode("utf-8"), encoding)
            except DecodeError as ex:
                raise DecodeError(
                    f"field {key!r}: {ex}", position=ex.position, symbol=ex.symbol
                ) from ex
        return obj

    return json.loads(text, object_hook=object_hook, **kwargs)
