import json

import pytest

from b85codec.encoding import ADOBE, RFC1924, Z85
from b85codec.error import DecodeError
from b85codec.serialization import Base85JSONEncoder, dumps, loads

HELLO = b"\x86\x4F\xD2\x6F\xB5\x59\xF7\x5B"


def test_dumps_bytes():
    out = dumps({"key": HELLO, "n": 1}, encoding=Z85)
    assert out == '{"key": "HelloWorld", "n": 1}'


def test_dumps_default_encoding():
    assert json.loads(dumps([b"\x00\x01"])) == ["009"]
    assert dumps([b"\x00\x01"]) == dumps([b"\x00\x01"], encoding=RFC1924)


def test_dumps_bytes_like():
    out = json.loads(dumps([bytearray(HELLO), memoryview(HELLO)], encoding=Z85))
    assert out == ["HelloWorld", "HelloWorld"]


def test_dumps_passes_kwargs():
    assert dumps({"b": b"", "a": 1}, sort_keys=True) == '{"a": 1, "b": ""}'


def test_encoder_rejects_other_types():
    with pytest.raises(TypeError):
        dumps({"value": object()})


def test_encoder_class():
    encoder = Base85JSONEncoder(encoding=ADOBE)
    assert encoder.encode({"v": bytes(4)}) == '{"v": "<~!!!!!~>"}'


def test_loads_fields():
    text = (
        '{"key": "HelloWorld", "name": "HelloWorld", '
        '"nested": [{"key": "HelloWorld"}]}'
    )
    obj = loads(text, fields=["key"], encoding=Z85)
    assert obj["key"] == HELLO
    assert obj["name"] == "HelloWorld"
    assert obj["nested"][0]["key"] == HELLO


def test_loads_roundtrip():
    obj = {"payload": bytes(range(256)), "meta": {"payload": b"    \x00\x00\x00\x00"}}
    assert loads(dumps(obj, encoding=ADOBE), fields={"payload"}, encoding=ADOBE) == obj


def test_loads_invalid_value():
    with pytest.raises(DecodeError) as exc:
        loads('{"key": "Hello,orld"}', fields=["key"], encoding=Z85)
    assert "'key'" in str(exc.value)
    assert exc.value.symbol == ord(",")


def test_loads_non_string_value():
    with pytest.raises(DecodeError):
        loads('{"key": 5}', fields=["key"])
