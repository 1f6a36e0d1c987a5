import pytest

base58 = pytest.importorskip("base58")
nacl = pytest.importorskip("libnacl")

from b85codec.error import Base85Error
from b85codec.keys import (
    KEY_TEXT_LENGTH,
    create_curve_keys,
    key_from_z85,
    verkey_to_curve_key,
    z85_key,
)


def test_z85_key():
    assert z85_key(bytes(32)) == "0" * KEY_TEXT_LENGTH
    key = bytes(range(32))
    assert len(z85_key(key)) == KEY_TEXT_LENGTH
    assert key_from_z85(z85_key(key)) == key
    assert key_from_z85(z85_key(key).encode("ascii")) == key


def test_z85_key_matches_zmq():
    z85 = pytest.importorskip("zmq.utils.z85")
    key = bytes(range(100, 132))
    assert z85_key(key).encode("ascii") == z85.encode(key)


def test_z85_key_length():
    with pytest.raises(Base85Error):
        z85_key(bytes(31))
    with pytest.raises(Base85Error):
        key_from_z85("0" * 39)


def test_create_curve_keys():
    (public, secret) = create_curve_keys()
    assert len(public) == len(secret) == KEY_TEXT_LENGTH
    curve_pk = key_from_z85(public)
    curve_sk = key_from_z85(secret)
    assert nacl.crypto_scalarmult_base(curve_sk) == curve_pk


def test_verkey_to_curve_key():
    verkey, _ = nacl.crypto_sign_keypair()
    text = verkey_to_curve_key(base58.b58encode(verkey).decode("ascii"))
    assert key_from_z85(text) == nacl.crypto_sign_ed25519_pk_to_curve25519(verkey)
