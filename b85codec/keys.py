from typing import Tuple, Union

import base58
import libnacl as nacl

from .codec import decode, encode
from .encoding import Z85
from .error import Base85Error

KEY_LENGTH = 32
KEY_TEXT_LENGTH = 40


def z85_key(key: bytes) -> str:
    if len(key) != KEY_LENGTH:
        raise Base85Error(f"invalid key: must be {KEY_LENGTH} bytes in length")
    return encode(key, Z85).decode("ascii")


def key_from_z85(text: Union[str, bytes]) -> bytes:
    if isinstance(text, str):
        text = text.encode("ascii")
    if len(text) != KEY_TEXT_LENGTH:
        raise Base85Error(
            f"invalid key text: must be {KEY_TEXT_LENGTH} characters in length"
        )
    return decode(text, Z85)


def create_curve_keys() -> Tuple[str, str]:
    curve_pk, curve_sk = nacl.crypto_box_keypair()
    return z85_key(curve_pk), z85_key(curve_sk)


def verkey_to_curve_key(verkey: str) -> str:
    curve_pk = nacl.crypto_sign_ed25519_pk_to_curve25519(base58.b58decode(verkey))
    return z85_key(curve_pk)
