import logging
import os
import sys

from .encoding import ENCODINGS, get_encoding
from .error import Base85Error
from .util import decode_str, encode_lines

DEFAULT_NAME = "rfc1924"


def run_encode(name: str, line_length: int = None):
    data = sys.stdin.buffer.read()
    encoded = encode_lines(
        data, get_encoding(name), line_length=line_length, line_ending="\n"
    )
    sys.stdout.buffer.write(encoded + b"\n")


def run_decode(name: str):
    text = sys.stdin.buffer.read()
    sys.stdout.buffer.write(decode_str(text, get_encoding(name), ignore_unknown=True))


def main(argv: list) -> int:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("B85CODEC_DEBUG") else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if len(argv) < 1:
        raise SystemExit("Missing required arguments (action)")
    action = argv[0]
    if len(argv) > 1:
        name = argv[1]
    else:
        name = os.environ.get("B85CODEC_ENCODING", DEFAULT_NAME)
    try:
        if action == "encode":
            line_length = int(argv[2]) if len(argv) > 2 else None
            run_encode(name, line_length)
        elif action == "decode":
            run_decode(name)
        elif action == "keys":
            try:
                from .keys import create_curve_keys
            except (ImportError, OSError) as ex:
                raise SystemExit(f"keys needs libnacl and base58: {ex}") from None
            (public, secret) = create_curve_keys()
            print("public:", public)
            print("secret:", secret)
        elif action == "list":
            for enc_name in ENCODINGS:
                print(enc_name)
        else:
            raise SystemExit(f"Unsupported action {action}")
    except Base85Error as ex:
        raise SystemExit(f"{action} failed: {ex}") from None
    except ValueError as ex:
        raise SystemExit(f"Invalid argument: {ex}") from None
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
