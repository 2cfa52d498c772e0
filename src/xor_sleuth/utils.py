import base64
import binascii
from typing import Literal, Union

from xor_sleuth.errors import InputFormatError

CiphertextFormat = Union[Literal[
    "hex",
    "raw",
    "b64",
    "b64_urlsafe",
], str]

CIPHERTEXT_FORMATS = ("hex", "raw", "b64", "b64_urlsafe")
TRIM_BYTES = b" \n\t"


def trim_input(data: bytes) -> bytes:
    """Strip spaces, newlines and tabs from both ends."""
    return data.strip(TRIM_BYTES)


def xor_bytes(buffer: bytes, key: int) -> bytes:
    """XOR every byte of buffer with the single key byte."""
    return bytes(b ^ key for b in buffer)


def parse_key_byte(text: str) -> int:
    """Parse a hex key byte such as "4c" or "0x4C"."""
    try:
        key = int(text, 16)
    except ValueError:
        raise InputFormatError(f"Invalid hex key byte: {text!r}")
    if not 0 <= key <= 0xFF:
        raise InputFormatError(f"Key must fit in one byte: {text!r}")
    return key


def hex_decode(data: bytes) -> bytes:
    """Strict hex: no whitespace between digit pairs, even length."""
    try:
        return binascii.unhexlify(data)
    except (binascii.Error, ValueError) as e:
        raise InputFormatError(f"Invalid hex ciphertext: {e}")


def b64_decode(data: bytes, *, urlsafe: bool = False) -> bytes:
    """Decodes standard or URL-safe b64. Tolerates missing '=' padding."""
    missing = len(data) % 4
    if missing:
        data += b"=" * (4 - missing)

    try:
        if urlsafe:
            return base64.urlsafe_b64decode(data)
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise InputFormatError(f"Invalid base64 ciphertext: {e}")


def decode_ciphertext(data: bytes, format: CiphertextFormat) -> bytes:
    """Trim then decode the ciphertext from the given format."""
    data = trim_input(data)
    if format == "hex":
        return hex_decode(data)
    elif format == "raw":
        return data
    elif format == "b64":
        return b64_decode(data)
    elif format == "b64_urlsafe":
        return b64_decode(data, urlsafe=True)
    else:
        raise ValueError(f"Invalid ciphertext format: {format}")


def load_ciphertext(file_path: str, format: CiphertextFormat = "hex") -> bytes:
    """Load the ciphertext from a file."""
    with open(file_path, "rb") as f:
        data = f.read()
    return decode_ciphertext(data, format)
