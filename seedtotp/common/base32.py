import base64
from typing import Union

from seedtotp.common.errors import InvalidEncoding

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
# ASCII lower case only: str.upper() folds some non-ASCII letters into A-Z
_VALUES = {char: index for index, char in enumerate(ALPHABET)}
_VALUES.update({char: index for index, char in enumerate(ALPHABET.lower())})


def decode(encoded: Union[str, bytes]) -> bytes:
    """
    Decode an RFC 4648 Base32 string into raw key bytes

    Padding characters are ignored wherever they appear, lower case is
    accepted, and trailing bits that do not fill a whole byte are dropped.

    Parameters:
    - encoded: Base32 text (str, or ASCII bytes)

    Returns:
    - Decoded bytes (empty for empty input)
    """
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode('ascii')
        except UnicodeDecodeError:
            raise InvalidEncoding("Secret is not ASCII Base32 text") from None

    output = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(encoded):
        if char == "=":
            continue
        value = _VALUES.get(char)
        if value is None:
            # Report where, never what: the input is a secret
            raise InvalidEncoding(f"Invalid Base32 character at position {position}")
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            output.append((buffer >> (bits - 8)) & 0xFF)
            bits -= 8
            buffer &= (1 << bits) - 1

    return bytes(output)


def encode(data: bytes, padding: bool = False) -> str:
    """Encode bytes as Base32 text, without '=' padding unless asked for"""
    encoded = base64.b32encode(data).decode('utf-8')
    return encoded if padding else encoded.rstrip("=")


def is_valid(encoded: Union[str, bytes]) -> bool:
    try:
        decode(encoded)
    except InvalidEncoding:
        return False
    return True
