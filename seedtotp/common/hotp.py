"""
HOTP building blocks (RFC 4226): counter encoding, dynamic truncation
and code formatting. Used internally by the TOTP generator.
"""
import struct

from seedtotp.common.crypto_utils import HMAC_SHA1
from seedtotp.common.errors import CounterOverflow, InvalidDigitCount

MAX_DIGITS = 10
MAX_COUNTER = 2 ** 64 - 1


def encode_counter(counter: int) -> bytes:
    """Encode a counter as the 8-byte big-endian block fed to the HMAC"""
    if counter < 0 or counter > MAX_COUNTER:
        raise CounterOverflow(f"Counter {counter} does not fit in 64 unsigned bits")
    return struct.pack('>Q', counter)


def truncate(hmac_result: bytes) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3)

    The low nibble of the last byte selects a 4-byte window; the top bit
    of that window is masked off so the result is a 31-bit integer.
    """
    if len(hmac_result) != HMAC_SHA1.DIGEST_SIZE:
        raise ValueError(f"Expected a {HMAC_SHA1.DIGEST_SIZE}-byte digest, got {len(hmac_result)}")

    offset = hmac_result[-1] & 0x0F
    return ((hmac_result[offset] & 0x7F) << 24 |
            (hmac_result[offset + 1] & 0xFF) << 16 |
            (hmac_result[offset + 2] & 0xFF) << 8 |
            (hmac_result[offset + 3] & 0xFF))


def format_code(value: int, digits: int = 6) -> str:
    """Reduce a truncated value to a zero-padded code of `digits` characters"""
    if not isinstance(digits, int) or isinstance(digits, bool) or not 1 <= digits <= MAX_DIGITS:
        raise InvalidDigitCount(f"digits must be between 1 and {MAX_DIGITS}, got {digits!r}")

    code = value % (10 ** digits)
    return str(code).zfill(digits)


def hotp(key: bytes, counter: int, digits: int = 6) -> str:
    """
    Generate an HMAC-based One-Time Password

    Parameters:
    - key: raw secret bytes
    - counter: moving factor (for TOTP, the time step count)
    - digits: code width

    Returns:
    - OTP code
    """
    counter_bytes = encode_counter(counter)
    hmac_result = HMAC_SHA1.digest(key, counter_bytes)
    return format_code(truncate(hmac_result), digits)
