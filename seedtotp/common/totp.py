import math
import time
import hmac
import logging

from seedtotp.common import base32
from seedtotp.common.crypto_utils import SecurePRNG
from seedtotp.common.errors import CounterOverflow, EmptySecret, InvalidTimeStep
from seedtotp.common.hotp import hotp

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30
DEFAULT_DIGITS = 6


def time_counter(timestamp, time_step=DEFAULT_PERIOD):
    """Number of whole time steps elapsed since the Unix epoch"""
    if time_step <= 0:
        raise InvalidTimeStep(f"time_step must be positive, got {time_step}")
    if not math.isfinite(timestamp):
        raise CounterOverflow(f"Timestamp {timestamp} has no time step")
    return int(timestamp // time_step)


def generate(secret, time_step=DEFAULT_PERIOD, digits=DEFAULT_DIGITS, timestamp=None):
    """
    Generate the TOTP code for a Base32 secret (RFC 6238, HMAC-SHA1)

    Parameters:
    - secret: Base32 encoded shared secret
    - time_step: seconds each code stays valid (default: 30)
    - digits: number of digits in the code (default: 6)
    - timestamp: UNIX timestamp (default: current time)

    Returns:
    - Zero-padded code of exactly `digits` characters
    """
    if timestamp is None:
        timestamp = time.time()

    counter = time_counter(timestamp, time_step)
    key = base32.decode(secret)
    if not key:
        raise EmptySecret("Secret decodes to an empty key")

    return hotp(key, counter, digits)


class TOTP:
    """
    Time-based One-Time Password generator according to RFC 6238
    """
    def __init__(self, secret, digits=DEFAULT_DIGITS, period=DEFAULT_PERIOD):
        """
        Initialize a new TOTP instance

        Parameters:
        - secret: Base32 encoded secret key
        - digits: Number of digits in the generated code (default: 6)
        - period: Time period in seconds for which a code is valid (default: 30)
        """
        self.secret = secret
        self.digits = digits
        self.period = period

    @staticmethod
    def generate_secret(length=20):
        """Generate a random Base32 secret of `length` bytes"""
        return SecurePRNG.generate_secret(length)

    def timecode(self, timestamp):
        return time_counter(timestamp, self.period)

    def at(self, timestamp):
        """
        Generate a TOTP code for a specific timestamp

        Parameters:
        - timestamp: UNIX timestamp

        Returns:
        - TOTP code for the given timestamp
        """
        return generate(self.secret, self.period, self.digits, timestamp)

    def now(self):
        return self.at(time.time())

    def remaining(self, timestamp=None):
        """Seconds left before the code for `timestamp` expires"""
        if timestamp is None:
            timestamp = time.time()
        return self.period - (timestamp % self.period)

    def verify(self, code, timestamp=None):
        """
        Verify a TOTP code against the time step containing `timestamp`

        Only the exact step is accepted, no neighbouring windows.

        Parameters:
        - code: The code to verify; integers are zero-padded to `digits`
        - timestamp: Timestamp to check against (default: current time)

        Returns:
        - True if the code is valid, False otherwise
        """
        if timestamp is None:
            timestamp = time.time()

        expected = self.at(timestamp)
        if isinstance(code, int) and not isinstance(code, bool) and code >= 0:
            code = str(code).zfill(self.digits)
        code = str(code).strip()
        if len(code) != self.digits or not code.isdigit():
            logger.debug("Rejected malformed code of length %d", len(code))
            return False

        return hmac.compare_digest(code.encode(), expected.encode())
