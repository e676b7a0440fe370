class TotpError(ValueError):
    """Base class for every failure raised while producing a TOTP code"""


class InvalidEncoding(TotpError):
    """The secret contains a character outside the Base32 alphabet"""


class EmptySecret(TotpError):
    """The secret decoded to zero bytes"""


class CounterOverflow(TotpError):
    """The time counter cannot be encoded as an unsigned 64-bit integer"""


class InvalidDigitCount(TotpError):
    """The requested code width is outside 1..10"""


class InvalidTimeStep(TotpError):
    """The time step is not a positive number of seconds"""


class SecretNotFound(TotpError):
    """The secret store has no usable value for the requested key"""

    def __init__(self, key):
        self.key = key
        super().__init__(f"No secret stored under '{key}'")


class ConfigurationError(TotpError):
    """Settings name an unknown store or carry an unusable value"""
