import secrets

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from seedtotp.common import base32

class HMAC_SHA1:
    """HMAC-SHA1 operations backed by the cryptography library"""

    DIGEST_SIZE = 20

    @staticmethod
    def _new(key):
        if isinstance(key, str):
            key = key.encode('utf-8')
        return crypto_hmac.HMAC(key, hashes.SHA1())

    @staticmethod
    def digest(key, message):
        """
        Compute an HMAC using SHA-1 (RFC 2104)

        Args:
            key (bytes or str): The key for HMAC
            message (bytes or str): The message to authenticate

        Returns:
            bytes: The 20-byte raw digest
        """
        if isinstance(message, str):
            message = message.encode('utf-8')

        h = HMAC_SHA1._new(key)
        h.update(message)
        return h.finalize()

    @staticmethod
    def verify(key, message, signature):
        """
        Verify an HMAC-SHA1 signature

        Args:
            key (bytes or str): The key for HMAC
            message (bytes or str): The message that was authenticated
            signature (bytes): The raw digest to check

        Returns:
            bool: True if signature is valid, False otherwise
        """
        if isinstance(message, str):
            message = message.encode('utf-8')

        h = HMAC_SHA1._new(key)
        h.update(message)
        # Constant-time comparison happens inside cryptography
        try:
            h.verify(signature)
        except InvalidSignature:
            return False
        return True

class SecurePRNG:
    """Cryptographically secure pseudorandom number generator"""

    @staticmethod
    def generate_secret(length=20):
        """
        Generate a random Base32 shared secret

        Args:
            length (int): Key length in bytes, 20 (160 bits) by default

        Returns:
            str: Base32 secret without padding
        """
        if length < 10:
            raise ValueError("Secrets should be at least 80 bits")
        return base32.encode(secrets.token_bytes(length))
