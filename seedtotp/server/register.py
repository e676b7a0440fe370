from seedtotp.common import base32
from seedtotp.common.crypto_utils import SecurePRNG
from seedtotp.common.errors import EmptySecret
from seedtotp.server.database import SecretDatabase

class Register:
    def __init__(self, db_path="secrets.db"):
        self.db_path = db_path
        self.database = SecretDatabase(db_path)

    def register_secret(self, name="SEED", secret=None):
        """
        Store a Base32 secret in the SQLite secret store.

        A fresh 160-bit secret is generated when none is given. The secret is
        validated before anything is written.

        Returns:
            str: The stored secret
        """
        if not name:
            raise ValueError("Secret name must not be empty")

        if secret is None:
            secret = SecurePRNG.generate_secret()
        secret = secret.strip()

        if not base32.decode(secret):
            raise EmptySecret("Refusing to store a secret that decodes to no bytes")

        self.database.put_secret(name, secret)
        return secret

    def remove_secret(self, name="SEED"):
        return self.database.delete_secret(name)
