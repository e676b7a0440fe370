"""Secret provisioning adapters.

Every store answers ``lookup(key)`` with the Base32 secret text or raises
SecretNotFound. None of them modify what they read.
"""

import logging
import os
from abc import ABC, abstractmethod

import keyring
from keyring.errors import KeyringError

from seedtotp.common.errors import ConfigurationError, SecretNotFound
from seedtotp.server.database import SecretDatabase

logger = logging.getLogger(__name__)


class SecretStore(ABC):
    """Synchronous key -> secret lookup."""

    @abstractmethod
    def lookup(self, key: str) -> str:
        raise NotImplementedError


class MemorySecretStore(SecretStore):
    def __init__(self, secrets=None):
        self.secrets = dict(secrets or {})

    def lookup(self, key: str) -> str:
        value = self.secrets.get(key)
        if not value:
            raise SecretNotFound(key)
        return value


class EnvSecretStore(SecretStore):
    """Reads ``<prefix><key>`` from the process environment."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def lookup(self, key: str) -> str:
        value = os.environ.get(self.prefix + key)
        if not value:
            raise SecretNotFound(self.prefix + key)
        return value


class KeyringSecretStore(SecretStore):
    """Reads secrets from the system keyring under a fixed service name."""

    def __init__(self, service: str = "seedtotp"):
        self.service = service

    def lookup(self, key: str) -> str:
        try:
            value = keyring.get_password(self.service, key)
        except KeyringError as e:
            logger.debug("Keyring backend failed for %s/%s: %s", self.service, key, type(e).__name__)
            raise SecretNotFound(key) from e
        if not value:
            raise SecretNotFound(key)
        return value


class SqliteSecretStore(SecretStore):
    def __init__(self, db_path: str = "secrets.db"):
        self.database = SecretDatabase(db_path)

    def lookup(self, key: str) -> str:
        value = self.database.get_secret(key)
        if not value:
            raise SecretNotFound(key)
        return value


def build_store(settings) -> SecretStore:
    """Create the store named by ``settings.store``."""
    if settings.store == "env":
        return EnvSecretStore(settings.env_prefix)
    if settings.store == "keyring":
        return KeyringSecretStore(settings.keyring_service)
    if settings.store == "sqlite":
        return SqliteSecretStore(settings.db_path)
    raise ConfigurationError(f"Unknown secret store '{settings.store}'")
