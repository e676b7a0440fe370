"""Settings for the secret store and audit log, read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from seedtotp.common.errors import ConfigurationError

STORES = ("env", "keyring", "sqlite")


@dataclass(frozen=True)
class Settings:
    store: str = "env"
    db_path: str = "secrets.db"
    keyring_service: str = "seedtotp"
    env_prefix: str = ""
    secret_key: str = "SEED"
    audit_log: Optional[str] = None


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from SEEDTOTP_* variables, loading a .env file first."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    store = os.getenv("SEEDTOTP_STORE", "env").strip().lower()
    if store not in STORES:
        raise ConfigurationError(f"Unknown secret store '{store}'. Must be one of: {', '.join(STORES)}")

    secret_key = os.getenv("SEEDTOTP_SECRET_KEY", "SEED")
    if not secret_key:
        raise ConfigurationError("SEEDTOTP_SECRET_KEY must not be empty")

    return Settings(
        store=store,
        db_path=os.getenv("SEEDTOTP_DB_PATH", "secrets.db"),
        keyring_service=os.getenv("SEEDTOTP_KEYRING_SERVICE", "seedtotp"),
        env_prefix=os.getenv("SEEDTOTP_ENV_PREFIX", ""),
        secret_key=secret_key,
        audit_log=os.getenv("SEEDTOTP_AUDIT_LOG") or None,
    )
