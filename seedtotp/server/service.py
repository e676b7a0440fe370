"""Public entry point: the current code for the secret stored under SEED."""

import logging

from seedtotp.common.errors import TotpError
from seedtotp.common.totp import generate
from seedtotp.server.audit_logger import AuditLogger
from seedtotp.server.config import load_settings
from seedtotp.server.secret_store import build_store

logger = logging.getLogger(__name__)

TIME_STEP = 30
DIGITS = 6


class TotpService:
    def __init__(self, store, audit_logger=None, secret_key="SEED"):
        self.store = store
        self.audit_logger = audit_logger or AuditLogger()
        self.secret_key = secret_key

    def get_totp(self, timestamp=None):
        """
        Look up the shared secret and return its current 6-digit code.

        Raises:
            SecretNotFound: the store has no secret under the configured key
            InvalidEncoding, EmptySecret: the stored secret is unusable
        """
        action = f"generate TOTP for '{self.secret_key}'"
        try:
            secret = self.store.lookup(self.secret_key)
            code = generate(secret, TIME_STEP, DIGITS, timestamp)
        except TotpError as e:
            self.audit_logger.log_failure(type(self.store).__name__, action, e)
            raise
        self.audit_logger.log_action(type(self.store).__name__, action)
        return code


def get_totp(store=None, settings=None, timestamp=None):
    """Generate the current code using configured (or supplied) collaborators."""
    if settings is None:
        settings = load_settings()
    if store is None:
        store = build_store(settings)
    logger.debug("Using %s for key %s", type(store).__name__, settings.secret_key)

    service = TotpService(store, AuditLogger(settings.audit_log), settings.secret_key)
    return service.get_totp(timestamp)
