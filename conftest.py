import pytest

RFC4226_KEY = b"12345678901234567890"
RFC6238_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
DEMO_SECRET = "JBSWY3DPEHPK3PXP"

SETTINGS_VARIABLES = (
    "SEEDTOTP_STORE",
    "SEEDTOTP_DB_PATH",
    "SEEDTOTP_KEYRING_SERVICE",
    "SEEDTOTP_ENV_PREFIX",
    "SEEDTOTP_SECRET_KEY",
    "SEEDTOTP_AUDIT_LOG",
    "SEED",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in SETTINGS_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def demo_secret():
    return DEMO_SECRET


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "secrets.db")
