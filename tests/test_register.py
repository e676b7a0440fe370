import pytest

from seedtotp.common.errors import EmptySecret, InvalidEncoding
from seedtotp.server.database import SecretDatabase
from seedtotp.server.register import Register
from seedtotp.server.secret_store import SqliteSecretStore


def test_register_given_secret(db_path, demo_secret):
    assert Register(db_path).register_secret(secret=f"  {demo_secret}\n") == demo_secret
    assert SqliteSecretStore(db_path).lookup("SEED") == demo_secret


def test_register_replaces_existing(db_path, demo_secret):
    register = Register(db_path)
    register.register_secret(secret="MZXW6")
    register.register_secret(secret=demo_secret)
    assert SecretDatabase(db_path).get_secret("SEED") == demo_secret


def test_register_generates_secret(db_path):
    secret = Register(db_path).register_secret("ALT")
    assert len(secret) == 32
    assert SecretDatabase(db_path).get_secret("ALT") == secret


@pytest.mark.parametrize("secret,error", [("12345678!", InvalidEncoding), ("", EmptySecret), ("M", EmptySecret)])
def test_register_rejects_unusable_secret(db_path, secret, error):
    with pytest.raises(error):
        Register(db_path).register_secret(secret=secret)
    assert SecretDatabase(db_path).list_names() == []


def test_register_requires_name(db_path, demo_secret):
    with pytest.raises(ValueError):
        Register(db_path).register_secret("", demo_secret)


def test_remove_secret(db_path, demo_secret):
    register = Register(db_path)
    register.register_secret(secret=demo_secret)
    assert register.remove_secret()
    assert not register.remove_secret()
