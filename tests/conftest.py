import pytest
from keyring.errors import PasswordDeleteError

from ghswitch.lib import paths


@pytest.fixture
def state_dir(monkeypatch, tmp_path):
    """Isolated state directory per test instead of ~/.config/gh-token-switch."""
    directory = tmp_path / "gh-token-switch"
    monkeypatch.setenv("GHSWITCH_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def state_file(state_dir):
    return paths.config_file()


class FakeKeyring:
    """In-memory stand-in for the keyring module's password functions."""

    def __init__(self):
        self.entries: dict[tuple[str, str], str] = {}

    def get_password(self, service, username):
        return self.entries.get((service, username))

    def set_password(self, service, username, password):
        self.entries[(service, username)] = password

    def delete_password(self, service, username):
        if (service, username) not in self.entries:
            raise PasswordDeleteError("Password not found")
        del self.entries[(service, username)]


@pytest.fixture
def fake_keyring(mocker):
    fake = FakeKeyring()
    mocker.patch("ghswitch.lib.keychain.keyring.get_password", side_effect=fake.get_password)
    mocker.patch("ghswitch.lib.keychain.keyring.set_password", side_effect=fake.set_password)
    mocker.patch(
        "ghswitch.lib.keychain.keyring.delete_password", side_effect=fake.delete_password
    )
    return fake


@pytest.fixture
def no_notify(mocker):
    return mocker.patch("ghswitch.lib.notify.send_notification")
