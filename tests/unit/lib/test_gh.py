import subprocess

import pytest

from ghswitch.errors import InstallFailed, Unavailable
from ghswitch.lib import gh


def test_read_active_secret(mocker):
    run = mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess([], 0, stdout="gho_token\n", stderr=""),
    )

    assert gh.read_active_secret() == "gho_token\n"
    run.assert_called_once_with(["gh", "auth", "token"], capture_output=True, text=True)


def test_read_active_secret_not_logged_in(mocker):
    mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess([], 1, stdout="", stderr="not logged in"),
    )

    with pytest.raises(Unavailable, match="'gh auth token' failed"):
        gh.read_active_secret()


def test_read_active_secret_gh_missing(mocker):
    mocker.patch("subprocess.run", side_effect=FileNotFoundError("gh"))

    with pytest.raises(Unavailable, match="is gh installed"):
        gh.read_active_secret()


def test_install_secret_pipes_token(mocker):
    run = mocker.patch("subprocess.run", return_value=subprocess.CompletedProcess([], 0))

    gh.install_secret("gho_token")

    run.assert_called_once_with(
        ["gh", "auth", "login", "--hostname", "github.com", "--with-token"],
        input="gho_token",
        text=True,
    )


def test_install_secret_failure(mocker):
    mocker.patch("subprocess.run", return_value=subprocess.CompletedProcess([], 1))

    with pytest.raises(InstallFailed):
        gh.install_secret("gho_token")


def test_install_secret_gh_missing(mocker):
    mocker.patch("subprocess.run", side_effect=FileNotFoundError("gh"))

    with pytest.raises(InstallFailed, match="is gh installed"):
        gh.install_secret("gho_token")
