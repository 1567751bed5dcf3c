import pytest

from plugcli.detect import detect


@pytest.mark.parametrize("guess", [None, "", "daemon", "help", "psgi"])
def test_no_marker_returns_guess(guess):
    assert detect(guess, {}) == guess
    assert detect(guess, {"HOME": "/root", "PLUGCLI_MODE": "production"}) == guess


@pytest.mark.parametrize("guess", [None, "", "daemon", "cgi"])
def test_psgi_marker(guess):
    assert detect(guess, {"PSGI_ENV": "production"}) == "psgi"


def test_psgi_marker_wins_over_cgi():
    env = {"PSGI_ENV": "", "PATH_INFO": "/", "GATEWAY_INTERFACE": "CGI/1.1"}
    assert detect("daemon", env) == "psgi"


@pytest.mark.parametrize("marker", ["PATH_INFO", "GATEWAY_INTERFACE"])
def test_cgi_markers(marker):
    assert detect("daemon", {marker: "CGI/1.1"}) == "cgi"
    # presence is enough
    assert detect(None, {marker: ""}) == "cgi"


def test_detect_is_repeatable():
    env = {"GATEWAY_INTERFACE": "CGI/1.1"}
    assert [detect("x", env) for _ in range(3)] == ["cgi"] * 3


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.delenv("PSGI_ENV", raising=False)
    monkeypatch.delenv("PATH_INFO", raising=False)
    monkeypatch.setenv("GATEWAY_INTERFACE", "CGI/1.1")
    assert detect("daemon") == "cgi"

    monkeypatch.delenv("GATEWAY_INTERFACE")
    assert detect("daemon") == "daemon"
