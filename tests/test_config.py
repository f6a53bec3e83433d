from pathlib import Path

import pytest
from pydantic import ValidationError

from jenkins_tracker.config import JenkinsSettings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("HOST", "USER", "TOKEN", "CLIENT_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"JENKINS_{name}", raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JENKINS_HOST", "https://ci.example.com//")
    monkeypatch.setenv("JENKINS_USER", "bot")
    monkeypatch.setenv("JENKINS_TOKEN", "11b053abc")
    monkeypatch.setenv("JENKINS_LOG_LEVEL", "debug")

    settings = JenkinsSettings()  # type: ignore[call-arg]

    assert settings.host == "https://ci.example.com"
    assert settings.user == "bot"
    assert settings.token == "11b053abc"
    assert settings.client_timeout == 60
    assert settings.log_level == "DEBUG"


def test_settings_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "JENKINS_HOST=http://localhost:8080\n"
        "JENKINS_USER=admin\n"
        "JENKINS_TOKEN=secret\n"
        "JENKINS_CLIENT_TIMEOUT=2.5\n"
    )

    settings = JenkinsSettings()  # type: ignore[call-arg]

    assert settings.host == "http://localhost:8080"
    assert settings.client_timeout == 2.5


def test_missing_credentials_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JENKINS_HOST", "http://localhost:8080")

    with pytest.raises(ValidationError) as exc_info:
        JenkinsSettings()  # type: ignore[call-arg]

    assert {error["loc"][0] for error in exc_info.value.errors()} == {"user", "token"}


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JENKINS_HOST", "http://localhost:8080")
    monkeypatch.setenv("JENKINS_USER", "bot")
    monkeypatch.setenv("JENKINS_TOKEN", "secret")
    monkeypatch.setenv("JENKINS_LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValidationError):
        JenkinsSettings()  # type: ignore[call-arg]
