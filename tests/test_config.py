from __future__ import annotations

import pytest

from casekit.config import CliConfig
from casekit.styles import CaseStyle


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CASEKIT_DEFAULT_STYLE", raising=False)
    monkeypatch.delenv("CASEKIT_SPLIT_ON_DOT", raising=False)


def test_defaults():
    config = CliConfig.from_env()
    assert config.default_style is CaseStyle.KEBAB
    assert config.split_on_dot is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CASEKIT_DEFAULT_STYLE", " SNAKE_CASE ")
    monkeypatch.setenv("CASEKIT_SPLIT_ON_DOT", "On")
    config = CliConfig.from_env()
    assert config.default_style is CaseStyle.SNAKE
    assert config.split_on_dot is True


def test_unrecognised_flag_keeps_default(monkeypatch):
    monkeypatch.setenv("CASEKIT_SPLIT_ON_DOT", "maybe")
    assert CliConfig.from_env().split_on_dot is False


def test_unknown_style_raises(monkeypatch):
    monkeypatch.setenv("CASEKIT_DEFAULT_STYLE", "sentence")
    with pytest.raises(ValueError, match="CASEKIT_DEFAULT_STYLE"):
        CliConfig.from_env()
