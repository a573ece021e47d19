"""Tests for the `python -m elevated` entry point."""

from __future__ import annotations

import json
import logging

import pytest
from elevated import _config as config_module
from elevated.__main__ import main


@pytest.fixture(autouse=True)
def reset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv('ELEVATED_LOG_LEVEL', raising=False)
    monkeypatch.delenv('ELEVATED_LOG_FORMAT', raising=False)


def test_main_returns_zero() -> None:
    assert main([]) == 0


def test_main_is_silent_without_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    """With no ELEVATED_LOG_LEVEL nothing is written to either stream."""
    main(['a', 'b'])
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == ''


def test_unknown_format_warning_stays_off_stdout(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv('ELEVATED_LOG_FORMAT', 'yaml')
    with caplog.at_level(logging.WARNING):
        assert main([]) == 0
    assert capsys.readouterr().out == ''
    assert any('yaml' in r.getMessage() for r in caplog.records)


def test_main_initializes_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('ELEVATED_LOG_LEVEL', 'DEBUG')
    main(['--ignored'])
    assert config_module.get_config().log_level == 'DEBUG'


def test_main_logs_start_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv('ELEVATED_LOG_LEVEL', 'DEBUG')

    main(['a', 'b'])

    captured = capsys.readouterr()
    assert captured.out == ''
    events = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
    started = [e for e in events if e['event'] == 'started']
    assert len(started) == 1
    assert started[0]['argv'] == ['a', 'b']
    assert started[0]['log_level'] == 'DEBUG'
