import importlib

import pytest

from config.settings import as_bool, as_float, as_int, from_secrets_or_env


@pytest.mark.parametrize("raw", ["1", "true", "TRUE", " yes ", "on", "t", "y"])
def test_as_bool_truthy(raw):
    assert as_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
def test_as_bool_falsy(raw):
    assert as_bool(raw) is False


def test_as_bool_default():
    assert as_bool(None, default=True) is True


def test_as_float_and_int_fall_back_on_garbage():
    assert as_float("2.5", 1.0) == 2.5
    assert as_float("warm", 1.0) == 1.0
    assert as_float(None, 8.0) == 8.0
    assert as_int("7", 3) == 7
    assert as_int("7.5", 3) == 3


def test_from_secrets_or_env_reads_environment(monkeypatch):
    monkeypatch.setenv("AGRILINK_TEST_KEY", "value")
    assert from_secrets_or_env("AGRILINK_TEST_KEY") == "value"
    assert from_secrets_or_env("AGRILINK_MISSING_KEY", "fallback") == "fallback"


def test_environment_comes_from_env(monkeypatch):
    from config import settings

    monkeypatch.setenv("ENV", "staging")
    try:
        assert importlib.reload(settings).ENVIRONMENT == "staging"
        monkeypatch.delenv("ENV")
        assert importlib.reload(settings).ENVIRONMENT == "development"
    finally:
        monkeypatch.undo()
        importlib.reload(settings)
