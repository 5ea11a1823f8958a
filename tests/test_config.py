import logging
from pathlib import Path

import pytest

from homebank.config import DEFAULT_BASE_URL, Settings, get_settings
from homebank.errors import ApiError
from homebank.logging_config import LOG_FILE_NAME, ROOT_LOGGER_NAME, setup_logging


@pytest.fixture
def clean_settings(monkeypatch):
    for name in (
        "HOMEBANK_API_BASE_URL",
        "HOMEBANK_REQUEST_TIMEOUT",
        "HOMEBANK_STRICT_RECONCILE",
        "LOG_LEVEL",
        "HOMEBANK_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(clean_settings):
    settings = get_settings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.request_timeout == 30.0
    assert settings.strict_reconcile is False
    assert settings.log_level == "INFO"


def test_environment_overrides(clean_settings):
    clean_settings.setenv("HOMEBANK_API_BASE_URL", "https://bank.example.com/api/")
    clean_settings.setenv("HOMEBANK_REQUEST_TIMEOUT", "0")
    clean_settings.setenv("HOMEBANK_STRICT_RECONCILE", "yes")
    clean_settings.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.base_url == "https://bank.example.com/api"
    assert settings.request_timeout is None
    assert settings.strict_reconcile is True
    assert settings.log_level == "DEBUG"


def test_settings_are_cached(clean_settings):
    first = get_settings()
    clean_settings.setenv("HOMEBANK_API_BASE_URL", "http://other")
    assert get_settings() is first


def test_bad_timeout(clean_settings):
    clean_settings.setenv("HOMEBANK_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        get_settings()


def test_setup_logging_writes_file_once(tmp_path):
    settings = Settings(log_dir=tmp_path / "logs", log_level="DEBUG")

    setup_logging(settings)
    log_file = setup_logging(settings)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    try:
        assert log_file == Path(tmp_path / "logs" / LOG_FILE_NAME)
        assert len(logger.handlers) == 2
        assert sorted(h.level for h in logger.handlers) == [logging.DEBUG, logging.WARNING]
        logging.getLogger("homebank.reconciler").warning("balance drift")
        for handler in logger.handlers:
            handler.flush()
        assert "balance drift" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_api_error_defaults():
    err = ApiError()
    assert err.as_dict() == {"status": "00", "statusText": "Ocurrió un error", "err": True}
    assert ApiError.from_response(None).status == "00"
