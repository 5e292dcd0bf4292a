import logging

from config import DEFAULT_LOG_FORMAT, Config


def test_defaults(monkeypatch):
    for name in ("OCR_CONF", "TESSERACT_CONFIG", "OCR_LANG", "MULTIPASS", "LOW_CONF_RETRY", "DEBUG_LOGGING", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config == Config()
    assert config.ocr_confidence_threshold == 0.35
    assert config.tesseract_config == "--oem 3 --psm 6"
    assert config.multipass_enabled is True
    assert config.log_format == DEFAULT_LOG_FORMAT
    assert config.log_level == logging.INFO


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("OCR_CONF", "0.6")
    monkeypatch.setenv("OCR_LANG", "eng+spa")
    monkeypatch.setenv("MULTIPASS", "FALSE")
    monkeypatch.setenv("LOW_CONF_RETRY", "0.1")
    monkeypatch.setenv("DEBUG_LOGGING", "True")
    config = Config.from_env()
    assert config.ocr_confidence_threshold == 0.6
    assert config.ocr_language == "eng+spa"
    assert config.multipass_enabled is False
    assert config.low_confidence_retry_threshold == 0.1
    assert config.log_level == logging.DEBUG
