import logging

from settings import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("CONVERTER_PAGE_TITLE", "CONVERTER_LAYOUT", "CONVERTER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CONVERTER_PAGE_TITLE", "Конвертер")
    monkeypatch.setenv("CONVERTER_LAYOUT", "Wide")
    monkeypatch.setenv("CONVERTER_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.page_title == "Конвертер"
    assert settings.layout == "wide"
    assert settings.log_level == logging.DEBUG


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("CONVERTER_LAYOUT", "sideways")
    monkeypatch.setenv("CONVERTER_LOG_LEVEL", "LOUD")
    settings = load_settings()
    assert settings.layout == "centered"
    assert settings.log_level == logging.WARNING
