from wordle_chain.config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config
)


def test_get_config_by_name():
    assert get_config('testing') is TestingConfig
    assert get_config('production') is ProductionConfig
    assert get_config('Development') is DevelopmentConfig


def test_unknown_name_falls_back_to_default():
    assert get_config('staging') is DevelopmentConfig


def test_get_config_reads_app_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    assert get_config() is ProductionConfig
    assert not get_config().DEBUG

    monkeypatch.delenv('APP_ENV')
    assert get_config() is DevelopmentConfig
    assert issubclass(get_config(), Config)
