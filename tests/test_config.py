from pagewise.core.config import PaginationConfig, Settings, effective_max_size
from pagewise.core.pagination import PaginationRequest


def test_settings_pagination_defaults(monkeypatch):
    monkeypatch.delenv("PAGINATION_MIN_SIZE", raising=False)
    monkeypatch.delenv("PAGINATION_MAX_SIZE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.pagination_min_size == 10
    assert settings.pagination_max_size == 50


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PAGINATION_MIN_SIZE", "5")
    monkeypatch.setenv("PAGINATION_MAX_SIZE", "200")
    settings = Settings(_env_file=None)
    config = PaginationConfig.from_settings(settings)
    assert config.min_size == 5
    assert config.max_size == 200
    assert config.effective_max_size == 200


def test_zero_max_size_uses_default():
    assert PaginationConfig(max_size=0).effective_max_size == 50
    assert PaginationConfig(max_size=-3).effective_max_size == 50


def test_effective_max_size_shared_by_config_and_request():
    for max_size in (-3, 0, 1, 20, 50, 200):
        expected = effective_max_size(max_size)
        assert expected == (max_size if max_size > 0 else 50)
        assert PaginationConfig(max_size=max_size).effective_max_size == expected
        assert PaginationRequest(max_size=max_size).effective_max_size == expected


def test_cors_origins_parsing(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert Settings(_env_file=None).cors_origins == ["https://a.example", "https://b.example"]
    monkeypatch.setenv("CORS_ORIGINS", '["https://c.example"]')
    assert Settings(_env_file=None).cors_origins == ["https://c.example"]
