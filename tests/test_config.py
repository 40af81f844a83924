import pytest

from walkgraph.config import AppSettings, ConfigError, get_settings


def test_defaults():
    settings = get_settings()
    assert settings.app_name == "walkgraph"
    assert settings.logging.level == "WARNING"
    assert settings.demo.origin == "A"
    assert settings.demo.kind == "both"


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WALKGRAPH_DEMO__ORIGIN", "E")
    monkeypatch.setenv("WALKGRAPH_LOGGING__LEVEL", "DEBUG")

    settings = AppSettings()
    assert settings.demo.origin == "E"
    assert settings.logging.level == "DEBUG"


def test_init_kwargs_win_over_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WALKGRAPH_DEBUG", "false")
    settings = get_settings(debug=True)
    assert settings.debug is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_value_raises_config_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WALKGRAPH_DEMO__KIND", "sideways")
    with pytest.raises(ConfigError, match="Invalid walkgraph configuration"):
        get_settings()
