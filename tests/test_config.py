import pytest
from pydantic import ValidationError

from asciigraph import GraphConfig, MinToMax, ZeroToMax
from asciigraph.config import Settings, get_settings


def test_defaults_match_default_graph_config(clean_env):
    settings = get_settings()
    assert settings.to_graph_config() == GraphConfig()
    assert settings.log_level == "WARNING"
    assert settings.enable_colour is True


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("ASCIIGRAPH_MAX_WIDTH", "100")
    monkeypatch.setenv("ASCIIGRAPH_MAX_HEIGHT", "12")
    monkeypatch.setenv("ASCIIGRAPH_PLOT_SYMBOL", "*")
    monkeypatch.setenv("ASCIIGRAPH_Y_RANGE", "zero_to_max")
    monkeypatch.setenv("ASCIIGRAPH_ENABLE_COLOUR", "false")

    settings = get_settings()
    config = settings.to_graph_config()

    assert config == GraphConfig(max_width=100, max_height=12, plot_symbol="*", y_range=ZeroToMax())
    assert settings.enable_colour is False


def test_dotenv_file_is_read(clean_env):
    (clean_env / ".env").write_text("ASCIIGRAPH_MAX_HEIGHT=9\nASCIIGRAPH_Y_RANGE=min_to_max\n")
    config = get_settings().to_graph_config()
    assert config.max_height == 9
    assert config.y_range == MinToMax()


def test_environment_wins_over_dotenv(clean_env, monkeypatch):
    (clean_env / ".env").write_text("ASCIIGRAPH_MAX_HEIGHT=9\n")
    monkeypatch.setenv("ASCIIGRAPH_MAX_HEIGHT", "7")
    assert get_settings().max_height == 7


def test_get_settings_is_not_cached(clean_env, monkeypatch):
    first = get_settings()
    monkeypatch.setenv("ASCIIGRAPH_MAX_WIDTH", "60")
    assert get_settings().max_width == 60
    assert first.max_width == 80


def test_invalid_y_range_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("ASCIIGRAPH_Y_RANGE", "sideways")
    with pytest.raises(ValidationError):
        Settings()


def test_summary_and_logging(clean_env, caplog):
    settings = get_settings()
    with caplog.at_level("DEBUG", logger="asciigraph.config"):
        settings.log_configuration()

    summary = settings.get_summary()
    assert summary["max_width"] == 80
    assert summary["y_range"] == "min_to_max"
    assert "max_height: 5" in caplog.text


def test_log_level_normalised(clean_env, monkeypatch):
    monkeypatch.setenv("ASCIIGRAPH_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("ASCIIGRAPH_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()
