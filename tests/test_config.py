from pathlib import Path

import pytest

from plotview.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, PlotSettings, load_settings
from plotview.errors import ConfigError


ENV_VARS = (
    "PLOTVIEW_WIDTH",
    "PLOTVIEW_HEIGHT",
    "PLOTVIEW_SCALE",
    "PLOTVIEW_LINE_WIDTH",
    "PLOTVIEW_LINE_COLOR",
    "PLOTVIEW_SCATTER_COLOR",
    "PLOTVIEW_BACKGROUND_COLOR",
    "PLOTVIEW_TITLE",
    "PLOTVIEW_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TERM", raising=False)

    settings = load_settings("data.txt")

    assert settings.input_path == Path("data.txt")
    assert settings.width == DEFAULT_WIDTH
    assert settings.height == DEFAULT_HEIGHT
    assert settings.scale == 1.0
    assert settings.line_width == 1.0
    assert settings.line_color == "black"
    assert settings.background_color == "white"
    assert settings.terminal == ""
    assert settings.display is True


def test_environment_defaults_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLOTVIEW_WIDTH", "640")
    monkeypatch.setenv("PLOTVIEW_HEIGHT", "480")
    monkeypatch.setenv("PLOTVIEW_LINE_COLOR", "#ff0000")
    monkeypatch.setenv("TERM", "xterm-256color")

    settings = load_settings("data.txt", height=300, scale=2.0)

    assert settings.width == 640
    assert settings.height == 300
    assert settings.scale == 2.0
    assert settings.line_color == "#ff0000"
    assert settings.terminal == "xterm-256color"


def test_settings_are_immutable() -> None:
    settings = PlotSettings(input_path=Path("data.txt"))

    with pytest.raises(AttributeError):
        settings.width = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"height": -5},
        {"scale": 0.0},
        {"line_width": float("nan")},
        {"line_color": "not-a-color"},
        {"background_color": "#12"},
    ],
)
def test_invalid_values_raise_config_error(overrides: dict) -> None:
    with pytest.raises(ConfigError):
        load_settings("data.txt", **overrides)


def test_non_numeric_environment_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLOTVIEW_WIDTH", "wide")

    with pytest.raises(ConfigError, match="PLOTVIEW_WIDTH"):
        load_settings("data.txt")


def test_empty_input_path_rejected() -> None:
    with pytest.raises(ConfigError):
        load_settings("")


def test_cli_overrides_skip_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLOTVIEW_WIDTH", "wide")
    monkeypatch.setenv("PLOTVIEW_SCALE", "big")

    settings = load_settings("data.txt", width=640, scale=1.5)

    assert settings.width == 640
    assert settings.scale == 1.5
