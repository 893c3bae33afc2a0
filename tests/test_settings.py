import json

import pytest

from mandelbrot_explorer import settings as settings_module
from mandelbrot_explorer.settings import Settings, SettingsError, load_settings


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_bundled_settings_match_defaults():
    assert load_settings() == Settings()


def test_defaults():
    settings = Settings()
    assert (settings.width, settings.height) == (1000, 1000)
    assert settings.initial_iterations == 16
    assert settings.default_palette == "OneDark"
    assert settings.export_path == "Mandelbrot.bmp"


def test_missing_bundled_file_falls_back(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(settings_module, "SETTINGS_PATH", str(tmp_path / "missing.json"))
    assert load_settings() == Settings()
    assert "using defaults" in caplog.text


def test_malformed_bundled_file_falls_back(monkeypatch, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    monkeypatch.setattr(settings_module, "SETTINGS_PATH", str(path))
    assert load_settings() == Settings()


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(str(tmp_path / "missing.json"))


def test_explicit_file_overrides_defaults(tmp_path):
    path = write_json(tmp_path / "custom.json", {"width": 640, "default_palette": "Gruvbox"})
    settings = load_settings(path)
    assert settings.width == 640
    assert settings.height == 1000
    assert settings.default_palette == "Gruvbox"


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = write_json(tmp_path / "custom.json", {"theme": "dark"})
    assert load_settings(path) == Settings()
    assert "theme" in caplog.text


def test_non_object_is_an_error(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(write_json(tmp_path / "list.json", [1, 2]))


@pytest.mark.parametrize("overrides", [
    {"width": 0},
    {"height": -3},
    {"width": "wide"},
    {"initial_iterations": True},
    {"detail_factor": 1},
    {"detail_factor": 0.5},
    {"detail_factor": float("nan")},
    {"detail_factor": float("inf")},
    {"max_iterations": 8},
    {"default_palette": "Solarized"},
    {"export_path": ""},
])
def test_invalid_values(overrides):
    with pytest.raises(SettingsError):
        Settings(**overrides)


def test_settings_error_is_value_error():
    assert issubclass(SettingsError, ValueError)


def test_with_dimensions():
    settings = Settings().with_dimensions(320, 200)
    assert (settings.width, settings.height) == (320, 200)
    with pytest.raises(SettingsError):
        Settings().with_dimensions(0, 200)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "1e400"])
def test_non_finite_detail_factor_in_file_is_rejected(tmp_path, literal):
    path = tmp_path / "custom.json"
    path.write_text('{"detail_factor": %s}' % literal)
    with pytest.raises(SettingsError):
        load_settings(str(path))
