import json

import pytest

import settings
from ordinals import ViewMode, WeekDay


@pytest.fixture()
def settings_path(tmp_path, monkeypatch):
    """Point the settings module at a file inside a temporary directory."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_missing_file_gives_defaults(settings_path):
    assert settings.load_settings() == settings._DEFAULTS


def test_corrupt_file_gives_defaults(settings_path):
    settings_path.write_text("{not json", encoding="utf-8")
    assert settings.load_settings() == settings._DEFAULTS


def test_non_object_file_gives_defaults(settings_path):
    settings_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert settings.load_settings() == settings._DEFAULTS


def test_valid_values_are_loaded(settings_path):
    settings_path.write_text(json.dumps({
        "dark_mode": True,
        "week_start": "Sunday",
        "show_iso_weeks": True,
        "lowest_mode": "month",
        "highest_mode": "DECADE",
    }), encoding="utf-8")
    loaded = settings.load_settings()
    assert loaded == {
        "dark_mode": True,
        "week_start": "sunday",
        "show_iso_weeks": True,
        "lowest_mode": "month",
        "highest_mode": "decade",
    }


def test_invalid_values_fall_back_per_key(settings_path):
    settings_path.write_text(json.dumps({
        "dark_mode": "yes",
        "week_start": 6,
        "show_iso_weeks": True,
        "lowest_mode": "year",
    }), encoding="utf-8")
    loaded = settings.load_settings()
    assert loaded["dark_mode"] is False
    assert loaded["week_start"] == "monday"
    assert loaded["show_iso_weeks"] is True
    assert loaded["lowest_mode"] == "day"


def test_save_then_load(settings_path):
    stored = dict(settings._DEFAULTS, week_start="friday", highest_mode="month")
    settings.save_settings(stored)
    assert settings.load_settings() == stored


def test_picker_kwargs():
    kwargs = settings.picker_kwargs(dict(settings._DEFAULTS, week_start="sunday",
                                         lowest_mode="month"))
    assert kwargs == {
        "week_start": WeekDay.SUNDAY,
        "show_iso_weeks": False,
        "lowest_mode": ViewMode.MONTH,
        "highest_mode": ViewMode.DECADE,
    }
