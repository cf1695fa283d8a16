from __future__ import annotations

import json
from pathlib import Path

import pytest

from glossary.preferences import DEFAULT_THEME, THEME_KEY, Theme, ThemePreferenceStore


@pytest.fixture
def store(tmp_path: Path) -> ThemePreferenceStore:
    return ThemePreferenceStore(tmp_path / "prefs" / "preferences.json")


def test_default_theme_is_light_without_file(store):
    assert DEFAULT_THEME is Theme.LIGHT
    assert store.get_theme() is Theme.LIGHT
    assert not store.path.exists()


def test_set_theme_persists(store):
    store.set_theme("dark")

    assert json.loads(store.path.read_text(encoding="utf-8")) == {THEME_KEY: "dark"}
    assert ThemePreferenceStore(store.path).get_theme() is Theme.DARK


def test_toggle_flips_and_persists(store):
    assert store.toggle() is Theme.DARK
    assert store.toggle() is Theme.LIGHT
    assert store.get_theme() is Theme.LIGHT


def test_other_keys_are_preserved(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"font-size": "large"}), encoding="utf-8")

    store.set_theme(Theme.DARK)

    assert json.loads(store.path.read_text(encoding="utf-8")) == {
        "font-size": "large",
        THEME_KEY: "dark",
    }


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps(["dark"]), json.dumps({THEME_KEY: "sepia"})],
)
def test_unusable_file_falls_back_to_default(store, content):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(content, encoding="utf-8")

    assert store.get_theme() is DEFAULT_THEME


def test_set_theme_rejects_unknown_value(store):
    with pytest.raises(ValueError):
        store.set_theme("sepia")


def test_path_defaults_to_settings(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("GLOSSARY_PREFERENCES_PATH", str(tmp_path / "p.json"))

    assert ThemePreferenceStore().path == tmp_path / "p.json"
