import pytest

from jukebox.config.defaults import DEFAULT_CONFIG
from jukebox.config.loader import load_config
from jukebox.config.playback_config import PlaybackConfig


def test_defaults_without_path():
    config = load_config(None)

    assert config["playlist"]["songs"] == []
    assert isinstance(config["playback_config"], PlaybackConfig)
    assert config["playback_config"].observer_types() == ["console"]
    assert config["playback_config"].log_level == "INFO"


def test_defaults_are_not_mutated():
    config = load_config(None)
    config["playlist"]["songs"].append("Thriller")

    assert DEFAULT_CONFIG["playlist"]["songs"] == []


def test_user_config_merges_over_defaults(tmp_path):
    path = tmp_path / "jukebox.yaml"
    path.write_text(
        "playlist:\n"
        "  songs:\n"
        "    - 99 Problems\n"
        "playback:\n"
        "  observers:\n"
        "    - type: memory\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config["playlist"]["songs"] == ["99 Problems"]
    assert config["playback_config"].observer_types() == ["memory"]
    assert config["playback_config"].log_level == "DEBUG"


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    config = load_config(str(path))

    assert config["playback_config"].observer_types() == ["console"]


def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/jukebox.yaml")


def test_non_mapping_config_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_observers_must_be_a_list(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("playback:\n  observers: console\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_empty_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "empty_sections.yaml"
    path.write_text("playlist:\nplayback:\nlogging:\n", encoding="utf-8")

    config = load_config(str(path))

    assert config["playlist"]["songs"] == []
    assert config["playback_config"].observer_types() == ["console"]
    assert config["playback_config"].log_level == "INFO"


def test_non_mapping_section_rejected(tmp_path):
    path = tmp_path / "scalar_section.yaml"
    path.write_text("playback: console\n", encoding="utf-8")

    with pytest.raises(ValueError, match="playback"):
        load_config(str(path))
