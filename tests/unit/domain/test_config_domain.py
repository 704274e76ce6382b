from __future__ import annotations

"""
Unit tests for configuration persistence in the user data directory.
"""

import json
from pathlib import Path

from symbolanalyzer.domain.config import (
    get_config_file,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)


def test_config_file_lives_in_data_dir(isolated_data_dir: Path):
    assert Path(get_config_file()) == isolated_data_dir / "config.json"


def test_missing_file_returns_defaults():
    assert load_app_state() == get_default_app_state()
    assert load_config() == get_default_config()


def test_save_then_load_round_trip():
    cfg = get_default_config()
    cfg.update({"input_path": "/tmp/a.csv", "min_size": 0, "categories": ["Rust"]})

    save_config(cfg)

    loaded = load_config()
    assert loaded["input_path"] == "/tmp/a.csv"
    assert loaded["min_size"] == 0
    assert loaded["categories"] == ["Rust"]


def test_corrupted_file_falls_back_to_defaults():
    Path(get_config_file()).write_text("{not json", encoding="utf-8")

    assert load_app_state() == get_default_app_state()


def test_non_object_file_falls_back_to_defaults():
    Path(get_config_file()).write_text("[1, 2]", encoding="utf-8")

    assert load_config() == get_default_config()


def test_partial_file_is_merged_over_defaults():
    Path(get_config_file()).write_text(
        json.dumps({"version": "0.1", "last_session": {"search_term": "vec"}}),
        encoding="utf-8",
    )

    state = load_app_state()

    assert state["version"] == get_default_app_state()["version"]
    assert state["last_session"]["search_term"] == "vec"
    assert state["last_session"]["min_size"] == get_default_config()["min_size"]
    assert state["app_settings"]["locale"] == "en"
