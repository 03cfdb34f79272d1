import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_path):
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(Path(tmp) / "pagebar" / "config.json")
        assert cfg["ITEMS_PER_PAGE"] is None
        assert cfg["SIBLING_COUNT"] == 2


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps({"pagination": {"items_per_page": 25, "sibling_count": 1}})
        )
        cfg = _load_with(cfg_path)
        assert cfg["ITEMS_PER_PAGE"] == 25
        assert cfg["SIBLING_COUNT"] == 1


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps({"pagination": {"items_per_page": 0, "sibling_count": "3"}})
        )
        cfg = _load_with(cfg_path)
        assert cfg["ITEMS_PER_PAGE"] is None
        assert cfg["SIBLING_COUNT"] == 2


def test_load_config_survives_malformed_json(caplog):
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text("{not json")
        cfg = _load_with(cfg_path)
        assert cfg == {"ITEMS_PER_PAGE": None, "SIBLING_COUNT": 2}
        assert "unreadable config" in caplog.text


def test_load_config_ignores_non_object_section():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(json.dumps({"pagination": [10]}))
        cfg = _load_with(cfg_path)
        assert cfg["SIBLING_COUNT"] == 2
