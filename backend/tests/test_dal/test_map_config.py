"""Tests for loading and serving the map graph."""

import json
from pathlib import Path

import pytest

from mapgate.config import settings
from mapgate.dal import map_config
from mapgate.dal.map_config import MapConfigError

EXAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "config" / "maps.example.json"


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "maps.json"
    path.write_text(json.dumps({
        "mapTokens": {"start": "", "cave": "start_clear"},
        "tokenMapping": {"start_clear": "start"},
        "ghostMixing": [["start", "cave"]],
    }), encoding="utf-8")
    return path


class TestLoadMapGraph:
    """Tests for load_map_graph."""

    def test_loads_valid_file(self, config_file):
        graph = map_config.load_map_graph(config_file)
        assert graph.map_tokens == {"start": "", "cave": "start_clear"}
        assert graph.token_mapping == {"start_clear": "start"}
        assert graph.ghost_mixing == (("start", "cave"),)

    def test_accepts_str_path(self, config_file):
        graph = map_config.load_map_graph(str(config_file))
        assert graph.required_token("cave") == "start_clear"

    def test_example_config_loads(self):
        graph = map_config.load_map_graph(EXAMPLE_CONFIG)
        assert "summit" in graph.maps

    def test_missing_keys_default_empty(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}", encoding="utf-8")
        graph = map_config.load_map_graph(path)
        assert graph.map_tokens == {}
        assert graph.ghost_mixing == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(MapConfigError):
            map_config.load_map_graph(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MapConfigError):
            map_config.load_map_graph(path)

    def test_wrong_types(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"mapTokens": {"start": 5}}), encoding="utf-8")
        with pytest.raises(MapConfigError):
            map_config.load_map_graph(path)


class TestGraphStore:
    """Tests for the process-wide graph accessors."""

    def test_get_before_load_raises(self, no_graph):
        assert map_config.is_map_graph_loaded() is False
        with pytest.raises(RuntimeError):
            map_config.get_map_graph()

    def test_init_and_get(self, no_graph, chain_graph):
        map_config.init_map_graph(chain_graph)
        assert map_config.is_map_graph_loaded() is True
        assert map_config.get_map_graph() is chain_graph

    def test_reset(self, loaded_graph):
        map_config.reset_map_graph()
        assert map_config.is_map_graph_loaded() is False

    def test_load_configured_path(self, no_graph, config_file, monkeypatch):
        monkeypatch.setattr(settings, "MAP_CONFIG_PATH", str(config_file))
        graph = map_config.load_configured_map_graph()
        assert map_config.get_map_graph() is graph
        assert graph.maps == ["start", "cave"]

    def test_load_without_path_installs_empty_graph(self, no_graph, monkeypatch):
        monkeypatch.setattr(settings, "MAP_CONFIG_PATH", None)
        graph = map_config.load_configured_map_graph()
        assert graph.map_tokens == {}
        assert map_config.is_map_graph_loaded() is True

    def test_load_configured_bad_path_leaves_store_empty(self, no_graph, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "MAP_CONFIG_PATH", str(tmp_path / "missing.json"))
        with pytest.raises(MapConfigError):
            map_config.load_configured_map_graph()
        assert map_config.is_map_graph_loaded() is False
