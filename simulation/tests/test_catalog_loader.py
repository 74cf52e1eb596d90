"""Tests for loading the market catalogs and YAML config."""

import json
from pathlib import Path

import pytest

from models.config import ConfigurationError, MarketSettings, SimulationConfig
from simulation.catalog_loader import load_market_config

REPO_ROOT = Path(__file__).resolve().parents[2]

SECTORS = [
    {"name": "Tech", "volatility": "high"},
    {"name": "Retail", "volatility": "low"},
]
CRISES = [{"name": "Crash", "affects": ["Tech"], "impact": -0.3}]
NEWS = [{"name": "Boom", "affects": ["Retail"], "impact": 0.1}]


def _write_data(directory: Path, **overrides):
    files = {
        "sector_catalog.json": SECTORS,
        "crisis_events.json": CRISES,
        "market_events.json": NEWS,
        "sector_relations.json": {"Tech": {"Retail": 1}},
    }
    files.update(overrides)
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        if content is None:
            continue
        (directory / name).write_text(json.dumps(content), encoding="utf-8")
    return directory


def test_loads_all_catalogs(tmp_path):
    config = load_market_config(_write_data(tmp_path), MarketSettings(sample_size=2))
    assert [s.name for s in config.sectors] == ["Tech", "Retail"]
    assert config.influence_graph == {"Tech": {"Retail": 1}}
    assert config.crisis_events[0].kind == "crisis"
    assert config.market_events[0].kind == "market"


def test_relations_file_is_optional(tmp_path):
    data_dir = _write_data(tmp_path, **{"sector_relations.json": None})
    config = load_market_config(data_dir, MarketSettings(sample_size=1))
    assert config.influence_graph == {}


def test_missing_required_file(tmp_path):
    data_dir = _write_data(tmp_path, **{"crisis_events.json": None})
    with pytest.raises(ConfigurationError, match="crisis_events.json"):
        load_market_config(data_dir, MarketSettings(sample_size=1))


@pytest.mark.parametrize(
    "filename", ["sector_catalog.json", "crisis_events.json", "market_events.json"]
)
def test_empty_catalog_is_configuration_error(tmp_path, filename):
    data_dir = _write_data(tmp_path, **{filename: []})
    with pytest.raises(ConfigurationError):
        load_market_config(data_dir, MarketSettings(sample_size=1))


def test_malformed_volatility_class(tmp_path):
    data_dir = _write_data(
        tmp_path, **{"sector_catalog.json": [{"name": "Tech", "volatility": "wild"}]}
    )
    with pytest.raises(ConfigurationError):
        load_market_config(data_dir, MarketSettings(sample_size=1))


def test_sample_size_larger_than_catalog(tmp_path):
    with pytest.raises(ConfigurationError, match="sample_size"):
        load_market_config(_write_data(tmp_path), MarketSettings(sample_size=3))


def test_malformed_json(tmp_path):
    data_dir = _write_data(tmp_path)
    (data_dir / "market_events.json").write_text("[{", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Malformed JSON"):
        load_market_config(data_dir, MarketSettings(sample_size=1))


def test_missing_data_dir(tmp_path):
    with pytest.raises(ConfigurationError):
        load_market_config(tmp_path / "nope")


def test_bundled_data_and_default_config_load():
    config = SimulationConfig.from_yaml(REPO_ROOT / "config" / "default.yaml")
    market = load_market_config(config.data_dir, config.market)
    assert len(market.sectors) == 21
    assert market.settings.sample_size == 8
    assert market.settings.volatility.high == (10.0, 25.0)


class TestSimulationConfigFromYaml:
    def test_relative_data_dir_resolves_against_config(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("data_dir: data\nnum_turns: 3\n", encoding="utf-8")
        config = SimulationConfig.from_yaml(path)
        assert Path(config.data_dir) == tmp_path / "data"
        assert config.num_turns == 3
        assert config.broker.initial_cash == 1000

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SimulationConfig.from_yaml(tmp_path / "missing.yaml")

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_yaml(path)

    def test_inverted_volatility_range(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("market:\n  volatility:\n    low: [5, 2]\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_yaml(path)
