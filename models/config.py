"""Simulation configuration models, loaded from YAML.

These live in ``models/`` because they are shared data contracts used by the
market engine, the run orchestration, and the trading strategies.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from models.event import CrisisEvent, MarketEvent
from models.sector import SectorSpec, VolatilityClass


class ConfigurationError(ValueError):
    """Invalid market or run configuration; the simulation must not start."""


class VolatilityProfile(BaseModel):
    """Inclusive ``[min, max]`` percentage range of per-turn fluctuation per class."""

    low: tuple[float, float] = (2.0, 5.0)
    medium: tuple[float, float] = (5.0, 15.0)
    high: tuple[float, float] = (10.0, 25.0)

    @model_validator(mode="after")
    def _check_ranges(self) -> VolatilityProfile:
        for cls_name in ("low", "medium", "high"):
            lo, hi = getattr(self, cls_name)
            if lo < 0 or lo > hi:
                raise ValueError(
                    f"Volatility range for '{cls_name}' must satisfy 0 <= min <= max, "
                    f"got [{lo}, {hi}]."
                )
        return self

    def range_for(self, volatility: VolatilityClass) -> tuple[float, float]:
        if volatility not in ("low", "medium", "high"):
            raise ConfigurationError(f"Unknown volatility class '{volatility}'.")
        return getattr(self, volatility)


class MarketSettings(BaseModel):
    """Tunable engine parameters that live in the YAML config."""

    sample_size: int = Field(
        default=8,
        ge=1,
        description="Number of sectors sampled from the catalog for a session.",
    )
    history_length: int = Field(
        default=10,
        ge=1,
        description="Number of trailing prices kept per sector.",
    )
    volatility: VolatilityProfile = Field(default_factory=VolatilityProfile)


class MarketConfig(BaseModel):
    """Everything the market engine needs: settings plus the static catalogs.

    Built by ``simulation.catalog_loader.load_market_config`` from the JSON
    data files, or directly in code (tests).
    """

    settings: MarketSettings = Field(default_factory=MarketSettings)
    sectors: list[SectorSpec] = Field(min_length=1, description="Sector catalog.")
    influence_graph: dict[str, dict[str, float]] = Field(
        default_factory=dict,
        description="sector -> related sector -> signed direction.",
    )
    crisis_events: list[CrisisEvent] = Field(min_length=1)
    market_events: list[MarketEvent] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_catalog(self) -> MarketConfig:
        names = [s.name for s in self.sectors]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate sector name(s) in catalog: {', '.join(duplicates)}.")
        if self.settings.sample_size > len(self.sectors):
            raise ValueError(
                f"sample_size {self.settings.sample_size} exceeds the sector catalog "
                f"size {len(self.sectors)}."
            )
        return self

    @classmethod
    def build(cls, **data) -> MarketConfig:
        """Validate *data*, raising ``ConfigurationError`` on failure."""
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid market configuration: {exc}") from exc


class BrokerConfig(BaseModel):
    """Configuration for the in-process portfolio ledger."""

    initial_cash: float = Field(
        default=1_000.0,
        ge=0,
        description="Starting cash balance for the portfolio.",
    )


class StrategyConfig(BaseModel):
    """Configuration for the automated player."""

    name: str = Field(
        default="momentum",
        description="Registered strategy name, e.g. 'hold', 'momentum'.",
    )


class SimulationConfig(BaseModel):
    """Top-level configuration for a simulation run, loaded from YAML.

    The run name is derived from the config file path at load time rather
    than being specified inside the YAML itself.
    """

    data_dir: str = Field(
        default="data",
        description="Directory holding the sector catalog, relations and event JSON files. "
        "Relative paths resolve against the config file's directory.",
    )
    market: MarketSettings = Field(default_factory=MarketSettings)
    broker: BrokerConfig = Field(
        default_factory=BrokerConfig,
        description="Portfolio ledger configuration.",
    )
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)
    num_turns: int = Field(default=20, ge=0, description="Turns per session.")
    num_sessions: int = Field(default=1, ge=1, description="Number of sessions to run.")
    seed: int | None = Field(
        default=None,
        description="Base random seed; session i uses seed + i. None draws fresh entropy.",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load and validate a ``SimulationConfig`` from a YAML file.

        Raises ``FileNotFoundError`` if the file does not exist and
        ``ConfigurationError`` if the content is not a valid config mapping.
        A relative ``data_dir`` is resolved against the file's directory.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Expected a YAML mapping in {path}, got {type(raw).__name__}."
            )

        try:
            config = cls(**raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid config in {path}: {exc}") from exc

        data_dir = Path(config.data_dir)
        if not data_dir.is_absolute():
            config = config.model_copy(
                update={"data_dir": str(path.parent / data_dir)}
            )
        return config
