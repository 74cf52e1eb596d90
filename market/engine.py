"""Market engine: session setup and the per-turn state transition.

A turn runs in four steps:

1. Draw at most one event for the whole roster.
2. Evolve every sector against the pre-turn snapshot, so no sector sees
   another's updated price.
3. Append each new price to its history, keeping the most recent
   ``history_length`` entries.
4. Prepend one summary line to the event log.

The engine holds only read-only configuration. Session state goes in and a
new state comes out; callers own it between turns.
"""

from __future__ import annotations

import logging

from market.events import describe_selection, select_event
from market.pricing import evolve_sector
from market.rng import RandomSource
from models.config import ConfigurationError, MarketConfig
from models.sector import Sector
from models.session import SessionState, TurnOutcome

logger = logging.getLogger(__name__)


class MarketEngine:
    """Stateless turn engine bound to one validated ``MarketConfig``."""

    def __init__(self, config: MarketConfig) -> None:
        self._validate(config)
        self._config = config

    @property
    def config(self) -> MarketConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def init_session(
        self,
        rng: RandomSource,
        sample_size: int | None = None,
    ) -> SessionState:
        """Sample the session's sectors from the catalog, all at the starting price."""
        catalog = self._config.sectors
        size = self._config.settings.sample_size if sample_size is None else sample_size
        if size < 1 or size > len(catalog):
            raise ConfigurationError(
                f"Sample size must be between 1 and {len(catalog)}, got {size}."
            )

        sectors = [Sector.from_spec(spec) for spec in rng.sample(list(catalog), size)]
        logger.info(
            "Session initialised with %d sector(s): %s",
            len(sectors),
            ", ".join(s.name for s in sectors),
        )
        return SessionState(
            turn=0,
            sectors=sectors,
            history={s.name: [s.price] for s in sectors},
            event_log=[],
        )

    def advance_turn(self, state: SessionState, rng: RandomSource) -> TurnOutcome:
        """Run one turn against *state* and return the new snapshot."""
        config = self._config
        selection = select_event(rng, config.crisis_events, config.market_events)

        snapshot = list(state.sectors)
        keep = config.settings.history_length
        new_sectors: list[Sector] = []
        new_history: dict[str, list[int]] = dict(state.history)
        influence: dict[str, float] = {}

        for sector in snapshot:
            history = state.history.get(sector.name) or [sector.price]
            update = evolve_sector(
                sector,
                history[-keep:],
                snapshot,
                selection,
                config.settings.volatility,
                config.influence_graph,
                rng,
            )
            new_sectors.append(update.sector)
            new_history[sector.name] = [*history, update.sector.price][-keep:]
            influence[sector.name] = update.influence
            logger.debug(
                "Turn %d: %s %d -> %d (delta %+.4f, %s, influence %+.2f)",
                state.turn + 1,
                sector.name,
                sector.price,
                update.sector.price,
                update.delta,
                update.sector.momentum.value,
                update.influence,
            )

        log_entry = describe_selection(selection)
        logger.info("Turn %d: %s", state.turn + 1, log_entry)

        new_state = SessionState(
            turn=state.turn + 1,
            sectors=new_sectors,
            history=new_history,
            event_log=[log_entry, *state.event_log],
        )
        return TurnOutcome(
            state=new_state,
            selection=selection,
            log_entry=log_entry,
            influence=influence,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(config: MarketConfig) -> None:
        """Re-check catalog invariants that in-code construction may bypass."""
        if not config.sectors:
            raise ConfigurationError("Sector catalog is empty.")
        if not config.crisis_events:
            raise ConfigurationError("Crisis event catalog is empty.")
        if not config.market_events:
            raise ConfigurationError("Market event catalog is empty.")
        for spec in config.sectors:
            config.settings.volatility.range_for(spec.volatility)


def init_session(
    config: MarketConfig,
    rng: RandomSource,
    sample_size: int | None = None,
) -> SessionState:
    """Functional form of ``MarketEngine.init_session``."""
    return MarketEngine(config).init_session(rng, sample_size)


def advance_turn(
    config: MarketConfig,
    state: SessionState,
    rng: RandomSource,
) -> TurnOutcome:
    """Functional form of ``MarketEngine.advance_turn``."""
    return MarketEngine(config).advance_turn(state, rng)
