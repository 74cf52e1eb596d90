"""Simulation runner: the main orchestration loop.

Lifecycle:
    1. Load config and market catalogs; build the engine.
    2. For each session:
        a. Seed a random source, sample the session's sectors, open a broker.
        b. For each turn:
            - Let the strategy trade at the current prices.
            - Advance the market one turn.
            - Log the turn.
        c. Record the session result.
    3. Finalise and write summary.
"""

from __future__ import annotations

import logging
from typing import Any

from market.engine import MarketEngine
from market.rng import make_rng
from models.config import ConfigurationError, MarketConfig, SimulationConfig
from models.log import SessionLog, TurnLog
from models.session import SessionState
from models.trade import Order, TradeResult
from simulation.broker import Broker
from simulation.catalog_loader import load_market_config
from simulation.sim_logging import SimulationLogger, run_name_from_config_path
from strategies.base import Strategy
from strategies.registry import create_strategy

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Drives sessions of the market game with an automated player."""

    def __init__(
        self,
        config: SimulationConfig,
        config_yaml_path: str,
        output_dir: str = "results",
        market_config: MarketConfig | None = None,
    ) -> None:
        self._config = config
        self._config_yaml_path = config_yaml_path
        self._run_name = run_name_from_config_path(config_yaml_path)
        self._sim_logger = SimulationLogger(output_dir, config, self._run_name)
        self._market_config = market_config

    def run(self) -> SimulationLogger:
        """Execute the full simulation and return the logger holding its results."""
        market_config = self._market_config or load_market_config(
            self._config.data_dir, self._config.market
        )
        engine = MarketEngine(market_config)
        self._check_strategy()
        self._sim_logger.init_run(self._config_yaml_path)

        logger.info(
            "Starting simulation '%s': %d session(s), %d turn(s) each, strategy '%s'.",
            self._run_name,
            self._config.num_sessions,
            self._config.num_turns,
            self._config.strategy.name,
        )

        for idx in range(self._config.num_sessions):
            session_id = f"session_{idx:03d}"
            seed = None if self._config.seed is None else self._config.seed + idx
            session_log = self._run_session(engine, session_id, seed)
            self._sim_logger.write_session(session_log)

        summary = self._build_summary()
        self._sim_logger.finalize(summary)
        logger.info("Simulation '%s' complete. Output: %s", self._run_name, self._sim_logger.run_dir)
        return self._sim_logger

    # ------------------------------------------------------------------
    # Session execution
    # ------------------------------------------------------------------

    def _check_strategy(self) -> None:
        """Fail before any output is written if the strategy name is not registered."""
        try:
            create_strategy(self._config.strategy)
        except KeyError as exc:
            raise ConfigurationError(exc.args[0]) from exc

    def _run_session(
        self,
        engine: MarketEngine,
        session_id: str,
        seed: int | None,
    ) -> SessionLog:
        """Play one session turn by turn and return its log."""
        rng = make_rng(seed)
        state = engine.init_session(rng)
        broker = Broker(self._config.broker, session_id=session_id)
        strategy = create_strategy(self._config.strategy)

        turn_logs: list[TurnLog] = []
        for _ in range(self._config.num_turns):
            trade_results = self._trade(strategy, broker, state, session_id)
            portfolio = broker.get_portfolio()

            outcome = engine.advance_turn(state, rng)
            state = outcome.state

            turn_logs.append(
                TurnLog(
                    turn=state.turn,
                    log_entry=outcome.log_entry,
                    event_kind=outcome.selection.kind,
                    event_name=outcome.selection.event.name if outcome.selection.event else None,
                    trade_results=trade_results,
                    sectors=state.sectors,
                    influence=outcome.influence,
                    portfolio=portfolio,
                    net_worth=portfolio.net_worth(state.sectors),
                )
            )

        final_portfolio = broker.get_portfolio()
        final_net_worth = final_portfolio.net_worth(state.sectors)
        logger.info(
            "Session '%s' complete after %d turn(s). Cash: $%.2f, holdings: %s, net worth: $%.2f",
            session_id,
            state.turn,
            final_portfolio.cash,
            final_portfolio.holdings,
            final_net_worth,
        )
        return SessionLog(
            session_id=session_id,
            strategy=self._config.strategy.name,
            seed=seed,
            turn_logs=turn_logs,
            trades=broker.get_trade_history(),
            event_log=state.event_log,
            final_portfolio=final_portfolio,
            final_net_worth=final_net_worth,
        )

    def _trade(
        self,
        strategy: Strategy,
        broker: Broker,
        state: SessionState,
        session_id: str,
    ) -> list[TradeResult]:
        """Ask the strategy for orders and fill them at the pre-turn prices."""
        try:
            orders: list[Order] = strategy.decide(state, broker.get_portfolio())
        except Exception as exc:
            msg = f"Strategy error in '{session_id}' turn {state.turn}: {exc}"
            logger.exception(msg)
            self._sim_logger.record_error(msg)
            return []

        return [broker.execute(order, state.sectors, turn=state.turn) for order in orders]

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def _build_summary(self) -> dict[str, Any]:
        """Build a lightweight summary dict for the run."""
        sessions = self._sim_logger.simulation_log.session_logs
        initial_cash = self._config.broker.initial_cash
        summaries = []
        for session in sessions:
            if session.final_portfolio is None:
                continue

            final_prices = session.turn_logs[-1].sectors if session.turn_logs else []
            net_worth = session.final_net_worth or 0.0
            return_pct = (
                ((net_worth - initial_cash) / initial_cash) * 100 if initial_cash else 0.0
            )
            summaries.append(
                {
                    "session_id": session.session_id,
                    "seed": session.seed,
                    "initial_cash": initial_cash,
                    "final_cash": session.final_portfolio.cash,
                    "final_holdings": session.final_portfolio.holdings,
                    "final_prices": {s.name: s.price for s in final_prices},
                    "net_worth": net_worth,
                    "return_pct": return_pct,
                    "total_trades": len(session.trades),
                    "events": sum(1 for t in session.turn_logs if t.event_kind != "none"),
                }
            )
        return {
            "run_name": self._sim_logger.run_dir.name,
            "strategy": self._config.strategy.name,
            "num_sessions": len(sessions),
            "session_summaries": summaries,
        }
