"""Simulation output logging: persists SimulationLog and SessionLogs.

The output directory structure is::

    {output_dir}/{run_name}/
    ├── config.yaml
    ├── simulation_log.json
    ├── sessions/
    │   ├── session_000/
    │   │   ├── session_log.json
    │   │   └── event_log.txt
    │   └── ...
    └── summary.json
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from models.config import SimulationConfig
from models.log import SessionLog, SimulationLog

logger = logging.getLogger(__name__)


def run_name_from_config_path(config_path: str | Path) -> str:
    """Derive a run name from the configuration file path (stem without extension)."""
    return Path(config_path).stem


class SimulationLogger:
    """Manages on-disk output for a simulation run.

    Call ``init_run`` once at the start, ``write_session`` after each session
    completes, and ``finalize`` at the very end.
    """

    def __init__(
        self,
        output_dir: str,
        config: SimulationConfig,
        run_name: str,
    ) -> None:
        self._run_dir = _unique_run_dir(Path(output_dir), run_name)
        self._sessions_dir = self._run_dir / "sessions"
        self._simulation_log = SimulationLog(
            run_name=self._run_dir.name,
            config=config,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init_run(self, config_yaml_path: str | None = None) -> None:
        """Create the output directory tree and optionally copy the config."""
        self._run_dir.mkdir(parents=True, exist_ok=True)
        self._sessions_dir.mkdir(exist_ok=True)
        if config_yaml_path is not None:
            dest = self._run_dir / "config.yaml"
            shutil.copy2(config_yaml_path, dest)
            logger.info("Copied config to %s", dest)

    def write_session(self, session_log: SessionLog) -> None:
        """Persist a completed session's log and event log to disk."""
        session_dir = self._sessions_dir / session_log.session_id
        session_dir.mkdir(parents=True, exist_ok=True)

        # Session log (full audit trail).
        _write_json(session_dir / "session_log.json", session_log.model_dump(mode="json"))

        # Event log, newest first, the way a player reads it.
        (session_dir / "event_log.txt").write_text(
            "\n".join(session_log.event_log) + "\n", encoding="utf-8"
        )

        # Accumulate in the run-level log.
        self._simulation_log.session_logs.append(session_log)
        logger.info("Wrote session log for '%s' to %s", session_log.session_id, session_dir)

    def record_error(self, message: str) -> None:
        """Append an error message to the run-level log."""
        self._simulation_log.errors.append(message)
        logger.error("Simulation error: %s", message)

    def finalize(self, summary: dict[str, Any] | None = None) -> None:
        """Write the run-level simulation log and optional summary."""
        _write_json(
            self._run_dir / "simulation_log.json",
            self._simulation_log.model_dump(mode="json"),
        )
        if summary is not None:
            _write_json(self._run_dir / "summary.json", summary)
        logger.info("Simulation log finalized at %s", self._run_dir)

    @property
    def simulation_log(self) -> SimulationLog:
        """Expose the in-memory simulation log (used by the runner for summaries)."""
        return self._simulation_log

    @property
    def run_dir(self) -> Path:
        return self._run_dir


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _unique_run_dir(output_dir: Path, run_name: str) -> Path:
    """First run keeps ``run_name``; repeats get ``run_name_001``, ``run_name_002``, ..."""
    candidate = output_dir / run_name
    idx = 0
    while candidate.exists():
        idx += 1
        candidate = output_dir / f"{run_name}_{idx:03d}"
    return candidate


def _write_json(path: Path, data: Any) -> None:
    """Write *data* as pretty-printed JSON to *path*."""
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
