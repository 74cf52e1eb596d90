"""Catalog loading and ``MarketConfig`` construction.

The static market data lives in JSON files under the configured data
directory:

* ``sector_catalog.json``: array of ``{"name", "volatility"}`` objects.
* ``sector_relations.json``: object mapping a sector to
  ``{related_sector: direction}``.
* ``crisis_events.json`` / ``market_events.json``: arrays of
  ``{"name", "affects", "impact"}`` objects.

Any problem with these files is reported as a ``ConfigurationError`` so the
simulation never starts on bad data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from models.config import ConfigurationError, MarketConfig, MarketSettings

logger = logging.getLogger(__name__)

SECTOR_CATALOG_FILE = "sector_catalog.json"
SECTOR_RELATIONS_FILE = "sector_relations.json"
CRISIS_EVENTS_FILE = "crisis_events.json"
MARKET_EVENTS_FILE = "market_events.json"


def load_market_config(
    data_dir: str | Path,
    settings: MarketSettings | None = None,
) -> MarketConfig:
    """Load every catalog from *data_dir* and validate them as a ``MarketConfig``.

    The relations file is optional; a missing one means an empty influence
    graph. The other three files are required.
    """
    directory = Path(data_dir)
    if not directory.is_dir():
        raise ConfigurationError(f"Data directory '{directory}' does not exist.")

    sectors = _load_json(directory / SECTOR_CATALOG_FILE, expect=list)
    crisis_events = _load_json(directory / CRISIS_EVENTS_FILE, expect=list)
    market_events = _load_json(directory / MARKET_EVENTS_FILE, expect=list)

    relations_path = directory / SECTOR_RELATIONS_FILE
    if relations_path.exists():
        influence_graph = _load_json(relations_path, expect=dict)
    else:
        logger.warning("No %s in '%s'; influence graph is empty.", SECTOR_RELATIONS_FILE, directory)
        influence_graph = {}

    config = MarketConfig.build(
        settings=settings or MarketSettings(),
        sectors=sectors,
        influence_graph=influence_graph,
        crisis_events=crisis_events,
        market_events=market_events,
    )
    logger.info(
        "Loaded market data from '%s': %d sector(s), %d relation source(s), "
        "%d crisis event(s), %d market event(s).",
        directory,
        len(config.sectors),
        len(config.influence_graph),
        len(config.crisis_events),
        len(config.market_events),
    )
    _warn_unknown_references(config)
    return config


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------

def _load_json(path: Path, expect: type) -> Any:
    """Read *path* as JSON and check that the top-level value is an *expect*."""
    if not path.is_file():
        raise ConfigurationError(f"Required data file '{path}' not found.")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Malformed JSON in '{path}': {exc}") from exc
    if not isinstance(raw, expect):
        raise ConfigurationError(
            f"Expected a JSON {expect.__name__} in '{path}', got {type(raw).__name__}."
        )
    return raw


def _warn_unknown_references(config: MarketConfig) -> None:
    """Log event and relation entries naming sectors absent from the catalog.

    Such entries are legal (they simply never apply) but usually a typo.
    """
    known = {s.name for s in config.sectors}
    for event in [*config.crisis_events, *config.market_events]:
        unknown = [name for name in event.affects if name not in known]
        if unknown:
            logger.warning(
                "Event '%s' affects unknown sector(s): %s", event.name, ", ".join(unknown)
            )
    for source, relations in config.influence_graph.items():
        unknown = [name for name in [source, *relations] if name not in known]
        if unknown:
            logger.warning(
                "Influence graph entry '%s' names unknown sector(s): %s",
                source,
                ", ".join(unknown),
            )
