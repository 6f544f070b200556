"""Game configuration loader.

Precedence, lowest first: built-in defaults, YAML file, environment
(``DRAUGHTS_SEED``, ``DRAUGHTS_LOG_LEVEL``), command-line flags.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import yaml

from draughts.core.schemas import load_schema, schema_errors
from draughts.game.board import DEFAULT_GLYPHS

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "config_schema.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a config file cannot be read or fails validation."""


@dataclass
class GameConfig:
    seed: int | None = None  # None = seed from the wall clock


@dataclass
class DisplayConfig:
    glyphs: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_GLYPHS))


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from a YAML file, or return defaults when *path* is None."""
    if path is None:
        return AppConfig()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        raw = {}

    errors = schema_errors(raw, load_schema(_SCHEMA_PATH))
    if errors:
        raise ConfigError(f"invalid config {path}: " + "; ".join(errors))

    g = raw.get("game", {})
    d = raw.get("display", {})
    lg = raw.get("logging", {})

    glyphs = dict(DEFAULT_GLYPHS)
    glyphs.update(d.get("glyphs", {}))
    _check_distinct_glyphs(glyphs, path)

    return AppConfig(
        game=GameConfig(seed=g.get("seed")),
        display=DisplayConfig(glyphs=glyphs),
        logging=LoggingConfig(level=lg.get("level", "WARNING")),
    )


def _check_distinct_glyphs(glyphs: dict[str, str], path: Path) -> None:
    """Every square/piece state needs its own glyph."""
    by_glyph: dict[str, list[str]] = {}
    for key, glyph in glyphs.items():
        by_glyph.setdefault(glyph, []).append(key)
    clashes = [keys for keys in by_glyph.values() if len(keys) > 1]
    if clashes:
        desc = "; ".join(" and ".join(keys) for keys in clashes)
        raise ConfigError(f"invalid config {path}: glyphs must differ ({desc} share a glyph)")


def apply_env_overrides(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Apply DRAUGHTS_* environment variables on top of *config* in place."""
    env = os.environ if environ is None else environ

    seed = env.get("DRAUGHTS_SEED")
    if seed:
        try:
            config.game.seed = int(seed)
        except ValueError as exc:
            raise ConfigError(f"DRAUGHTS_SEED must be an integer, got {seed!r}") from exc
        logger.debug("Seed overridden from environment: %s", seed)

    level = env.get("DRAUGHTS_LOG_LEVEL")
    if level:
        level = level.upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"DRAUGHTS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        config.logging.level = level
        logger.debug("Log level overridden from environment: %s", level)

    return config
