"""Evaluator configuration.

Defaults come from the environment::

    MONKEY_DEBUG=full MONKEY_MAX_DEPTH=500 MONKEY_SCOPED_BLOCKS=on

and can be overridden from a flag string (``max_depth=100; debug=info``),
the form accepted by the CLI's ``--flags`` option.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_ENV_PREFIX = "MONKEY_"

LOG_LEVELS = ("none", "error", "warning", "info", "debug")
_LEVEL_ALIASES = {
    "off": "none",
    "false": "none",
    "0": "none",
    "1": "debug",
    "minimal": "error",
    "true": "debug",
    "on": "debug",
    "full": "debug",
    "verbose": "debug",
}

DEFAULT_MAX_DEPTH = 500


def _parse_value(raw: str) -> Any:
    if not raw:
        return raw
    lowered = raw.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    try:
        return int(raw)
    except ValueError:
        pass
    if (raw.startswith("\"") and raw.endswith("\"")) or (raw.startswith("'") and raw.endswith("'")):
        return raw[1:-1]
    return raw


def _normalize_level(value: Any) -> str:
    if value is True:
        return "debug"
    if value is False or value is None:
        return "none"
    level = str(value).strip().lower()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown debug level: {value!r}")
    return level


def parse_flags(text: str) -> Dict[str, Any]:
    """Parse ``key=value`` pairs separated by ``;`` or ``,``."""
    flags: Dict[str, Any] = {}
    if not text:
        return flags
    for part in re.split(r"[;,]", text):
        part = part.strip()
        if not part or "=" not in part:
            continue
        key, raw_val = part.split("=", 1)
        flags[key.strip().lower()] = _parse_value(raw_val.strip())
    return flags


@dataclass(frozen=True)
class EvaluatorConfig:
    debug_level: str = "none"
    max_depth: int = DEFAULT_MAX_DEPTH
    scoped_blocks: bool = False
    strict_nodes: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "debug_level", _normalize_level(self.debug_level))
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    def should_log(self, level: str = "debug") -> bool:
        if self.debug_level == "none":
            return False
        return LOG_LEVELS.index(_normalize_level(level)) <= LOG_LEVELS.index(self.debug_level)

    def with_overrides(self, **overrides: Any) -> "EvaluatorConfig":
        """Copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "debug" in changes:
            changes["debug_level"] = changes.pop("debug")
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EvaluatorConfig":
        """Read ``MONKEY_*`` variables; a bad value is logged and left at its default."""
        environ = os.environ if environ is None else environ
        cfg = cls()
        for name in ("debug", "max_depth", "scoped_blocks", "strict_nodes"):
            raw = environ.get(_ENV_PREFIX + name.upper())
            if raw is None:
                continue
            try:
                cfg = cfg.with_overrides(**{name: _parse_value(raw.strip())})
            except ValueError as e:
                logger.warning("Ignoring %s%s=%r: %s", _ENV_PREFIX, name.upper(), raw, e)
        return cfg

    @classmethod
    def from_flags(cls, text: str, base: Optional["EvaluatorConfig"] = None) -> "EvaluatorConfig":
        return (base or cls()).with_overrides(**parse_flags(text))


config = EvaluatorConfig.from_env()


def get_config() -> EvaluatorConfig:
    return config


def set_config(new_config: EvaluatorConfig) -> EvaluatorConfig:
    """Replace the process-wide default; returns the previous one."""
    global config
    previous = config
    config = new_config
    return previous
