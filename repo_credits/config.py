# repo_credits/config.py
"""
Configuration for repo-credits.

Values come from, in increasing precedence: the dataclass defaults, a TOML
file (``$REPO_CREDITS_CONFIG`` or ``~/.config/repo-credits/config.toml``),
``REPO_CREDITS_*`` environment variables, and finally CLI flags, which the
commands apply on top of the loaded object.

Example file::

    theme = "scroll"
    rain_tick_ms = 40
    show_ticks = 80
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import ConfigError
from .ui.rain import RainSettings
from .ui.reveal import RevealTiming

logger = logging.getLogger(__name__)

ENV_PREFIX = "REPO_CREDITS_"
CONFIG_ENV = "REPO_CREDITS_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/repo-credits/config.toml")


class Theme(str, Enum):
    rain = "rain"
    scroll = "scroll"


@dataclass
class CreditsConfig:
    theme: Theme = Theme.rain
    seed: Optional[int] = None
    rain_tick_ms: int = 50
    scroll_tick_ms: int = 120
    rain_ticks: int = 30
    resolve_ticks: int = 25
    show_ticks: int = 50
    dissolve_ticks: int = 20
    flip_rate: float = 0.15
    spawn_chance: float = 0.02
    min_speed: int = 1
    max_speed: int = 3
    min_trail: int = 4
    max_trail: int = 14

    def tick_period(self) -> float:
        """Seconds between ticks for the configured theme."""
        ms = self.rain_tick_ms if self.theme is Theme.rain else self.scroll_tick_ms
        return ms / 1000.0

    def reveal_timing(self) -> RevealTiming:
        return RevealTiming(
            rain=self.rain_ticks,
            resolve=self.resolve_ticks,
            show=self.show_ticks,
            dissolve=self.dissolve_ticks,
            flip_rate=self.flip_rate,
        )

    def rain_settings(self) -> RainSettings:
        return RainSettings(
            spawn_chance=self.spawn_chance,
            min_speed=self.min_speed,
            max_speed=self.max_speed,
            min_trail=self.min_trail,
            max_trail=self.max_trail,
        )

    def validate(self) -> "CreditsConfig":
        for name in ("rain_tick_ms", "scroll_tick_ms", "rain_ticks", "resolve_ticks",
                     "show_ticks", "dissolve_ticks", "min_speed", "min_trail"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be at least 1 (got {getattr(self, name)})")
        for name in ("flip_rate", "spawn_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be between 0 and 1 (got {value})")
        if self.min_speed > self.max_speed:
            raise ConfigError("min_speed must not exceed max_speed")
        if self.min_trail > self.max_trail:
            raise ConfigError("min_trail must not exceed max_trail")
        return self


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer")
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("expected a number")
    return float(value)


def _to_seed(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return _to_int(value)


_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "theme": Theme,
    "seed": _to_seed,
    "flip_rate": _to_float,
    "spawn_chance": _to_float,
}


def _convert(name: str, value: Any, source: str) -> Any:
    convert = _CONVERTERS.get(name, _to_int)
    try:
        return convert(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name!r} in {source}: {value!r}") from exc


def _config_path(env: Mapping[str, str]) -> Path:
    return Path(env.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()


def _read_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc


def load_config(
    path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None
) -> CreditsConfig:
    env = os.environ if env is None else env
    path = path or _config_path(env)
    known = {f.name for f in fields(CreditsConfig)}
    values: Dict[str, Any] = {}

    for key, value in _read_file(path).items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r in %s", key, path)
            continue
        values[key] = _convert(key, value, str(path))

    for name in known:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = _convert(name, raw, ENV_PREFIX + name.upper())

    logger.debug("config from %s: %s", path, values)
    return CreditsConfig(**values).validate()
