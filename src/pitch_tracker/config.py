from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, cast

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from pitch_tracker.domain.pitcher import Pitcher


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "api": {
        "base_url": "https://statsapi.mlb.com/api",
        "timeout": 10.0,
        "connect_timeout": 5.0,
    },
    "cache": {
        "enabled": True,
        "db_path": "~/.cache/pitch-tracker/cache.db",
        "ttl_seconds": 3600,
    },
    "enrichment": {
        "max_workers": 8,
    },
}


def create_config(
    yaml_path: str = "pitch_tracker.yaml",
    env_prefix: str = "PITCH_TRACKER",
    defaults: dict[str, object] | None = None,
    *,
    no_cache: bool = False,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. Missing files are ignored.
        env_prefix: Prefix for environment variables, e.g. ``PITCH_TRACKER__CACHE__TTL_SECONDS``.
        defaults: Default configuration values.
        no_cache: Force ``cache.enabled`` off regardless of the other layers.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if no_cache:
        layers.insert(0, config_from_dict({"cache": {"enabled": False}}))

    return ConfigurationSet(*layers)


def _as_bool(value: object) -> bool:
    # env vars arrive as strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def cache_enabled(cfg: AppConfig) -> bool:
    return _as_bool(cfg["cache.enabled"])


def load_pitchers(cfg: AppConfig | None = None) -> tuple[Pitcher, ...]:
    """Return the configured pitcher set, falling back to the built-in roster."""
    from pitch_tracker.roster import DEFAULT_PITCHERS

    if cfg is None:
        cfg = create_config()
    try:
        raw = cfg["pitchers"]
    except KeyError:
        return DEFAULT_PITCHERS
    entries = list(cast("Iterable[Mapping[str, object]]", raw))
    return tuple(
        Pitcher(
            id=int(str(entry["id"])),
            name=str(entry["name"]),
            name_en=str(entry.get("name_en", entry["name"])),
        )
        for entry in entries
    )
