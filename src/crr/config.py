# src/crr/config.py
from __future__ import annotations
import argparse, copy, os, pathlib, typing as t
from dataclasses import dataclass
import yaml

from crr.errors import InvalidArgument

CONFIG_ENV = "CRR_CONFIG"

DEFAULTS: t.Dict[str, t.Any] = {
    "pricing": {
        "spot": 100.0,
        "strike": 100.0,
        "rate": 0.05,
        "days": 1.0,
        "steps": 100,
        "sigma": 0.2,
    },
    "logging": {"level": "WARNING"},
}


def _as_int(v) -> int:
    f = float(v)
    if not f.is_integer():
        raise ValueError(f"not an integer: {v!r}")
    return int(f)


def _cast(section: str, key: str, cast, value):
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"{section}.{key}: cannot use {value!r} ({e})") from e


# CLI flag -> (section, key, cast); casts also apply to values read from YAML
_OVERRIDES = {
    "spot":      ("pricing", "spot",   float),
    "strike":    ("pricing", "strike", float),
    "rate":      ("pricing", "rate",   float),
    "days":      ("pricing", "days",   float),
    "steps":     ("pricing", "steps",  _as_int),
    "sigma":     ("pricing", "sigma",  float),
    "log_level": ("logging", "level",  str),
}


@dataclass
class PricerConfig:
    raw: dict

    @classmethod
    def load(cls, path: str | None = None,
             cli_overrides: t.Dict[str, t.Any] | None = None) -> "PricerConfig":
        """
        Defaults <- YAML file <- CLI overrides (shallow, per section).

        `path` falls back to $CRR_CONFIG; with neither only defaults apply.
        """
        data = copy.deepcopy(DEFAULTS)
        path = path or os.environ.get(CONFIG_ENV)
        if path:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise InvalidArgument(f"{path}: top level must be a mapping")
            for section, values in loaded.items():
                if values is not None and not isinstance(values, dict):
                    raise InvalidArgument(f"{path}: section '{section}' must be a mapping")
                data.setdefault(section, {}).update(values or {})
            for section, key, cast in _OVERRIDES.values():
                data[section][key] = _cast(section, key, cast, data[section][key])
        cli_overrides = cli_overrides or {}
        for flag, (section, key, cast) in _OVERRIDES.items():
            if cli_overrides.get(flag) is not None:
                data[section][key] = _cast(section, key, cast, cli_overrides[flag])
        return cls(raw=data)

    def dump_to(self, path: str) -> None:
        pathlib.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.raw, f)

    @property
    def pricing(self) -> dict: return self.raw["pricing"]

    @property
    def log_level(self) -> str: return str(self.raw["logging"]["level"]).upper()

    def __getitem__(self, k): return self.raw[k]


def add_common_args(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
    p.add_argument("--config", type=str, help=f"YAML config (default: ${CONFIG_ENV})")
    p.add_argument("--spot", type=float)
    p.add_argument("--strike", type=float)
    p.add_argument("--rate", type=float)
    p.add_argument("--days", type=float)     # time to maturity, days
    p.add_argument("--steps", type=int)
    p.add_argument("--sigma", type=float)
    p.add_argument("--log-level", dest="log_level", type=str,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p
