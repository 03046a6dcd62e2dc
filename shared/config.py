"""
PassLens Configuration
=======================

Settings live in ``config.toml`` at the project root (or any file passed
with ``--config``) and map onto plain dataclasses.  Every key is
optional; missing keys keep the defaults below and unknown keys are
dropped, so an older PassLens can read a newer file.

    [global]   -> GlobalConfig   logging, output format, masking
    [meter]    -> MeterConfig    generator shape and attacker model

References:
    - Wiggins, A. (2011). The Twelve-Factor App, III. Config. https://12factor.net/
    - TOML v1.0.0. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

DEFAULT_SYMBOLS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_Section = TypeVar("_Section")


def _section(kind: type[_Section], table: Mapping[str, Any]) -> _Section:
    """Build dataclass *kind* from the keys of *table* it declares."""
    known = {f.name for f in fields(kind)}  # type: ignore[arg-type]
    return kind(**{k: v for k, v in table.items() if k in known})


@dataclass(slots=True)
class MeterConfig:
    """``[meter]``: generator and estimation settings.

    With the defaults, scores, entropy and crack-time labels match the
    reference heuristic.  ``symbol_pool_size`` and ``guesses_per_second``
    change the estimates; the generator fields change only the shape of
    generated passwords.
    """

    min_length: int = 16
    max_length: int = 24
    symbols: str = DEFAULT_SYMBOLS
    secure_random: bool = True

    guesses_per_second: float = 1e12
    symbol_pool_size: int = 32


@dataclass(slots=True)
class GlobalConfig:
    """``[global]``: logging, output and display settings."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_format: str = "console"
    mask_passwords: bool = True
    version: str = "1.0.0"


@dataclass(slots=True)
class LensConfig:
    """All PassLens settings.

    Usage::

        config = LensConfig.load()                 # ./config.toml or defaults
        config = LensConfig.load("ci.toml")        # explicit file
        config.meter.min_length                    # 16 unless overridden
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    meter: MeterConfig = field(default_factory=MeterConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LensConfig:
        """Build from an already parsed TOML document."""
        return cls(
            global_settings=_section(GlobalConfig, data.get("global", {})),
            meter=_section(MeterConfig, data.get("meter", {})),
        )

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> LensConfig:
        """Read settings from *path*, or from ``config.toml`` when omitted.

        A missing default file yields the defaults.

        Raises:
            FileNotFoundError: *path* was given and does not exist.
            tomllib.TOMLDecodeError: The file is not valid TOML.
        """
        if path is None:
            if not DEFAULT_CONFIG_PATH.is_file():
                return cls()
            source = DEFAULT_CONFIG_PATH
        else:
            source = Path(path)
            if not source.is_file():
                raise FileNotFoundError(f"Configuration file not found: {source}")

        with source.open("rb") as fh:
            return cls.from_mapping(tomllib.load(fh))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_cached: Optional[LensConfig] = None


def get_config(path: Optional[str | Path] = None) -> LensConfig:
    """Process-wide configuration.

    The first call (or any call with an explicit *path*) loads and caches;
    later calls without a path return the cached instance.
    """
    global _cached
    if _cached is None or path is not None:
        _cached = LensConfig.load(path)
    return _cached
