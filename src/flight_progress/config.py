"""
Configuration module for the Flight Progress Engine.

Centralizes tunable values (arc sampling, curvature, cache sizing) and
chart styling. Engine values can be overridden from environment
variables; entry points load a .env file before calling from_env().
"""

import os
from dataclasses import dataclass
from typing import Optional

from flight_progress.exceptions import InvalidEngineConfigError

CURVATURE_PROFILES = ("constant", "distance_tiered")
POSITION_MODES = ("nearest", "continuous")

_ENV_PREFIX = "FLIGHT_PROGRESS_"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidEngineConfigError(name.lower(), raw, "expected an integer")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidEngineConfigError(name.lower(), raw, "expected a number")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


@dataclass(frozen=True)
class EngineConfig:
    """
    Tunable parameters of the progress engine.

    Attributes:
        sample_count: Number of Bezier segments; arcs hold sample_count + 1 points.
        curvature_factor: Bow magnitude as a fraction of route length
            (used by the "constant" profile).
        curvature_profile: "constant" or "distance_tiered".
        cache_enabled: Memoize arcs per rounded endpoint pair.
        cache_precision: Decimal places used to round cache keys.
        cache_max_entries: Upper bound on memoized arcs (oldest evicted first).
        position_mode: "nearest" snaps the marker to an arc sample,
            "continuous" blends between samples.
    """

    sample_count: int = 50
    curvature_factor: float = 0.3
    curvature_profile: str = "constant"
    cache_enabled: bool = True
    cache_precision: int = 6
    cache_max_entries: int = 1024
    position_mode: str = "nearest"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.position_mode not in POSITION_MODES:
            raise InvalidEngineConfigError(
                "position_mode",
                self.position_mode,
                f"must be one of {', '.join(POSITION_MODES)}",
            )
        if self.sample_count < 1:
            raise InvalidEngineConfigError(
                "sample_count", self.sample_count, "must be >= 1"
            )
        if self.curvature_factor < 0:
            raise InvalidEngineConfigError(
                "curvature_factor", self.curvature_factor, "must be >= 0"
            )
        if self.curvature_profile not in CURVATURE_PROFILES:
            raise InvalidEngineConfigError(
                "curvature_profile",
                self.curvature_profile,
                f"must be one of {', '.join(CURVATURE_PROFILES)}",
            )
        if self.cache_precision < 0:
            raise InvalidEngineConfigError(
                "cache_precision", self.cache_precision, "must be >= 0"
            )
        if self.cache_max_entries < 1:
            raise InvalidEngineConfigError(
                "cache_max_entries", self.cache_max_entries, "must be >= 1"
            )

    @classmethod
    def from_env(cls, defaults: Optional["EngineConfig"] = None) -> "EngineConfig":
        """
        Build a config from FLIGHT_PROGRESS_* environment variables.

        Unset or blank variables keep the default value.

        Args:
            defaults: Base values; EngineConfig() if None.

        Returns:
            Validated EngineConfig.

        Raises:
            InvalidEngineConfigError: If a variable cannot be parsed or
                the resulting value is out of range.
        """
        base = defaults or cls()
        return cls(
            sample_count=_env_int("SAMPLE_COUNT", base.sample_count),
            curvature_factor=_env_float("CURVATURE_FACTOR", base.curvature_factor),
            curvature_profile=_env_str("CURVATURE_PROFILE", base.curvature_profile),
            cache_enabled=_env_bool("CACHE_ENABLED", base.cache_enabled),
            cache_precision=_env_int("CACHE_PRECISION", base.cache_precision),
            cache_max_entries=_env_int("CACHE_MAX_ENTRIES", base.cache_max_entries),
            position_mode=_env_str("POSITION_MODE", base.position_mode),
        )


@dataclass(frozen=True)
class ChartConfig:
    """Default styling for progress figures."""

    height: int = 500

    # Route strokes
    traveled_color: str = "#7c3aed"
    traveled_width: int = 4
    remaining_color: str = "#3b82f6"
    remaining_width: int = 3
    remaining_opacity: float = 0.4
    remaining_dash: str = "dash"

    # Markers
    airport_marker_color: str = "#10b981"
    airport_marker_size: int = 10
    aircraft_marker_color: str = "#ef4444"
    aircraft_marker_size: int = 14

    # Map geo settings
    map_projection: str = "equirectangular"
    land_color: str = "#f3f4f6"
    country_border_color: str = "#e5e7eb"
