"""Runtime settings read from the environment (and a local .env file)."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from vastucompass.i18n import LANGUAGES
from vastucompass.models import GridResolution

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """An environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: str | None = None
    language: str = "en"
    grid_resolution: GridResolution = GridResolution.PADAS_81
    plot_half_size_m: float = 15.0  # Half the side of an auto-placed plot square


def _read_choice(
    env: Mapping[str, str], key: str, default: str, choices: tuple[str, ...], upper: bool = False
) -> str:
    value = env.get(key, "").strip() or default
    if upper:
        value = value.upper()
    if value not in choices:
        raise ConfigError(f"{key} must be one of {', '.join(choices)}, got {value!r}")
    return value


def _read_positive_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e
    if not value > 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read instead of os.environ. Blank values count as
            unset. When None, a .env file in the working directory is
            loaded first.

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If any variable is set to an invalid non-blank value.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    log_level = _read_choice(env, "VASTU_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True)
    language = _read_choice(env, "VASTU_LANGUAGE", "en", LANGUAGES)
    resolution = _read_choice(
        env, "VASTU_GRID_RESOLUTION", GridResolution.PADAS_81.value, tuple(r.value for r in GridResolution)
    )
    return Settings(
        log_level=log_level,
        log_file=env.get("VASTU_LOG_FILE", "").strip() or None,
        language=language,
        grid_resolution=GridResolution(resolution),
        plot_half_size_m=_read_positive_float(env, "VASTU_PLOT_HALF_SIZE_M", 15.0),
    )
