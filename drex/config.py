"""Environment configuration for dice rolling."""
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

SERVICE_NAME = "drex"

DEFAULT_MAX_DICE = 1_000
DEFAULT_MAX_SIDES = 1_000_000


def _int_env(key: str, default: int | None, minimum: int | None = None) -> int | None:
    """Read an integer environment variable.

    Args:
        key: Environment variable name
        default: Value used when the variable is unset or empty
        minimum: Optional lowest accepted value

    Returns:
        Parsed integer, or the default

    Raises:
        ConfigurationError: If the value is not an integer or is below minimum
    """
    raw = os.environ.get(key, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer, got '{raw}'",
            config_key=key,
        ) from None

    if minimum is not None and value < minimum:
        raise ConfigurationError(
            f"{key} must be at least {minimum}, got {value}",
            config_key=key,
        )
    return value


@dataclass
class Config:
    """Dice configuration loaded from environment variables."""

    max_dice: int
    max_sides: int
    seed: int | None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        return cls(
            max_dice=_int_env("DREX_MAX_DICE", DEFAULT_MAX_DICE, minimum=1),
            max_sides=_int_env("DREX_MAX_SIDES", DEFAULT_MAX_SIDES, minimum=1),
            seed=_int_env("DREX_SEED", None),
        )

    @property
    def is_seeded(self) -> bool:
        """Check if the default random source is seeded."""
        return self.seed is not None


def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config instance (cached after first call)
    """
    if not hasattr(get_config, "_config"):
        get_config._config = Config.from_env()
    return get_config._config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    if hasattr(get_config, "_config"):
        del get_config._config
