from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
import sys
import tomllib
from typing import Any, ClassVar, TypeVar

import keyring
from keyring.errors import KeyringError
from loguru import logger

from binance_rest.client import API_HOST, DEFAULT_TIMEOUT_S

# --- Constants ---
APP_NAME = "binance-rest"
if sys.platform == "win32":
    CONFIG_DIR = Path.home() / "AppData" / "Roaming" / APP_NAME
else:
    CONFIG_DIR = Path.home() / ".config" / APP_NAME

CONFIG_FILE = CONFIG_DIR / "config.toml"

# --- Keyring ---
KEYRING_SERVICE_NAME = f"{APP_NAME}-api-keys"
KEYRING_KEY_ENTRY = "api_key"
KEYRING_SECRET_ENTRY = "secret_key"

T = TypeVar("T")


@dataclass
class GeneralSettings:
    """Logging settings for applications built on the client."""

    log_level_console: str = "INFO"
    log_level_file: str = "DEBUG"
    log_directory: str = str(CONFIG_DIR / "logs")


@dataclass
class APISettings:
    """Where and how to reach the exchange."""

    # Credentials live in the system keyring, never in the config file.
    base_url: str = API_HOST
    timeout_s: float = DEFAULT_TIMEOUT_S


@dataclass
class Settings:
    """Root container for all settings."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    api: APISettings = field(default_factory=APISettings)

    _instance: ClassVar["Settings | None"] = None

    @classmethod
    def get_instance(cls) -> "Settings":
        """Returns the process-wide Settings, loading them on first use."""
        if cls._instance is None:
            cls._instance = load_config()
        return cls._instance


def _coerce_scalar(name: str, value: Any, default: Any) -> Any:
    """Checks a config value against the type of the field's default.

    Integers are accepted where a float is expected. Anything else of the
    wrong type is reported and the default is kept.
    """
    if isinstance(default, float) and isinstance(value, int | float):
        if not isinstance(value, bool):
            return float(value)
    elif type(value) is type(default):
        return value

    logger.warning(
        f"Ignoring '{name}' = {value!r}: expected {type(default).__name__}, "
        f"got {type(value).__name__}."
    )
    return default


def _update_dataclass(dc_instance: T, data: dict[str, Any], prefix: str = "") -> T:
    """Recursively updates a dataclass instance from a dictionary."""
    for f in field_names(dc_instance):
        if f not in data:
            continue
        name = f"{prefix}{f}"
        field_value = getattr(dc_instance, f)
        if is_dataclass(field_value):
            if not isinstance(data[f], dict):
                logger.warning(
                    f"Ignoring '{name}': expected a table, "
                    f"got {type(data[f]).__name__}."
                )
                continue
            _update_dataclass(field_value, data[f], prefix=f"{name}.")
        else:
            setattr(dc_instance, f, _coerce_scalar(name, data[f], field_value))
    return dc_instance


def field_names(dc_instance: Any) -> list[str]:
    """Helper to get field names from a dataclass instance."""
    return [f.name for f in dc_instance.__dataclass_fields__.values()]


def load_config(path: Path = CONFIG_FILE) -> Settings:
    """Loads settings from a TOML file, merging them with defaults.

    If the config file does not exist, a commented stub is written in its
    place and the defaults are returned. A malformed file is reported and
    ignored; sections or values of the wrong type are reported and replaced
    by their defaults.

    Args:
        path: The path to the configuration file.

    Returns:
        A populated Settings object.
    """
    settings_obj = Settings()
    logger.info(f"Loading configuration from '{path}'...")

    if not path.exists():
        logger.warning(f"Configuration file not found. Creating default at '{path}'.")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write("# binance-rest configuration file\n")
                f.write("# [api]\n")
                f.write(f'# base_url = "{API_HOST}"\n')
                f.write(f"# timeout_s = {DEFAULT_TIMEOUT_S}\n")
        except OSError as e:
            logger.error(f"Failed to create default config file: {e}")
        return settings_obj

    try:
        with path.open("rb") as f:
            user_config = tomllib.load(f)
        _update_dataclass(settings_obj, user_config)
        logger.success("Successfully loaded user configuration.")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML from '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
    except OSError as e:
        logger.error(f"Could not read configuration file '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")

    return settings_obj


# --- Keyring Management ---


def get_api_credentials() -> tuple[str | None, str | None]:
    """Retrieves the API key and secret key from the system keyring.

    Returns:
        A tuple of (api_key, secret_key). Missing entries, or an unusable
        keyring backend, yield None in their place.
    """
    try:
        api_key = keyring.get_password(KEYRING_SERVICE_NAME, KEYRING_KEY_ENTRY)
        secret_key = keyring.get_password(KEYRING_SERVICE_NAME, KEYRING_SECRET_ENTRY)
    except KeyringError as e:
        logger.error(f"Could not retrieve credentials from keyring: {e}")
        return None, None

    if api_key or secret_key:
        logger.debug("Retrieved API credentials from keyring.")
    return api_key, secret_key


def set_api_credentials(api_key: str, secret_key: str) -> None:
    """Stores the API key and secret key in the system keyring.

    Raises:
        KeyringError: If the keyring backend rejects the write.
    """
    keyring.set_password(KEYRING_SERVICE_NAME, KEYRING_KEY_ENTRY, api_key)
    keyring.set_password(KEYRING_SERVICE_NAME, KEYRING_SECRET_ENTRY, secret_key)
    logger.info("Successfully stored API credentials in keyring.")
