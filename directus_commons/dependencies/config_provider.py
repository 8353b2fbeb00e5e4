import os
from typing import Optional

from dotenv import load_dotenv

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.model.config_model import ClientConfig
from directus_commons.utils.errors import ConfigurationError


def get_env(key: str, default: Optional[str] = None) -> str:
    """Get environment variable or raise ConfigurationError if not found."""
    value = os.getenv(key, default)
    if value is None or value == "":
        raise ConfigurationError(AppMessage.ENV_MISSING.format(key=key))
    return value


def load_client_config(env_file: Optional[str] = None) -> ClientConfig:
    """
    Read the endpoint and token from the environment (and `.env`, if present).

    DIRECTUS_URL and DIRECTUS_TOKEN are required, DIRECTUS_TIMEOUT is optional.
    """
    load_dotenv(env_file)
    return ClientConfig(
        base_url=get_env(AppConstants.ENV_URL),
        token=get_env(AppConstants.ENV_TOKEN),
        timeout=_get_timeout(),
    )


def _get_timeout() -> float:
    raw = os.getenv(AppConstants.ENV_TIMEOUT, "").strip()
    if not raw:
        return AppConstants.DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(AppMessage.ENV_INVALID_NUMBER.format(key=AppConstants.ENV_TIMEOUT, value=raw)) from e
