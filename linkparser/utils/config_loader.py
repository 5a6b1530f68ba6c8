import os
from typing import Any, Dict, Optional

import yaml

from pydantic_settings import BaseSettings, SettingsConfigDict

from linkparser.utils.env_loader import load_environment


DEFAULT_USER_AGENT = "LinkParserBot/1.0"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "../config/config.yaml")


class Config(BaseSettings):
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    log_path: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="LINKPARSER_", env_file=".env", extra="ignore")


def _load_yaml_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    path = config_path or os.getenv("LINKPARSER_CONFIG") or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        return {}

    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: Optional[str] = None) -> Config:
    load_environment()
    file_data = _load_yaml_config(config_path)
    fetcher_settings: Dict[str, Any] = file_data.get("fetcher") or {}
    logging_settings: Dict[str, Any] = file_data.get("logging") or {}

    # env -> config file -> default
    user_agent = (
        os.getenv("LINKPARSER_USER_AGENT")
        or fetcher_settings.get("user_agent")
        or DEFAULT_USER_AGENT
    )
    request_timeout = (
        os.getenv("LINKPARSER_REQUEST_TIMEOUT")
        or fetcher_settings.get("request_timeout")
        or DEFAULT_REQUEST_TIMEOUT
    )
    log_level = os.getenv("LINKPARSER_LOG_LEVEL") or logging_settings.get("level") or "INFO"
    log_path = os.getenv("LINKPARSER_LOG_PATH") or logging_settings.get("path")

    return Config(
        user_agent=user_agent,
        request_timeout=request_timeout,
        log_level=log_level,
        log_path=log_path,
    )


def get_user_agent() -> str:
    """Return the configured User-Agent string."""
    return load_config().user_agent
