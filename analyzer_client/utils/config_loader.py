import logging
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_CONFIG_PATH = os.path.join(ROOT_DIR, "configs", "config.yaml")

BACKEND_URL_ENV = "BACKEND_URL"


class ConfigError(RuntimeError):
    """Raised when the client cannot start with the given configuration."""


class ClientSettings(BaseModel):
    """Validated runtime settings for the analyzer client."""

    backend_url: str
    request_timeout: float = Field(default=300, gt=0)
    score_scale: int = Field(default=10, gt=0)
    log_cell_chars: int = Field(default=60, gt=1)
    log_level: str = "INFO"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load YAML configuration for the client.

    Args:
        config_path: Optional path override for the config file.

    Returns:
        Parsed configuration dictionary.
    """

    path = config_path or DEFAULT_CONFIG_PATH
    abs_path = os.path.abspath(path)
    if not os.path.exists(abs_path):
        raise FileNotFoundError(f"Config file not found: {abs_path}")

    with open(abs_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data


def load_settings(
    config_path: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
) -> ClientSettings:
    """
    Build ``ClientSettings`` from the YAML file plus the ``BACKEND_URL`` override.

    A missing or blank backend address is a startup error, never an implicit
    relative URL. A missing config file means "all defaults"; the
    environment variable alone is then enough to start.
    """

    env = os.environ if environ is None else environ
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        logging.getLogger(__name__).info(f"{e}; using defaults")
        config = {}
    backend = config.get("backend") or {}
    display = config.get("display") or {}
    log_config = config.get("logging") or {}

    base_url = (env.get(BACKEND_URL_ENV) or backend.get("base_url") or "").strip()
    if not base_url:
        raise ConfigError(
            f"Backend base URL is not configured. Set {BACKEND_URL_ENV} "
            f"or backend.base_url in the config file."
        )

    try:
        return ClientSettings(
            backend_url=base_url.rstrip("/"),
            request_timeout=backend.get("request_timeout", 300),
            score_scale=display.get("score_scale", 10),
            log_cell_chars=display.get("log_cell_chars", 60),
            log_level=str(log_config.get("level", "INFO")).upper(),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid client configuration: {e}") from e


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stream handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    root.setLevel(level)
