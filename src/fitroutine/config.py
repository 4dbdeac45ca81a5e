"""
Settings for fitroutine.

Values come from config/fitroutine.yaml when present, then from the
environment (a .env file is honoured).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv


CONFIG_RELATIVE_PATH = Path("config") / "fitroutine.yaml"
# Fallback for runs from a source checkout
CHECKOUT_CONFIG_PATH = Path(__file__).parent.parent.parent / CONFIG_RELATIVE_PATH
DEFAULT_STORAGE_PATH = Path.home() / ".fitroutine" / "progress.json"


def find_config_path() -> Optional[Path]:
    """config/fitroutine.yaml under the working directory, else the checkout copy."""
    for candidate in (Path.cwd() / CONFIG_RELATIVE_PATH, CHECKOUT_CONFIG_PATH):
        if candidate.exists():
            return candidate
    return None


def load_config_yaml(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load configuration from YAML file, return empty dict if not found."""
    path = Path(config_path) if config_path else find_config_path()
    if path is not None and path.exists():
        with open(path) as f:
            return yaml.safe_load(f) or {}
    return {}


@dataclass
class Settings:
    storage_path: Path = DEFAULT_STORAGE_PATH
    history_limit: int = 10  # routines kept in progress history
    log_level: str = "INFO"
    catalog_path: Optional[Path] = None  # None = packaged catalog

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> 'Settings':
        """Load settings from YAML, then apply FITROUTINE_* environment overrides."""
        load_dotenv()
        yaml_config = load_config_yaml(config_path)

        storage = yaml_config.get('storage', {}) or {}
        logging_cfg = yaml_config.get('logging', {}) or {}
        catalog = yaml_config.get('catalog', {}) or {}

        storage_path = os.getenv("FITROUTINE_STORAGE_PATH", storage.get('path'))
        history_limit = os.getenv("FITROUTINE_HISTORY_LIMIT", storage.get('history_limit', 10))
        log_level = os.getenv("FITROUTINE_LOG_LEVEL", logging_cfg.get('level', "INFO"))
        catalog_path = os.getenv("FITROUTINE_CATALOG", catalog.get('path'))

        return cls(
            storage_path=Path(storage_path).expanduser() if storage_path else DEFAULT_STORAGE_PATH,
            history_limit=int(history_limit),
            log_level=str(log_level).upper(),
            catalog_path=Path(catalog_path).expanduser() if catalog_path else None,
        )
