"""Loading the YAML configuration."""

import os
from pathlib import Path

import yaml

from gameshelf_news.config.models import GameshelfNewsConfig

CONFIG_ENV_VAR = "GAMESHELF_NEWS_CONFIG"

_BUNDLED_CONFIG = Path(__file__).resolve().parents[3] / "configs" / "default.yaml"


def load_config(path: Path | str) -> GameshelfNewsConfig:
    """Read a YAML file into a validated config.

    Sections and keys left out of the file keep their defaults, so an empty
    file is a valid config.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If a value is out of range or unknown.
    """
    with Path(path).open() as f:
        raw = yaml.safe_load(f)
    return GameshelfNewsConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Config path from ``$GAMESHELF_NEWS_CONFIG``, else the bundled ``configs/default.yaml``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return _BUNDLED_CONFIG
