from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from client_pager.config.model import PagerConfig
from client_pager.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_pager_config(path: Union[str, Path]) -> PagerConfig:
    """
    Load pager configuration from a JSON file.
    Falls back to defaults if the file is missing.

    Raises:
        ConfigError: if the file is not valid JSON or holds invalid values
    """
    path = Path(path)
    logger.info("Loading pager config", extra={"config_path": str(path)})

    if not path.is_file():
        logger.warning(f"Pager config not found at: {path}, using defaults")
        return PagerConfig()

    try:
        with path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse {path.name}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")

    return PagerConfig.from_dict(raw)
