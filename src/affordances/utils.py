import json
import logging
from pathlib import Path
from typing import Any, Dict


def load_settings(config_file: Path | None, required: bool = True) -> Dict[str, Any]:
    try:
        if config_file:
            with open(config_file, 'r') as config_handle:
                return json.load(config_handle)
    except (OSError, json.JSONDecodeError) as e:
        if required:
            logging.error(f"Error loading config file {config_file}: {e}")
        return {}

    return {}


def configure_logging(level: str = "info") -> int:
    """Set the root logging level from a config-style name ('debug', 'info', ...); returns the level used."""
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        logging.warning(f"Unknown log level '{level}', using INFO")
        numeric = logging.INFO
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(numeric)
    return numeric
