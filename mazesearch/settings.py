"""
Settings Module - persistent defaults for maze generation and solving.

Settings live in a JSON file (``mazesearch.json`` in the working directory
unless another path is given). Missing keys fall back to DEFAULT_SETTINGS.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("mazesearch.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "rows": 15,
    "cols": 15,
    "algorithm": "best_first",
    "diagonals": False,
    "seed": None,
}


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file; SETTINGS_FILE when omitted

    Returns:
        Settings dictionary. Returns defaults if the file is missing or invalid.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    if not settings_file.exists():
        logger.debug("Settings file %s not found, using defaults", settings_file)
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load settings from %s: %s, using defaults", settings_file, e)
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings file %s does not hold an object, using defaults", settings_file)
        return DEFAULT_SETTINGS.copy()

    unknown = sorted(set(settings) - set(DEFAULT_SETTINGS))
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))

    # Merge with defaults to handle missing keys
    result = DEFAULT_SETTINGS.copy()
    result.update({key: value for key, value in settings.items() if key in DEFAULT_SETTINGS})
    logger.debug("Settings loaded: %s", result)
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Union[str, Path]] = None) -> Path:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file; SETTINGS_FILE when omitted

    Returns:
        The path written to
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_file, 'w', encoding='utf-8') as f:
        json.dump(settings, f, indent=2)
    logger.debug("Settings saved to %s: %s", settings_file, settings)
    return settings_file
