"""
Configuration resolver for the pick engine.

Turns an optional, untrusted override payload (parsed JSON, usually from a
config file) into a validated :class:`~backend.core.pick_config.PickConfig`.

Resolution never raises.  Any problem with the payload (not a mapping,
wrong types, out-of-range values, inverted bounds) discards the *whole*
payload and the defaults are used instead, so a bad config file can never
stop the app from showing a pick.  The discard is logged at WARNING.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from backend.core.pick_config import PickConfig, merge_config
from backend.schemas import PickConfigOverrides

logger = logging.getLogger(__name__)

#: Environment variable naming a JSON file of config overrides.
CONFIG_PATH_ENV = "PICKS_CONFIG_PATH"


def resolve_config(overrides: Optional[Any] = None) -> PickConfig:
    """
    Merge ``overrides`` over the default configuration.

    Args:
        overrides: Partial config mapping using the camelCase wire names
            (``{"marketWeight": 0.8, "siggy": {"underdogBump": 0.02}}``)
            or the snake_case field names.  ``None`` means defaults.

    Returns:
        A new, validated :class:`PickConfig`.  The default instance is never
        modified.
    """
    default = PickConfig.default()
    if overrides is None:
        return default
    if not isinstance(overrides, Mapping):
        logger.warning(
            "Ignoring pick config overrides: expected a mapping, got %s",
            type(overrides).__name__,
        )
        return default

    try:
        changes = PickConfigOverrides.model_validate(dict(overrides)).to_changes()
        config = merge_config(default, changes)
        config.validate()
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning("Ignoring pick config overrides, using defaults: %s", e)
        return default

    return config


def load_config_file(path: Union[str, Path, None] = None) -> PickConfig:
    """
    Resolve the configuration from a JSON override file.

    Args:
        path: File to read.  Falls back to ``$PICKS_CONFIG_PATH``; when
            neither is set the defaults are returned.

    Returns:
        The resolved :class:`PickConfig`.  Unreadable files and invalid JSON
        fall back to defaults, like any other malformed payload.
    """
    path = path or os.getenv(CONFIG_PATH_ENV)
    if not path:
        return PickConfig.default()

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load pick config %s, using defaults: %s", path, e)
        return PickConfig.default()

    logger.info("Loaded pick config overrides from %s", path)
    return resolve_config(payload)
