"""Constants used in the project."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    MANIFEST_EXTENSION = ".nuspec"
    RESTORE_INDEX_FILE = "project.assets.json"
    LIBRARY_TYPE_PACKAGE = "package"
    TAG_SEPARATOR = " "
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    ENV_CONFIG_PATH = "JAVAFINDER_CONFIG"
    ENV_LOG_LEVEL = "JAVAFINDER_LOG_LEVEL"
    DEFAULT_CONFIG_PATHS = [
        os.path.join("~", ".config", "javafinder", "javafinder.yml"),
        os.path.join("~", ".javafinder.yml"),
    ]


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the optional YAML configuration file.

    Looks at ``path`` first, then the ``JAVAFINDER_CONFIG`` environment
    variable, then the default locations. Returns an empty dict when no
    file is found or the file cannot be parsed.
    """
    import yaml

    candidates = []
    if path:
        candidates.append(path)
    env_path = os.environ.get(Constants.ENV_CONFIG_PATH)
    if env_path and env_path.strip():
        candidates.append(env_path.strip())
    candidates.extend(Constants.DEFAULT_CONFIG_PATHS)

    for candidate in candidates:
        expanded = os.path.expanduser(candidate)
        if not os.path.isfile(expanded):
            continue
        try:
            with open(expanded, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Couldn't load config file %s: %s", expanded, e)
            return {}
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config file %s: top level is not a mapping", expanded)
        return {}
    return {}


def apply_config(cfg: Optional[Dict[str, Any]]) -> None:
    """Apply the ``finder`` section of a config dict onto ``Constants``.

    Recognized keys: ``manifest_extension``, ``restore_index_file``,
    ``tag_separator``. Unknown keys are ignored; bad values are logged and
    skipped so a broken config never breaks resolution.
    """
    if not isinstance(cfg, dict):
        return
    section = cfg.get("finder", cfg)
    if not isinstance(section, dict):
        return

    overrides = {
        "manifest_extension": "MANIFEST_EXTENSION",
        "restore_index_file": "RESTORE_INDEX_FILE",
        "tag_separator": "TAG_SEPARATOR",
    }
    for key, attr in overrides.items():
        value = section.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value:
            logger.warning("Ignoring config value for %s: expected a non-empty string", key)
            continue
        setattr(Constants, attr, value)
