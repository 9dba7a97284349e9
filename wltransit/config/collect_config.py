#!/usr/bin/env python3
"""
Collect Config Loader

Loads the transition filter toggles from an INI file.

Config format (collect.ini):
    [collect]
    keep_world = false
    keep_relative = false
    keep_shops = false
    keep_derelict = false
    keep_previous = false
    keep_auto_intra = false
    keep_hardcoded_intra = false
    keep_post_sewers = true

Missing keys keep their default (false).
"""

import configparser
from dataclasses import fields
from pathlib import Path

from wltransit.collect.filter_policy import CollectConfig
from wltransit.errors import ConfigError
from wltransit.utils import log, logWarning

COLLECT_SECTION = 'collect'


def load_collect_config(config_path: Path) -> CollectConfig:
    """
    Load filter toggles from an INI file.

    Args:
        config_path: Path to collect.ini

    Returns:
        CollectConfig. Defaults are used when the file or section is missing.

    Raises:
        ConfigError: if a toggle is not a boolean
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logWarning(f"Collect config not found: {config_path}, using defaults")
        return CollectConfig()

    config = configparser.ConfigParser()
    config.read(config_path, encoding='utf-8')

    if not config.has_section(COLLECT_SECTION):
        logWarning(f"No [{COLLECT_SECTION}] section in {config_path}, using defaults")
        return CollectConfig()

    section = config[COLLECT_SECTION]
    known = {f.name for f in fields(CollectConfig)}

    for key in section:
        if key not in known:
            logWarning(f"Unknown key in [{COLLECT_SECTION}] {key}")

    values = {}
    for name in known:
        if name not in section:
            continue
        try:
            values[name] = section.getboolean(name)
        except ValueError as e:
            raise ConfigError(f"Invalid value for [{COLLECT_SECTION}] {name}: {e}") from e

    cfg = CollectConfig(**values)
    log(f"Collect config: {config_path}")
    return cfg
