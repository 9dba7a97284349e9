#!/usr/bin/env python3
"""
Transition Op Config Loader

Loads a batch of transition ops from an INI config file. Ops are applied in
file order.

Config format (ops.ini):
    [op_name]
    a = from_location, to_location
    b = from_location, to_location

Example:
    [workshop_to_cellar]
    a = Highpool, HighpoolWorkshop
    b = AgCenter, AgCenterRootCellar
"""

import configparser
from pathlib import Path
from typing import Dict, List, Optional

from wltransit.errors import LocationLookupError
from wltransit.transitions.trans_op import TransOp
from wltransit.locations.names import parse_loc_pair
from wltransit.utils import log, logWarning


class TransOpConfig:
    """
    Config loader for transition op batches.

    Provides the ops in file order and lookup by section name.
    """

    def __init__(self, config_path: Path):
        """
        Load ops from INI file.

        Args:
            config_path: Path to ops.ini
        """
        # Dict: op name -> TransOp, in file order
        self._ops: Dict[str, TransOp] = {}
        self._config_path = Path(config_path)
        self._load_config(self._config_path)

    def _load_config(self, config_path: Path):
        """Parse INI file and populate ops dict."""
        if not config_path.exists():
            logWarning(f"Transition op config not found: {config_path}")
            return

        config = configparser.ConfigParser()
        # Preserve case sensitivity for section names and keys
        config.optionxform = str
        config.read(config_path, encoding='utf-8')

        error_count = 0

        for section in config.sections():
            data = config[section]

            if 'a' not in data or 'b' not in data:
                logWarning(f"Missing 'a' or 'b' in [{section}]")
                error_count += 1
                continue

            try:
                a = parse_loc_pair(data['a'])
                b = parse_loc_pair(data['b'])
            except LocationLookupError as e:
                logWarning(f"Invalid op [{section}]: {e}")
                error_count += 1
                continue

            self._ops[section] = TransOp(a=a, b=b)

        if error_count > 0:
            logWarning(f"  {error_count} op config errors")

        log(f"Transition ops: {config_path} ({len(self._ops)} ops)")

    def get_ops(self) -> List[TransOp]:
        """All ops in file order."""
        return list(self._ops.values())

    def get_op(self, name: str) -> Optional[TransOp]:
        return self._ops.get(name)

    @property
    def op_count(self) -> int:
        """Total number of ops loaded."""
        return len(self._ops)

    def __repr__(self) -> str:
        return f"TransOpConfig({self._config_path}, ops={list(self._ops)})"
