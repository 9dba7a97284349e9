#!/usr/bin/env python3
"""
Exception List Config Loader

Loads selector exception lists from an INI file. The lists overlay the
built-in ones: a pair present in the file replaces the built-in entry.

Config format (exceptions.ini):
    [from_location, to_location]
    read.black = 12
    read.white =
    write.black = 3, 4
    write.white =

Section names are location names (case-insensitive). The pair is
(regular source location, raw destination location) of the transitions.

Example:
    [Needles, NeedlesDowntownWest]
    read.white = 20
"""

import configparser
from pathlib import Path
from typing import Dict, Tuple

from wltransit.errors import LocationLookupError
from wltransit.locations.data_types import LocPair, TransXList, TransXListPair
from wltransit.locations.names import parse_loc_pair
from wltransit.utils import log, logWarning

_KEYS = ('read.black', 'read.white', 'write.black', 'write.white')


def _parse_selectors(value: str) -> Tuple[int, ...]:
    """Parse comma-separated selectors; raises ValueError on a bad number."""
    return tuple(int(s.strip()) for s in value.split(',') if s.strip())


def load_xlist_overlay(config_path: Path) -> Dict[LocPair, TransXListPair]:
    """
    Parse an exception list INI file.

    Sections with an unknown location name, an unknown key or a malformed
    selector are skipped whole with a warning, leaving any built-in list for
    the pair in place.

    Args:
        config_path: Path to exceptions.ini

    Returns:
        Dict mapping LocPair -> TransXListPair (empty if the file is missing)
    """
    overlay: Dict[LocPair, TransXListPair] = {}
    config_path = Path(config_path)

    if not config_path.exists():
        logWarning(f"Exception list config not found: {config_path}")
        return overlay

    config = configparser.ConfigParser()
    # Preserve case sensitivity for section names and keys
    config.optionxform = str
    config.read(config_path, encoding='utf-8')

    error_count = 0

    for section in config.sections():
        try:
            pair = parse_loc_pair(section)
        except LocationLookupError as e:
            logWarning(f"Skipping exception list [{section}]: {e}")
            error_count += 1
            continue

        lists: Dict[str, Tuple[int, ...]] = {}
        valid = True
        for key, value in config.items(section):
            if key not in _KEYS:
                logWarning(f"Unknown key in [{section}] {key}: expected one of {', '.join(_KEYS)}")
                error_count += 1
                valid = False
                continue
            try:
                lists[key] = _parse_selectors(value)
            except ValueError as e:
                logWarning(f"Invalid selector list in [{section}] {key}: {e}")
                error_count += 1
                valid = False

        if not valid:
            continue

        overlay[pair] = TransXListPair(
            read=TransXList(black=lists.get('read.black', ()), white=lists.get('read.white', ())),
            write=TransXList(black=lists.get('write.black', ()), white=lists.get('write.white', ())),
        )

    if error_count > 0:
        logWarning(f"  {error_count} exception list config errors")

    log(f"Exception lists: {config_path} ({len(overlay)} pairs)")
    return overlay
