"""
Location names.

Converts exact location codes (regular or sub-location) to display strings and back.
"""

from wltransit.errors import LocationLookupError
from wltransit.locations.base_locations import LOCATION_NAME_MAP
from wltransit.locations.data_types import LocPair
from wltransit.locations.sub_locations import SUB_LOCATION_NAME_MAP


def location_string(loc: int) -> str:
    """
    User-friendly name for an exact location code.

    Unknown codes are rendered as "Unknown(<code>)".
    """
    name = SUB_LOCATION_NAME_MAP.get(loc) or LOCATION_NAME_MAP.get(loc)
    if name:
        return name
    return f"Unknown({loc})"


def location_full_string(loc: int) -> str:
    """Embellished form of location_string: '<code> (<name>)'."""
    return f"{loc} ({location_string(loc)})"


def loc_pair_string(pair: LocPair) -> str:
    return f"{location_string(pair.from_loc)} -> {location_string(pair.to_loc)}"


def parse_location(s: str) -> int:
    """
    Convert a name to an exact location code.

    Raises:
        LocationLookupError: if no location has that name
    """
    for loc, name in SUB_LOCATION_NAME_MAP.items():
        if s == name:
            return loc

    for loc, name in LOCATION_NAME_MAP.items():
        if s == name:
            return loc

    raise LocationLookupError(f"invalid location name: \"{s}\"")


def parse_location_nocase(s: str) -> int:
    """
    Convert a name to an exact location code, ignoring case.

    Raises:
        LocationLookupError: if no location has that name
    """
    folded = s.casefold()

    for loc, name in SUB_LOCATION_NAME_MAP.items():
        if folded == name.casefold():
            return loc

    for loc, name in LOCATION_NAME_MAP.items():
        if folded == name.casefold():
            return loc

    raise LocationLookupError(f"invalid location name: \"{s}\"")


def parse_loc_pair(s: str, ignore_case: bool = True) -> LocPair:
    """
    Parse a "From, To" string into a LocPair.

    Args:
        s: Two location names separated by a comma
        ignore_case: Match names case-insensitively

    Raises:
        LocationLookupError: if either name is unknown or the string is not a pair
    """
    parts = [p.strip() for p in s.split(',')]
    if len(parts) != 2 or not all(parts):
        raise LocationLookupError(f"invalid location pair: \"{s}\": expected 'From, To'")

    parse = parse_location_nocase if ignore_case else parse_location
    return LocPair(parse(parts[0]), parse(parts[1]))
