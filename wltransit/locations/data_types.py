"""
Data types for location lookups.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple


class LocPair(NamedTuple):
    """Ordered pair of location codes (from -> to)"""
    from_loc: int
    to_loc: int

    def mirror(self) -> 'LocPair':
        return LocPair(self.to_loc, self.from_loc)


class SubLocDesc(NamedTuple):
    """Addresses one transition slot: (game index, block index, selector)"""
    game_idx: int
    block_idx: int
    selector: int


class SubLocOverride(NamedTuple):
    """Exact from/to codes for a transition slot. None keeps the regular location."""
    from_loc: Optional[int]
    to_loc: Optional[int]


@dataclass(frozen=True)
class TransXList:
    """Selector blacklist and whitelist for one role"""
    black: Tuple[int, ...] = ()
    white: Tuple[int, ...] = ()


@dataclass(frozen=True)
class TransXListPair:
    """Exception lists for a location pair, split by role"""
    read: TransXList = field(default_factory=TransXList)  # Entries copied from
    write: TransXList = field(default_factory=TransXList)  # Entries copied to
