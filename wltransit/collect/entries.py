"""
Transition entries.

A TransEntry annotates one transition record with what is needed to replace
it with another: the block and slot it lives in, and its exact endpoints.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from wltransit.decode.state import BlockZIP, Transition
from wltransit.locations.data_types import LocPair


@dataclass
class TransEntry:
    """Single transition, annotated with its addressing context"""
    from_block: BlockZIP
    from_loc: int  # Regular location of from_block (never a sub-location)
    trans: Transition  # Snapshot of the record when it was collected
    selector: int  # Slot in the block's transition table

    from_exact_loc: int
    to_exact_loc: int

    @property
    def exact_pair(self) -> LocPair:
        return LocPair(self.from_exact_loc, self.to_exact_loc)

    @property
    def raw_pair(self) -> LocPair:
        """(regular source, raw destination); the key of the exception lists."""
        return LocPair(self.from_loc, self.trans.location)


def copy_entries(entries: Optional[List[TransEntry]]) -> Optional[List[TransEntry]]:
    """Deep copy a list of entries, including the transition snapshots."""
    if entries is None:
        return None
    return [replace(e, trans=replace(e.trans)) for e in entries]
