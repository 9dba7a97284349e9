"""
Selector exception lists.

Restricts which transition slots may be read from or written to when one
transition's content is copied into another.
"""

from enum import Enum
from typing import List, Optional

from wltransit.collect.entries import TransEntry
from wltransit.locations.data_types import TransXList
from wltransit.locations.knowledge_base import DEFAULT_KNOWLEDGE_BASE, LocationKnowledgeBase
from wltransit.locations.names import location_string
from wltransit.utils import logDebug


class XListRole(Enum):
    """Which side of a copy an entry is on"""
    READ = "read"  # Content is copied from the entry
    WRITE = "write"  # Content is copied into the entry


def _select_xlist(entry: TransEntry, role: XListRole, kb: LocationKnowledgeBase) -> TransXList:
    xlists = kb.get_xlists(entry.raw_pair)
    return xlists.read if role is XListRole.READ else xlists.write


def filter_entries(entries: List[TransEntry], role: XListRole,
                   kb: Optional[LocationKnowledgeBase] = None) -> List[TransEntry]:
    """
    Apply whitelists and blacklists to a list of entries.

    A non-empty whitelist admits only its selectors. The blacklist then
    removes selectors from whatever remains.

    Args:
        entries: Entries to filter
        role: Whether the entries will be read from or written to
        kb: Knowledge base (defaults to DEFAULT_KNOWLEDGE_BASE)

    Returns:
        Entries that passed, in their original order
    """
    if kb is None:
        kb = DEFAULT_KNOWLEDGE_BASE

    filtered: List[TransEntry] = []
    for e in entries:
        xlist = _select_xlist(e, role, kb)
        name = location_string(e.from_loc)

        if xlist.white:
            if e.selector not in xlist.white:
                logDebug(f"delisting {name},{e.selector} ({role.value})")
                continue
            logDebug(f"whitelisting {name},{e.selector} ({role.value})")

        if e.selector in xlist.black:
            logDebug(f"blacklisting {name},{e.selector} ({role.value})")
            continue

        filtered.append(e)

    return filtered
