"""
Location Knowledge Base

Static tables the collector, filter and transition-op executor are defined
in terms of:

- depth tier of every location
- sub-location overrides (transition slot -> exact from/to)
- intra-area pairs (two sections of one area)
- locations gated behind the Las Vegas sewers
- per-pair selector exception lists for reads and writes

The tables are held in an immutable LocationKnowledgeBase. DEFAULT_KNOWLEDGE_BASE
is built once at import time; overlays produce a new object.
"""

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from wltransit.locations import base_locations as base
from wltransit.locations import sub_locations as sub
from wltransit.locations.data_types import (
    LocPair, SubLocDesc, SubLocOverride, TransXList, TransXListPair,
)
from wltransit.utils import logDebug

# Transitions which take the player from one section of an area to another
INTRA_TRANSITIONS: Tuple[LocPair, ...] = (
    LocPair(base.LOCATION_BLOOD_TEMPLE_TOP, base.LOCATION_BLOOD_TEMPLE_BOTTOM),
    LocPair(base.LOCATION_BLOOD_TEMPLE_BOTTOM, base.LOCATION_BLOOD_TEMPLE_TOP),
    LocPair(base.LOCATION_LAS_VEGAS_SEWERS_WEST, base.LOCATION_LAS_VEGAS_SEWERS_EAST),
    LocPair(base.LOCATION_LAS_VEGAS_SEWERS_EAST, base.LOCATION_LAS_VEGAS_SEWERS_WEST),
    LocPair(base.LOCATION_NEEDLES_DOWNTOWN_WEST, base.LOCATION_NEEDLES_DOWNTOWN_EAST),
    LocPair(base.LOCATION_NEEDLES_DOWNTOWN_EAST, base.LOCATION_NEEDLES_DOWNTOWN_WEST),
)

# Depth of each location. The world map is 0; interiors are deeper.
# A shallow-to-deep transition (Highpool -> cave) must not be replaced by a
# deep-to-shallow one (courthouse -> Quartz).
LOCATION_DEPTH_MAP: Dict[int, int] = {
    base.LOCATION_WORLD_MAP: 0,
    base.LOCATION_QUARTZ: 1,
    base.LOCATION_SCOTTS_BAR: 2,
    base.LOCATION_STAGE_COACH_INN: 2,
    base.LOCATION_UGLYS_HIDEOUT: 2,
    base.LOCATION_QUARTZ_DERELICT_BUILDINGS: 2,
    base.LOCATION_COURTHOUSE: 2,
    base.LOCATION_SLEEPER_BASE_LEVEL1: 1,
    base.LOCATION_DESERT_NOMADS: 1,
    base.LOCATION_AG_CENTER: 1,
    base.LOCATION_HIGHPOOL: 1,
    base.LOCATION_LAS_VEGAS_DERELICT_BUILDINGS: 2,
    base.LOCATION_LAS_VEGAS: 1,
    base.LOCATION_SLEEPER_BASE_LEVEL2: 2,
    base.LOCATION_SLEEPER_BASE_LEVEL3: 2,
    base.LOCATION_BASE_COCHISE_OUTSIDE: 2,
    base.LOCATION_BASE_COCHISE_LEVEL1: 3,
    base.LOCATION_BASE_COCHISE_LEVEL3: 3,
    base.LOCATION_BASE_COCHISE_LEVEL2: 3,
    base.LOCATION_BASE_COCHISE_LEVEL4: 3,
    base.LOCATION_DARWIN: 1,
    base.LOCATION_DARWIN_BASE: 2,
    base.LOCATION_FINSTERS_BRAIN: 2,
    base.LOCATION_LAS_VEGAS_SEWERS_WEST: 3,
    base.LOCATION_LAS_VEGAS_SEWERS_EAST: 3,
    base.LOCATION_NEEDLES: 1,
    base.LOCATION_BLOOD_TEMPLE_TOP: 2,
    base.LOCATION_BLOOD_TEMPLE_BOTTOM: 2,
    base.LOCATION_VERMIN_CAVE: 2,
    base.LOCATION_WASTE_PIT: 2,
    base.LOCATION_NEEDLES_DOWNTOWN_EAST: 3,
    base.LOCATION_NEEDLES_DOWNTOWN_WEST: 3,
    base.LOCATION_POLICE_STATION: 2,
    base.LOCATION_GUARDIAN_CITADEL_ENTRANCE: 2,
    base.LOCATION_GUARDIAN_CITADEL_OUTER: 3,
    base.LOCATION_TEMPLE_MUSHROOM: 2,
    base.LOCATION_FARAN_BRYGOS: 2,
    base.LOCATION_FAT_FREDDYS: 2,
    base.LOCATION_SPADES_CASINO: 2,
    base.LOCATION_GUARDIAN_CITADEL_INNER: 3,
    base.LOCATION_MINE_SHAFT: 1,
    base.LOCATION_SAVAGE_VILLAGE: 1,

    sub.SUB_LOCATION_HIGHPOOL_CAVE: 2,
    sub.SUB_LOCATION_HIGHPOOL_COMMUNITY_CENTER: 2,
    sub.SUB_LOCATION_HIGHPOOL_WORKSHOP: 2,
    sub.SUB_LOCATION_AG_CENTER_ROOT_CELLAR: 2,
    sub.SUB_LOCATION_DESERT_NOMADS_TENT: 2,
    sub.SUB_LOCATION_UGLYS_HIDEOUT_ALLEY: 2,
    sub.SUB_LOCATION_NEEDLES_BISHOPS_OFFICE: 2,
    sub.SUB_LOCATION_NEEDLES_GARAGE: 2,
    sub.SUB_LOCATION_NEEDLES_POLICE_STATION: 2,
    sub.SUB_LOCATION_NEEDLES_AMMO_BUNKER: 2,
    sub.SUB_LOCATION_DARWIN_BLACK_MARKET: 2,
    sub.SUB_LOCATION_DARWIN_LAB: 2,
    sub.SUB_LOCATION_DARWIN_BLACK_GILA_TAVERN: 2,
    sub.SUB_LOCATION_LAS_VEGAS_JAIL: 2,
    sub.SUB_LOCATION_LAS_VEGAS_PROTON_AX_ROOM: 2,
    sub.SUB_LOCATION_SPADES_CASINO_WINE_CELLAR: 3,
    sub.SUB_LOCATION_SPADES_CASINO_LEVEL2: 3,
    sub.SUB_LOCATION_SPADES_CASINO_BASEMENT: 3,
}

# Locations the player is expected to explore only after the sewers
LOCATION_POST_SEWERS: FrozenSet[int] = frozenset({
    base.LOCATION_SLEEPER_BASE_LEVEL1,
    base.LOCATION_SLEEPER_BASE_LEVEL2,
    base.LOCATION_SLEEPER_BASE_LEVEL3,
    base.LOCATION_BASE_COCHISE_OUTSIDE,
    base.LOCATION_BASE_COCHISE_LEVEL1,
    base.LOCATION_BASE_COCHISE_LEVEL3,
    base.LOCATION_BASE_COCHISE_LEVEL2,
    base.LOCATION_BASE_COCHISE_LEVEL4,
    base.LOCATION_FINSTERS_BRAIN,
    base.LOCATION_GUARDIAN_CITADEL_ENTRANCE,
    base.LOCATION_GUARDIAN_CITADEL_OUTER,
    base.LOCATION_GUARDIAN_CITADEL_INNER,
})

# Selector exception lists, keyed by (regular source, raw destination)
LOCATION_XLIST_PAIR_MAP: Dict[LocPair, TransXListPair] = {
    LocPair(base.LOCATION_DESERT_NOMADS, base.LOCATION_DESERT_NOMADS): TransXListPair(
        # Selector 12 puts the player back in the tent, but only once the tent
        # has been entered. Copied elsewhere it would never lead to the tent.
        read=TransXList(black=(12,)),
    ),
    LocPair(base.LOCATION_NEEDLES, base.LOCATION_NEEDLES_DOWNTOWN_WEST): TransXListPair(
        # Several Needles exits lead into Downtown West and most of them drop
        # the player somewhere confusing. The fixup pass makes 20 usable.
        read=TransXList(white=(20,)),
    ),
}

_EMPTY_XLISTS = TransXListPair()


@dataclass(frozen=True)
class LocationKnowledgeBase:
    """
    Read-only view of the location tables.

    Built once and passed by reference to the collector, filter and executor.
    """
    depth_map: Mapping[int, int]
    sub_loc_map: Mapping[SubLocDesc, SubLocOverride]
    intra_transitions: Tuple[LocPair, ...]
    post_sewers: FrozenSet[int]
    xlist_pair_map: Mapping[LocPair, TransXListPair]

    @classmethod
    def from_tables(cls,
                    depth_map: Mapping[int, int],
                    sub_loc_map: Mapping[SubLocDesc, SubLocOverride],
                    intra_transitions: Iterable[LocPair],
                    post_sewers: Iterable[int],
                    xlist_pair_map: Mapping[LocPair, TransXListPair]) -> 'LocationKnowledgeBase':
        """Build a knowledge base from plain tables, taking private copies."""
        return cls(
            depth_map=MappingProxyType(dict(depth_map)),
            sub_loc_map=MappingProxyType(dict(sub_loc_map)),
            intra_transitions=tuple(LocPair(*p) for p in intra_transitions),
            post_sewers=frozenset(post_sewers),
            xlist_pair_map=MappingProxyType(dict(xlist_pair_map)),
        )

    def depth(self, loc: int) -> int:
        """Depth tier of a location. Unknown locations are treated as depth 0."""
        return self.depth_map.get(loc, 0)

    def sub_loc_override(self, desc: SubLocDesc) -> Optional[SubLocOverride]:
        """
        Look up the exact from/to locations of a transition slot.

        Returns:
            SubLocOverride if the slot leads to or from a sub-location, None otherwise
        """
        override = self.sub_loc_map.get(desc)
        if override is not None:
            logDebug(f"translated {desc} to sub location pair {override}")
        return override

    def has_sub_loc_override(self, desc: SubLocDesc) -> bool:
        return desc in self.sub_loc_map

    def is_intra(self, pair: LocPair) -> bool:
        """Check whether a (regular from, raw to) pair is a hardcoded intra-area transition."""
        return pair in self.intra_transitions

    def is_post_sewers(self, loc: int) -> bool:
        return loc in self.post_sewers

    def get_xlists(self, pair: LocPair) -> TransXListPair:
        """Exception lists for a pair; empty lists when none are configured."""
        return self.xlist_pair_map.get(pair, _EMPTY_XLISTS)

    def with_xlists(self, overlay: Mapping[LocPair, TransXListPair]) -> 'LocationKnowledgeBase':
        """
        Return a copy whose exception lists are overlaid with the given ones.

        Pairs present in the overlay replace the built-in entry for that pair.
        """
        merged = dict(self.xlist_pair_map)
        merged.update(overlay)
        return replace(self, xlist_pair_map=MappingProxyType(merged))


DEFAULT_KNOWLEDGE_BASE = LocationKnowledgeBase.from_tables(
    depth_map=LOCATION_DEPTH_MAP,
    sub_loc_map=sub.SUB_LOC_MAP,
    intra_transitions=INTRA_TRANSITIONS,
    post_sewers=LOCATION_POST_SEWERS,
    xlist_pair_map=LOCATION_XLIST_PAIR_MAP,
)
