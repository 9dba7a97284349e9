"""
Transition Collection

Graph store for every transition among all blocks. Holds two adjacency maps:

- unfiltered: every transition
- filtered: transitions kept by a CollectConfig, pruned to round trips

Both maps are keyed [exact_from][exact_to] and hold lists of TransEntry in
block scan order. Entries may be modified but never added or removed.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from wltransit.collect.collector import collect_transitions
from wltransit.collect.entries import TransEntry
from wltransit.collect.filter_policy import CollectConfig, should_keep_transition
from wltransit.collect.fixup import fixup_transitions
from wltransit.decode.state import DecodeState
from wltransit.locations.data_types import LocPair
from wltransit.locations.knowledge_base import DEFAULT_KNOWLEDGE_BASE, LocationKnowledgeBase
from wltransit.locations.names import location_full_string, location_string
from wltransit.utils import log, logDebug

# [exact_from][exact_to] -> entries
LocPairMap = Dict[int, Dict[int, List[TransEntry]]]


def _add_entry(m: LocPairMap, e: TransEntry):
    m.setdefault(e.from_exact_loc, {}).setdefault(e.to_exact_loc, []).append(e)


def _lookup(m: LocPairMap, pair: LocPair) -> List[TransEntry]:
    return m.get(pair.from_loc, {}).get(pair.to_loc, [])


def _pairs(m: LocPairMap) -> List[LocPair]:
    """All directed pairs of a map, sorted by (from, to)."""
    return sorted(LocPair(f, t) for f, tos in m.items() for t in tos)


@dataclass
class Collection:
    """
    The set of all transitions among all blocks.

    Build with build_collection(); the filtered map is closed under mirroring:
    if (x, y) is present, so is (y, x).
    """
    unfiltered: LocPairMap = field(default_factory=dict)
    filtered: LocPairMap = field(default_factory=dict)
    kb: LocationKnowledgeBase = field(default=DEFAULT_KNOWLEDGE_BASE, repr=False)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_entries(cls, entries: List[TransEntry], cfg: CollectConfig,
                     kb: Optional[LocationKnowledgeBase] = None) -> 'Collection':
        """
        Build a Collection from collected entries.

        Args:
            entries: Unfiltered entries in scan order
            cfg: Filter toggles
            kb: Knowledge base (defaults to DEFAULT_KNOWLEDGE_BASE)
        """
        if kb is None:
            kb = DEFAULT_KNOWLEDGE_BASE

        coll = cls(kb=kb)
        for e in entries:
            _add_entry(coll.unfiltered, e)
            if should_keep_transition(e, cfg, kb):
                _add_entry(coll.filtered, e)

        coll._prune_one_way()
        return coll

    def _prune_one_way(self):
        """
        Remove filtered pairs that have no return trip.

        Removing a pair without a mirror never takes away another pair's
        mirror, so one pass over a snapshot reaches the fixed point.
        """
        for pair in _pairs(self.filtered):
            if pair.from_loc in self.filtered.get(pair.to_loc, {}):
                continue

            logDebug(f"discarding entry: {location_full_string(pair.from_loc)} --> "
                     f"{location_full_string(pair.to_loc)}: no round trip")
            tos = self.filtered[pair.from_loc]
            del tos[pair.to_loc]
            if not tos:
                del self.filtered[pair.from_loc]

    # =========================================================================
    # Directed Lookups
    # =========================================================================

    def get_filtered(self, pair: LocPair) -> List[TransEntry]:
        """Filtered transitions from pair.from_loc to pair.to_loc (empty if none)."""
        return _lookup(self.filtered, pair)

    def get_unfiltered(self, pair: LocPair) -> List[TransEntry]:
        """All transitions from pair.from_loc to pair.to_loc (empty if none)."""
        return _lookup(self.unfiltered, pair)

    def get_from_to(self, pair: LocPair) -> Tuple[List[TransEntry], List[TransEntry]]:
        """
        Filtered transitions in both directions.

        Returns:
            Tuple of (from -> to entries, to -> from entries)
        """
        return self.get_filtered(pair), self.get_filtered(pair.mirror())

    def filtered_pairs(self) -> List[LocPair]:
        return _pairs(self.filtered)

    def unfiltered_pairs(self) -> List[LocPair]:
        return _pairs(self.unfiltered)

    # =========================================================================
    # Graph Queries
    # =========================================================================

    def get_1way_up(self, from_loc: int) -> List[TransEntry]:
        """
        Unfiltered transitions leaving a location that:
        1. lead to a shallower location, and
        2. are one way (no transition at all leads back).

        Destinations are visited in ascending code order.
        """
        entries: List[TransEntry] = []
        from_depth = self.kb.depth(from_loc)

        for to_loc, es in sorted(self.unfiltered.get(from_loc, {}).items()):
            # Only consider upward transitions
            if self.kb.depth(to_loc) >= from_depth:
                continue
            # Only consider one-way transitions
            if self.get_unfiltered(LocPair(to_loc, from_loc)):
                continue
            entries.extend(es)

        return entries

    def round_trips(self) -> List[LocPair]:
        """
        Round trips in the filtered map, one direction per location pair.

        Only pairs that lead to an equal or deeper location are returned; the
        reverse route is implied. Sorted by (from, to).
        """
        pairs: List[LocPair] = []
        seen = set()

        for pair in _pairs(self.filtered):
            if self.kb.depth(pair.to_loc) < self.kb.depth(pair.from_loc):
                continue
            if pair.mirror() in seen:
                continue
            seen.add(pair)
            pairs.append(pair)

        return pairs

    # =========================================================================
    # Summary
    # =========================================================================

    def entry_count(self, filtered: bool = False) -> int:
        m = self.filtered if filtered else self.unfiltered
        return sum(len(es) for tos in m.values() for es in tos.values())

    def summary(self) -> Dict[str, int]:
        return {
            'entries': self.entry_count(),
            'pairs': len(self.unfiltered_pairs()),
            'filtered_entries': self.entry_count(filtered=True),
            'filtered_pairs': len(self.filtered_pairs()),
            'round_trips': len(self.round_trips()),
        }

    def print_summary(self):
        """Print collection summary"""
        stats = self.summary()
        log(f"Collected {stats['entries']} transitions over {stats['pairs']} location pairs")
        log(f"  Usable: {stats['filtered_entries']} transitions over "
            f"{stats['filtered_pairs']} location pairs")
        log(f"  Round trips: {stats['round_trips']}")

    def print_round_trips(self):
        log("Round trips:")
        for i, pair in enumerate(self.round_trips(), 1):
            forward, reverse = self.get_from_to(pair)
            log(f"  {i:3d}. {location_string(pair.from_loc):25s} <-> "
                f"{location_string(pair.to_loc):25s} ({len(forward)}/{len(reverse)})")


def build_collection(state: DecodeState, cfg: CollectConfig,
                     kb: Optional[LocationKnowledgeBase] = None,
                     apply_fixups: bool = True) -> Collection:
    """
    Gather the transitions of a decoded state and construct a Collection.

    Args:
        state: Decoded state. The fixup pass modifies it in place.
        cfg: Filter toggles
        kb: Knowledge base (defaults to DEFAULT_KNOWLEDGE_BASE)
        apply_fixups: Run fixup_transitions() first. Disable only for states
                      that have already been fixed up.

    Raises:
        ResolutionError: if a fixup target or block coordinate cannot be resolved
    """
    if apply_fixups:
        fixup_transitions(state)

    entries = collect_transitions(state, kb)
    return Collection.from_entries(entries, cfg, kb)
