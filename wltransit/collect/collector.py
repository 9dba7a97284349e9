"""
Transition Collector

Walks every block of both games and annotates each non-empty transition slot
with its block, regular source location and exact endpoints.
"""

from dataclasses import replace
from typing import List, Optional

from wltransit.constants import GAME_COUNT
from wltransit.collect.entries import TransEntry
from wltransit.decode.state import BlockZIP, DecodeState
from wltransit.locations.base_locations import block_zip_to_loc
from wltransit.locations.data_types import SubLocDesc
from wltransit.locations.knowledge_base import DEFAULT_KNOWLEDGE_BASE, LocationKnowledgeBase


def _collect_game(state: DecodeState, game_idx: int,
                  kb: LocationKnowledgeBase) -> List[TransEntry]:
    entries: List[TransEntry] = []

    for block_idx, block in enumerate(state.blocks[game_idx]):
        zip_ = BlockZIP(game_idx, block_idx)

        for selector, t in enumerate(block.action_tables.transitions):
            if t is None:
                continue

            from_loc = block_zip_to_loc(zip_)

            from_exact = from_loc
            to_exact = t.location
            override = kb.sub_loc_override(SubLocDesc(game_idx, block_idx, selector))
            if override is not None:
                if override.from_loc is not None:
                    from_exact = override.from_loc
                if override.to_loc is not None:
                    to_exact = override.to_loc

            entries.append(TransEntry(
                from_block=zip_,
                from_loc=from_loc,
                trans=replace(t),
                selector=selector,
                from_exact_loc=from_exact,
                to_exact_loc=to_exact,
            ))

    return entries


def collect_transitions(state: DecodeState,
                        kb: Optional[LocationKnowledgeBase] = None) -> List[TransEntry]:
    """
    Gather every transition from both games, unfiltered.

    Entries are ordered by game, then block, then selector.

    Args:
        state: Decoded state to scan
        kb: Knowledge base (defaults to DEFAULT_KNOWLEDGE_BASE)

    Returns:
        List of TransEntry, one per non-empty transition slot

    Raises:
        ResolutionError: if a block coordinate does not resolve to a location
    """
    if kb is None:
        kb = DEFAULT_KNOWLEDGE_BASE

    entries: List[TransEntry] = []
    for game_idx in range(GAME_COUNT):
        entries.extend(_collect_game(state, game_idx, kb))

    return entries
