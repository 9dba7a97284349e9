"""
Transition filter policy.

Decides which transitions are usable for replacement. Each CollectConfig
toggle keeps one class of transition that is dropped by default.
"""

from dataclasses import dataclass
from typing import Optional

from wltransit.constants import ACTION_CLASS_SHOP, LOCATION_PREVIOUS
from wltransit.collect.entries import TransEntry
from wltransit.locations.base_locations import BLOCK0_WORLD_MAP, LOCATION_WORLD_MAP
from wltransit.locations.data_types import SubLocDesc
from wltransit.locations.knowledge_base import DEFAULT_KNOWLEDGE_BASE, LocationKnowledgeBase
from wltransit.locations.names import location_string
from wltransit.utils import logDebug


@dataclass(frozen=True)
class CollectConfig:
    """Which transitions to keep in the filtered graph"""
    keep_world: bool = False  # To or from the world map
    keep_relative: bool = False  # Relative-coordinate transitions
    keep_shops: bool = False  # Transitions that open a shop
    keep_derelict: bool = False  # Derelict buildings
    keep_previous: bool = False  # "Return to previous location" transitions
    keep_auto_intra: bool = False  # Destination is the source block's own location
    keep_hardcoded_intra: bool = False  # Listed in INTRA_TRANSITIONS
    keep_post_sewers: bool = False  # Destination only reachable after the sewers


def should_keep_transition(entry: TransEntry, cfg: CollectConfig,
                           kb: Optional[LocationKnowledgeBase] = None) -> bool:
    """
    Check whether a transition belongs in the filtered graph.

    Rules are applied in a fixed order and the first match discards the entry.

    Args:
        entry: Transition to check
        cfg: Filter toggles
        kb: Knowledge base (defaults to DEFAULT_KNOWLEDGE_BASE)

    Returns:
        True to keep the transition, False to discard it
    """
    if kb is None:
        kb = DEFAULT_KNOWLEDGE_BASE

    def log_discard(reason: str):
        logDebug(f"discarding transition ({location_string(entry.from_exact_loc)} -> "
                 f"{location_string(entry.to_exact_loc)}) {entry}: {reason}")

    t = entry.trans

    if not cfg.keep_world:
        if entry.from_block.game_idx == 0 and entry.from_block.block_idx == BLOCK0_WORLD_MAP:
            log_discard("from world map")
            return False
        if t.location == LOCATION_WORLD_MAP:
            log_discard("to world map")
            return False

    if not cfg.keep_relative and t.relative:
        log_discard("relative")
        return False

    if not cfg.keep_shops and t.to_class == ACTION_CLASS_SHOP:
        log_discard("shop")
        return False

    if not cfg.keep_derelict and t.is_derelict():
        log_discard("derelict")
        return False

    if not cfg.keep_previous and t.location == LOCATION_PREVIOUS:
        log_discard("previous")
        return False

    if not cfg.keep_post_sewers and kb.is_post_sewers(t.location):
        log_discard("post sewers")
        return False

    if not cfg.keep_auto_intra and t.location == entry.from_loc:
        desc = SubLocDesc(entry.from_block.game_idx, entry.from_block.block_idx, entry.selector)
        if not kb.has_sub_loc_override(desc):
            log_discard("auto intra filter")
            return False

    if not cfg.keep_hardcoded_intra and kb.is_intra(entry.raw_pair):
        log_discard("hardcoded intra filter")
        return False

    return True
