"""
Locations Package

Location codes, names and the knowledge base tables that the transition
collector, filter and executor are defined in terms of.
"""

from .data_types import LocPair, SubLocDesc, SubLocOverride, TransXList, TransXListPair
from .base_locations import (
    block_zip_to_loc,
    loc_to_block_zip,
    block_count,
    LOCATION_NAME_MAP,
    LOCATION_WORLD_MAP,
    BLOCK0_WORLD_MAP,
)
from .sub_locations import SUB_LOCATION_NAME_MAP, SUB_LOC_MAP
from .knowledge_base import LocationKnowledgeBase, DEFAULT_KNOWLEDGE_BASE
from .names import (
    location_string,
    location_full_string,
    loc_pair_string,
    parse_location,
    parse_location_nocase,
    parse_loc_pair,
)
