"""Tests for location tables, names and the knowledge base."""

import pytest

from wltransit.constants import LOCATION_PREVIOUS, SUB_LOCATION_MIN
from wltransit.decode import BlockZIP
from wltransit.errors import LocationLookupError, ResolutionError
from wltransit.locations import (
    DEFAULT_KNOWLEDGE_BASE,
    LOCATION_NAME_MAP,
    LocPair,
    SUB_LOCATION_NAME_MAP,
    SUB_LOC_MAP,
    SubLocDesc,
    TransXList,
    TransXListPair,
    block_count,
    block_zip_to_loc,
    loc_pair_string,
    loc_to_block_zip,
    location_full_string,
    location_string,
    parse_loc_pair,
    parse_location,
    parse_location_nocase,
)
from wltransit.locations import base_locations as base
from wltransit.locations import sub_locations as sub


class TestBlockResolution:
    """Tests for the block coordinate resolver."""

    def test_block_counts(self):
        assert block_count(0) == 20
        assert block_count(1) == 22

    def test_resolves_world_map(self):
        assert block_zip_to_loc(BlockZIP(0, base.BLOCK0_WORLD_MAP)) == base.LOCATION_WORLD_MAP

    def test_resolves_game_1(self):
        assert block_zip_to_loc(BlockZIP(1, base.BLOCK1_FAT_FREDDYS)) == base.LOCATION_FAT_FREDDYS

    def test_every_block_round_trips(self):
        """Each block's location resolves back to the same block."""
        for game_idx in (0, 1):
            for block_idx in range(block_count(game_idx)):
                zip_ = BlockZIP(game_idx, block_idx)
                assert loc_to_block_zip(block_zip_to_loc(zip_)) == zip_

    @pytest.mark.parametrize("zip_", [BlockZIP(0, 20), BlockZIP(1, -1), BlockZIP(2, 0)])
    def test_invalid_coordinate(self, zip_):
        with pytest.raises(ResolutionError):
            block_zip_to_loc(zip_)

    def test_sub_location_has_no_block(self):
        with pytest.raises(ResolutionError):
            loc_to_block_zip(sub.SUB_LOCATION_HIGHPOOL_CAVE)

    def test_regular_codes_below_sub_range(self):
        regular = set(LOCATION_NAME_MAP) - {LOCATION_PREVIOUS}
        assert max(regular) < SUB_LOCATION_MIN
        assert min(SUB_LOCATION_NAME_MAP) == SUB_LOCATION_MIN


class TestNames:
    """Tests for location name formatting and parsing."""

    def test_regular_name(self):
        assert location_string(base.LOCATION_HIGHPOOL) == "Highpool"

    def test_sub_location_name(self):
        assert location_string(sub.SUB_LOCATION_HIGHPOOL_CAVE) == "HighpoolCave"

    def test_unknown_name(self):
        assert location_string(999) == "Unknown(999)"

    def test_full_string(self):
        assert location_full_string(base.LOCATION_QUARTZ) == "4 (Quartz)"

    def test_pair_string(self):
        pair = LocPair(base.LOCATION_QUARTZ, base.LOCATION_COURTHOUSE)
        assert loc_pair_string(pair) == "Quartz -> Courthouse"

    def test_parse_case_sensitive(self):
        assert parse_location("DarwinLab") == sub.SUB_LOCATION_DARWIN_LAB
        assert parse_location("Needles") == base.LOCATION_NEEDLES

    def test_parse_case_sensitive_rejects_wrong_case(self):
        with pytest.raises(LocationLookupError):
            parse_location("needles")

    def test_parse_nocase(self):
        assert parse_location_nocase("needles") == base.LOCATION_NEEDLES
        assert parse_location_nocase("SPADESCASINOBASEMENT") == sub.SUB_LOCATION_SPADES_CASINO_BASEMENT

    def test_parse_unknown(self):
        with pytest.raises(LocationLookupError) as exc_info:
            parse_location_nocase("Atlantis")
        assert "Atlantis" in str(exc_info.value)

    def test_parse_pair(self):
        assert parse_loc_pair("highpool, HighpoolCave") == LocPair(
            base.LOCATION_HIGHPOOL, sub.SUB_LOCATION_HIGHPOOL_CAVE)

    def test_parse_pair_case_sensitive(self):
        with pytest.raises(LocationLookupError):
            parse_loc_pair("highpool, HighpoolCave", ignore_case=False)

    @pytest.mark.parametrize("s", ["Highpool", "Highpool, ", "Highpool, Quartz, Needles"])
    def test_parse_pair_malformed(self, s):
        with pytest.raises(LocationLookupError):
            parse_loc_pair(s)

    def test_names_are_unique_ignoring_case(self):
        names = [n.casefold() for n in list(LOCATION_NAME_MAP.values()) +
                 list(SUB_LOCATION_NAME_MAP.values())]
        assert len(names) == len(set(names))


class TestKnowledgeBase:
    """Tests for LocationKnowledgeBase lookups."""

    def test_depth(self):
        kb = DEFAULT_KNOWLEDGE_BASE
        assert kb.depth(base.LOCATION_WORLD_MAP) == 0
        assert kb.depth(base.LOCATION_HIGHPOOL) == 1
        assert kb.depth(sub.SUB_LOCATION_SPADES_CASINO_BASEMENT) == 3

    def test_unknown_depth_is_zero(self):
        assert DEFAULT_KNOWLEDGE_BASE.depth(LOCATION_PREVIOUS) == 0

    def test_every_named_location_has_depth(self):
        for loc in list(LOCATION_NAME_MAP) + list(SUB_LOCATION_NAME_MAP):
            if loc != LOCATION_PREVIOUS:
                assert loc in DEFAULT_KNOWLEDGE_BASE.depth_map

    def test_sub_loc_override(self):
        override = DEFAULT_KNOWLEDGE_BASE.sub_loc_override(SubLocDesc(0, base.BLOCK0_HIGHPOOL, 1))
        assert override.from_loc is None
        assert override.to_loc == sub.SUB_LOCATION_HIGHPOOL_CAVE

    def test_no_sub_loc_override(self):
        assert DEFAULT_KNOWLEDGE_BASE.sub_loc_override(SubLocDesc(0, base.BLOCK0_HIGHPOOL, 0)) is None

    def test_sub_loc_map_targets_are_sub_locations(self):
        """Every override names a sub-location on at least one end."""
        for override in SUB_LOC_MAP.values():
            ends = [loc for loc in override if loc is not None]
            assert any(loc >= SUB_LOCATION_MIN for loc in ends)

    def test_intra(self):
        kb = DEFAULT_KNOWLEDGE_BASE
        assert kb.is_intra(LocPair(base.LOCATION_BLOOD_TEMPLE_TOP, base.LOCATION_BLOOD_TEMPLE_BOTTOM))
        assert not kb.is_intra(LocPair(base.LOCATION_BLOOD_TEMPLE_TOP, base.LOCATION_DARWIN))

    def test_post_sewers(self):
        assert DEFAULT_KNOWLEDGE_BASE.is_post_sewers(base.LOCATION_FINSTERS_BRAIN)
        assert not DEFAULT_KNOWLEDGE_BASE.is_post_sewers(base.LOCATION_DARWIN)

    def test_builtin_xlists(self):
        xlists = DEFAULT_KNOWLEDGE_BASE.get_xlists(
            LocPair(base.LOCATION_NEEDLES, base.LOCATION_NEEDLES_DOWNTOWN_WEST))
        assert xlists.read.white == (20,)
        assert xlists.write == TransXList()

    def test_missing_xlists_are_empty(self):
        assert DEFAULT_KNOWLEDGE_BASE.get_xlists(LocPair(0, 1)) == TransXListPair()

    def test_with_xlists_returns_new_object(self):
        pair = LocPair(base.LOCATION_QUARTZ, base.LOCATION_SCOTTS_BAR)
        overlay = {pair: TransXListPair(write=TransXList(black=(3,)))}

        kb = DEFAULT_KNOWLEDGE_BASE.with_xlists(overlay)

        assert kb.get_xlists(pair).write.black == (3,)
        assert DEFAULT_KNOWLEDGE_BASE.get_xlists(pair) == TransXListPair()
        # Built-in entries survive the overlay
        assert kb.get_xlists(LocPair(base.LOCATION_DESERT_NOMADS,
                                     base.LOCATION_DESERT_NOMADS)).read.black == (12,)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_KNOWLEDGE_BASE.depth_map[base.LOCATION_HIGHPOOL] = 5
