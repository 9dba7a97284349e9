"""Tests for the INI config loaders."""

import pytest

from wltransit.collect import CollectConfig
from wltransit.config import load_collect_config, load_xlist_overlay
from wltransit.errors import ConfigError
from wltransit.locations import DEFAULT_KNOWLEDGE_BASE, LocPair, TransXList, TransXListPair
from wltransit.locations import base_locations as base
from wltransit.locations import sub_locations as sub
from wltransit.transitions import TransOp, TransOpConfig
from wltransit.utils import get_warnings


@pytest.fixture
def write_ini(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write


class TestCollectConfig:
    """Tests for load_collect_config."""

    def test_loads_toggles(self, write_ini):
        path = write_ini("collect.ini", """
[collect]
keep_world = true
keep_post_sewers = yes
keep_shops = off
""")
        assert load_collect_config(path) == CollectConfig(keep_world=True, keep_post_sewers=True)

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_collect_config(tmp_path / "missing.ini") == CollectConfig()
        assert len(get_warnings()) == 1

    def test_missing_section_uses_defaults(self, write_ini):
        path = write_ini("collect.ini", "[other]\nkeep_world = true\n")
        assert load_collect_config(path) == CollectConfig()
        assert "No [collect] section" in get_warnings()[0]

    def test_unknown_key_warns(self, write_ini):
        path = write_ini("collect.ini", "[collect]\nkeep_everything = true\n")
        assert load_collect_config(path) == CollectConfig()
        assert get_warnings() == ["Unknown key in [collect] keep_everything"]

    def test_invalid_boolean(self, write_ini):
        path = write_ini("collect.ini", "[collect]\nkeep_relative = maybe\n")
        with pytest.raises(ConfigError, match="keep_relative"):
            load_collect_config(path)


class TestExceptionListConfig:
    """Tests for load_xlist_overlay."""

    def test_loads_lists(self, write_ini):
        path = write_ini("exceptions.ini", """
[Quartz, ScottsBar]
write.white = 3, 7
read.black = 1

[highpool, highpoolcave]
write.black = 2
""")
        overlay = load_xlist_overlay(path)

        assert overlay == {
            LocPair(base.LOCATION_QUARTZ, base.LOCATION_SCOTTS_BAR): TransXListPair(
                read=TransXList(black=(1,)), write=TransXList(white=(3, 7))),
            LocPair(base.LOCATION_HIGHPOOL, sub.SUB_LOCATION_HIGHPOOL_CAVE): TransXListPair(
                write=TransXList(black=(2,))),
        }
        assert get_warnings() == []

    def test_empty_list(self, write_ini):
        path = write_ini("exceptions.ini", "[Quartz, ScottsBar]\nread.white =\n")
        overlay = load_xlist_overlay(path)
        assert overlay[LocPair(base.LOCATION_QUARTZ, base.LOCATION_SCOTTS_BAR)] == TransXListPair()

    def test_bad_sections_skipped(self, write_ini):
        path = write_ini("exceptions.ini", """
[Atlantis, Quartz]
read.black = 1

[Quartz, ScottsBar]
read.black = one

[Quartz, Courthouse]
write.black = 5
""")
        overlay = load_xlist_overlay(path)

        assert list(overlay) == [LocPair(base.LOCATION_QUARTZ, base.LOCATION_COURTHOUSE)]
        assert len(get_warnings()) == 3

    def test_unknown_key_skips_section(self, write_ini):
        """A misspelt key must not wipe out the built-in lists for the pair."""
        path = write_ini("exceptions.ini", "[Needles, NeedlesDowntownWest]\nread.whitelist = 20\n")
        overlay = load_xlist_overlay(path)

        assert overlay == {}
        assert "read.whitelist" in get_warnings()[0]

        kb = DEFAULT_KNOWLEDGE_BASE.with_xlists(overlay)
        xlists = kb.get_xlists(LocPair(base.LOCATION_NEEDLES, base.LOCATION_NEEDLES_DOWNTOWN_WEST))
        assert xlists.read.white == (20,)

    def test_missing_file(self, tmp_path):
        assert load_xlist_overlay(tmp_path / "missing.ini") == {}


class TestTransOpConfig:
    """Tests for TransOpConfig."""

    def test_ops_in_file_order(self, write_ini):
        path = write_ini("ops.ini", """
[second_first]
a = Quartz, Courthouse
b = Quartz, ScottsBar

[first_second]
a = highpool, HighpoolWorkshop
b = AgCenter, agcenterrootcellar
""")
        config = TransOpConfig(path)

        assert config.op_count == 2
        assert config.get_ops() == [
            TransOp(a=LocPair(base.LOCATION_QUARTZ, base.LOCATION_COURTHOUSE),
                    b=LocPair(base.LOCATION_QUARTZ, base.LOCATION_SCOTTS_BAR)),
            TransOp(a=LocPair(base.LOCATION_HIGHPOOL, sub.SUB_LOCATION_HIGHPOOL_WORKSHOP),
                    b=LocPair(base.LOCATION_AG_CENTER, sub.SUB_LOCATION_AG_CENTER_ROOT_CELLAR)),
        ]
        assert config.get_op('first_second').a.from_loc == base.LOCATION_HIGHPOOL
        assert config.get_op('missing') is None

    def test_invalid_ops_skipped(self, write_ini):
        path = write_ini("ops.ini", """
[no_b]
a = Quartz, Courthouse

[bad_name]
a = Quartz, Atlantis
b = Quartz, ScottsBar

[good]
a = Quartz, Courthouse
b = Quartz, ScottsBar
""")
        config = TransOpConfig(path)

        assert config.op_count == 1
        assert config.get_op('good') is not None
        assert len(get_warnings()) == 3

    def test_missing_file(self, tmp_path):
        config = TransOpConfig(tmp_path / "missing.ini")
        assert config.get_ops() == []
        assert "not found" in get_warnings()[0]
