"""Shared fixtures: synthetic decoded states and a per-test log file."""

import pytest

from wltransit.constants import GAME_COUNT, LOCATION_PREVIOUS
from wltransit.decode import Block, DecodeState, Transition
from wltransit.locations import base_locations as base
from wltransit.locations import block_count
from wltransit.utils import close_logging, init_logging


class World:
    """Builds a decoded state with every block present and no transitions."""

    def __init__(self):
        self.state = DecodeState()
        for game_idx in range(GAME_COUNT):
            for _ in range(block_count(game_idx)):
                self.state.blocks[game_idx].append(Block())

    def put(self, game_idx: int, block_idx: int, selector: int, **fields) -> Transition:
        """Place a transition in a slot, padding the table with empty slots."""
        transitions = self.state.blocks[game_idx][block_idx].action_tables.transitions
        while len(transitions) <= selector:
            transitions.append(None)
        t = Transition(**fields)
        transitions[selector] = t
        return t

    def get(self, game_idx: int, block_idx: int, selector: int) -> Transition:
        return self.state.blocks[game_idx][block_idx].action_tables.transitions[selector]

    def seed_fixup_targets(self):
        """Add the transitions that fixup_transitions() expects to find."""
        self.put(0, base.BLOCK0_NEEDLES, 11, relative=True,
                 location=base.LOCATION_NEEDLES_DOWNTOWN_EAST, loc_x=1, loc_y=0)
        self.put(0, base.BLOCK0_NEEDLES, 20, relative=True,
                 location=base.LOCATION_NEEDLES_DOWNTOWN_WEST, loc_x=0, loc_y=-1)
        self.put(0, base.BLOCK0_NEEDLES_DOWNTOWN_WEST, 2, relative=True,
                 location=base.LOCATION_NEEDLES, loc_x=0, loc_y=1)
        self.put(1, base.BLOCK1_FAT_FREDDYS, 5, location=LOCATION_PREVIOUS)
        return self


@pytest.fixture(autouse=True)
def transitions_log(tmp_path):
    """Route each test's log output to its own file and reset warning tracking."""
    close_logging()
    log_path = tmp_path / "transitions.log"
    init_logging(log_path)
    yield log_path
    close_logging()


@pytest.fixture
def world():
    return World()


def build_quartz_world(world: World) -> World:
    """
    Quartz with two bars and a courthouse:

    - Quartz(3), Quartz(7) -> ScottsBar; ScottsBar(0) -> Quartz
    - Quartz(5) -> Courthouse; Courthouse(0) -> Quartz
    - Courthouse(1) -> WorldMap, with no way back (one way up)
    - Quartz(9) -> StageCoachInn; StageCoachInn(0) -> Quartz is relative
    """
    world.put(0, base.BLOCK0_QUARTZ, 3, location=base.LOCATION_SCOTTS_BAR,
              loc_x=3, loc_y=3, offset=0x30, text=1)
    world.put(0, base.BLOCK0_QUARTZ, 5, location=base.LOCATION_COURTHOUSE,
              loc_x=5, loc_y=5, prompt=True, offset=0x50, text=2)
    world.put(0, base.BLOCK0_QUARTZ, 7, location=base.LOCATION_SCOTTS_BAR,
              loc_x=7, loc_y=7, offset=0x70, text=3)
    world.put(0, base.BLOCK0_QUARTZ, 9, location=base.LOCATION_STAGE_COACH_INN,
              loc_x=9, loc_y=9, offset=0x90)
    world.put(0, base.BLOCK0_SCOTTS_BAR, 0, location=base.LOCATION_QUARTZ,
              loc_x=10, loc_y=11, offset=0x100)
    world.put(0, base.BLOCK0_COURTHOUSE, 0, location=base.LOCATION_QUARTZ,
              loc_x=20, loc_y=21, offset=0x200)
    world.put(0, base.BLOCK0_COURTHOUSE, 1, location=base.LOCATION_WORLD_MAP,
              loc_x=40, loc_y=41, offset=0x210)
    world.put(0, base.BLOCK0_STAGE_COACH_INN, 0, relative=True, location=base.LOCATION_QUARTZ,
              loc_x=1, loc_y=0, offset=0x300)
    return world


@pytest.fixture
def quartz_world(world):
    return build_quartz_world(world)


@pytest.fixture
def make_quartz_world():
    """Factory for independent copies of the quartz world."""
    return lambda: build_quartz_world(World())
