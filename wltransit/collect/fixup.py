"""
Transition Fixups

Pre-pass applied to a decoded state before collection. Converts known
relative transitions to absolute form and rewrites the one exit that uses
the "previous location" sentinel, so they can take part in replacement.

Must run exactly once per state: converting an already-absolute transition
is an error.
"""

from dataclasses import replace
from typing import List, NamedTuple

from wltransit.decode.state import BlockZIP, DecodeState, Point, Transition
from wltransit.errors import ResolutionError
from wltransit.locations import base_locations as base
from wltransit.utils import logDebug


class RelToAbsFixup(NamedTuple):
    """A relative transition and the position it fires from"""
    zip: BlockZIP
    selector: int
    base: Point
    description: str


RELATIVE_TO_ABSOLUTE_FIXUPS: List[RelToAbsFixup] = [
    RelToAbsFixup(BlockZIP(0, base.BLOCK0_NEEDLES), 11, Point(30, 13),
                  "Needles -> Downtown East"),
    RelToAbsFixup(BlockZIP(0, base.BLOCK0_NEEDLES), 20, Point(1, 14),
                  "Needles -> Downtown West"),
    RelToAbsFixup(BlockZIP(0, base.BLOCK0_NEEDLES_DOWNTOWN_WEST), 2, Point(35, 29),
                  "Downtown West -> Needles"),
]

# The proton ax room exit uses the "previous" sentinel, which cannot be
# copied elsewhere. Point it at the street outside the building instead.
PROTON_AX_ROOM_EXIT = BlockZIP(1, base.BLOCK1_FAT_FREDDYS)
PROTON_AX_ROOM_EXIT_SELECTOR = 5
PROTON_AX_ROOM_EXIT_DEST = Point(46, 12)


def _get_target(state: DecodeState, zip_: BlockZIP, selector: int) -> Transition:
    t = state.get_transition(zip_, selector)
    if t is None:
        raise ResolutionError(f"fixup target missing: game={zip_.game_idx} "
                              f"block={zip_.block_idx} selector={selector}")
    return t


def _rel_to_abs(state: DecodeState, fixup: RelToAbsFixup):
    t = _get_target(state, fixup.zip, fixup.selector)
    if not t.relative:
        raise ResolutionError(f"failed to convert transition to absolute: "
                              f"game={fixup.zip.game_idx} block={fixup.zip.block_idx} "
                              f"selector={fixup.selector}: transition not relative")

    old_t = replace(t)
    t.make_absolute(fixup.base)

    logDebug(f"converted relative transition to absolute ({fixup.description}): "
             f"game={fixup.zip.game_idx} block={fixup.zip.block_idx} "
             f"selector={fixup.selector} {old_t} --> {t}")


def fixup_transitions(state: DecodeState):
    """
    Apply the hardcoded fixups to a decoded state in place.

    Raises:
        ResolutionError: if a fixup target is missing or not in the expected state
    """
    for fixup in RELATIVE_TO_ABSOLUTE_FIXUPS:
        _rel_to_abs(state, fixup)

    t = _get_target(state, PROTON_AX_ROOM_EXIT, PROTON_AX_ROOM_EXIT_SELECTOR)
    t.location = base.LOCATION_LAS_VEGAS
    t.loc_x = PROTON_AX_ROOM_EXIT_DEST.x
    t.loc_y = PROTON_AX_ROOM_EXIT_DEST.y
    logDebug(f"rerouted proton ax room exit to Las Vegas {PROTON_AX_ROOM_EXIT_DEST}")
