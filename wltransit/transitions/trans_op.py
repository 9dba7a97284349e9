"""
Transition-Op Executor

A TransOp swaps the content of two travel connections. It involves four
transition sets:

1. A.From --> A.To
2. A.From <-- A.To (A return trip)
3. B.From --> B.To
4. B.From <-- B.To (B return trip)

After the op, A.From's exits toward A.To lead where B's forward route led,
and B.To's exits toward B.From (plus its one-way exits upward) lead where A's
return route led. Each slot keeps its own block, selector and identity fields.

Reads use the filtered graph so only round-trip-safe content is duplicated.
Writes use the unfiltered graph so every physical slot is rewritten.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from wltransit.collect.entries import TransEntry
from wltransit.decode.state import DecodeState, Transition
from wltransit.graph.collection import Collection
from wltransit.locations.data_types import LocPair
from wltransit.locations.knowledge_base import LocationKnowledgeBase
from wltransit.locations.names import loc_pair_string, location_string
from wltransit.transitions.xlist import XListRole, filter_entries
from wltransit.utils import log, logDebug, logWarning


@dataclass(frozen=True)
class TransOp:
    """Replace the A connection's content with the B connection's"""
    a: LocPair
    b: LocPair

    def __str__(self):
        return f"[{loc_pair_string(self.a)}] <- [{loc_pair_string(self.b)}]"


def copy_trans(dst: Transition, src: Transition):
    """
    Replace a destination transition's travel content with a source's.

    Identity fields of the destination (offset, text, class) are preserved to
    keep its parent block consistent.
    """
    dst.relative = src.relative
    dst.prompt = src.prompt
    dst.loc_x = src.loc_x
    dst.loc_y = src.loc_y
    dst.derelict = src.derelict
    dst.location = src.location


def select_copy_src(idx: int, entries: List[TransEntry]) -> Transition:
    """Cycle through parallel source entries so that repeated slots differ."""
    return entries[idx % len(entries)].trans


@dataclass
class TransOpContext:
    """Entry sets needed to execute a single transition op"""
    a_forward: List[TransEntry]  # Written
    a_reverse: List[TransEntry]  # Read
    b_forward: List[TransEntry]  # Read
    b_reverse: List[TransEntry]  # Written
    b_rev_1way_up: List[TransEntry]  # Written; may be empty


def new_trans_op_context(coll: Collection, op: TransOp,
                         kb: Optional[LocationKnowledgeBase] = None) -> Optional[TransOpContext]:
    """
    Gather and filter the entry sets for an op.

    Returns:
        TransOpContext, or None if the op cannot be applied (a warning is logged)
    """
    if kb is None:
        kb = coll.kb

    a_forward = coll.get_unfiltered(op.a)
    a_reverse = coll.get_filtered(op.a.mirror())
    b_forward = coll.get_filtered(op.b)
    b_reverse = coll.get_unfiltered(op.b.mirror())

    if not a_forward or not a_reverse or not b_forward or not b_reverse:
        logWarning(f"ignoring op {op}: no round trip")
        return None

    sets = (
        (a_forward, XListRole.WRITE, op.a),
        (a_reverse, XListRole.READ, op.a.mirror()),
        (b_forward, XListRole.READ, op.b),
        (b_reverse, XListRole.WRITE, op.b.mirror()),
    )

    filtered_sets = []
    for entries, role, pair in sets:
        filtered = filter_entries(entries, role, kb)
        if not filtered:
            logWarning(f"ignoring op {op}: {loc_pair_string(pair)} filtered to 0 ({role.value})")
            return None
        filtered_sets.append(filtered)

    b_rev_1way_up = filter_entries(coll.get_1way_up(op.b.to_loc), XListRole.WRITE, kb)

    return TransOpContext(
        a_forward=filtered_sets[0],
        a_reverse=filtered_sets[1],
        b_forward=filtered_sets[2],
        b_reverse=filtered_sets[3],
        b_rev_1way_up=b_rev_1way_up,
    )


def _plan_copies(ctx: TransOpContext) -> List[Tuple[str, TransEntry, Transition]]:
    """List every (route, destination entry, source content) copy the op makes."""
    plan = []
    for i, e in enumerate(ctx.a_forward):
        plan.append(("forward route", e, select_copy_src(i, ctx.b_forward)))
    for i, e in enumerate(ctx.b_reverse):
        plan.append(("reverse route", e, select_copy_src(i, ctx.a_reverse)))
    for i, e in enumerate(ctx.b_rev_1way_up):
        plan.append(("one way up", e, select_copy_src(i, ctx.a_reverse)))
    return plan


def exec_trans_op(coll: Collection, state: DecodeState, op: TransOp,
                  kb: Optional[LocationKnowledgeBase] = None) -> bool:
    """
    Modify the decoded state according to a TransOp.

    1. A.From --> A.To   BECOMES   A.From --> B.To
    2. B.From <-- B.To   BECOMES   A.From <-- B.To
    3. B.To's one-way exits upward also lead back to A.From

    Content is read from the entries' collection-time snapshots and written to
    the state's records. An op that cannot be applied is skipped with a
    warning and leaves the state untouched.

    Args:
        coll: Collection built from the state
        state: Decoded state to modify in place
        op: Op to execute
        kb: Knowledge base for exception lists (defaults to the collection's)

    Returns:
        True if the op was applied, False if it was skipped
    """
    ctx = new_trans_op_context(coll, op, kb)
    if ctx is None:
        return False

    plan = _plan_copies(ctx)

    # Resolve every destination record first so a mismatch leaves the state untouched
    targets = []
    for route, e, src in plan:
        dst = state.get_transition(e.from_block, e.selector)
        if dst is None:
            logWarning(f"ignoring op {op}: no transition at game={e.from_block.game_idx} "
                       f"block={e.from_block.block_idx} selector={e.selector}")
            return False
        targets.append((route, e, dst, src))

    log(f"setting transition: {op}")

    for route, e, dst, src in targets:
        logDebug(f"replacing {location_string(e.from_exact_loc)}->"
                 f"{location_string(e.to_exact_loc)}({e.selector}) with "
                 f"{location_string(src.location)} ({route})")
        copy_trans(dst, src)

    return True


def exec_trans_ops(coll: Collection, state: DecodeState, ops: Iterable[TransOp],
                   kb: Optional[LocationKnowledgeBase] = None) -> int:
    """
    Execute a batch of ops against one Collection, each independently.

    Returns:
        Number of ops applied
    """
    applied = 0
    for op in ops:
        if exec_trans_op(coll, state, op, kb):
            applied += 1
    return applied
