"""
wltransit

Collects the travel transitions of a decoded two-game world into a
multigraph, filters it to usable round trips, and rewrites connections by
swapping transition content.

Usage:
    from wltransit import CollectConfig, TransOp, build_collection, exec_trans_op
    from wltransit.locations import parse_loc_pair

    coll = build_collection(state, CollectConfig())
    for pair in coll.round_trips():
        ...
    exec_trans_op(coll, state, TransOp(parse_loc_pair("Highpool, HighpoolCave"),
                                       parse_loc_pair("AgCenter, AgCenterRootCellar")))
"""

from .errors import ResolutionError, LocationLookupError, ConfigError
from .collect import CollectConfig, TransEntry, collect_transitions, fixup_transitions
from .graph import Collection, build_collection
from .transitions import TransOp, exec_trans_op, exec_trans_ops

__version__ = "0.1.0"
