#!/usr/bin/env python3
"""
Build Transitions

Driver script for rewriting the transitions of a decoded state.

Pipeline:
1. Load the decoded state (JSON)
2. Load filter toggles (collect.ini) and exception list overlay (exceptions.ini)
3. Fix up known transitions and build the transition collection
4. Apply transition ops (ops.ini) in file order
5. Write the rewritten state

Usage:
    wltransit-build --state state.json --ops ops.ini --output rewritten.json
"""

import sys
import argparse
from pathlib import Path
from typing import Optional

from wltransit.config import load_collect_config, load_xlist_overlay
from wltransit.collect import CollectConfig
from wltransit.decode import load_state, save_state
from wltransit.graph import build_collection
from wltransit.locations import DEFAULT_KNOWLEDGE_BASE
from wltransit.transitions import TransOpConfig, exec_trans_ops
from wltransit.utils import log, logError, init_logging, print_summary


class TransitionBuilder:
    """
    Orchestrates loading, collecting and rewriting transitions
    """

    def __init__(self, state_path: Path, collect_config_path: Optional[Path] = None,
                 exceptions_path: Optional[Path] = None):
        """
        Initialize builder

        Args:
            state_path: Decoded state JSON
            collect_config_path: Path to collect.ini (defaults when None)
            exceptions_path: Path to exceptions.ini overlay (built-in lists when None)
        """
        self.state_path = Path(state_path)
        self.cfg = load_collect_config(collect_config_path) if collect_config_path else CollectConfig()

        self.kb = DEFAULT_KNOWLEDGE_BASE
        if exceptions_path:
            self.kb = self.kb.with_xlists(load_xlist_overlay(exceptions_path))

        self.state = None
        self.coll = None

    def collect(self):
        """Load the state and build the transition collection."""
        log("=" * 70)
        log("STEP 1: Collecting Transitions")
        log("=" * 70)

        self.state = load_state(self.state_path)
        self.coll = build_collection(self.state, self.cfg, self.kb)
        self.coll.print_summary()
        log()

    def apply_ops(self, ops_path: Path) -> int:
        """
        Apply every op from an ops.ini file.

        Returns:
            Number of ops applied
        """
        log("=" * 70)
        log("STEP 2: Applying Transition Ops")
        log("=" * 70)

        op_config = TransOpConfig(ops_path)
        applied = exec_trans_ops(self.coll, self.state, op_config.get_ops(), self.kb)
        log(f"Applied {applied}/{op_config.op_count} ops")
        log()
        return applied

    def write(self, output_path: Path):
        save_state(self.state, output_path)


def main():
    parser = argparse.ArgumentParser(
        description='Rewrite travel transitions of a decoded state',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    wltransit-build --state state.json --list-round-trips

    # Apply ops with custom filter toggles:
    wltransit-build --state state.json --config collect.ini --ops ops.ini --output out.json

ops.ini:
    [workshop_to_cellar]
    a = Highpool, HighpoolWorkshop
    b = AgCenter, AgCenterRootCellar
        """
    )

    parser.add_argument('--state', required=True,
                        help='Decoded state JSON file')
    parser.add_argument('--config', default=None,
                        help='Path to collect.ini filter configuration')
    parser.add_argument('--exceptions', default=None,
                        help='Path to exceptions.ini selector exception lists')
    parser.add_argument('--ops', default=None,
                        help='Path to ops.ini transition ops')
    parser.add_argument('--output', default=None,
                        help='Output path for the rewritten state JSON')
    parser.add_argument('--list-round-trips', action='store_true',
                        help='List usable round trips')
    parser.add_argument('--log', default=None,
                        help='Log file path (default: ./transitions.log)')
    args = parser.parse_args()

    # Initialize logging
    init_logging(Path(args.log) if args.log else None)

    try:
        builder = TransitionBuilder(args.state, args.config, args.exceptions)
        builder.collect()

        if args.list_round_trips:
            builder.coll.print_round_trips()
            log()

        if args.ops:
            builder.apply_ops(args.ops)

        if args.output:
            builder.write(args.output)

    except Exception as e:
        logError(f"{e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    print_summary()


if __name__ == '__main__':
    main()
