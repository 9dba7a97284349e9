"""
Decode Package

Decoded state data model consumed by the collector and mutated by the
transition-op executor, plus its JSON interchange format.
"""

from .state import Point, BlockZIP, Transition, ActionTables, Block, DecodeState
from .json_io import load_state, save_state, state_from_dict, state_to_dict
