"""
Collect Package

Gathers annotated transitions from a decoded state and decides which of
them are usable for replacement.
"""

from .entries import TransEntry, copy_entries
from .filter_policy import CollectConfig, should_keep_transition
from .collector import collect_transitions
from .fixup import fixup_transitions
