"""
Graph Package

Central data structure for the transition graph.
"""

from .collection import Collection, LocPairMap, build_collection
