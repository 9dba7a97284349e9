"""
Decoded state data types.

In-memory form of the decoded game data: two games, each a list of blocks,
each block holding a transition table indexed by selector. Empty slots are None.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from wltransit.constants import GAME_COUNT


class Point(NamedTuple):
    """Map coordinates inside a block"""
    x: int
    y: int


class BlockZIP(NamedTuple):
    """Block coordinate: (game index, block index)"""
    game_idx: int
    block_idx: int


@dataclass
class Transition:
    """Single transition record from a block's action table"""
    relative: bool = False  # loc_x/loc_y are offsets from the player's position
    location: int = 0  # Destination location code
    loc_x: int = 0
    loc_y: int = 0
    derelict: bool = False
    prompt: bool = False  # Ask the player before moving
    to_class: int = 0  # Destination class tag (shops use ACTION_CLASS_SHOP)

    # Identity fields, tied to the record's slot in its block
    offset: int = 0  # Byte offset of the record inside the block
    text: int = 0  # Message index shown with the prompt

    def is_derelict(self) -> bool:
        return self.derelict

    def make_absolute(self, base: Point):
        """
        Convert a relative transition to absolute form.

        Args:
            base: Player position at which the transition fires; the relative
                  offsets are applied to it
        """
        self.loc_x = base.x + self.loc_x
        self.loc_y = base.y + self.loc_y
        self.relative = False


@dataclass
class ActionTables:
    """Action tables of one block. Only transitions are modeled."""
    transitions: List[Optional[Transition]] = field(default_factory=list)


@dataclass
class Block:
    """One decoded data block"""
    action_tables: ActionTables = field(default_factory=ActionTables)


@dataclass
class DecodeState:
    """Decoded data of both games: blocks[game_idx][block_idx]"""
    blocks: List[List[Block]] = field(default_factory=lambda: [[] for _ in range(GAME_COUNT)])

    def get_block(self, zip_: BlockZIP) -> Block:
        return self.blocks[zip_.game_idx][zip_.block_idx]

    def get_transition(self, zip_: BlockZIP, selector: int) -> Optional[Transition]:
        """Get the record in a block's transition slot, or None when out of range or empty."""
        if not 0 <= zip_.game_idx < len(self.blocks):
            return None
        if not 0 <= zip_.block_idx < len(self.blocks[zip_.game_idx]):
            return None

        transitions = self.get_block(zip_).action_tables.transitions
        if not 0 <= selector < len(transitions):
            return None
        return transitions[selector]

    def transition_count(self) -> int:
        """Count non-empty transition slots across both games."""
        return sum(
            1
            for game in self.blocks
            for block in game
            for t in block.action_tables.transitions
            if t is not None
        )
