"""
JSON interchange for decoded states.

The binary decoder lives outside this package; it hands states over as JSON:

    {
      "games": [
        [ {"transitions": [null, {"relative": false, "location": 3, ...}]}, ... ],
        [ ... ]
      ]
    }
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

from wltransit.constants import GAME_COUNT
from wltransit.decode.state import ActionTables, Block, DecodeState, Transition
from wltransit.utils import log

# Record key -> expected value type (bool or int)
_TRANSITION_TYPES = {f.name: f.type for f in fields(Transition)}


def _transition_from_dict(data: Optional[Dict[str, Any]], where: str) -> Optional[Transition]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected object or null, got {type(data).__name__}")

    unknown = set(data) - set(_TRANSITION_TYPES)
    if unknown:
        raise ValueError(f"{where}: unknown transition keys {sorted(unknown)}")

    for key, value in data.items():
        expected = _TRANSITION_TYPES[key]
        # bool is a subclass of int; a flag is not a valid number
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ValueError(f"{where}: {key} must be {expected.__name__}, "
                             f"got {type(value).__name__}")

    return Transition(**data)


def state_from_dict(data: Dict[str, Any]) -> DecodeState:
    """
    Build a DecodeState from its JSON form.

    Raises:
        ValueError: if the structure does not match the interchange format
    """
    games = data.get('games') if isinstance(data, dict) else None
    if not isinstance(games, list) or len(games) != GAME_COUNT:
        raise ValueError(f"expected 'games' list with {GAME_COUNT} entries")

    state = DecodeState()
    for game_idx, game in enumerate(games):
        if not isinstance(game, list):
            raise ValueError(f"game {game_idx}: expected list of blocks")

        for block_idx, block in enumerate(game):
            where = f"game={game_idx} block={block_idx}"
            transitions = block.get('transitions', []) if isinstance(block, dict) else None
            if not isinstance(transitions, list):
                raise ValueError(f"{where}: expected 'transitions' list")

            state.blocks[game_idx].append(Block(action_tables=ActionTables(transitions=[
                _transition_from_dict(t, f"{where} selector={selector}")
                for selector, t in enumerate(transitions)
            ])))

    return state


def state_to_dict(state: DecodeState) -> Dict[str, Any]:
    """Convert a DecodeState to its JSON form."""
    return {
        'games': [
            [
                {'transitions': [asdict(t) if t is not None else None
                                 for t in block.action_tables.transitions]}
                for block in game
            ]
            for game in state.blocks
        ]
    }


def load_state(path: Path) -> DecodeState:
    """Load a decoded state from a JSON file."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    state = state_from_dict(data)
    log(f"Loaded state: {path} ({state.transition_count()} transitions)")
    return state


def save_state(state: DecodeState, path: Path):
    """Write a decoded state to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(state_to_dict(state), f, indent=1)
    log(f"State written to: {path}")
