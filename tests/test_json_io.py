"""Tests for the decoded state JSON interchange."""

import json

import pytest

from wltransit.decode import DecodeState, Transition, load_state, save_state, state_from_dict, state_to_dict
from wltransit.locations import base_locations as base


class TestStateDict:
    """Tests for state_from_dict and state_to_dict."""

    def test_from_dict(self):
        state = state_from_dict({'games': [
            [{'transitions': [None, {'location': 3, 'loc_x': 4, 'prompt': True}]}],
            [{}],
        ]})

        assert len(state.blocks[0]) == 1
        assert state.blocks[0][0].action_tables.transitions == [
            None, Transition(location=3, loc_x=4, prompt=True)]
        assert state.blocks[1][0].action_tables.transitions == []
        assert state.transition_count() == 1

    def test_to_dict_keeps_empty_slots(self, quartz_world):
        data = state_to_dict(quartz_world.state)
        quartz = data['games'][0][base.BLOCK0_QUARTZ]['transitions']

        assert quartz[:3] == [None, None, None]
        assert quartz[5]['location'] == base.LOCATION_COURTHOUSE
        assert quartz[5]['offset'] == 0x50

    def test_same_state_after_reload(self, quartz_world):
        data = state_to_dict(quartz_world.state)
        assert state_from_dict(data) == quartz_world.state

    @pytest.mark.parametrize("data,match", [
        ({}, "games"),
        ({'games': [[]]}, "games"),
        ({'games': [{}, []]}, "game 0"),
        ({'games': [[{'transitions': {}}], []]}, "transitions"),
        ({'games': [[{'transitions': [7]}], []]}, "selector=0"),
        ({'games': [[{'transitions': [{'destination': 1}]}], []]}, "destination"),
        ({'games': [[{'transitions': [{'location': "11"}]}], []]}, "location must be int"),
        ({'games': [[{'transitions': [{'relative': "no"}]}], []]}, "relative must be bool"),
        ({'games': [[{'transitions': [{'loc_x': True}]}], []]}, "loc_x must be int"),
        ({'games': [[{'transitions': [{'prompt': 1}]}], []]}, "prompt must be bool"),
    ])
    def test_malformed(self, data, match):
        with pytest.raises(ValueError, match=match):
            state_from_dict(data)


class TestStateFiles:
    """Tests for load_state and save_state."""

    def test_save_then_load(self, quartz_world, tmp_path):
        path = tmp_path / "out" / "state.json"
        save_state(quartz_world.state, path)

        assert load_state(path) == quartz_world.state

    def test_load(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({'games': [[{'transitions': [{'location': 1}]}], []]}),
                        encoding='utf-8')

        state = load_state(path)
        assert isinstance(state, DecodeState)
        assert state.blocks[0][0].action_tables.transitions[0].location == 1
