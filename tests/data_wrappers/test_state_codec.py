import json

import pytest

from data_types import DEFAULT_PLAYERS, GameStatus, Move, PersistedState
from data_wrappers import decode_state, encode_state
from tests.testing_data.data_generation import generate_state, moves_for

player_one, player_two = DEFAULT_PLAYERS

test_states = [
    PersistedState(),
    generate_state(current_squares=[[5], []]),
    generate_state(
        current_squares=[[1, 9], [5]],
        round_winners=[player_one, None, player_two],
        past_winners=[None, player_one],
    ),
]


@pytest.mark.parametrize("state", test_states)
def test_round_trip(state: PersistedState):
    encoded = encode_state(state)

    assert decode_state(encoded) == state
    assert encode_state(decode_state(encoded)) == encoded


def test_encoded_layout():
    state = generate_state(current_squares=[[1], []], round_winners=[None])

    payload = json.loads(encode_state(state))

    assert list(payload.keys()) == ["current_game_moves", "history"]
    assert payload["current_game_moves"] == [
        {
            "square_id": 1,
            "player": {
                "id": 1,
                "name": "Player 1",
                "icon_class": "fa-x",
                "color_class": "turquoise",
            },
        }
    ]
    assert payload["history"]["current_round_games"][0]["status"] == {
        "is_complete": True,
        "winner": None,
    }
    assert payload["history"]["all_games"] == []


def test_decoded_winner_is_player():
    state = decode_state(encode_state(generate_state(round_winners=[player_two])))

    assert state.history.current_round_games[0].status == GameStatus(
        is_complete=True, winner=player_two
    )


@pytest.mark.parametrize(
    "value",
    [
        "",
        "{not json",
        "[]",
        '{"current_game_moves": []}',
        '{"current_game_moves": [{"square_id": 1}], "history": '
        '{"current_round_games": [], "all_games": []}}',
    ],
)
def test_decode_bad_values(value: str):
    with pytest.raises(ValueError):
        decode_state(value)


def test_decode_repeated_square():
    state = PersistedState(
        current_game_moves=[
            Move(square_id=5, player=player_one),
            Move(square_id=5, player=player_two),
        ]
    )

    with pytest.raises(ValueError):
        decode_state(encode_state(state))


def test_decode_too_many_moves():
    state = PersistedState(
        current_game_moves=moves_for([[1, 3, 4, 8, 9], [2, 5, 6, 7]])
        + [Move(square_id=1, player=player_two)]
    )

    with pytest.raises(ValueError):
        decode_state(encode_state(state))


def test_decode_move_off_board():
    state = PersistedState(current_game_moves=[Move(square_id=10, player=player_one)])

    with pytest.raises(ValueError):
        decode_state(encode_state(state))


def test_decode_unfinished_archived_game():
    state = generate_state(past_winners=[player_two])
    state.history.all_games[0].status = GameStatus(is_complete=False)

    with pytest.raises(ValueError):
        decode_state(encode_state(state))
