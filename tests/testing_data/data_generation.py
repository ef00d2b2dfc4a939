"""Contains functions for generating fake data"""

import random
import string
from typing import Iterable, List, Optional

import pytest

from data_types import (
    DEFAULT_PLAYERS,
    CompletedGame,
    GameHistory,
    GameStatus,
    Move,
    PersistedState,
    Player,
)
from data_wrappers import MemoryBackend, Store


@pytest.fixture
def storage_key():
    """Generates a random storage key"""

    return gen_storage_key()


def gen_storage_key():
    """Generates a random storage key"""

    return "".join(random.choices(string.ascii_letters + string.digits, k=8))


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(storage_key, backend):
    """Store for a fresh game using the default players"""

    return Store(storage_key, DEFAULT_PLAYERS, backend)


def play_moves(store: Store, square_ids: Iterable[int]) -> None:
    """Plays moves in order, alternating players as the store does"""

    for square_id in square_ids:
        store.player_move(square_id)


def moves_for(squares_by_player: List[List[int]]) -> List[Move]:
    """Creates moves alternating between players.

    squares_by_player[0] are player one's squares and squares_by_player[1]
    are player two's. Player one goes first.
    """

    moves = []
    first, second = squares_by_player
    for turn in range(len(first) + len(second)):
        squares = first if turn % 2 == 0 else second
        player = DEFAULT_PLAYERS[turn % 2]
        moves.append(Move(square_id=squares[turn // 2], player=player))
    return moves


def completed_game(winner: Optional[Player]) -> CompletedGame:
    """Creates an archived game with the passed winner, None for a tie"""

    if winner is None:
        moves = moves_for([[1, 3, 4, 8, 9], [2, 5, 6, 7]])
    elif winner == DEFAULT_PLAYERS[0]:
        moves = moves_for([[1, 2, 3], [4, 5]])
    else:
        moves = moves_for([[1, 2, 9], [4, 5, 6]])

    return CompletedGame(moves=moves, status=GameStatus(is_complete=True, winner=winner))


def generate_state(
    current_squares: Optional[List[List[int]]] = None,
    round_winners: Iterable[Optional[Player]] = (),
    past_winners: Iterable[Optional[Player]] = (),
) -> PersistedState:
    """Creates a persisted state.

    round_winners and past_winners give the winner of each archived game in
    the current round and in earlier rounds, with None for ties.
    """

    return PersistedState(
        current_game_moves=moves_for(current_squares) if current_squares else [],
        history=GameHistory(
            current_round_games=[completed_game(winner) for winner in round_winners],
            all_games=[completed_game(winner) for winner in past_winners],
        ),
    )
