"""Converts the persisted game state to and from the string kept in storage"""

import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from data_types import (
    CompletedGame,
    GameHistory,
    GameStatus,
    Move,
    PersistedState,
    Player,
)


def encode_state(state: PersistedState) -> str:
    """Encodes the state as a JSON string.

    Field order follows the dataclasses and lists keep their order so
    encoding a decoded string gives back the same string.
    """

    return json.dumps(asdict(state))


def _player(payload: Optional[Dict[str, Any]]) -> Optional[Player]:
    if payload is None:
        return None
    return Player(
        id=int(payload["id"]),
        name=str(payload["name"]),
        icon_class=str(payload["icon_class"]),
        color_class=str(payload["color_class"]),
    )


def _moves(payload: List[Dict[str, Any]]) -> List[Move]:
    return [
        Move(square_id=int(move["square_id"]), player=_player(move["player"]))
        for move in payload
    ]


def _completed_games(payload: List[Dict[str, Any]]) -> List[CompletedGame]:
    return [
        CompletedGame(
            moves=_moves(game["moves"]),
            status=GameStatus(
                is_complete=bool(game["status"]["is_complete"]),
                winner=_player(game["status"]["winner"]),
            ),
        )
        for game in payload
    ]


def _check_moves(moves: List[Move]) -> None:
    """Raises ValueError unless moves could come from a single game"""

    square_ids = [move.square_id for move in moves]

    if len(square_ids) > 9:
        raise ValueError(f"Game has {len(square_ids)} moves, at most 9 are allowed")
    if len(set(square_ids)) != len(square_ids):
        raise ValueError(f"Game has more than one move on a square: {square_ids}")
    if any(not 1 <= square_id <= 9 for square_id in square_ids):
        raise ValueError(f"Game has moves off the board: {square_ids}")


def _check_state(state: PersistedState) -> None:
    _check_moves(state.current_game_moves)

    for game in state.history.current_round_games + state.history.all_games:
        _check_moves(game.moves)
        if not game.status.is_complete:
            raise ValueError("Archived game is not complete")


def decode_state(value: str) -> PersistedState:
    """Decodes a string made by encode_state.

    Raises:
        ValueError: Raised if value isn't JSON, doesn't have the shape of
            a persisted state, or has games no real play could lead to
            (repeated squares, too many moves, unfinished archived games).
    """

    payload = json.loads(value)

    try:
        history = payload["history"]
        state = PersistedState(
            current_game_moves=_moves(payload["current_game_moves"]),
            history=GameHistory(
                current_round_games=_completed_games(history["current_round_games"]),
                all_games=_completed_games(history["all_games"]),
            ),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Stored state has an unexpected shape: {exc!r}") from exc

    _check_state(state)
    return state
