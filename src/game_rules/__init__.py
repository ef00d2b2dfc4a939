"""Rules of tic-tac-toe worked out from a list of moves"""

import logging
from typing import List, Optional, Sequence

from data_types import GameStatus, Move, Player, SquareId

logger = logging.getLogger(__name__)

BOARD_SIZE = 9

# Squares are numbered 1 to 9 left to right, top to bottom
WINNING_PATTERNS = (
    (1, 2, 3),
    (1, 5, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 5, 7),
    (3, 6, 9),
    (4, 5, 6),
    (7, 8, 9),
)


def current_player(moves: Sequence[Move], players: Sequence[Player]) -> Player:
    """Returns the player whose turn it is. Even move counts are player one's"""

    return players[len(moves) % 2]


def occupied_squares(moves: Sequence[Move], player: Player) -> List[SquareId]:
    return [move.square_id for move in moves if move.player.id == player.id]


def find_winner(moves: Sequence[Move], players: Sequence[Player]) -> Optional[Player]:
    """Checks moves for a winner.

    Every player is checked against every pattern. If more than one player
    has a line the last one checked is returned.

    Args:
        moves (Sequence[Move]): Moves of the game.
        players (Sequence[Player]): Players of the game in turn order.

    Returns:
        Player, optional: Player with a complete line, None if there isn't one.
    """

    winner = None

    for player in players:
        selected = set(occupied_squares(moves, player))

        if any(selected.issuperset(pattern) for pattern in WINNING_PATTERNS):
            if winner is not None:
                logger.warning(
                    "Both %s and %s have a winning line, using %s",
                    winner.name,
                    player.name,
                    player.name,
                )
            winner = player

    return winner


def game_status(moves: Sequence[Move], players: Sequence[Player]) -> GameStatus:
    winner = find_winner(moves, players)
    return GameStatus(
        is_complete=winner is not None or len(moves) == BOARD_SIZE, winner=winner
    )
