"""Text versions of the game board and scoreboard.

All functions in this module are pure and return strings to be printed.

Typical usage example:
    print(game_screen(store.game, store.stats))
"""

from typing import List

from data_types import GamePhase, GameView, Player, PlayerWithStats, RoundStats

HELP_TEXT = "Commands: 1-9 play a square, r reset game, n new round, q quit"


def player_mark(player: Player | PlayerWithStats) -> str:
    """Mark shown on the board for a player, made from their icon class.

    "fa-x" becomes "X".
    """

    return player.icon_class.removeprefix("fa-").upper()


def board_string(game: GameView) -> str:
    """Creates the 3x3 board with marks on played squares.

    Empty squares show their number so users know what to type.
    """

    rows: List[str] = []
    for row_start in (1, 4, 7):
        cells = []
        for square_id in range(row_start, row_start + 3):
            move = game.move_at(square_id)
            cells.append(player_mark(move.player) if move else str(square_id))
        rows.append(" " + " | ".join(cells))

    return "\n---+---+---\n".join(rows)


def turn_string(game: GameView) -> str:
    """Line saying whose turn it is or how the game ended"""

    phase = game.phase

    if phase == GamePhase.COMPLETE_WIN and game.status.winner:
        return f"{game.status.winner.name} wins!"
    if phase == GamePhase.COMPLETE_TIE:
        return "Tie game!"

    return f"{game.current_player.name}, you're up ({player_mark(game.current_player)})"


def scoreboard_string(stats: RoundStats) -> str:
    player_one, player_two = stats.player_with_stats

    return (
        f"{player_one.name} ({player_mark(player_one)}): {player_one.wins} wins"
        f" | Ties: {stats.ties} | "
        f"{player_two.name} ({player_mark(player_two)}): {player_two.wins} wins"
    )


def game_screen(game: GameView, stats: RoundStats) -> str:
    """Everything shown to users after each change"""

    return "\n".join(
        [
            turn_string(game),
            "",
            board_string(game),
            "",
            scoreboard_string(stats),
        ]
    )
