"""Contains data types used throughout program"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Type aliases
SquareId = int
PlayerId = int
StorageKey = str


class GamePhase(Enum):
    """Enum for the phase a single game is in"""

    IN_PROGRESS = 0
    COMPLETE_WIN = 1
    COMPLETE_TIE = 2


@dataclass(frozen=True)
class Player:
    """Static config for one of the two players.

    Attributes:
        id (PlayerId): Id of player.
        name (str): Name shown to users.
        icon_class (str): Icon used to mark the player's squares.
        color_class (str): Color used for the player's marks.
    """

    id: PlayerId
    name: str
    icon_class: str
    color_class: str


DEFAULT_PLAYERS = (
    Player(id=1, name="Player 1", icon_class="fa-x", color_class="turquoise"),
    Player(id=2, name="Player 2", icon_class="fa-o", color_class="yellow"),
)


@dataclass(frozen=True)
class Move:
    """A single mark placed on the board.

    Attributes:
        square_id (SquareId): Square the mark is on, from 1 to 9.
        player (Player): Player who placed the mark.
    """

    square_id: SquareId
    player: Player


@dataclass(frozen=True)
class GameStatus:
    """Outcome of a game so far.

    A tie is complete with no winner.

    Attributes:
        is_complete (bool): True if the game has a winner or the board is full.
        winner (Player, optional): Player who won the game.
    """

    is_complete: bool
    winner: Optional[Player] = None


@dataclass
class CompletedGame:
    """Archived record of a finished game"""

    moves: List[Move]
    status: GameStatus


@dataclass
class GameHistory:
    """Completed games of the current round and of all earlier rounds.

    Attributes:
        current_round_games (List[CompletedGame]): Games counted on the
            scoreboard.
        all_games (List[CompletedGame]): Games from rounds that have ended.
    """

    current_round_games: List[CompletedGame] = field(default_factory=list)
    all_games: List[CompletedGame] = field(default_factory=list)


@dataclass
class PersistedState:
    """Root object stored under the game's storage key"""

    current_game_moves: List[Move] = field(default_factory=list)
    history: GameHistory = field(default_factory=GameHistory)


@dataclass
class GameView:
    """Everything about the current game derived from its moves.

    Attributes:
        moves (List[Move]): Moves played so far in order.
        current_player (Player): Player whose turn it is.
        status (GameStatus): Whether the game is over and who won.
    """

    moves: List[Move]
    current_player: Player
    status: GameStatus

    @property
    def phase(self) -> GamePhase:
        if not self.status.is_complete:
            return GamePhase.IN_PROGRESS
        if self.status.winner is None:
            return GamePhase.COMPLETE_TIE
        return GamePhase.COMPLETE_WIN

    def move_at(self, square_id: SquareId) -> Optional[Move]:
        """Returns the move on a square if there is one"""

        for move in self.moves:
            if move.square_id == square_id:
                return move
        return None


@dataclass
class PlayerWithStats:
    """Player config along with how many games they won this round"""

    id: PlayerId
    name: str
    icon_class: str
    color_class: str
    wins: int


@dataclass
class RoundStats:
    """Scoreboard for the current round"""

    player_with_stats: List[PlayerWithStats]
    ties: int
