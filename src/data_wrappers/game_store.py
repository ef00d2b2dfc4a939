"""Contains the Store class which holds the state of the game being played"""

import copy
import logging
from typing import Callable, Optional, Sequence, Union

from data_types import (
    CompletedGame,
    GameHistory,
    GameView,
    Move,
    PersistedState,
    Player,
    PlayerWithStats,
    RoundStats,
    SquareId,
    StorageKey,
)
from data_types.protocols import StorageBackend
from exceptions import CorruptState, IllegalMove, InvalidArgument
from game_rules import BOARD_SIZE, current_player, game_status

from .state_codec import decode_state, encode_state
from .utils import Listener, Notifier

logger = logging.getLogger(__name__)

StateUpdate = Union[PersistedState, Callable[[PersistedState], PersistedState]]


class Store:
    """Wrapper around a storage backend that holds a game of tic-tac-toe.

    Only the moves of the current game and the history of completed games
    are stored, all under a single key. Everything else (whose turn it is,
    the winner, the scoreboard) is worked out from those on every read.

    Every change reads the stored state, changes a copy of it, and writes the
    whole copy back. Listeners are called after each write.

    Typical usage example:
        store = Store("game-state-key", DEFAULT_PLAYERS, MemoryBackend())
        store.add_listener(lambda: render(store.game, store.stats), "render")
        store.player_move(5)
    """

    def __init__(
        self,
        key: StorageKey,
        players: Sequence[Player],
        backend: StorageBackend,
    ) -> None:
        """Creates a store for a game.

        Args:
            key (StorageKey): Key the state is stored under.
            players (Sequence[Player]): The two players in turn order.
            backend (StorageBackend): Where the state is stored.

        Raises:
            ValueError: Raised if there aren't exactly two players.
        """

        if len(players) != 2:
            raise ValueError(f"Tic-tac-toe needs 2 players, got {len(players)}")

        self.storage_key = key
        self.players = tuple(players)
        self.__backend = backend
        self.__notifier = Notifier()

        # Last stored value this store wrote or was told about. A change signal
        # for this value is an echo of something already shown
        self.__last_seen: Optional[str] = None

        backend.subscribe(key, self.external_change)

    # Derived views -----------------------------------------------------
    @property
    def game(self) -> GameView:
        """The current game worked out from the stored moves"""

        return self.__game_from(self.__get_state())

    @property
    def stats(self) -> RoundStats:
        """Wins for each player and ties in the current round"""

        games = self.__get_state().history.current_round_games

        return RoundStats(
            player_with_stats=[
                PlayerWithStats(
                    id=player.id,
                    name=player.name,
                    icon_class=player.icon_class,
                    color_class=player.color_class,
                    wins=len(
                        [
                            game
                            for game in games
                            if game.status.winner is not None
                            and game.status.winner.id == player.id
                        ]
                    ),
                )
                for player in self.players
            ],
            ties=len([game for game in games if game.status.winner is None]),
        )

    @property
    def history(self) -> GameHistory:
        """Completed games of the current round and earlier rounds.

        Returns a fresh copy, changing it doesn't change the stored state.
        """

        return self.__get_state().history

    @property
    def state(self) -> PersistedState:
        """The whole stored state as a fresh copy"""

        return self.__get_state()

    # Listeners ---------------------------------------------------------
    def add_listener(self, fn: Listener, name: Optional[str] = None) -> Listener:
        """Adds a callback that is called after every change to the state.

        Callbacks take no arguments and should read game and stats again.
        """

        return self.__notifier.add_listener(fn, name)

    def remove_listener(self, fn_or_name: Union[Listener, str]) -> None:
        self.__notifier.remove_listener(fn_or_name)

    def external_change(self) -> None:
        """Handler for the backend telling us the stored state was changed.

        Listeners are called unless the stored value is the last one this
        store wrote or was told about, which happens when redis reports this
        store's own write.
        """

        value = self.__backend.get(self.storage_key)
        if value == self.__last_seen:
            return

        self.__last_seen = value

        logger.info("State %s changed by another process", self.storage_key)
        self.__notifier.notify()

    # Mutations ---------------------------------------------------------
    def player_move(self, square_id: SquareId) -> None:
        """Plays a move for the player whose turn it is.

        Args:
            square_id (SquareId): Square to place the mark on, from 1 to 9.

        Raises:
            IllegalMove: Raised if the square doesn't exist or is taken, or
                if the game is already over.
        """

        state_clone = copy.deepcopy(self.__get_state())
        game = self.__game_from(state_clone)

        if not 1 <= square_id <= BOARD_SIZE:
            raise IllegalMove(square_id, f"squares are numbered 1 to {BOARD_SIZE}")
        if game.status.is_complete:
            raise IllegalMove(square_id, "the game is over")
        if game.move_at(square_id) is not None:
            raise IllegalMove(square_id, "the square is already taken")

        # Player is taken from before the move is added so parity doesn't shift
        player = game.current_player
        state_clone.current_game_moves.append(Move(square_id=square_id, player=player))

        logger.debug("%s plays square %d", player.name, square_id)
        self.__save_state(state_clone)

    def reset(self) -> None:
        """Starts a new game.

        If the current game is complete it is archived in the current round,
        otherwise it is dropped.
        """

        state = self.__get_state()
        game = self.__game_from(state)
        state_clone = copy.deepcopy(state)

        if game.status.is_complete:
            state_clone.history.current_round_games.append(
                CompletedGame(moves=game.moves, status=game.status)
            )
            logger.debug(
                "Archived game won by %s",
                game.status.winner.name if game.status.winner else "nobody",
            )
        elif game.moves:
            logger.debug("Dropped unfinished game of %d moves", len(game.moves))

        state_clone.current_game_moves = []

        self.__save_state(state_clone)

    def new_round(self) -> None:
        """Resets the game and the scoreboard.

        Games of the current round are moved onto the list of all games.
        This writes twice, once for the reset and once for the round.
        """

        self.reset()

        def end_round(state: PersistedState) -> PersistedState:
            state.history.all_games.extend(state.history.current_round_games)
            state.history.current_round_games = []
            return state

        logger.debug("Starting new round")
        self.__save_state(end_round)

    # Internal helpers --------------------------------------------------
    def __game_from(self, state: PersistedState) -> GameView:
        moves = state.current_game_moves

        return GameView(
            moves=moves,
            current_player=current_player(moves, self.players),
            status=game_status(moves, self.players),
        )

    def __save_state(self, state_or_fn: StateUpdate) -> None:
        """Moves from the old state to the new one and stores it.

        Args:
            state_or_fn (StateUpdate): Either the new state, or a function
                that is passed a copy of the old state and returns the new one.

        Raises:
            InvalidArgument: Raised if state_or_fn is neither.
        """

        if isinstance(state_or_fn, PersistedState):
            new_state = state_or_fn
        elif callable(state_or_fn):
            new_state = state_or_fn(copy.deepcopy(self.__get_state()))
        else:
            raise InvalidArgument(state_or_fn)

        encoded = encode_state(new_state)
        self.__last_seen = encoded
        self.__backend.set(self.storage_key, encoded)

        self.__notifier.notify()

    def __get_state(self) -> PersistedState:
        """Reads the state from the backend.

        Returns an empty state if nothing is stored yet.

        Raises:
            CorruptState: Raised if the stored value can't be decoded.
        """

        item = self.__backend.get(self.storage_key)
        if item is None:
            return PersistedState()

        try:
            return decode_state(item)
        except ValueError as exc:
            logger.error("Could not decode state stored under %s", self.storage_key)
            raise CorruptState(self.storage_key) from exc
