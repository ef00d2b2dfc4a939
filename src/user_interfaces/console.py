"""Terminal front end that forwards typed commands to the store"""

import logging
from typing import Callable

from data_wrappers import Store
from exceptions import IllegalMove
from user_interfaces.board_render import HELP_TEXT, game_screen

logger = logging.getLogger(__name__)

RESET_COMMANDS = ("r", "reset")
NEW_ROUND_COMMANDS = ("n", "new", "new round")
QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleGame:
    """Reads commands from a user and re-renders the game on every change.

    The screen is redrawn whenever the store notifies its listeners, which
    includes changes made by other processes sharing the same storage.
    """

    def __init__(
        self,
        store: Store,
        output: Callable[[str], None] = print,
        read_line: Callable[[str], str] = input,
    ) -> None:
        self.store = store
        self.__output = output
        self.__read_line = read_line

    def render(self) -> None:
        self.__output(game_screen(self.store.game, self.store.stats))

    def handle_command(self, command: str) -> bool:
        """Runs a single command typed by the user.

        Args:
            command (str): Text the user entered.

        Returns:
            bool: False if the user asked to quit, True otherwise.
        """

        command = command.strip().lower()

        if command in QUIT_COMMANDS:
            return False

        if command in RESET_COMMANDS:
            self.store.reset()
        elif command in NEW_ROUND_COMMANDS:
            self.store.new_round()
        elif command.isdigit():
            try:
                self.store.player_move(int(command))
            except IllegalMove as exc:
                self.__output(str(exc))
        else:
            self.__output(HELP_TEXT)

        return True

    def run(self) -> None:
        """Renders the game and reads commands until the user quits"""

        self.store.add_listener(self.render, "render")
        self.render()
        self.__output(HELP_TEXT)

        try:
            while self.handle_command(self.__read_line("> ")):
                pass
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, stopping")
        finally:
            self.store.remove_listener("render")
