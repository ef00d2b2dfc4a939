"""Interfaces users see and type commands into"""

from user_interfaces.board_render import game_screen
from user_interfaces.console import ConsoleGame
