import logging
from typing import Callable, Dict, Optional, Union

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Notifier:
    """Registry of callbacks that are called when state changes.

    Callbacks are stored by name. The name of a callback is the function's
    __name__ unless one is passed in when adding it.
    """

    def __init__(self) -> None:
        self.__listeners: Dict[str, Listener] = {}

    def add_listener(self, fn: Listener, name: Optional[str] = None) -> Listener:
        """Adds a callback to be called on every change.

        Can be used as a decorator. Does not effect the function in any way.

        If a callback of the same name is already added the new function
        will overwrite the old one.

        Args:
            fn (Listener): Function that takes no arguments.
            name (str, optional): Name to store the callback under. Defaults
                to the function's name.

        Returns:
            Listener: The function that was passed in.
        """

        self.__listeners[name or fn.__name__] = fn
        return fn

    def remove_listener(self, fn_or_name: Union[Listener, str]) -> None:
        """Removes a callback added with add_listener.

        Raises:
            KeyError: Raised if no callback is stored under that name.
        """

        name = fn_or_name if isinstance(fn_or_name, str) else fn_or_name.__name__

        if name not in self.__listeners:
            raise KeyError(f"Listener {name} not found")

        del self.__listeners[name]

    def notify(self) -> None:
        """Calls every callback in the order they were added"""

        logger.debug("Notifying %d listeners", len(self.__listeners))

        # Copy so callbacks can remove themselves
        for listener in list(self.__listeners.values()):
            listener()

    def __len__(self) -> int:
        return len(self.__listeners)
