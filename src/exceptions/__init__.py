from typing import Any

from data_types import SquareId, StorageKey


class IllegalMove(Exception):
    """Raised when a move can't be played on the current game.

    Attributes:
        square_id: square the move was attempted on.
        reason: why the move was rejected.
    """

    def __init__(self, square_id: SquareId, reason: str, *args: object) -> None:
        """Initializes the exception with the square id and reason.

        Args:
            square_id (SquareId): Square the move was attempted on.
            reason (str): Why the move was rejected.
        """

        self.square_id = square_id
        self.reason = reason
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Move on square {self.square_id} is not allowed: {self.reason}"


class InvalidArgument(Exception):
    """Raised when the state writer gets something that is neither a state
    nor a function producing one.

    Attributes:
        argument: the value that was passed.
    """

    def __init__(self, argument: Any, *args: object) -> None:
        self.argument = argument
        super().__init__(*args)

    def __str__(self) -> str:
        return (
            f"Invalid argument passed to save state: {type(self.argument).__name__}"
        )


class CorruptState(Exception):
    """Raised when the stored value for a key can't be decoded.

    Attributes:
        key: storage key holding the bad value.
    """

    def __init__(self, key: StorageKey, *args: object) -> None:
        """Initializes the exception with the storage key.

        Args:
            key (StorageKey): Key the undecodable value was stored under.
        """

        self.key = key
        super().__init__(*args)

    def __str__(self) -> str:
        return f"State stored under {self.key} could not be decoded"
