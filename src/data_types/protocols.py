"""Contains protocols for type checking"""

from typing import Callable, Optional, Protocol

from data_types import StorageKey


class StorageBackend(Protocol):
    """Protocol for the key-value store game state is kept in.

    Values are opaque strings. The change callback is called with no
    arguments when another process writes to a subscribed key.
    """

    def get(self, key: StorageKey) -> Optional[str]:
        ...

    def set(self, key: StorageKey, value: str) -> None:
        ...

    def subscribe(self, key: StorageKey, callback: Callable[[], None]) -> None:
        ...
