"""Key-value stores the game state can be kept in.

Both classes follow the StorageBackend protocol. Values are stored as plain
strings under a single key and subscribers are told when another writer
changes a key they subscribed to.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import redis
import redis.client as redis_client

from data_types import StorageKey

logger = logging.getLogger(__name__)


class RedisBackend:
    """Stores game state in redis.

    Changes made by other processes are picked up with redis keyspace
    notifications. Subscribed keys are listened to on a pubsub worker thread
    started by listen().
    """

    def __init__(self, client: Optional[redis.Redis] = None, db_number: int = 0):
        self.__client = client or redis.Redis(db=db_number, decode_responses=True)
        self.__db_number = self.__client.connection_pool.connection_kwargs.get(
            "db", db_number
        )

        # Dict of channel names and their handlers
        self.__channel_handlers: Dict[str, Callable[[Any], None]] = {}

        self.__pubsub: Optional[redis_client.PubSub] = None
        self.__worker: Optional[redis_client.PubSubWorkerThread] = None

    @staticmethod
    def from_url(url: str) -> "RedisBackend":
        """Creates a backend from a redis url like redis://localhost:6379/0"""

        return RedisBackend(redis.Redis.from_url(url, decode_responses=True))

    def __keyspace_channel(self, key: StorageKey) -> str:
        return f"__keyspace@{self.__db_number}__:{key}"

    def get(self, key: StorageKey) -> Optional[str]:
        value = self.__client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: StorageKey, value: str) -> None:
        self.__client.set(key, value)

    def subscribe(self, key: StorageKey, callback: Callable[[], None]) -> None:
        """Calls callback whenever the value under key is set.

        Redis reports writes from every client including this one, so the
        callback is also called for this backend's own writes.

        If listen() was already called the pubsub worker is restarted so the
        new key is picked up.
        """

        def handler(message: Any) -> None:
            event = message.get("data")
            if isinstance(event, bytes):
                event = event.decode("utf-8")

            if event == "set":
                callback()
            else:
                logger.debug("Ignoring %s event on %s", event, key)

        self.__channel_handlers[self.__keyspace_channel(key)] = handler

        if self.__worker is not None:
            self.listen()

    def listen(self, sleep_time: float = 0.1) -> redis_client.PubSubWorkerThread:
        """Starts a worker thread that runs subscribed callbacks.

        Args:
            sleep_time (float, optional): Seconds the worker waits for a
                message on each loop. Defaults to 0.1.

        Returns:
            PubSubWorkerThread: The running worker.
        """

        self.close()

        try:
            # Keyspace events for string commands
            self.__client.config_set("notify-keyspace-events", "K$")
        except redis.ResponseError as exc:
            logger.warning(
                "Could not enable keyspace notifications, changes from other "
                "processes may not be seen: %s",
                exc,
            )

        self.__pubsub = self.__client.pubsub(ignore_subscribe_messages=True)
        self.__pubsub.subscribe(**self.__channel_handlers)
        self.__worker = self.__pubsub.run_in_thread(
            sleep_time=sleep_time,
            daemon=True,
            exception_handler=self.__worker_failed,
        )

        logger.info("Listening for changes on %d keys", len(self.__channel_handlers))
        return self.__worker

    def __worker_failed(
        self,
        exc: BaseException,
        pubsub: redis_client.PubSub,
        worker: redis_client.PubSubWorkerThread,
    ) -> None:
        """Logs an error raised by a callback and stops the worker.

        Changes from other processes aren't picked up after this until
        listen() is called again.
        """

        logger.error(
            "Stopped listening for changes after a callback failed",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        worker.stop()

    def close(self) -> None:
        """Stops the pubsub worker if it is running"""

        if self.__worker is not None:
            self.__worker.stop()
            self.__worker = None

        if self.__pubsub is not None:
            self.__pubsub.close()
            self.__pubsub = None


class MemoryBackend:
    """Stores game state in a dict in this process.

    Backends made with share() use the same dict, and each one is told about
    writes made through the others but not about its own. This behaves like
    browser tabs sharing local storage.
    """

    def __init__(self) -> None:
        self.__items: Dict[StorageKey, str] = {}
        self.__group: List["MemoryBackend"] = [self]
        self.__subscriptions: Dict[StorageKey, List[Callable[[], None]]] = {}

    def share(self) -> "MemoryBackend":
        """Creates another backend that sees the same items as this one"""

        peer = MemoryBackend()
        peer.__items = self.__items
        peer.__group = self.__group
        self.__group.append(peer)
        return peer

    def get(self, key: StorageKey) -> Optional[str]:
        return self.__items.get(key)

    def set(self, key: StorageKey, value: str) -> None:
        self.__items[key] = value

        for peer in self.__group:
            if peer is not self:
                peer.__changed(key)

    def subscribe(self, key: StorageKey, callback: Callable[[], None]) -> None:
        self.__subscriptions.setdefault(key, []).append(callback)

    def __changed(self, key: StorageKey) -> None:
        for callback in list(self.__subscriptions.get(key, [])):
            callback()
