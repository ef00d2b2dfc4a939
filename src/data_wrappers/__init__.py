"""Exports all data wrapper classes to make them easier to import"""

from data_wrappers.backends import MemoryBackend, RedisBackend
from data_wrappers.game_store import Store
from data_wrappers.state_codec import decode_state, encode_state
