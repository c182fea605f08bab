#!filepath: collectkit/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import CollectKitError, InvalidArgumentError
from .utils.argument import Argument
from .config.app_config import AppConfig

from .core.circular_index import NOT_FOUND, CircularIndex
from .core.byte_chunker import ByteChunker
from .core.vivify_map import AutoVivifyingOrderedMap
from .core.sequence_utils import SequenceUtils
from .core.map_utils import MapUtils

# alias 简化调用
circular = CircularIndex
chunks = ByteChunker
seq = SequenceUtils
maps = MapUtils

__all__ = [
    "logs", "Logging", "init_logging",
    "CollectKitError", "InvalidArgumentError", "Argument",
    "AppConfig",
    "NOT_FOUND",
    "CircularIndex", "circular",
    "ByteChunker", "chunks",
    "AutoVivifyingOrderedMap",
    "SequenceUtils", "seq",
    "MapUtils", "maps",
]
